"""
Reader that replays a fixed list of answers.
"""

from typing import Iterable, List

from .base import BaseReader


class ScriptedReader(BaseReader):
    """Answers prompts from a prepared sequence instead of a user.

    Prompts shown and diagnostics emitted are kept in ``prompts`` and
    ``messages`` so callers can inspect the conversation afterwards.
    """

    def __init__(self, answers: Iterable[str], date_entry: str = "text"):
        super().__init__(date_entry=date_entry)
        self._answers = iter(answers)
        self.prompts: List[str] = []
        self.messages: List[str] = []

    def _read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return str(next(self._answers))
        except StopIteration:
            raise EOFError(f"No scripted answer left for prompt {prompt!r}") from None

    def _report(self, message: str) -> None:
        self.messages.append(message)
