"""
Reader that talks to a terminal through text streams.
"""

import sys
from typing import Optional, TextIO

from .base import BaseReader


class ConsoleReader(BaseReader):
    """Reads answers line by line from ``stdin`` and prompts on ``stdout``.

    The streams are looked up on ``sys`` at call time when not given, so
    redirected or monkeypatched standard streams are honoured.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        date_entry: str = "text",
    ):
        super().__init__(date_entry=date_entry)
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def _report(self, message: str) -> None:
        print(message, file=self.stdout)
