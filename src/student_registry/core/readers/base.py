"""
Base class for interactive input readers.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date

from ..errors import FormatError
from ...utils.parsing import build_date, parse_date, parse_integer

logger = logging.getLogger(__name__)

DATE_ENTRY_MODES = ("text", "parts")


class BaseReader(ABC):
    """Abstract source of values typed by a user.

    Subclasses only supply raw lines and a place to show diagnostics; the
    parsing and the re-prompt loops live here. Every ``read_*`` method asks
    again until it gets a well-formed value. An exhausted source raises
    ``EOFError``.
    """

    def __init__(self, date_entry: str = "text"):
        if date_entry not in DATE_ENTRY_MODES:
            raise ValueError(f"Unsupported date entry mode: {date_entry}")
        self.date_entry = date_entry

    @abstractmethod
    def _read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return one line without its terminator.

        Raises:
            EOFError: If there is no more input
        """
        pass

    @abstractmethod
    def _report(self, message: str) -> None:
        """Show a diagnostic about rejected input."""
        pass

    def read_string(self, prompt: str) -> str:
        """Return the raw line; blank answers are left to the caller."""
        return self._read_line(prompt)

    def read_integer(self, prompt: str) -> int:
        while True:
            text = self._read_line(prompt)
            try:
                return parse_integer(text)
            except FormatError as e:
                logger.debug(f"Rejected integer input {text!r}: {e}")
                self._report(f"{e}. Please enter a whole number.")

    def read_date(self, prompt: str) -> date:
        """Read a date in the configured entry mode.

        In ``text`` mode one line such as ``15.05.2000`` or ``2000-05-15`` is
        read. In ``parts`` mode day, month and year are asked separately and
        the whole triple is asked again if it is not a calendar date.
        """
        if self.date_entry == "parts":
            return self._read_date_parts(prompt)
        while True:
            text = self._read_line(prompt)
            try:
                return parse_date(text)
            except FormatError as e:
                logger.debug(f"Rejected date input {text!r}: {e}")
                self._report(f"{e}. Use DD.MM.YYYY or YYYY-MM-DD.")

    def _read_date_parts(self, prompt: str) -> date:
        label = prompt.rstrip(": ")
        while True:
            day = self.read_integer(f"{label}, day: ")
            month = self.read_integer(f"{label}, month: ")
            year = self.read_integer(f"{label}, year: ")
            try:
                return build_date(year, month, day)
            except FormatError as e:
                logger.debug(f"Rejected date parts {day}/{month}/{year}: {e}")
                self._report(f"{e}. Please try again.")

    def read_letter(self, prompt: str) -> str:
        """Return the first character of the first non-blank answer."""
        while True:
            text = self._read_line(prompt).strip()
            if text:
                return text[0]
            logger.debug("Rejected empty letter input")
            self._report("Please enter at least one character.")
