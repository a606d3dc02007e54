"""
Factory for creating input readers.
"""

from .base import BaseReader
from .console import ConsoleReader
from .scripted import ScriptedReader


class ReaderFactory:
    """Factory class for creating input readers."""

    @staticmethod
    def create(reader_type: str, **kwargs) -> BaseReader:
        """Create a reader instance based on type.

        Args:
            reader_type: Type of reader ('console', 'scripted')
            **kwargs: Arguments for the reader, e.g. ``answers`` for
                'scripted' or ``stdin``/``stdout`` for 'console'

        Returns:
            BaseReader instance

        Raises:
            ValueError: If reader type is not supported
        """
        reader_type = reader_type.lower()

        if reader_type == 'console':
            return ConsoleReader(**kwargs)
        elif reader_type == 'scripted':
            return ScriptedReader(kwargs.pop('answers', ()), **kwargs)
        else:
            raise ValueError(f"Unsupported reader type: {reader_type}")

    @staticmethod
    def get_available_readers():
        """Get list of available reader types."""
        return ['console', 'scripted']
