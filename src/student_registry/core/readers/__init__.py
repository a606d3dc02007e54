"""
Input Readers Module

Contains the interactive value readers and their factory.
"""

from .base import BaseReader, DATE_ENTRY_MODES
from .console import ConsoleReader
from .scripted import ScriptedReader
from .factory import ReaderFactory

__all__ = [
    "BaseReader",
    "DATE_ENTRY_MODES",
    "ConsoleReader",
    "ScriptedReader",
    "ReaderFactory",
]
