"""Utility functions for student registry."""

from .parsing import build_date, parse_date, parse_integer

__all__ = [
    'build_date',
    'parse_date',
    'parse_integer',
]
