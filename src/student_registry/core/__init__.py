"""Core functionality for the student registry."""

from . import errors
from . import models
from . import readers

__all__ = ["errors", "models", "readers"]
