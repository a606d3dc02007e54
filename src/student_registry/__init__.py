"""Student Registry - console registration of people and students."""

from .core.errors import RegistryError, ValidationError, FormatError
from .core.models import Person, Profile, Student, Enrollment
from .core.readers import BaseReader, ConsoleReader, ScriptedReader, ReaderFactory
from .pipelines.registration import RegistrationResult, run_registration

__version__ = "0.1.0"

__all__ = [
    "RegistryError",
    "ValidationError",
    "FormatError",
    "Person",
    "Profile",
    "Student",
    "Enrollment",
    "BaseReader",
    "ConsoleReader",
    "ScriptedReader",
    "ReaderFactory",
    "RegistrationResult",
    "run_registration",
]
