"""Exceptions raised by the registry models and readers."""

import pydantic


class RegistryError(Exception):
    """Base class for student registry errors."""
    pass


class ValidationError(RegistryError, ValueError):
    """Raised when a value is rejected by a person or student field."""

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        """Collapse a pydantic error report into one readable message.

        Only the first failing field is reported, as ``"<field>: <reason>"``.
        """
        errors = exc.errors()
        if not errors:
            return cls(str(exc))
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "value"
        reason = first.get("msg", "invalid value")
        # pydantic prefixes messages raised from custom validators
        if reason.startswith("Value error, "):
            reason = reason[len("Value error, "):]
        return cls(f"{field}: {reason}")


class FormatError(RegistryError, ValueError):
    """Raised when text cannot be parsed into a date or an integer."""
    pass
