"""Registration pipelines."""

from .registration import RegistrationResult, run_registration

__all__ = ["RegistrationResult", "run_registration"]
