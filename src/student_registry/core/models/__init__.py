"""Person and student models."""

from .person import Person, Profile
from .student import Enrollment, Student
from .validators import (
    MIN_ADMISSION_YEAR,
    to_str,
    require_text,
    not_in_future,
    admission_year_in_range,
)

__all__ = [
    "Person",
    "Profile",
    "Student",
    "Enrollment",
    "MIN_ADMISSION_YEAR",
    "to_str",
    "require_text",
    "not_in_future",
    "admission_year_in_range",
]
