"""Interactive registration of a person and a student.

The run is single pass: both registrants are filled from the reader, then
the derived values are reported. A rejected field ends the run with one
error line instead of an exception.
"""

import logging
from datetime import date
from typing import Callable, NamedTuple, Optional

from ..core.errors import ValidationError
from ..core.models import Person, Student
from ..core.readers import BaseReader

logger = logging.getLogger(__name__)


class RegistrationResult(NamedTuple):
    """Everything collected and computed during one registration run."""
    person: Person
    student: Student
    reference_date: date
    student_age: int
    letter: str
    letter_count: int


def run_registration(
    reader: BaseReader,
    write: Callable[[str], None] = print,
) -> Optional[RegistrationResult]:
    """Collect a person and a student, then report age, letter count and roles.

    Args:
        reader: Source of the typed answers
        write: Sink for the report lines

    Returns:
        The collected data, or None if a value was rejected
    """
    try:
        return _register(reader, write)
    except ValidationError as e:
        logger.info(f"Registration aborted: {e}")
        write(f"Error: {e}")
        return None


def _register(reader: BaseReader, write: Callable[[str], None]) -> RegistrationResult:
    write("=== Person details ===")
    person: Person = Student()
    person.fill_from_reader(reader)

    write("")
    write("=== Student details ===")
    student = Student()
    student.fill_from_reader(reader)

    write("")
    write("=== Reference date ===")
    reference_date = reader.read_date("Date: ")

    student_age = student.get_age(reference_date)
    write("")
    write(f"Student age: {student_age} years")

    write("")
    letter = reader.read_letter("Letter to count in the person's surname: ")
    letter_count = person.count_letter(letter)
    write(f"Occurrences of '{letter}' in the surname: {letter_count}")

    write("")
    write(f"Person role: {person.get_role_info()}")
    write(f"Student role: {student.get_role_info()}")

    return RegistrationResult(
        person=person,
        student=student,
        reference_date=reference_date,
        student_age=student_age,
        letter=letter,
        letter_count=letter_count,
    )
