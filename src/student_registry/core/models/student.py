"""Student data model."""

import logging
from typing import TYPE_CHECKING, Annotated, Any, Dict, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from .base import ensure_unset, revise
from .person import Person, RequiredText
from .validators import admission_year_in_range, to_str

if TYPE_CHECKING:
    from ..readers.base import BaseReader

logger = logging.getLogger(__name__)


class Enrollment(BaseModel):
    """Admission year and specialty of a student."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    admission_year: Optional[Annotated[int, AfterValidator(admission_year_in_range)]] = Field(
        None, description="Year of admission, from 1900 to the current year."
    )
    specialty: Optional[RequiredText] = Field(None, description="Field of study.")


class Student(Person):
    """A person enrolled at a university."""

    def __init__(self) -> None:
        super().__init__()
        self._enrollment = Enrollment()

    @property
    def enrollment(self) -> Enrollment:
        return self._enrollment

    @property
    def admission_year(self) -> Optional[int]:
        return self._enrollment.admission_year

    @property
    def specialty(self) -> Optional[str]:
        return self._enrollment.specialty

    def set_admission_year(self, year: int) -> None:
        """Store the admission year.

        Raises:
            ValidationError: If the year is outside 1900..current year or was
                already set
        """
        ensure_unset(self._enrollment, "admission_year")
        self._enrollment = revise(self._enrollment, admission_year=year)
        logger.debug(f"Admission year set to {year}")

    def set_specialty(self, value: Any) -> None:
        """Store the specialty.

        Raises:
            ValidationError: If the specialty is blank or was already set
        """
        ensure_unset(self._enrollment, "specialty")
        self._enrollment = revise(self._enrollment, specialty=to_str(value))
        logger.debug(f"Specialty set to {self.specialty}")

    def get_role_info(self) -> str:
        if self.specialty is None or self.admission_year is None:
            return "Student (enrollment details not provided)"
        return f"Student of {self.specialty}, admitted in {self.admission_year}"

    def fill_from_reader(self, reader: "BaseReader") -> None:
        super().fill_from_reader(reader)
        self.set_admission_year(reader.read_integer("Admission year: "))
        self.set_specialty(reader.read_string("Specialty: "))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(self._enrollment.model_dump(mode="json"))
        return data
