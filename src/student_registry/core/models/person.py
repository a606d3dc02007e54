"""Person data model and the capability set shared by every registrant."""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import TYPE_CHECKING, Annotated, Any, Dict, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from ..errors import ValidationError
from .base import ensure_unset, revise
from .validators import not_in_future, require_text, to_str

if TYPE_CHECKING:
    from ..readers.base import BaseReader

logger = logging.getLogger(__name__)

RequiredText = Annotated[str, BeforeValidator(to_str), AfterValidator(require_text)]


class Profile(BaseModel):
    """Identity and birth date of a person.

    Fields start out as ``None`` and are filled once by the owning ``Person``.
    The record is frozen; ``Person`` swaps in a revised copy instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    first_name: Optional[RequiredText] = Field(None, description="Given name.")
    surname: Optional[RequiredText] = Field(None, description="Family name.")
    patronymic: Annotated[str, BeforeValidator(to_str)] = Field(
        "", description="Name derived from the father's given name. Never validated."
    )
    birth_date: Optional[Annotated[date, AfterValidator(not_in_future)]] = Field(
        None, description="Date of birth, no later than the day it was entered."
    )

    def age_on(self, reference_date: date) -> int:
        """Full calendar years between the birth date and ``reference_date``."""
        if self.birth_date is None:
            raise ValidationError("birth_date: not set")
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        if reference_date < self.birth_date:
            raise ValidationError(
                f"reference date {reference_date.isoformat()} is earlier than "
                f"birth date {self.birth_date.isoformat()}"
            )
        age = reference_date.year - self.birth_date.year
        # birthday not reached yet in the reference year
        if (reference_date.month, reference_date.day) < (self.birth_date.month, self.birth_date.day):
            age -= 1
        return age

    def count_letter(self, letter: str) -> int:
        """Case-insensitive number of occurrences of ``letter`` in the surname."""
        if len(letter) != 1:
            raise ValueError(f"Expected a single character, got {letter!r}")
        if not self.surname:
            return 0
        return self.surname.lower().count(letter.lower())


class Person(ABC):
    """Somebody the registry collects details for.

    The capability set is ``fill_from_reader``, ``get_age``, ``count_letter``
    and ``get_role_info``. Field storage and the shared calculations are
    delegated to a ``Profile`` record; variants add their own records next
    to it and describe their role.
    """

    def __init__(self) -> None:
        self._profile = Profile()

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def first_name(self) -> Optional[str]:
        return self._profile.first_name

    @property
    def surname(self) -> Optional[str]:
        return self._profile.surname

    @property
    def patronymic(self) -> str:
        return self._profile.patronymic

    @property
    def birth_date(self) -> Optional[date]:
        return self._profile.birth_date

    @property
    def full_name(self) -> str:
        """Surname, first name and patronymic, skipping the empty parts."""
        parts = [self.surname, self.first_name, self.patronymic]
        return " ".join(part for part in parts if part)

    def set_identity(self, first_name: Any, surname: Any, patronymic: Any = None) -> None:
        """Store the name fields.

        Raises:
            ValidationError: If the first name or surname is blank, or the
                identity has already been set
        """
        ensure_unset(self._profile, "first_name", "surname")
        self._profile = revise(
            self._profile,
            first_name=to_str(first_name),
            surname=to_str(surname),
            patronymic=patronymic,
        )
        logger.debug(f"Identity set for {self.full_name}")

    def set_birth_date(self, value: date) -> None:
        """Store the birth date.

        Raises:
            ValidationError: If the date is later than today or was already set
        """
        ensure_unset(self._profile, "birth_date")
        self._profile = revise(self._profile, birth_date=value)
        logger.debug(f"Birth date set to {self.birth_date}")

    def get_age(self, reference_date: date) -> int:
        """Age in full years on ``reference_date``.

        Raises:
            ValidationError: If no birth date is set or ``reference_date`` is
                earlier than it
        """
        return self._profile.age_on(reference_date)

    def count_letter(self, letter: str) -> int:
        """Count ``letter`` in the surname, ignoring case."""
        return self._profile.count_letter(letter)

    @abstractmethod
    def get_role_info(self) -> str:
        """Describe the role this person plays."""
        pass

    def fill_from_reader(self, reader: "BaseReader") -> None:
        """Prompt for the name fields and birth date, validating each group.

        Raises:
            ValidationError: As soon as a field group is rejected
        """
        first_name = reader.read_string("First name: ")
        surname = reader.read_string("Surname: ")
        patronymic = reader.read_string("Patronymic: ")
        self.set_identity(first_name, surname, patronymic)

        self.set_birth_date(reader.read_date("Birth date: "))

    def to_dict(self) -> Dict[str, Any]:
        """Fields of this person as plain JSON-friendly values."""
        return self._profile.model_dump(mode="json")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name!r})"
