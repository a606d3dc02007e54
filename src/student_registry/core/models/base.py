"""Helpers shared by the frozen field records."""

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from ..errors import ValidationError

RecordT = TypeVar("RecordT", bound=BaseModel)


def revise(record: RecordT, **changes: Any) -> RecordT:
    """Return a validated copy of ``record`` with ``changes`` applied.

    ``model_copy(update=...)`` skips validation, so the record is rebuilt from
    its dumped fields instead. The original record is left untouched when
    validation fails.

    Raises:
        ValidationError: If any resulting field is rejected
    """
    data = record.model_dump()
    data.update(changes)
    try:
        return type(record).model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def ensure_unset(record: BaseModel, *fields: str) -> None:
    """Fail if any of ``fields`` already holds a value on ``record``."""
    for name in fields:
        if getattr(record, name) is not None:
            raise ValidationError(f"{name}: already set")
