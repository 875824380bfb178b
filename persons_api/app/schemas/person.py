"""
Pydantic model for person records.

A person is identified by a caller supplied unsigned 32‑bit ``id``.
``id`` and ``age`` must be JSON integers; numeric strings such as
``"30"`` are rejected rather than coerced.

``date`` is kept exactly as sent.  It must parse as an ISO‑8601 date
(``2023-01-01``) or date‑time (``2023-01-05T10:30:00Z``), but the
string itself is what gets stored and returned, never a normalised
form of it.
"""

import datetime

from pydantic import BaseModel, Field, StrictInt, StrictStr, TypeAdapter, ValidationError, field_validator

MAX_PERSON_ID = 2**32 - 1

_DATE = TypeAdapter(datetime.date)
_DATETIME = TypeAdapter(datetime.datetime)


class Person(BaseModel):
    """A single person record."""

    id: StrictInt = Field(..., ge=0, le=MAX_PERSON_ID, examples=[1])
    name: StrictStr = Field(..., examples=["Alice"])
    age: StrictInt = Field(..., examples=[30])
    date: StrictStr = Field(..., examples=["2023-01-01"])

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        for adapter in (_DATE, _DATETIME):
            try:
                adapter.validate_python(v)
            except ValidationError:
                continue
            return v
        raise ValueError("date must be an ISO-8601 date or date-time")
