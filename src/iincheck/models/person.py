"""Registered person and HTTP response bodies."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from iincheck.models.iin import IINRecord


class Person(BaseModel):
    """A person registered under an IIN."""

    name: str = Field(min_length=1)
    iin: str
    phone: str = ""


class IINCheckResponse(BaseModel):
    """Body of GET /iin_check/{iin}."""

    correct: bool
    sex: Optional[str] = None
    date_of_birth: Optional[str] = None  # DD.MM.YYYY

    @classmethod
    def from_record(cls, record: IINRecord) -> IINCheckResponse:
        if not record.valid:
            return cls(correct=False)
        return cls(
            correct=True,
            sex=record.sex.value,
            date_of_birth=record.date_of_birth_display,
        )


class PersonResponse(BaseModel):
    """Outcome of a person write, or an error envelope."""

    success: bool
    errors: Optional[str] = None
