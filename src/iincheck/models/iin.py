"""Decoded IIN record."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, model_validator

DISPLAY_DATE_FORMAT = "%d.%m.%Y"


class Sex(StrEnum):
    MALE = "male"
    FEMALE = "female"


class IINRecord(BaseModel):
    """Demographic data embedded in an IIN.

    ``sex``, ``date_of_birth``, ``century`` and ``region_code`` are set if and
    only if ``valid`` is true. The IIN itself is not kept.
    """

    model_config = {"frozen": True}

    valid: bool
    sex: Optional[Sex] = None
    date_of_birth: Optional[date] = None
    century: Optional[int] = None  # 19, 20 or 21
    region_code: Optional[int] = None  # digits 8-11

    @model_validator(mode="after")
    def _populated_iff_valid(self) -> IINRecord:
        fields = (self.sex, self.date_of_birth, self.century, self.region_code)
        if self.valid and any(f is None for f in fields):
            raise ValueError("a valid IINRecord needs sex, date_of_birth, century and region_code")
        if not self.valid and any(f is not None for f in fields):
            raise ValueError("an invalid IINRecord carries no decoded fields")
        return self

    @classmethod
    def invalid(cls) -> IINRecord:
        return cls(valid=False)

    @property
    def date_of_birth_display(self) -> str | None:
        """Birth date as DD.MM.YYYY, the format used on the wire."""
        if self.date_of_birth is None:
            return None
        return self.date_of_birth.strftime(DISPLAY_DATE_FORMAT)
