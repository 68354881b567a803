"""Tests for IINRecord and the response models built from it."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from iincheck.models.iin import IINRecord, Sex
from iincheck.models.person import IINCheckResponse, Person


def _valid_record() -> IINRecord:
    return IINRecord(
        valid=True, sex=Sex.MALE, date_of_birth=date(2003, 12, 31), century=21, region_code=12,
    )


def test_invalid_record_has_no_fields():
    record = IINRecord.invalid()
    assert record.valid is False
    assert record.sex is None
    assert record.date_of_birth_display is None


def test_valid_record_requires_all_fields():
    with pytest.raises(ValidationError):
        IINRecord(valid=True, sex=Sex.MALE)


def test_invalid_record_rejects_decoded_fields():
    with pytest.raises(ValidationError):
        IINRecord(valid=False, century=21)


def test_record_is_frozen():
    with pytest.raises(ValidationError):
        _valid_record().century = 20


def test_date_display_format():
    assert _valid_record().date_of_birth_display == "31.12.2003"


def test_check_response_from_valid_record():
    response = IINCheckResponse.from_record(_valid_record())
    assert response.model_dump(exclude_none=True) == {
        "correct": True, "sex": "male", "date_of_birth": "31.12.2003",
    }


def test_check_response_from_invalid_record():
    response = IINCheckResponse.from_record(IINRecord.invalid())
    assert response.model_dump(exclude_none=True) == {"correct": False}


def test_person_requires_name():
    with pytest.raises(ValidationError):
        Person(name="", iin="031231500126")
    assert Person(name="Aigerim", iin="031231500126").phone == ""
