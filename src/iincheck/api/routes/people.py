"""Person registration and lookup endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from iincheck.api.deps import get_decoder, get_repository
from iincheck.core.protocols import IIINDecoder
from iincheck.models.person import Person, PersonResponse
from iincheck.persistence.protocols import IPersonRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["people"])


@router.post("", response_model=PersonResponse, response_model_exclude_none=True)
def create_person(
    person: Person,
    decoder: IIINDecoder = Depends(get_decoder),
    repository: IPersonRepository = Depends(get_repository),
) -> PersonResponse:
    """Register a person after validating their IIN.

    Decode failures surface as 400 with the reason, duplicates as 409.
    """
    decoder.decode(person.iin)
    repository.create(person)
    logger.info("Registered person %r", person.name)
    return PersonResponse(success=True)


@router.get("/iin/{iin}", response_model=Person)
def get_person_by_iin(
    iin: str,
    decoder: IIINDecoder = Depends(get_decoder),
    repository: IPersonRepository = Depends(get_repository),
) -> Person:
    decoder.decode(iin)
    return repository.get_by_iin(iin)


@router.get("/name/{name_part}", response_model=list[Person])
def find_people_by_name_part(
    name_part: str,
    repository: IPersonRepository = Depends(get_repository),
) -> list[Person]:
    return repository.find_by_name_part(name_part)
