"""In-memory backend for unit tests — dict-backed fake."""

from __future__ import annotations

from iincheck.core.exceptions import PersonAlreadyExistsError, PersonNotFoundError
from iincheck.models.person import Person


class MemoryPersonRepository:
    """Dict-backed IPersonRepository for unit tests."""

    def __init__(self) -> None:
        self._people: dict[str, Person] = {}
        self.available = True

    def create(self, person: Person) -> None:
        if person.iin in self._people:
            raise PersonAlreadyExistsError(person.iin)
        self._people[person.iin] = person

    def get_by_iin(self, iin: str) -> Person:
        try:
            return self._people[iin]
        except KeyError:
            raise PersonNotFoundError(iin) from None

    def find_by_name_part(self, name_part: str) -> list[Person]:
        needle = name_part.lower()
        matches = [p for p in self._people.values() if needle in p.name.lower()]
        return sorted(matches, key=lambda p: (p.name, p.iin))

    def ping(self) -> bool:
        return self.available
