"""Protocol interfaces for iincheck abstractions.

Layers depend on these Protocols rather than on concrete classes, so the
decoder, its clock and the person store can all be swapped in tests.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from iincheck.models.iin import IINRecord
    from iincheck.models.person import Person


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@runtime_checkable
class IClock(Protocol):
    """Returns the current calendar date (UTC)."""

    def __call__(self) -> date: ...


# ---------------------------------------------------------------------------
# IIN Decoder
# ---------------------------------------------------------------------------

@runtime_checkable
class IIINDecoder(Protocol):
    """Validates an IIN and extracts sex, birth date, century and region code."""

    def decode(self, iin: str) -> IINRecord: ...

    def check(self, iin: str) -> IINRecord: ...

    def is_valid(self, iin: str) -> bool: ...


# ---------------------------------------------------------------------------
# Persistence: Person Repository
# ---------------------------------------------------------------------------

@runtime_checkable
class IPersonRepository(Protocol):
    """Relational store of registered persons, keyed by IIN."""

    def create(self, person: Person) -> None: ...

    def get_by_iin(self, iin: str) -> Person: ...

    def find_by_name_part(self, name_part: str) -> list[Person]: ...

    def ping(self) -> bool: ...
