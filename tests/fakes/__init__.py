"""Shared test doubles — memory backends and a fixed clock."""

from __future__ import annotations

from datetime import date

from iincheck.persistence.memory_backend import MemoryPersonRepository


class FixedClock:
    """IClock that always returns the same date."""

    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today


__all__ = ["FixedClock", "MemoryPersonRepository"]
