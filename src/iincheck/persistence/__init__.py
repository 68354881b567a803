"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from iincheck.core.config import AppSettings
from iincheck.persistence.sql_backend import SQLPersonRepository


def create_persistence(settings: AppSettings | None = None) -> SQLPersonRepository:
    """Create the person repository from application settings.

    Creates the ``people`` table when ``database.create_schema`` is set.
    """
    if settings is None:
        settings = AppSettings()

    repository = SQLPersonRepository.from_url(
        settings.database.sqlalchemy_url,
        pool_size=settings.database.pool_size,
    )
    if settings.database.create_schema:
        repository.create_schema()
    return repository
