"""Request-scoped dependencies resolved from application state."""

from __future__ import annotations

from fastapi import Request

from iincheck.core.protocols import IIINDecoder
from iincheck.persistence.protocols import IPersonRepository


def get_decoder(request: Request) -> IIINDecoder:
    return request.app.state.decoder


def get_repository(request: Request) -> IPersonRepository:
    return request.app.state.repository
