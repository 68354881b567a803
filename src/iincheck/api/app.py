"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from iincheck.api.routes import health, iin, people
from iincheck.core.config import AppSettings
from iincheck.core.exceptions import (
    IINDecodeError,
    PersonAlreadyExistsError,
    PersonNotFoundError,
    RepositoryError,
)
from iincheck.core.log import configure_logging
from iincheck.core.protocols import IIINDecoder, IPersonRepository
from iincheck.models.person import PersonResponse
from iincheck.persistence import create_persistence
from iincheck.validator.iin_decoder import IINDecoder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the person store unless one was injected."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level)

    owned_repository = None
    if app.state.repository is None:
        owned_repository = create_persistence(settings)
        app.state.repository = owned_repository

    logger.info("iincheck started (environment=%s)", settings.environment)
    try:
        yield
    finally:
        if owned_repository is not None:
            owned_repository.dispose()
        logger.info("iincheck stopped")


def _error(status_code: int, message: str) -> JSONResponse:
    body = PersonResponse(success=False, errors=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(IINDecodeError)
    async def _decode_error(request: Request, exc: IINDecodeError) -> JSONResponse:
        logger.info("IIN validation failed on %s: %s", request.url.path, exc.reason)
        return _error(400, exc.reason)

    @app.exception_handler(PersonAlreadyExistsError)
    async def _duplicate(request: Request, exc: PersonAlreadyExistsError) -> JSONResponse:
        return _error(409, str(exc))

    @app.exception_handler(PersonNotFoundError)
    async def _not_found(request: Request, exc: PersonNotFoundError) -> JSONResponse:
        return _error(404, "Person not found")

    @app.exception_handler(RepositoryError)
    async def _repository_error(request: Request, exc: RepositoryError) -> JSONResponse:
        logger.error("Repository failure on %s: %s", request.url.path, exc)
        return _error(500, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request on %s: %s", request.url.path, exc.errors())
        return _error(400, "Invalid request format")


def create_app(
    settings: AppSettings | None = None,
    *,
    repository: IPersonRepository | None = None,
    decoder: IIINDecoder | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="IIN Check Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    settings = settings or AppSettings()
    app.state.settings = settings
    app.state.repository = repository
    app.state.decoder = decoder or IINDecoder(
        fallback_ten_as_zero=settings.iin.fallback_ten_as_zero,
    )

    _register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(iin.router)
    app.include_router(people.router, prefix="/people/info")
    return app
