"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from iincheck.api.deps import get_repository
from iincheck.persistence.protocols import IPersonRepository

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
def ready(repository: IPersonRepository = Depends(get_repository)) -> JSONResponse:
    if not repository.ping():
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return JSONResponse(content={"status": "ready"})
