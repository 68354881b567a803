"""IIN check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from iincheck.api.deps import get_decoder
from iincheck.core.protocols import IIINDecoder
from iincheck.models.person import IINCheckResponse

router = APIRouter(tags=["iin"])


@router.get(
    "/iin_check/{iin}",
    response_model=IINCheckResponse,
    response_model_exclude_none=True,
)
def check_iin(iin: str, decoder: IIINDecoder = Depends(get_decoder)) -> IINCheckResponse:
    """Report whether ``iin`` is correct and, if so, the sex and birth date it encodes."""
    return IINCheckResponse.from_record(decoder.check(iin))
