"""Command line entry point: ``iincheck check|generate|serve``."""

import json
import logging
import random
from typing import List, Optional

import typer
from pydantic import ValidationError
from typer import Argument, Exit, Option, echo

from iincheck.core.config import AppSettings
from iincheck.core.exceptions import IINDecodeError
from iincheck.core.log import configure_logging
from iincheck.core.protocols import IIINDecoder
from iincheck.validator.generator import generate_iin
from iincheck.validator.iin_decoder import IINDecoder

log = logging.getLogger(__name__)

app = typer.Typer(help="Validate and decode Kazakhstani IINs.", no_args_is_help=True)


def _describe(decoder: IIINDecoder, iin: str) -> dict:
    try:
        record = decoder.decode(iin)
    except IINDecodeError as exc:
        return {"iin": iin, "valid": False, "error": exc.code, "reason": exc.reason}
    return {
        "iin": iin,
        "valid": True,
        "sex": record.sex.value,
        "date_of_birth": record.date_of_birth_display,
        "century": record.century,
        "region_code": record.region_code,
    }


@app.callback()
def main(
    log_level: Optional[str] = Option(None, "--log-level", help=(
        "Log level: critical, error, warning, info, debug. "
        "Defaults to IINCHECK_LOG_LEVEL."
    )),
) -> None:
    overrides = {} if log_level is None else {"log_level": log_level}
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        reason = "; ".join(error["msg"] for error in exc.errors())
        raise typer.BadParameter(reason, param_hint="--log-level") from exc
    configure_logging(settings.log_level)


@app.command()
def check(
    iins: List[str] = Argument(..., help="IINs to decode"),
    fallback_ten_as_zero: Optional[bool] = Option(None, help=(
        "Accept control digit 0 when both weight tables give remainder 10. "
        "Defaults to IINCHECK_IIN_FALLBACK_TEN_AS_ZERO."
    )),
) -> None:
    """Decode IINs, one JSON line per input. Exits 1 if any is invalid."""
    if fallback_ten_as_zero is None:
        fallback_ten_as_zero = AppSettings().iin.fallback_ten_as_zero
    decoder = IINDecoder(fallback_ten_as_zero=fallback_ten_as_zero)

    all_valid = True
    for iin in iins:
        result = _describe(decoder, iin)
        all_valid = all_valid and result["valid"]
        echo(json.dumps(result, ensure_ascii=False))
    if not all_valid:
        raise Exit(code=1)


@app.command()
def generate(
    count: int = Option(1, "--count", "-n", min=1, help="How many IINs to print"),
    invalid: bool = Option(False, help="Produce IINs with a wrong control digit"),
    seed: Optional[int] = Option(None, help="Random seed for reproducible output"),
) -> None:
    """Print random IINs for fixtures and load tests."""
    rng = random.Random(seed)
    for _ in range(count):
        echo(generate_iin(rng, valid=not invalid))


@app.command()
def serve(
    host: Optional[str] = Option(None, help="Bind host, defaults to IINCHECK_SERVER_HOST"),
    port: Optional[int] = Option(None, help="Bind port, defaults to IINCHECK_SERVER_PORT"),
) -> None:
    """Run the HTTP service."""
    import uvicorn

    from iincheck.api.app import create_app

    settings = AppSettings()
    host = host or settings.server.host
    port = port or settings.server.port
    log.info("Server is running on %s:%s", host, port)
    uvicorn.run(create_app(settings), host=host, port=port)
