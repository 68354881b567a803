"""Synthetic IIN generation for load tests and fixtures."""

from __future__ import annotations

import random
from datetime import date

from iincheck.validator.iin_decoder import control_digit, utc_today

MIN_BIRTH_YEAR = 1950


def _century_digit(rng: random.Random, year: int) -> int:
    male = rng.random() < 0.5
    if year >= 2000:
        return 5 if male else 6
    return 3 if male else 4


def generate_iin(rng: random.Random | None = None, *, valid: bool = True, today: date | None = None) -> str:
    """Return a random IIN born between 1950 and ``today``.

    With ``valid=False`` the control digit is deliberately wrong, so the result
    always fails decoding with a checksum mismatch.
    """
    rng = rng or random.Random()
    today = today or utc_today()
    while True:
        year = rng.randint(MIN_BIRTH_YEAR, today.year)
        born = date(year, rng.randint(1, 12), rng.randint(1, 28))
        if born > today:
            continue
        first_eleven = (
            f"{year % 100:02d}{born.month:02d}{born.day:02d}"
            f"{_century_digit(rng, year)}{rng.randint(1000, 9999):04d}"
        )
        expected = control_digit(first_eleven)
        if expected is None:
            continue
        if not valid:
            expected = (expected + rng.randint(1, 9)) % 10
        return f"{first_eleven}{expected}"
