"""Kazakhstani IIN decoder.

An IIN is ``YYMMDDCRRRRK``:

* ``YYMMDD`` birth date, two-digit year
* ``C`` century/sex digit (1-2: 1800s, 3-4: 1900s, 5-6: 2000s; odd male, even female)
* ``RRRR`` region/sequence code
* ``K`` control digit, a weighted sum of the first eleven digits modulo 11

Rules are checked in a fixed order and the first violation is raised, so the
same input always reports the same error. ``decode`` takes the current date as
an argument; ``IINDecoder`` binds a clock for callers that want the live date.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timezone

from iincheck.core.exceptions import (
    ChecksumMismatch,
    FutureBirthDate,
    IINDecodeError,
    InvalidCenturyDigit,
    InvalidDay,
    InvalidFormat,
    InvalidLength,
    InvalidMonth,
)
from iincheck.core.protocols import IClock
from iincheck.models.iin import IINRecord, Sex

logger = logging.getLogger(__name__)

IIN_LENGTH = 12
DIGITS = frozenset("0123456789")

PRIMARY_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)
FALLBACK_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 10, 11, 1, 2)

# century/sex digit -> (base year, calendar century)
CENTURIES: dict[int, tuple[int, int]] = {
    1: (1800, 19),
    2: (1800, 19),
    3: (1900, 20),
    4: (1900, 20),
    5: (2000, 21),
    6: (2000, 21),
}


def utc_today() -> date:
    """Production clock: today's date in UTC."""
    return datetime.now(timezone.utc).date()


def _weighted_remainder(digits: str, weights: tuple[int, ...]) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights)) % 11


def control_digit(first_eleven: str, *, fallback_ten_as_zero: bool = False) -> int | None:
    """Return the control digit expected after ``first_eleven``.

    Returns None when both weight tables leave remainder 10 and no control
    digit is admissible, unless ``fallback_ten_as_zero`` maps that case to 0.
    """
    remainder = _weighted_remainder(first_eleven, PRIMARY_WEIGHTS)
    if remainder != 10:
        return remainder
    remainder = _weighted_remainder(first_eleven, FALLBACK_WEIGHTS)
    if remainder != 10:
        return remainder
    return 0 if fallback_ten_as_zero else None


def _check_shape(iin: str) -> None:
    if len(iin) != IIN_LENGTH:
        raise InvalidLength(len(iin))
    # str.isdigit() accepts non-ASCII digits, so compare against 0-9 explicitly
    if not DIGITS.issuperset(iin):
        raise InvalidFormat()


def _check_control_digit(iin: str, fallback_ten_as_zero: bool) -> None:
    expected = control_digit(iin[:11], fallback_ten_as_zero=fallback_ten_as_zero)
    if expected is None:
        raise ChecksumMismatch("IIN control digit is undefined for these digits")
    if expected != int(iin[11]):
        raise ChecksumMismatch()


def _century_and_sex(iin: str) -> tuple[int, int, Sex]:
    digit = int(iin[6])
    if digit not in CENTURIES:
        raise InvalidCenturyDigit(digit)
    base_year, century = CENTURIES[digit]
    sex = Sex.MALE if digit % 2 else Sex.FEMALE
    return base_year, century, sex


def _birth_date(iin: str, base_year: int, today: date) -> date:
    year = base_year + int(iin[0:2])
    month = int(iin[2:4])
    day = int(iin[4:6])
    if not 1 <= month <= 12:
        raise InvalidMonth(month)
    # monthrange applies the Gregorian leap rule for February
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        raise InvalidDay(day, month, year)
    born = date(year, month, day)
    if born > today:
        raise FutureBirthDate()
    return born


def decode(iin: str, today: date, *, fallback_ten_as_zero: bool = False) -> IINRecord:
    """Validate ``iin`` and return its decoded record.

    Raises the ``IINDecodeError`` subclass for the first rule the input breaks,
    in this order: length, charset, control digit, century digit, month, day,
    future birth date.
    """
    _check_shape(iin)
    _check_control_digit(iin, fallback_ten_as_zero)
    base_year, century, sex = _century_and_sex(iin)
    born = _birth_date(iin, base_year, today)
    return IINRecord(
        valid=True,
        sex=sex,
        date_of_birth=born,
        century=century,
        region_code=int(iin[7:11]),
    )


def is_valid(iin: str, today: date, *, fallback_ten_as_zero: bool = False) -> bool:
    try:
        decode(iin, today, fallback_ten_as_zero=fallback_ten_as_zero)
    except IINDecodeError:
        return False
    return True


def extract_sex(iin: str) -> Sex:
    """Read the sex from the century/sex digit without verifying the control digit."""
    _check_shape(iin)
    return _century_and_sex(iin)[2]


def extract_date_of_birth(iin: str, today: date) -> date:
    """Read and validate the birth date without verifying the control digit."""
    _check_shape(iin)
    base_year, _, _ = _century_and_sex(iin)
    return _birth_date(iin, base_year, today)


class IINDecoder:
    """IIN decoder bound to a clock and a checksum policy.

    This is the object handed to the HTTP layer and the CLI.
    """

    def __init__(self, clock: IClock = utc_today, *, fallback_ten_as_zero: bool = False) -> None:
        self._clock = clock
        self._fallback_ten_as_zero = fallback_ten_as_zero

    def decode(self, iin: str) -> IINRecord:
        return decode(iin, self._clock(), fallback_ten_as_zero=self._fallback_ten_as_zero)

    def check(self, iin: str) -> IINRecord:
        """Like ``decode`` but returns an invalid record instead of raising."""
        try:
            return self.decode(iin)
        except IINDecodeError as exc:
            logger.debug("IIN rejected (%s): %s", exc.code, exc.reason)
            return IINRecord.invalid()

    def is_valid(self, iin: str) -> bool:
        return self.check(iin).valid
