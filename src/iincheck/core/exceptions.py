"""iincheck exception hierarchy."""

from __future__ import annotations


class IINCheckError(Exception):
    """Base exception for all iincheck errors."""


class IINDecodeError(IINCheckError):
    """An IIN failed one of the decoding rules.

    ``code`` is a stable machine-readable identifier, ``reason`` the message
    shown to API clients.
    """

    code = "decode_error"
    default_reason = "invalid IIN"

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class InvalidLength(IINDecodeError):
    code = "invalid_length"
    default_reason = "IIN must be exactly 12 characters long"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"{self.default_reason}, got {length}")


class InvalidFormat(IINDecodeError):
    code = "invalid_format"
    default_reason = "IIN must contain only digits 0-9"


class ChecksumMismatch(IINDecodeError):
    code = "checksum_mismatch"
    default_reason = "IIN control digit does not match"


class InvalidCenturyDigit(IINDecodeError):
    code = "invalid_century_digit"
    default_reason = "invalid century/sex digit"

    def __init__(self, digit: int) -> None:
        self.digit = digit
        super().__init__(f"{self.default_reason}: {digit}")


class InvalidMonth(IINDecodeError):
    code = "invalid_month"
    default_reason = "invalid birth month"

    def __init__(self, month: int) -> None:
        self.month = month
        super().__init__(f"{self.default_reason}: {month:02d}")


class InvalidDay(IINDecodeError):
    code = "invalid_day"
    default_reason = "invalid birth day"

    def __init__(self, day: int, month: int, year: int) -> None:
        self.day = day
        self.month = month
        self.year = year
        super().__init__(f"{self.default_reason}: {day:02d}.{month:02d}.{year:04d}")


class FutureBirthDate(IINDecodeError):
    code = "future_birth_date"
    default_reason = "birth date cannot be in the future"


class RepositoryError(IINCheckError):
    """Person store operation failed."""


class PersonAlreadyExistsError(RepositoryError):
    """A person with this IIN is already registered."""

    def __init__(self, iin: str) -> None:
        self.iin = iin
        super().__init__("a person with this IIN already exists")


class PersonNotFoundError(RepositoryError):
    """No person registered under the requested IIN."""

    def __init__(self, iin: str) -> None:
        self.iin = iin
        super().__init__("person not found")
