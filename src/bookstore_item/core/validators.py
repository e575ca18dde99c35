"""Format checks for ISBN-10, ISNI and currency codes."""

from __future__ import annotations

from decimal import Decimal

import structlog

from .errors import InvalidArgumentError, OutOfRangeError

log = structlog.get_logger()

ISBN_LENGTH = 10
ISNI_LENGTH = 16
CURRENCY_LENGTH = 3

_DIGITS = "0123456789"
_CHECK_CHAR = "X"


def _digits_or_x(text: str, length: int) -> bool:
    return len(text) == length and all(c == _CHECK_CHAR or c in _DIGITS for c in text)


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def validate_isni(isni: str) -> bool:
    """True if ``isni`` is 16 characters, each a digit or 'X'.

    Only the shape is checked; the ISNI check character is not verified.
    """
    if not isinstance(isni, str):
        return False
    return _digits_or_x(isni, ISNI_LENGTH)


def validate_isbn_format(isbn: str) -> bool:
    """True if ``isbn`` is 10 characters, each a digit or 'X'."""
    if not isinstance(isbn, str):
        return False
    return _digits_or_x(isbn, ISBN_LENGTH)


def validate_isbn_checksum(isbn: str) -> bool:
    """True if the weighted ISBN-10 sum is divisible by 11.

    The leftmost character carries weight 10 and the last weight 1; 'X'
    counts as 10. Characters that are neither are skipped, so this must be
    paired with ``validate_isbn_format``.
    """
    if not isinstance(isbn, str) or len(isbn) < ISBN_LENGTH:
        return False

    checksum = 0
    for i, c in enumerate(isbn[:ISBN_LENGTH]):
        weight = ISBN_LENGTH - i
        if c == _CHECK_CHAR:
            checksum += 10 * weight
        elif c in _DIGITS:
            checksum += int(c) * weight
    return checksum % 11 == 0


def validate_isbn(isbn: str) -> bool:
    return validate_isbn_format(isbn) and validate_isbn_checksum(isbn)


def validate_currency(currency: str) -> bool:
    """True if ``currency`` is exactly three letters, in any case."""
    if not isinstance(currency, str):
        return False
    return len(currency) == CURRENCY_LENGTH and currency.isalpha()


def require_text(value: str | None, field: str) -> str:
    if value is not None and not isinstance(value, str):
        log.debug("non_text_field_rejected", field=field, type=type(value).__name__)
        raise InvalidArgumentError(field, value, "must be text")
    if is_blank(value):
        log.debug("blank_field_rejected", field=field)
        raise InvalidArgumentError(field, value, "must not be blank")
    return value


def require_isbn(isbn: str) -> str:
    if not validate_isbn_format(isbn):
        log.debug("isbn_rejected", isbn=isbn, reason="format")
        raise InvalidArgumentError("isbn", isbn, "must be 10 digits or 'X'")
    if not validate_isbn_checksum(isbn):
        log.debug("isbn_rejected", isbn=isbn, reason="checksum")
        raise InvalidArgumentError("isbn", isbn, "failed checksum")
    return isbn


def require_isni(isni: str) -> str:
    if not validate_isni(isni):
        log.debug("isni_rejected", isni=isni)
        raise InvalidArgumentError("isni", isni, "must be 16 digits or 'X'")
    return isni


def require_currency(currency: str, field: str = "currency") -> str:
    if not validate_currency(currency):
        log.debug("currency_rejected", field=field, currency=currency)
        raise InvalidArgumentError(field, currency, "must be three letters")
    return currency


def require_non_negative(value: int | Decimal, field: str) -> int | Decimal:
    if value < 0:
        log.debug("negative_value_rejected", field=field, value=str(value))
        raise OutOfRangeError(field, value)
    return value
