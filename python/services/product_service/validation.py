"""Expiration date and code value checks applied before a product is stored."""

from __future__ import annotations

import re
from typing import Iterable

from common.models import Product

from product_service.errors import (
    InvalidDayError,
    InvalidExpirationError,
    InvalidMonthError,
    InvalidYearError,
)

DATE_PATTERN = r"^(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[0-2])/\d{4}$"

_DATE_RE = re.compile(DATE_PATTERN, re.ASCII)


def validate_date_grammar(text: str) -> bool:
    # fullmatch so a trailing newline does not slip past "$"
    return _DATE_RE.fullmatch(text) is not None


def split_date(text: str) -> tuple[int, int, int]:
    day, month, year = text.split("/")
    return int(day), int(month), int(year)


def validate_date_components(day: int, month: int, year: int) -> None:
    """Range-check the parts of a date.

    Day and month accept 0 at the lower end; the grammar never produces
    it, so the gap only shows when this is called directly. There is no
    calendar awareness: 31/02 passes.
    """
    if day < 0 or day > 31:
        raise InvalidDayError()
    if month < 0 or month > 12:
        raise InvalidMonthError()
    if year < 0:
        raise InvalidYearError()


def validate_expiration(text: str) -> None:
    if not validate_date_grammar(text):
        raise InvalidExpirationError()
    validate_date_components(*split_date(text))


def validate_unique_code(code: str, products: Iterable[Product]) -> bool:
    return all(product.code_value != code for product in products)
