"""Reads the seed product list from a JSON file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from common.models import Product

from product_service.errors import ProductFileError, ValidationFailure
from product_service.validation import validate_expiration

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(list[Product])


def load_products(path: str | Path) -> list[Product]:
    """Load and check the products stored at ``path``.

    Raises ProductFileError if the file is unreadable, is not a JSON array
    of products, or holds data the store would never accept (a malformed
    expiration or a repeated code value).
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ProductFileError(str(path), exc.strerror or str(exc)) from exc

    try:
        products = _PRODUCT_LIST.validate_json(raw)
    except ValidationError as exc:
        raise ProductFileError(str(path), f"invalid product data ({exc.error_count()} errors)") from exc

    seen: set[str] = set()
    for product in products:
        try:
            validate_expiration(product.expiration)
        except ValidationFailure as exc:
            raise ProductFileError(str(path), f"product {product.id}: {exc.message}") from exc
        if product.code_value in seen:
            raise ProductFileError(str(path), f"product {product.id}: code value is used")
        seen.add(product.code_value)

    logger.info("loaded %d products from %s", len(products), path)
    return products
