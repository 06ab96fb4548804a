"""In-memory product store owned by the application."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable

from common.models import Product, ProductCreate

from product_service.errors import DuplicateCodeError, ProductNotFoundError
from product_service.validation import validate_expiration, validate_unique_code

logger = logging.getLogger(__name__)


class ProductStore:
    """Ordered list of products; appends are the only mutation."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: list[Product] = list(products)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def by_id(self, product_id: int) -> Product:
        with self._lock:
            for product in self._products:
                if product.id == product_id:
                    return product
        raise ProductNotFoundError()

    def filter(self, predicate: Callable[[Product], bool]) -> list[Product]:
        with self._lock:
            return [product for product in self._products if predicate(product)]

    def append(self, product: Product) -> None:
        with self._lock:
            self._products.append(product)

    def create(self, candidate: ProductCreate) -> Product:
        """Validate ``candidate`` and append it with id ``len(store) + 1``.

        Checks run in a fixed order (expiration, then code value) and the
        first failure is raised. The lock is held from id assignment to
        append, so concurrent creates never share an id.
        """
        with self._lock:
            product_id = len(self._products) + 1
            validate_expiration(candidate.expiration)
            if not validate_unique_code(candidate.code_value, self._products):
                raise DuplicateCodeError()
            product = Product(
                id=product_id,
                **candidate.model_dump(exclude={"id"}),
            )
            self._products.append(product)
        logger.info("product created id=%s code_value=%s", product.id, product.code_value)
        return product
