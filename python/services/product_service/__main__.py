"""Run the product service: ``python -m product_service``."""

from __future__ import annotations

import logging

import uvicorn

from common.logsetup import setup_logging

from product_service.app import create_app
from product_service.errors import ProductFileError
from product_service.loader import load_products
from product_service.settings import get_settings
from product_service.store import ProductStore

logger = logging.getLogger("product_service")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        products = load_products(settings.products_file)
    except ProductFileError as exc:
        logger.error("startup aborted: %s", exc)
        raise SystemExit(1) from exc

    app = create_app(settings, ProductStore(products))
    logger.info("serving %s on %s:%d", settings.title, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
