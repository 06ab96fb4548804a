"""Product Service — FastAPI application serving an in-memory product list."""

from __future__ import annotations

import logging
import re
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from common.models import (
    ErrorResponse,
    MessageResponse,
    Product,
    ProductCreate,
    ProductCreated,
)

from product_service.errors import (
    InvalidRequestBodyError,
    MalformedInputError,
    ProductServiceError,
)
from product_service.loader import load_products
from product_service.settings import Settings, get_settings
from product_service.store import ProductStore

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)

router = APIRouter()


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def parse_id(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise MalformedInputError("Invalid id")
    return int(raw)


def parse_price(raw: str | None) -> float:
    # float() is looser than a plain numeric literal about these
    if raw is None or raw != raw.strip() or "_" in raw:
        raise MalformedInputError("Invalid price")
    try:
        return float(raw)
    except ValueError:
        raise MalformedInputError("Invalid price") from None


@router.get("/ping", response_class=PlainTextResponse)
def ping():
    return PlainTextResponse("pong")


@router.get("/products", response_model=list[Product])
def list_products(store: ProductStore = Depends(get_store)):
    return store.all()


@router.get(
    "/products/search",
    response_model=list[Product],
    responses={400: {"model": ErrorResponse}},
)
def search_products(
    price_gt: str | None = Query(default=None, alias="priceGt"),
    store: ProductStore = Depends(get_store),
):
    threshold = parse_price(price_gt)
    return store.filter(lambda product: product.price > threshold)


@router.get(
    "/products/{product_id}",
    response_model=Product,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return store.by_id(parse_id(product_id))


@router.post(
    "/products",
    response_model=ProductCreated,
    status_code=201,
    responses={400: {"model": MessageResponse}},
)
def create_product(payload: ProductCreate, store: ProductStore = Depends(get_store)):
    product = store.create(payload)
    return ProductCreated(message="product created", data=product)


async def _service_error_handler(request: Request, exc: ProductServiceError):
    logger.info(
        "%s %s rejected: %d %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def _validation_handler(request: Request, exc: RequestValidationError):
    if any(error.get("loc", ())[:1] == ("body",) for error in exc.errors()):
        return await _service_error_handler(request, InvalidRequestBodyError())
    return await request_validation_exception_handler(request, exc)


def create_app(settings: Settings | None = None, store: ProductStore | None = None) -> FastAPI:
    """Build the application.

    With no ``store`` the seed file named by ``settings.products_file`` is
    loaded during startup; a ProductFileError aborts startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "store", None) is None:
            app.state.store = ProductStore(load_products(settings.products_file))
        yield

    app = FastAPI(title=settings.title, version=settings.version, lifespan=lifespan)
    if store is not None:
        app.state.store = store
    app.add_exception_handler(ProductServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)
    app.include_router(router)
    return app


app = create_app()
