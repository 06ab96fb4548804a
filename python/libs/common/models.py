"""Shared Pydantic models used across Python services."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# JSON numbers outside a signed 64-bit range are rejected rather than kept as big ints.
Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class ProductBase(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    # Declared first so serialized products lead with it, as in the seed file.
    id: Int64 | None = None
    name: str = ""
    quantity: Int64 = 0
    code_value: str = ""
    is_published: bool = False
    expiration: str = ""
    price: float = 0.0


class ProductCreate(ProductBase):
    """Request body; a client-sent ``id`` is accepted and ignored."""


class Product(ProductBase):
    id: Int64


class ProductCreated(BaseModel):
    message: str
    data: Product


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str
