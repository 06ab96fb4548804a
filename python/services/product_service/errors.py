"""Exceptions raised by the product service and their HTTP mapping."""

from __future__ import annotations


class ProductServiceError(Exception):
    """Base error; ``key`` names the JSON field the message is returned under."""

    status_code = 400
    key = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict[str, str]:
        return {self.key: self.message}


class MalformedInputError(ProductServiceError):
    pass


class ProductNotFoundError(ProductServiceError):
    status_code = 404

    def __init__(self, message: str = "product not found"):
        super().__init__(message)


class ValidationFailure(ProductServiceError):
    key = "message"


class InvalidRequestBodyError(ValidationFailure):
    def __init__(self, message: str = "invalid request body"):
        super().__init__(message)


class InvalidExpirationError(ValidationFailure):
    def __init__(self, message: str = "invalid expiration date"):
        super().__init__(message)


class InvalidDayError(ValidationFailure):
    def __init__(self, message: str = "invalid day"):
        super().__init__(message)


class InvalidMonthError(ValidationFailure):
    def __init__(self, message: str = "invalid month"):
        super().__init__(message)


class InvalidYearError(ValidationFailure):
    def __init__(self, message: str = "invalid year"):
        super().__init__(message)


class DuplicateCodeError(ValidationFailure):
    def __init__(self, message: str = "code value is used"):
        super().__init__(message)


class ProductFileError(Exception):
    """The seed file could not be turned into a product list."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot load products from {path}: {reason}")
        self.path = path
        self.reason = reason
