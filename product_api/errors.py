# product_api/errors.py

from typing import Optional


class ProductAPIError(Exception):
    """Base error translated into a ``{"message": ...}`` JSON response."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class Unauthorized(ProductAPIError):
    status_code = 401
    message = "Unauthorized: Invalid API Key"


class ValidationError(ProductAPIError):
    status_code = 400
    message = "All product fields are required"


class ProductNotFound(ProductAPIError):
    status_code = 404
    message = "Product not found"


class InternalError(ProductAPIError):
    pass
