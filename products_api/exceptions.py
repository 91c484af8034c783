# products_api/exceptions.py
from typing import Iterable, Optional


class ProductsApiError(Exception):
    """Base class for errors the HTTP layer turns into client responses."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProductsApiError):
    pass


class NotFoundError(ProductsApiError):
    # Nothing raises this yet: every positive id is synthesized on demand.
    pass


class UnsupportedApiVersionError(ProductsApiError):
    def __init__(self, raw_version: Optional[str]):
        super().__init__(f"The requested API version '{raw_version}' is not supported")
        self.raw_version = raw_version


class UnsupportedOperationError(ProductsApiError):
    def __init__(self, operation: str, version: str, allowed_methods: Iterable[str] = ()):
        super().__init__(f"'{operation}' is not available in API version {version}")
        self.operation = operation
        self.version = version
        self.allowed_methods = list(allowed_methods)
