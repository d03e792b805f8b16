"""Exceptions raised by the catalog client."""


class CatalogError(Exception):
    """Base class for all catalog client failures."""


class NetworkError(CatalogError):
    """The request could not be completed by the transport."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class HttpError(CatalogError):
    """The server answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str | None = None):
        super().__init__(f"HTTP {status_code}: {reason or 'unknown reason'}")
        self.status_code = status_code
        self.reason = reason


class DecodeError(CatalogError):
    """A response body or one of its fields could not be decoded."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
