"""Domain exception hierarchy mapped to HTTP responses in ``app.main``."""

from typing import Any

from fastapi import status


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class AuthenticationError(CatalogError):
    """The request carries no usable credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED

    @property
    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": "Bearer"}


class NotFoundError(CatalogError):
    """A property or saved-property row does not exist for the caller."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CatalogError):
    """The requested row already exists."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidInputError(CatalogError):
    """A request body is missing or carries unusable values."""

    status_code = status.HTTP_400_BAD_REQUEST


class StoreUnavailableError(CatalogError):
    """The store could not answer a read that has no fallback."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class StoreWriteError(CatalogError):
    """A mutation could not be committed; the caller may retry."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    retry_after_seconds = 5

    @property
    def headers(self) -> dict[str, str]:
        return {"Retry-After": str(self.retry_after_seconds)}
