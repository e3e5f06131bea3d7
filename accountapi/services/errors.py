"""
Account API error taxonomy. Every failure the client raises is an AccountAPIError.
"""

from typing import Any


class AccountAPIError(Exception):
    """Base class for Account API client failures."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class ValidationError(AccountAPIError):
    """400: the server rejected the request body or identifier. Not retryable as-is."""

    def __init__(
        self,
        error_code: str | None = None,
        error_message: str | None = None,
        detail: Any = None,
    ) -> None:
        self.error_code = error_code or ""
        self.error_message = error_message or ""
        super().__init__(
            f"error code: {self.error_code}, message: {self.error_message}",
            status_code=400,
            detail=detail,
        )


class NotFoundError(AccountAPIError):
    """404 where absence is an error (delete)."""

    def __init__(self, message: str = "specified resource does not exist") -> None:
        super().__init__(message, status_code=404)


class ConflictError(AccountAPIError):
    """409: version mismatch. Re-fetch to learn the current version before retrying."""

    def __init__(self, message: str = "specified version incorrect") -> None:
        super().__init__(message, status_code=409)


class UnexpectedStatusError(AccountAPIError):
    """Status code the operation does not model."""

    def __init__(self, operation: str, status_code: int, detail: Any = None) -> None:
        self.operation = operation
        super().__init__(
            f"{operation} account resulted in unexpected HTTP status code: {status_code}",
            status_code=status_code,
            detail=detail,
        )


class TransportError(AccountAPIError):
    """The request never produced an HTTP response (DNS, refused connection, timeout, cancellation)."""


class RequestTimeoutError(TransportError):
    """The effective deadline (caller's or configured) fired."""


class RequestCancelledError(TransportError):
    """The caller cancelled the context."""


class SerializationError(AccountAPIError):
    """Local JSON encode/decode failure of a request or response body."""
