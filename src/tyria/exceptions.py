"""
Exception hierarchy for the tyria client library.

Two families live here:

- Response errors describe a response the remote API sent back: a
  documented failure (``ApiError``) or an undeclared status
  (``UnknownStatusError``), kept as unrelated classes. They are returned
  inside ``Err`` and only raised when the caller asks for it with
  ``Result.unwrap()``.
- Client errors (malformed bodies, missing credentials, transport failures)
  mean no usable response exists. They are raised.
"""

from typing import Any, Dict, Optional


class TyriaClientError(Exception):
    """
    Base exception for all tyria client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.message == other.message
            and self.status_code == other.status_code
            and self.details == other.details
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.status_code))


# =============================================================================
# API Errors (returned as values)
# =============================================================================


class ApiError(TyriaClientError):
    """
    Documented failure reported by the remote API.

    Produced when the response status is one of the endpoint's declared
    failure codes (e.g. 403 without the required scope, 404 for an unknown
    ID, 400 for a malformed filter). ``message`` holds the ``text`` field of
    the error body.
    """


class UnknownStatusError(TyriaClientError):
    """
    The response status was neither a declared success nor a declared failure.

    Not an ``ApiError``: ``except ApiError`` only catches documented failures.
    """

    def __init__(
        self,
        status_code: int,
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            f"unknown status code: {status_code}",
            status_code=status_code,
            details=details,
        )


# =============================================================================
# Client Errors (raised)
# =============================================================================


class MalformedResponseError(TyriaClientError):
    """
    A success response whose body does not match the expected type.

    This points at drift between the client models and the remote schema,
    not at a failure the API reported.
    """

    def __init__(
        self,
        message: str = "Malformed response body",
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        expected_type: Optional[str] = None,
    ):
        if expected_type:
            details = details or {}
            details["expected_type"] = expected_type
        super().__init__(message, status_code=status_code, details=details)
        self.expected_type = expected_type


class AuthenticationError(TyriaClientError):
    """An authenticated endpoint was called without an API token."""

    def __init__(
        self,
        message: str = "API token is not configured",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(TyriaClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport issue before any HTTP status is available.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
