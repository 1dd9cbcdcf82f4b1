"""
WorkOS SDK Error Classes

Every failure surfaced by the SDK is a WorkOSError. Caller mistakes are
raised before any request is made; API failures carry the server message
and request id.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class WorkOSError(Exception):
    """Base error class for the WorkOS SDK."""

    def __init__(
        self,
        message: str,
        http_status: Optional[int] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.request_id = request_id
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    def __str__(self) -> str:
        if self.request_id:
            return f"{self.message} - request ID: {self.request_id}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "http_status": self.http_status,
            "request_id": self.request_id,
            "details": self.details,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"http_status={self.http_status!r}, request_id={self.request_id!r})"
        )


class ArgumentError(WorkOSError, ValueError):
    """Invalid arguments supplied by the caller."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class ConfigurationError(WorkOSError):
    """Configuration error (missing API key, bad hostname)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class APIError(WorkOSError):
    """The API answered with a failure."""


class AuthenticationError(APIError):
    """The API key was missing, invalid or revoked (HTTP 401)."""


class InvalidRequestError(APIError):
    """The API rejected the request parameters (HTTP 400, 404, 422)."""


class NetworkError(WorkOSError):
    """Network error (connection issues, timeouts)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


def is_workos_error(error: Any) -> bool:
    """Check if error is a WorkOSError."""
    return isinstance(error, WorkOSError)
