"""
Structured error system for the Love API client.

Every failure of a client call surfaces as one of the exceptions below,
so callers can tell a bad argument from a network failure, an unexpected
status code, or a response body that could not be decoded.
"""

from enum import IntEnum
from typing import Any, Dict, Optional

import httpx


class StatusCode(IntEnum):
    """HTTP status codes the Love API answers with."""

    OK = 200
    CREATED = 201
    FAILED = 418
    BAD_PARAMS = 422


class LoveError(Exception):
    """Base exception for all Love API related errors."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "status": self.status,
            "code": self.code,
            "details": self.details,
            "type": self.__class__.__name__
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.status:
            parts.append(f"(Status: {self.status})")
        if self.code:
            parts.append(f"(Code: {self.code})")
        return " ".join(parts)


class InvalidArgumentError(LoveError):
    """Caller-supplied parameters failed a precondition."""

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, code="INVALID_ARGUMENT", **kwargs)
        if argument:
            self.details["argument"] = argument


class TransportError(LoveError):
    """The HTTP call itself could not complete."""

    def __init__(
        self,
        message: str = "Transport error",
        kind: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, code="TRANSPORT_ERROR", **kwargs)
        if kind:
            self.details["kind"] = kind


class ApiError(LoveError):
    """The call completed but the API answered with an unexpected status."""

    def __init__(
        self,
        message: str = "Love API error",
        status: Optional[int] = None,
        body: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, status=status, code="API_ERROR", **kwargs)
        if body:
            self.details["body"] = body


class DecodeError(LoveError):
    """The response body did not decode into the expected records."""

    def __init__(
        self,
        message: str = "Could not decode response",
        field: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, code="DECODE_ERROR", **kwargs)
        if field:
            self.details["field"] = field


class ConfigurationError(LoveError):
    """Error related to client configuration."""

    def __init__(
        self,
        message: str = "Configuration error",
        config_field: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, code="CONFIGURATION_ERROR", **kwargs)
        if config_field:
            self.details["config_field"] = config_field


def classify_transport_error(error: httpx.RequestError) -> TransportError:
    """
    Wrap an httpx request failure into a TransportError.

    Args:
        error: The exception raised by httpx while sending the request

    Returns:
        TransportError with ``details["kind"]`` set to ``timeout``,
        ``connect`` or ``request``
    """
    if isinstance(error, httpx.TimeoutException):
        kind = "timeout"
    elif isinstance(error, httpx.ConnectError):
        kind = "connect"
    else:
        kind = "request"

    message = str(error) or error.__class__.__name__
    return TransportError(message, kind=kind, original_error=error)


def create_user_friendly_message(error: LoveError) -> str:
    """
    Create a user-friendly error message.

    Args:
        error: The LoveError to convert

    Returns:
        User-friendly error message
    """
    if isinstance(error, InvalidArgumentError):
        return f"Invalid arguments: {error.message}"

    elif isinstance(error, TransportError):
        if error.details.get("kind") == "timeout":
            return "The request to the Love API timed out. Please try again."
        return "Could not reach the Love API. Please check LOVE_BASE_URL and your connection."

    elif isinstance(error, ApiError):
        if error.status == StatusCode.BAD_PARAMS:
            return f"The Love API rejected the request: {error.message}"
        return f"Love API Error: {error.message}"

    elif isinstance(error, DecodeError):
        return f"The Love API returned an unexpected response: {error.message}"

    elif isinstance(error, ConfigurationError):
        field = error.details.get("config_field")
        if field:
            return f"{error.message}. Set LOVE_{field.upper()} in your environment or .env file."
        return error.message

    else:
        return f"An error occurred: {error.message}"
