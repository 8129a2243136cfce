"""
Love API client package.

This package provides the HTTP client for the Yelp Love API, the records it
decodes responses into, and the structured errors it raises.
"""

from .errors import (
    StatusCode,
    LoveError,
    InvalidArgumentError,
    TransportError,
    ApiError,
    DecodeError,
    ConfigurationError,
    classify_transport_error,
    create_user_friendly_message,
)
from .models import (
    Love,
    AutocompleteSuggestion,
    decode_love,
    decode_suggestion,
    decode_love_list,
    decode_suggestion_list,
    parse_timestamp,
)
from .love_client import (
    LoveClient,
    create_love_client,
    DEFAULT_TIMEOUT_SECONDS,
)

__all__ = [
    # Client
    "LoveClient",
    "create_love_client",
    "DEFAULT_TIMEOUT_SECONDS",
    # Records
    "Love",
    "AutocompleteSuggestion",
    "decode_love",
    "decode_suggestion",
    "decode_love_list",
    "decode_suggestion_list",
    "parse_timestamp",
    # Errors
    "StatusCode",
    "LoveError",
    "InvalidArgumentError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "ConfigurationError",
    "classify_transport_error",
    "create_user_friendly_message",
]
