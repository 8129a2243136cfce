"""
Records returned by the Love API and the decoders that build them.

Each record has an explicit decode function that checks the required keys
of a JSON object before constructing it. Anything unexpected in a response
raises DecodeError; no partial lists are ever returned.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict

from .errors import DecodeError

T = TypeVar("T")

LOVE_KEYS = ("sender", "recipient", "message", "timestamp")
SUGGESTION_KEYS = ("label", "value")

TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
)


class Love(BaseModel):
    """A timestamped message sent from one user to another."""

    model_config = ConfigDict(frozen=True)

    sender: str
    recipient: str
    message: str
    timestamp: datetime


class AutocompleteSuggestion(BaseModel):
    """A username completion, as shown to the user and as sent to the API."""

    model_config = ConfigDict(frozen=True)

    display: str
    username: str


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp as sent by the Love API.

    Both ``2000-01-01T01:01:01.552636`` and ``2000-01-01T01:01:01`` are
    accepted, as is a space in place of the ``T``. Date-only and compact
    forms are rejected.

    Raises:
        DecodeError: If the value is not a valid timestamp
    """
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    raise DecodeError(f"invalid timestamp encoding: {value!r}", field="timestamp")


def _require_strings(obj: Any, keys: tuple) -> Dict[str, str]:
    if not isinstance(obj, Mapping):
        raise DecodeError(f"expected a JSON object, got {type(obj).__name__}")

    values = {}
    for key in keys:
        if key not in obj:
            raise DecodeError(f"missing key {key}", field=key)
        value = obj[key]
        if not isinstance(value, str):
            raise DecodeError(
                f"key {key} must be a string, got {type(value).__name__}",
                field=key,
            )
        values[key] = value
    return values


def decode_love(obj: Any) -> Love:
    """Decode one love object from a ``GET /love`` response."""
    values = _require_strings(obj, LOVE_KEYS)
    return Love(
        sender=values["sender"],
        recipient=values["recipient"],
        message=values["message"],
        timestamp=parse_timestamp(values["timestamp"]),
    )


def decode_suggestion(obj: Any) -> AutocompleteSuggestion:
    """Decode one suggestion from a ``GET /autocomplete`` response."""
    values = _require_strings(obj, SUGGESTION_KEYS)
    return AutocompleteSuggestion(display=values["label"], username=values["value"])


def _decode_list(payload: Any, decode: Callable[[Any], T]) -> List[T]:
    if not isinstance(payload, list):
        raise DecodeError(f"expected a JSON array, got {type(payload).__name__}")
    return [decode(item) for item in payload]


def decode_love_list(payload: Any) -> List[Love]:
    """Decode a JSON array of love objects."""
    return _decode_list(payload, decode_love)


def decode_suggestion_list(payload: Any) -> List[AutocompleteSuggestion]:
    """Decode a JSON array of autocomplete suggestions."""
    return _decode_list(payload, decode_suggestion)
