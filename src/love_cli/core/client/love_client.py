"""
HTTP client for the Yelp Love API.

API overview (see https://github.com/Yelp/love/#api):

- ``GET /love`` returns a JSON list of loves, filtered by ``sender`` and/or
  ``recipient``, optionally capped by ``limit``.
- ``POST /love`` sends love. ``recipient`` may hold several comma separated
  usernames; the server does the fan-out. Answers 201 with a text body.
- ``GET /autocomplete`` returns ``{"label": ..., "value": ...}`` objects for
  a search ``term``.

Every call carries the ``api_key`` parameter. Keys are generated from the
Admin section of a Love instance and allow sending love from any user.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from love_cli import USER_AGENT
from .errors import (
    ApiError,
    DecodeError,
    InvalidArgumentError,
    StatusCode,
    classify_transport_error,
)
from .models import (
    AutocompleteSuggestion,
    Love,
    decode_love_list,
    decode_suggestion_list,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class LoveClient:
    """
    Client for a single Love instance.

    ``base_url`` should include the ``api`` part but no trailing slash,
    e.g. ``https://cwrulove.appspot.com/api``. The client holds no mutable
    state after construction and may be shared between threads.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._http = httpx.Client(
            headers={"User-Agent": USER_AGENT},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> "LoveClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_love(self, sender: str = "", recipient: str = "", limit: int = 0) -> List[Love]:
        """
        Retrieve love sent from a user, to a user, or between two users.

        Either ``sender`` or ``recipient`` (but not both) may be empty,
        meaning any user. A ``limit`` <= 0 requests no limit; a sensible
        limit such as 20 avoids overloading the server, which likely caps
        results at 2000 anyway.

        Raises:
            InvalidArgumentError: If both sender and recipient are empty
            TransportError: If the request could not be sent
            ApiError: If the API does not answer 200
            DecodeError: If the body is not a list of valid loves
        """
        if not sender and not recipient:
            raise InvalidArgumentError(
                "Must specify at least one of sender and recipient",
                argument="sender",
            )

        params: Dict[str, str] = {"api_key": self._api_key}
        if sender:
            params["sender"] = sender
        if recipient:
            params["recipient"] = recipient
        if limit > 0:
            params["limit"] = str(limit)

        response = self._request("GET", "/love", params=params)
        self._expect_status(response, StatusCode.OK)
        return decode_love_list(self._parse_json(response))

    def send_love(self, sender: str, recipient: str, message: str) -> None:
        """
        Send love from one user to another.

        ``recipient`` is a single string, but it may hold several usernames
        separated by commas.

        Raises:
            TransportError: If the request could not be sent
            ApiError: If the API does not answer 201; the message is the
                API's error text when the body can be read
        """
        data = {
            "api_key": self._api_key,
            "sender": sender,
            "recipient": recipient,
            "message": message,
        }
        response = self._request("POST", "/love", data=data)
        if response.status_code != StatusCode.CREATED:
            body = self._read_text(response)
            raise ApiError(
                body or self._status_line(response),
                status=response.status_code,
                body=body,
            )

    def send_loves(self, sender: str, recipients: Sequence[str], message: str) -> None:
        """Send love from one user to each of ``recipients`` in a single request."""
        self.send_love(sender, ",".join(recipients), message)

    def autocomplete(self, term: str) -> List[AutocompleteSuggestion]:
        """
        Return username completions for ``term``.

        Completions may match the username, first or last name of a user.
        """
        params = {"api_key": self._api_key, "term": term}
        response = self._request("GET", "/autocomplete", params=params)
        self._expect_status(response, StatusCode.OK)
        return decode_suggestion_list(self._parse_json(response))

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{path}"
        fields = kwargs.get("params") or kwargs.get("data") or {}
        logger.debug(f"{method} {url} fields={sorted(k for k in fields if k != 'api_key')}")

        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise classify_transport_error(e) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def _expect_status(self, response: httpx.Response, expected: StatusCode) -> None:
        if response.status_code != expected:
            raise ApiError(
                self._status_line(response),
                status=response.status_code,
                body=self._read_text(response),
            )

    @staticmethod
    def _status_line(response: httpx.Response) -> str:
        return f"{response.status_code} {response.reason_phrase}".strip()

    @staticmethod
    def _read_text(response: httpx.Response) -> Optional[str]:
        try:
            text = response.text.strip()
        except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError):
            return None
        return text or None

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"response is not valid JSON: {e}", original_error=e) from e


def create_love_client(
    api_key: str,
    base_url: str,
    **kwargs
) -> LoveClient:
    """Create a Love API client. No validation is done on the arguments."""
    return LoveClient(api_key=api_key, base_url=base_url, **kwargs)
