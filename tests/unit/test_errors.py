"""
Tests for the Love API error types.
"""

import httpx
import pytest

from love_cli.core.client import (
    ApiError,
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    LoveError,
    StatusCode,
    TransportError,
    classify_transport_error,
    create_user_friendly_message,
)


class TestStatusCode:
    def test_values(self):
        assert StatusCode.OK == 200
        assert StatusCode.CREATED == 201
        assert StatusCode.FAILED == 418
        assert StatusCode.BAD_PARAMS == 422


class TestLoveError:
    """Test the base error and its subclasses."""

    def test_str_includes_status_and_code(self):
        error = ApiError("Unprocessable", status=422)
        assert str(error) == "Unprocessable (Status: 422) (Code: API_ERROR)"

    def test_to_dict(self):
        error = DecodeError("missing key sender", field="sender")

        assert error.to_dict() == {
            "message": "missing key sender",
            "status": None,
            "code": "DECODE_ERROR",
            "details": {"field": "sender"},
            "type": "DecodeError",
        }

    @pytest.mark.parametrize(
        "error_class", [InvalidArgumentError, TransportError, ApiError, DecodeError, ConfigurationError]
    )
    def test_subclasses_are_love_errors(self, error_class):
        assert isinstance(error_class(), LoveError)


class TestClassifyTransportError:
    """Test wrapping httpx exceptions."""

    @pytest.fixture
    def request_(self):
        return httpx.Request("GET", "https://example.com/api/love")

    def test_timeout(self, request_):
        error = classify_transport_error(httpx.ConnectTimeout("timed out", request=request_))
        assert error.details["kind"] == "timeout"

    def test_connect(self, request_):
        error = classify_transport_error(httpx.ConnectError("refused", request=request_))
        assert error.details["kind"] == "connect"
        assert error.message == "refused"

    def test_other(self, request_):
        original = httpx.RemoteProtocolError("bad", request=request_)
        error = classify_transport_error(original)
        assert error.details["kind"] == "request"
        assert error.original_error is original


class TestUserFriendlyMessage:
    def test_api_error_includes_api_text(self):
        message = create_user_friendly_message(ApiError("i'm a little teapot", status=418))
        assert message == "Love API Error: i'm a little teapot"

    def test_bad_params(self):
        message = create_user_friendly_message(ApiError("unknown user", status=StatusCode.BAD_PARAMS))
        assert "rejected" in message

    def test_timeout(self):
        message = create_user_friendly_message(TransportError("slow", kind="timeout"))
        assert "timed out" in message

    def test_configuration_names_env_var(self):
        message = create_user_friendly_message(ConfigurationError("No sender configured", config_field="sender"))
        assert "LOVE_SENDER" in message

    def test_generic(self):
        assert create_user_friendly_message(LoveError("boom")) == "An error occurred: boom"
