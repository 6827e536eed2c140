"""
Tests for the SDK error types.
"""
import pytest

from mangopay_sdk.models.errors import (
    AuthenticationError,
    HeaderParseError,
    MangoPayError,
    ResponseError,
    TimeoutError,
)


class TestMangoPayError:
    """Tests for the base error."""

    def test_str_includes_code(self):
        assert str(MangoPayError("Something failed", code="X")) == "[X] Something failed"

    def test_default_code(self):
        assert MangoPayError("Something failed").code == "MANGOPAY_ERROR"

    def test_to_dict(self):
        error = MangoPayError("Something failed", code="X", details={"a": 1})

        assert error.to_dict() == {
            "error": {"code": "X", "message": "Something failed", "details": {"a": 1}}
        }

    @pytest.mark.parametrize(
        "error",
        [
            AuthenticationError("{}"),
            TimeoutError(),
            ResponseError("{}", 500),
            HeaderParseError("X-Number-Of-Pages", "x"),
        ],
    )
    def test_all_errors_share_base(self, error):
        assert isinstance(error, MangoPayError)


class TestAuthenticationError:
    def test_keep_raw_body(self):
        error = AuthenticationError('{"Message":"denied"}')

        assert error.body == '{"Message":"denied"}'
        assert error.code == "AUTHENTICATION_ERROR"

    def test_default_message(self):
        assert AuthenticationError().message == "Unauthorized"


class TestTimeoutError:
    def test_code(self):
        error = TimeoutError("read timed out")

        assert error.code == "TIMEOUT"
        assert error.message == "read timed out"


class TestResponseError:
    """Tests for ResponseError."""

    def test_status_and_body(self):
        error = ResponseError('{"Message":"boom"}', 500)

        assert error.status_code == 500
        assert error.body == '{"Message":"boom"}'
        assert error.details == {"status_code": 500}

    def test_json_body(self):
        assert ResponseError('{"Message":"boom"}', 500).json() == {"Message": "boom"}

    def test_json_none_for_text(self):
        assert ResponseError("Bad gateway", 502).json() is None

    def test_message_fallback(self):
        """Should name the status when the body is empty."""
        assert ResponseError("", 503).message == "HTTP 503"

    def test_explicit_message(self):
        error = ResponseError("", 0, message="connection refused")

        assert error.message == "connection refused"
        assert error.status_code == 0


class TestHeaderParseError:
    def test_is_value_error(self):
        error = HeaderParseError("X-Number-Of-Items", "many")

        assert isinstance(error, ValueError)
        assert error.details == {"header": "X-Number-Of-Items", "value": "many"}
