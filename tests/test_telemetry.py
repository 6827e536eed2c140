"""
Tests for the exchange record.
"""
import httpx

from mangopay_sdk.telemetry import ExchangeRecord, record_exchange

REQUEST = httpx.Request("GET", "https://api.test.mangopay.com/v2.01/test-client/users")


class TestRecordExchange:
    """Tests for record_exchange."""

    def test_read_rate_limit_headers(self):
        response = httpx.Response(
            200,
            headers=[
                ("X-RateLimit-Limit", "2300"),
                ("X-RateLimit-Remaining", "2299"),
                ("X-RateLimit-Reset", "1700000000"),
            ],
        )

        record = record_exchange(REQUEST, response)

        assert record.request is REQUEST
        assert record.response is response
        assert record.rate_limit_limit == "2300"
        assert record.rate_limit_remaining == "2299"
        assert record.rate_limit_reset == "1700000000"

    def test_match_names_exactly(self):
        """Should ignore rate-limit headers whose case differs."""
        response = httpx.Response(200, headers=[("x-ratelimit-limit", "2300")])

        assert record_exchange(REQUEST, response).rate_limit_limit is None

    def test_missing_headers(self):
        record = record_exchange(REQUEST, httpx.Response(204))

        assert record.rate_limit_limit is None
        assert record.rate_limit_remaining is None
        assert record.rate_limit_reset is None

    def test_no_response(self):
        assert record_exchange(REQUEST, None) == ExchangeRecord(request=REQUEST)
