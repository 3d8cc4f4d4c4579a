"""Tests for the authenticated SP-API client and its retry policy."""

from datetime import timedelta
from unittest.mock import Mock, patch
from urllib.parse import urlsplit

import pytest
import requests

from amazon_seller_mcp.auth.credentials import AccessToken
from amazon_seller_mcp.client import SPAPIClient, get_client
from amazon_seller_mcp.config import SPAPIConfig
from amazon_seller_mcp.exceptions import (
    AuthenticationError,
    ClientRequestError,
    ConfigurationError,
    SPAPIRateLimitError,
    SPAPIRequestError,
)


class TestExecuteSuccess:
    """Successful dispatch."""

    def test_returns_decoded_json_unchanged(self, sp_client, http_session, response_factory):
        http_session.request.return_value = response_factory(json_data={"orderId": "123"})

        assert sp_client.execute("GET", "/orders/v0/orders/123") == {"orderId": "123"}

    def test_request_headers(self, sp_client, http_session, response_factory):
        """The access token travels next to the SigV4 headers."""
        http_session.request.return_value = response_factory(json_data={})

        sp_client.execute("GET", "/orders/v0/orders/123")

        kwargs = http_session.request.call_args.kwargs
        headers = kwargs["headers"]
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://sellingpartnerapi-na.amazon.com/orders/v0/orders/123"
        assert kwargs["data"] is None
        assert kwargs["timeout"] == 30
        assert headers["x-amz-access-token"] == "Atza|test_access_token"
        assert headers["content-type"] == "application/json"
        assert headers["x-amz-security-token"] == "test_session_token"
        assert headers["Authorization"].startswith("AWS4-HMAC-SHA256 Credential=ASIATESTKEY/")
        assert "x-amz-date" in headers

    def test_dispatched_query_matches_signed_query(self, sp_client, http_session, response_factory):
        http_session.request.return_value = response_factory(json_data={})

        sp_client.execute("GET", "/orders/v0/orders", query={"OrderStatuses": ["Shipped", "Unshipped"], "A": 1})

        url = http_session.request.call_args.kwargs["url"]
        assert urlsplit(url).query == "A=1&OrderStatuses=Shipped%2CUnshipped"

    def test_body_serialized_as_json(self, sp_client, http_session, response_factory):
        http_session.request.return_value = response_factory(json_data={"reportId": "42"})

        sp_client.execute("POST", "/reports/2021-06-30/reports", body={"reportType": "X"})

        assert http_session.request.call_args.kwargs["data"] == b'{"reportType":"X"}'

    def test_empty_body_returns_empty_dict(self, sp_client, http_session, response_factory):
        http_session.request.return_value = response_factory(status_code=204, text="")

        assert sp_client.execute("DELETE", "/listings/2021-08-01/items/S/sku") == {}

    def test_non_json_body_returned_raw(self, sp_client, http_session, response_factory):
        http_session.request.return_value = response_factory(text="plain text")

        assert sp_client.execute("GET", "/x") == {"raw": "plain text"}

    def test_expired_token_refreshed_before_dispatch(
        self, sp_client, http_session, response_factory, token_refresher, clock
    ):
        http_session.request.return_value = response_factory(json_data={})
        sp_client.execute("GET", "/x")

        token_refresher.refresh.return_value = AccessToken("Atza|fresh", clock() + timedelta(hours=2))
        clock.advance(60 * 60)
        sp_client.execute("GET", "/x")

        assert token_refresher.refresh.call_count == 2
        assert http_session.request.call_args.kwargs["headers"]["x-amz-access-token"] == "Atza|fresh"


class TestRetryPolicy:
    """Bounded retry with exponential backoff."""

    def test_transient_errors_retried_then_succeed(self, sp_client, http_session, response_factory, sleep_calls):
        """Three connection failures then success: four attempts, delays 1, 2, 4."""
        http_session.request.side_effect = [
            requests.ConnectionError("reset"),
            requests.ConnectionError("reset"),
            requests.ConnectionError("reset"),
            response_factory(json_data={"payload": "ok"}),
        ]

        assert sp_client.execute("GET", "/x") == {"payload": "ok"}
        assert http_session.request.call_count == 4
        assert sleep_calls == [1.0, 2.0, 4.0]

    def test_gives_up_after_four_attempts(self, sp_client, http_session, sleep_calls):
        http_session.request.side_effect = requests.Timeout("timed out")

        with pytest.raises(SPAPIRequestError) as exc_info:
            sp_client.execute("GET", "/x")

        assert http_session.request.call_count == 4
        assert exc_info.value.attempts == 4
        assert "timed out" in exc_info.value.message
        assert sleep_calls == [1.0, 2.0, 4.0]

    def test_server_error_is_retried(self, sp_client, http_session, response_factory):
        http_session.request.side_effect = [
            response_factory(status_code=503, json_data={"errors": [{"message": "try later"}]}),
            response_factory(json_data={"ok": True}),
        ]

        assert sp_client.execute("GET", "/x") == {"ok": True}
        assert http_session.request.call_count == 2

    def test_client_error_not_retried(self, sp_client, http_session, response_factory, sleep_calls):
        http_session.request.return_value = response_factory(
            status_code=404,
            json_data={"errors": [{"code": "NotFound", "message": "Order not found"}]},
            reason="Not Found",
        )

        with pytest.raises(ClientRequestError) as exc_info:
            sp_client.execute("GET", "/orders/v0/orders/missing")

        assert http_session.request.call_count == 1
        assert sleep_calls == []
        assert exc_info.value.status_code == 404
        assert exc_info.value.api_error_code == "NotFound"
        assert "Order not found" in exc_info.value.message

    def test_rate_limit_raises_with_retry_after(self, sp_client, http_session, response_factory):
        http_session.request.return_value = response_factory(
            status_code=429,
            json_data={"errors": [{"code": "QuotaExceeded", "message": "You exceeded your quota"}]},
            headers={"Retry-After": "5"},
        )

        with pytest.raises(SPAPIRateLimitError) as exc_info:
            sp_client.execute("GET", "/x")

        assert exc_info.value.retry_after == 5
        assert http_session.request.call_count == 1

    def test_authentication_failure_not_retried(self, sp_client, http_session, token_refresher):
        token_refresher.refresh.side_effect = AuthenticationError("invalid_grant", status_code=400)

        with pytest.raises(AuthenticationError):
            sp_client.execute("GET", "/x")

        http_session.request.assert_not_called()
        assert token_refresher.refresh.call_count == 1

    def test_each_attempt_is_signed_afresh(self, sp_client, http_session, response_factory, clock):
        dates = []

        def record(**kwargs):
            dates.append(kwargs["headers"]["x-amz-date"])
            if len(dates) == 1:
                raise requests.ConnectionError("reset")
            return response_factory(json_data={})

        http_session.request.side_effect = record
        with patch("amazon_seller_mcp.auth.signer.datetime") as mock_datetime:
            mock_datetime.now.side_effect = [clock(), clock() + timedelta(seconds=2)]
            sp_client.execute("GET", "/x")

        assert dates == ["20240501T120000Z", "20240501T120002Z"]


class TestClientConstruction:
    def test_from_config_static_keys(self):
        config = SPAPIConfig("refresh", "id", "secret", "AKID", "SECRET", region="eu-west-1")
        client = SPAPIClient.from_config(config, session=Mock())

        assert client.base_url == "https://sellingpartnerapi-eu.amazon.com"
        assert client.credentials.get_aws_credentials().access_key_id == "AKID"

    def test_from_config_role_assumption(self):
        config = SPAPIConfig("refresh", "id", "secret", "AKID", "SECRET", role_arn="arn:aws:iam::1:role/r")
        client = SPAPIClient.from_config(config, session=Mock())

        assert client.credentials.status()["aws_credentials"]["mode"] == "assume_role"

    def test_get_client_validates_configuration(self):
        get_client.cache_clear()
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                get_client()
        get_client.cache_clear()

        assert "SP_API_REFRESH_TOKEN" in exc_info.value.message
