"""Shared fixtures for the amazon-seller-mcp test suite."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from amazon_seller_mcp.auth.credentials import AccessToken, CredentialCache, TemporaryAwsCredentials
from amazon_seller_mcp.auth.signer import RequestSigner
from amazon_seller_mcp.client import SPAPIClient


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


def make_response(status_code=200, json_data=None, text=None, headers=None, reason="OK"):
    """Build a Mock shaped like a requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.headers = headers or {}
    if json_data is not None:
        response.json.return_value = json_data
        response.text = text if text is not None else str(json_data)
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text or ""
    response.content = response.text.encode("utf-8")
    return response


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def aws_credentials():
    return TemporaryAwsCredentials(
        access_key_id="ASIATESTKEY",
        secret_access_key="test_secret_key",
        session_token="test_session_token",
    )


@pytest.fixture
def token_refresher(clock):
    refresher = Mock()
    refresher.refresh.return_value = AccessToken("Atza|test_access_token", clock() + timedelta(minutes=59))
    return refresher


@pytest.fixture
def credential_cache(token_refresher, aws_credentials, clock):
    return CredentialCache(token_refresher, static_credentials=aws_credentials, clock=clock)


@pytest.fixture
def http_session():
    return Mock()


@pytest.fixture
def sleep_calls():
    return []


@pytest.fixture
def sp_client(credential_cache, http_session, sleep_calls):
    """SPAPIClient over a mocked session that records backoff delays."""
    return SPAPIClient(
        credential_cache,
        RequestSigner("us-east-1"),
        session=http_session,
        marketplace_id="ATVPDKIKX0DER",
        sleep=sleep_calls.append,
    )


@pytest.fixture
def response_factory():
    return make_response
