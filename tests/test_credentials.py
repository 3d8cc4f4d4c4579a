"""Tests for the credential cache."""

import threading
import time
from datetime import timedelta
from unittest.mock import Mock

import pytest

from amazon_seller_mcp.auth.credentials import AccessToken, CredentialCache, TemporaryAwsCredentials
from amazon_seller_mcp.exceptions import AuthenticationError, CredentialAssumptionError


class TestAccessTokenCaching:
    """Access token reuse and refresh."""

    def test_valid_token_is_reused(self, credential_cache, token_refresher):
        """A cached token is returned without another exchange."""
        first = credential_cache.get_access_token()
        second = credential_cache.get_access_token()

        assert first == second == "Atza|test_access_token"
        assert token_refresher.refresh.call_count == 1

    def test_expired_token_is_refreshed(self, credential_cache, token_refresher, clock):
        """Once the margin-adjusted expiry passes, the next call refreshes."""
        credential_cache.get_access_token()
        token_refresher.refresh.return_value = AccessToken("Atza|second", clock() + timedelta(hours=2))

        clock.advance(59 * 60)
        assert credential_cache.get_access_token() == "Atza|second"
        assert token_refresher.refresh.call_count == 2

    def test_token_still_valid_just_before_expiry(self, credential_cache, token_refresher, clock):
        credential_cache.get_access_token()
        clock.advance(59 * 60 - 1)

        credential_cache.get_access_token()
        assert token_refresher.refresh.call_count == 1

    def test_failed_refresh_keeps_previous_token(self, credential_cache, token_refresher, clock):
        """A failed exchange propagates and does not clear the cache."""
        credential_cache.get_access_token()
        clock.advance(60 * 60)
        token_refresher.refresh.side_effect = AuthenticationError("invalid_grant", status_code=400)

        with pytest.raises(AuthenticationError):
            credential_cache.get_access_token()

        assert credential_cache._access_token.value == "Atza|test_access_token"

    def test_concurrent_callers_trigger_single_refresh(self, aws_credentials, clock):
        """Threads racing on an empty cache share one exchange."""
        calls = []

        def slow_refresh():
            calls.append(1)
            time.sleep(0.05)
            return AccessToken("Atza|shared", clock() + timedelta(hours=1))

        refresher = Mock()
        refresher.refresh.side_effect = slow_refresh
        cache = CredentialCache(refresher, static_credentials=aws_credentials, clock=clock)

        results = []
        threads = [threading.Thread(target=lambda: results.append(cache.get_access_token())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert results == ["Atza|shared"] * 8

    def test_invalidate_forces_refresh(self, credential_cache, token_refresher):
        credential_cache.get_access_token()
        credential_cache.invalidate()
        credential_cache.get_access_token()

        assert token_refresher.refresh.call_count == 2


class TestAwsCredentialCaching:
    """AWS credential modes: static keys and role assumption."""

    def test_static_credentials_returned_directly(self, credential_cache, aws_credentials):
        assert credential_cache.get_aws_credentials() is aws_credentials

    def test_assumed_credentials_are_cached(self, token_refresher, clock):
        assumed = TemporaryAwsCredentials("ASIA1", "secret1", "token1", clock() + timedelta(minutes=59))
        assumer = Mock()
        assumer.assume.return_value = assumed
        cache = CredentialCache(token_refresher, role_assumer=assumer, clock=clock)

        assert cache.get_aws_credentials() is assumed
        assert cache.get_aws_credentials() is assumed
        assert assumer.assume.call_count == 1

    def test_assumed_credentials_refreshed_after_expiry(self, token_refresher, clock):
        first = TemporaryAwsCredentials("ASIA1", "secret1", "token1", clock() + timedelta(minutes=59))
        second = TemporaryAwsCredentials("ASIA2", "secret2", "token2", clock() + timedelta(hours=2))
        assumer = Mock()
        assumer.assume.side_effect = [first, second]
        cache = CredentialCache(token_refresher, role_assumer=assumer, clock=clock)

        cache.get_aws_credentials()
        clock.advance(60 * 60)

        assert cache.get_aws_credentials() is second

    def test_failed_assumption_propagates(self, token_refresher, clock):
        assumer = Mock()
        assumer.assume.side_effect = CredentialAssumptionError("denied", sts_error_code="AccessDenied")
        cache = CredentialCache(token_refresher, role_assumer=assumer, clock=clock)

        with pytest.raises(CredentialAssumptionError) as exc_info:
            cache.get_aws_credentials()
        assert exc_info.value.sts_error_code == "AccessDenied"

    def test_requires_a_credential_source(self, token_refresher):
        with pytest.raises(ValueError):
            CredentialCache(token_refresher)


def test_status_reports_remaining_lifetime(credential_cache, clock):
    """status() describes both credentials without exposing them."""
    assert credential_cache.status()["access_token"]["cached"] is False

    credential_cache.get_access_token()
    clock.advance(60)
    status = credential_cache.status()

    assert status["access_token"] == {"cached": True, "valid": True, "seconds_remaining": 58 * 60}
    assert status["aws_credentials"]["mode"] == "static"
    assert "Atza" not in str(status)


def test_repr_masks_secrets(clock):
    token = AccessToken("Atza|abcdefghijklmnopqrstuvwxyz", clock())
    creds = TemporaryAwsCredentials("ASIAEXAMPLEKEY", "very-secret", "session")

    assert "qrstuvwxyz" not in repr(token)
    assert "very-secret" not in repr(creds)
