"""Cached SP-API credentials.

Two credentials expire independently: the LWA access token and the
temporary AWS credentials used for signing. Both are held by a
CredentialCache owned by one client instance.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from ..logging_config import mask

if TYPE_CHECKING:
    from .lwa import TokenRefresher
    from .sts import RoleAssumer

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AccessToken:
    """LWA access token with its margin-adjusted expiry."""

    value: str
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        return now < self.expires_at

    def __repr__(self) -> str:
        return f"AccessToken(value={mask(self.value)}, expires_at={self.expires_at.isoformat()})"


@dataclass(frozen=True)
class TemporaryAwsCredentials:
    """AWS key triple used only to sign requests.

    Static keys carry no session token and no expiry.
    """

    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None
    expires_at: Optional[datetime] = None

    def is_valid(self, now: datetime) -> bool:
        return self.expires_at is None or now < self.expires_at

    def __repr__(self) -> str:
        expires = self.expires_at.isoformat() if self.expires_at else "never"
        return (
            f"TemporaryAwsCredentials(access_key_id={mask(self.access_key_id, 8)}, "
            f"session_token={'set' if self.session_token else 'none'}, expires_at={expires})"
        )


class CredentialCache:
    """Process-wide holder of the current access token and AWS credentials.

    Each getter returns the cached value while it is valid and refreshes it
    otherwise. Refreshes are serialized per credential kind so concurrent
    callers that see an expired value trigger a single refresh. A failed
    refresh leaves the previous value in place.
    """

    def __init__(
        self,
        token_refresher: "TokenRefresher",
        role_assumer: Optional["RoleAssumer"] = None,
        static_credentials: Optional[TemporaryAwsCredentials] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if role_assumer is None and static_credentials is None:
            raise ValueError("Either a role assumer or static AWS credentials are required")

        self._token_refresher = token_refresher
        self._role_assumer = role_assumer
        self._static_credentials = static_credentials
        self._clock = clock

        self._access_token: Optional[AccessToken] = None
        self._aws_credentials: Optional[TemporaryAwsCredentials] = None
        self._token_lock = threading.Lock()
        self._aws_lock = threading.Lock()

    def get_access_token(self) -> str:
        """Return a valid LWA access token, refreshing it when expired.

        Raises:
            AuthenticationError: If the refresh fails
        """
        cached = self._access_token
        if cached is not None and cached.is_valid(self._clock()):
            return cached.value

        with self._token_lock:
            # Another caller may have refreshed while we waited
            cached = self._access_token
            if cached is not None and cached.is_valid(self._clock()):
                return cached.value

            logger.debug("Access token missing or expired, refreshing")
            token = self._token_refresher.refresh()
            self._access_token = token
            logger.debug(f"Access token cached until {token.expires_at.isoformat()}")
            return token.value

    def get_aws_credentials(self) -> TemporaryAwsCredentials:
        """Return valid AWS credentials, assuming the role when expired.

        Raises:
            CredentialAssumptionError: If role assumption fails
        """
        if self._role_assumer is None:
            return self._static_credentials  # type: ignore[return-value]

        cached = self._aws_credentials
        if cached is not None and cached.is_valid(self._clock()):
            return cached

        with self._aws_lock:
            cached = self._aws_credentials
            if cached is not None and cached.is_valid(self._clock()):
                return cached

            logger.debug("AWS credentials missing or expired, assuming role")
            credentials = self._role_assumer.assume()
            self._aws_credentials = credentials
            logger.debug(f"AWS credentials cached: {credentials!r}")
            return credentials

    def invalidate(self) -> None:
        """Drop both cached credentials so the next call refreshes them."""
        with self._token_lock:
            self._access_token = None
        with self._aws_lock:
            self._aws_credentials = None

    def status(self) -> Dict[str, Any]:
        """Describe what is cached and for how long it stays valid."""
        now = self._clock()

        def describe(expires_at: Optional[datetime], present: bool) -> Dict[str, Any]:
            if not present:
                return {"cached": False, "valid": False, "seconds_remaining": None}
            if expires_at is None:
                return {"cached": True, "valid": True, "seconds_remaining": None}
            remaining = int((expires_at - now).total_seconds())
            return {"cached": True, "valid": remaining > 0, "seconds_remaining": max(remaining, 0)}

        token = self._access_token
        if self._role_assumer is None:
            aws = describe(None, True)
            aws["mode"] = "static"
        else:
            creds = self._aws_credentials
            aws = describe(creds.expires_at if creds else None, creds is not None)
            aws["mode"] = "assume_role"

        return {
            "access_token": describe(token.expires_at if token else None, token is not None),
            "aws_credentials": aws,
        }
