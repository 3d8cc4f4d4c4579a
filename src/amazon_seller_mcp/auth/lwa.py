"""Login with Amazon (LWA) refresh-token exchange."""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

import requests

from ..constants import EXPIRY_SAFETY_MARGIN, LWA_TIMEOUT, LWA_TOKEN_URL
from ..exceptions import AuthenticationError
from ..logging_config import mask
from .credentials import AccessToken, utc_now

logger = logging.getLogger(__name__)


class TokenRefresher:
    """Exchanges the long-lived refresh token for a short-lived access token."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        session: Optional[requests.Session] = None,
        token_url: str = LWA_TOKEN_URL,
        timeout: float = LWA_TIMEOUT,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.refresh_token = refresh_token
        self.token_url = token_url
        self.timeout = timeout
        self._session = session or requests.Session()
        self._clock = clock

    def refresh(self) -> AccessToken:
        """Request a new access token.

        Returns:
            AccessToken whose expiry is the provider lifetime minus the safety margin

        Raises:
            AuthenticationError: On missing configuration, network failure,
                a non-2xx answer or a malformed payload
        """
        if not all([self.client_id, self.client_secret, self.refresh_token]):
            raise AuthenticationError(
                "Missing required LWA credentials. Set SP_API_CLIENT_ID, "
                "SP_API_CLIENT_SECRET and SP_API_REFRESH_TOKEN."
            )

        logger.debug(f"Requesting LWA access token (refresh_token={mask(self.refresh_token)})")
        requested_at = self._clock()

        try:
            response = self._session.post(
                self.token_url,
                data={
                    "grant_type": "refresh_token",
                    "refresh_token": self.refresh_token,
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"LWA token request failed: {e}")
            raise AuthenticationError(f"Failed to authenticate with Amazon SP-API: {e}") from e

        payload = self._parse_payload(response)

        if not 200 <= response.status_code < 300:
            description = payload.get("error_description") or payload.get("error") or response.text
            logger.error(f"LWA token request rejected: status={response.status_code} payload={payload}")
            raise AuthenticationError(
                f"Failed to authenticate with Amazon SP-API (HTTP {response.status_code}): {description}",
                status_code=response.status_code,
                details=payload,
            )

        access_token = payload.get("access_token")
        if not access_token:
            raise AuthenticationError(
                "LWA token response did not contain an access_token",
                status_code=response.status_code,
                details=payload,
            )

        try:
            expires_in = int(payload.get("expires_in", 3600))
        except (TypeError, ValueError) as e:
            raise AuthenticationError(
                f"LWA token response has an invalid expires_in: {payload.get('expires_in')!r}",
                status_code=response.status_code,
                details=payload,
            ) from e
        expires_at = requested_at + timedelta(seconds=expires_in) - EXPIRY_SAFETY_MARGIN
        logger.info(f"LWA access token obtained, expires in {expires_in}s")
        return AccessToken(value=str(access_token), expires_at=expires_at)

    @staticmethod
    def _parse_payload(response: requests.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {"raw_response": response.text}
        return payload if isinstance(payload, dict) else {"raw_response": payload}
