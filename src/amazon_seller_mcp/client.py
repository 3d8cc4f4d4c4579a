"""Authenticated SP-API client.

Every call obtains a valid access token and AWS credentials, signs the
request, sends it, and retries transient failures with exponential backoff.
"""

import functools
import json
import logging
import time
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from .auth.credentials import CredentialCache, TemporaryAwsCredentials
from .auth.lwa import TokenRefresher
from .auth.signer import QueryParams, RequestSigner
from .auth.sts import RoleAssumer
from .config import SPAPIConfig
from .constants import DEFAULT_TIMEOUT, MAX_RETRIES, RETRY_BASE_DELAY, USER_AGENT
from .exceptions import (
    ClientRequestError,
    SPAPIRateLimitError,
    SPAPIRequestError,
    TransientNetworkError,
)
from .logging_config import mask
from .utils.errors import parse_error_envelope

logger = logging.getLogger(__name__)

# Connection reset, DNS failure, refused connections, timeouts and
# sockets dropped mid-response all surface as one of these.
RETRYABLE_EXCEPTIONS = (
    requests.ConnectionError,
    requests.Timeout,
    requests.exceptions.ChunkedEncodingError,
)


def build_session(pool_maxsize: int = 50) -> requests.Session:
    """Create a keep-alive session shared by every request of a client."""
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=10, pool_maxsize=pool_maxsize)
    session.mount("https://", adapter)
    return session


class SPAPIClient:
    """Executes signed SP-API requests with retry."""

    def __init__(
        self,
        credentials: CredentialCache,
        signer: RequestSigner,
        session: Optional[requests.Session] = None,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_BASE_DELAY,
        timeout: float = DEFAULT_TIMEOUT,
        marketplace_id: Optional[str] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.credentials = credentials
        self.signer = signer
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self.marketplace_id = marketplace_id
        self._session = session or build_session()
        self._sleep = sleep

    @classmethod
    def from_config(
        cls,
        config: SPAPIConfig,
        session: Optional[requests.Session] = None,
        **kwargs: Any,
    ) -> "SPAPIClient":
        """Wire up refresher, role assumer (or static keys), cache and signer."""
        session = session or build_session()
        refresher = TokenRefresher(
            config.client_id,
            config.client_secret,
            config.refresh_token,
            session=session,
        )

        role_assumer = None
        static_credentials = None
        if config.uses_role_assumption:
            role_assumer = RoleAssumer(
                config.aws_access_key,
                config.aws_secret_key,
                config.role_arn,  # type: ignore[arg-type]
                config.region,
            )
        else:
            static_credentials = TemporaryAwsCredentials(
                access_key_id=config.aws_access_key,
                secret_access_key=config.aws_secret_key,
            )

        cache = CredentialCache(refresher, role_assumer, static_credentials)
        return cls(
            cache,
            RequestSigner(config.region),
            session=session,
            marketplace_id=config.marketplace_id,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return f"https://{self.signer.host}"

    def execute(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        query: Optional[QueryParams] = None,
    ) -> Any:
        """Send one logical request, retrying transient failures.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE)
            path: API path, e.g. ``/orders/v0/orders/123``
            body: JSON-serializable request body
            query: Query parameters; list values are comma-joined

        Returns:
            The decoded JSON response, unchanged

        Raises:
            ClientRequestError: HTTP 4xx, on the first attempt
            SPAPIRequestError: When every attempt failed transiently
            AuthenticationError, CredentialAssumptionError, SigningError:
                Credential or signing failures, never retried
        """
        method = method.upper()
        request_id = str(uuid.uuid4())
        attempts = self.max_retries + 1
        last_error: Optional[TransientNetworkError] = None

        for attempt in range(attempts):
            if attempt > 0:
                delay = self._backoff(attempt - 1)
                logger.info(
                    f"Request {request_id}: retrying {method} {path} in {delay:.1f}s "
                    f"(attempt {attempt + 1}/{attempts})"
                )
                self._sleep(delay)

            try:
                return self._send(request_id, method, path, body, query)
            except TransientNetworkError as e:
                last_error = e
                logger.warning(f"Request {request_id}: transient failure on attempt {attempt + 1}: {e}")

        message = last_error.message if last_error else "unknown error"
        logger.error(f"Request {request_id}: {method} {path} failed after {attempts} attempts: {message}")
        raise SPAPIRequestError(
            f"SP-API request failed after {attempts} attempts: {message}",
            attempts=attempts,
            last_error=last_error,
        ) from last_error

    def _send(
        self,
        request_id: str,
        method: str,
        path: str,
        body: Optional[Any],
        query: Optional[QueryParams],
    ) -> Any:
        """Perform a single attempt with fresh credentials and a fresh signature."""
        start_time = datetime.now()
        access_token = self.credentials.get_access_token()
        aws_credentials = self.credentials.get_aws_credentials()

        payload = json.dumps(body, separators=(",", ":")) if body is not None else ""
        signing_headers = self.signer.sign(method, path, query, payload, aws_credentials, access_token)

        headers: Dict[str, str] = {
            "x-amz-access-token": access_token,
            "content-type": "application/json",
            "user-agent": USER_AGENT,
        }
        headers.update(signing_headers)

        # Dispatch exactly the URL that was signed
        url = self.signer.url_for(path, query)

        logger.debug(
            f"Request {request_id}: {method} {url} "
            f"(access_token={mask(access_token)}, payload_bytes={len(payload)})"
        )

        try:
            response = self._session.request(
                method=method,
                url=url,
                data=payload.encode("utf-8") if payload else None,
                headers=headers,
                timeout=self.timeout,
            )
        except RETRYABLE_EXCEPTIONS as e:
            raise TransientNetworkError(f"{type(e).__name__}: {e}") from e

        duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
        status = response.status_code

        if status >= 500:
            envelope = parse_error_envelope(self._decode(response), status, response.reason or "")
            logger.warning(f"Request {request_id}: server error {status} in {duration_ms}ms")
            raise TransientNetworkError(
                f"SP-API server error (HTTP {status}): {envelope.message}", status_code=status
            )

        if status >= 400:
            envelope = parse_error_envelope(self._decode(response), status, response.reason or "")
            logger.error(
                f"Request {request_id}: HTTP {status} in {duration_ms}ms, "
                f"code={envelope.code} message={envelope.message}"
            )
            if status == 429:
                raise SPAPIRateLimitError(
                    f"SP-API request failed: {envelope.message}",
                    retry_after=self._retry_after(response),
                    details=envelope.details,
                )
            raise ClientRequestError(
                f"SP-API request failed: {envelope.message}",
                status_code=status,
                api_error_code=envelope.code,
                details=envelope.details,
            )

        logger.info(f"Request {request_id}: Success in {duration_ms}ms, status={status}")
        if not response.content:
            return {}
        data = self._decode(response)
        return data if data is not None else {"raw": response.text}

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _retry_after(response: requests.Response) -> int:
        try:
            return int(response.headers.get("Retry-After", 60))
        except (TypeError, ValueError):
            return 60

    def _backoff(self, failed_attempt: int) -> float:
        """Delay after the given zero-based failed attempt: 1s, 2s, 4s, ..."""
        return float(self.retry_delay * (2**failed_attempt))

    def get(self, path: str, query: Optional[QueryParams] = None) -> Any:
        return self.execute("GET", path, query=query)

    def post(self, path: str, body: Optional[Any] = None, query: Optional[QueryParams] = None) -> Any:
        return self.execute("POST", path, body=body, query=query)

    def put(self, path: str, body: Optional[Any] = None, query: Optional[QueryParams] = None) -> Any:
        return self.execute("PUT", path, body=body, query=query)

    def delete(self, path: str, query: Optional[QueryParams] = None) -> Any:
        return self.execute("DELETE", path, query=query)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()


@functools.lru_cache(maxsize=1)
def get_client() -> SPAPIClient:
    """Build and cache the process-wide client from the environment."""
    config = SPAPIConfig.from_env()
    config.validate()
    logger.info(
        f"SP-API client configured: region={config.region}, "
        f"role_assumption={config.uses_role_assumption}"
    )
    return SPAPIClient.from_config(config)
