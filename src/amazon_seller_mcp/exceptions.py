"""Common exceptions for the amazon-seller-mcp package."""

from typing import Any, Optional


class SPAPIError(Exception):
    """Base class for every error raised while talking to SP-API."""

    error_code = "unexpected_error"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details if details is not None else {}


class ConfigurationError(SPAPIError):
    """Raised when required settings are missing."""

    error_code = "invalid_input"


class AuthenticationError(SPAPIError):
    """Raised when the LWA refresh-token exchange fails."""

    error_code = "auth_failed"

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code


class CredentialAssumptionError(SPAPIError):
    """Raised when STS role assumption fails."""

    error_code = "credential_error"

    def __init__(self, message: str, sts_error_code: Optional[str] = None) -> None:
        super().__init__(message, details={"sts_error_code": sts_error_code} if sts_error_code else None)
        self.sts_error_code = sts_error_code


class SigningError(SPAPIError):
    """Raised when the signer is given unusable inputs."""

    error_code = "signing_error"


class TransientNetworkError(SPAPIError):
    """Retryable failure: connection problems, timeouts or HTTP 5xx."""

    error_code = "network_error"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClientRequestError(SPAPIError):
    """Raised when SP-API answers with HTTP 4xx. Never retried."""

    error_code = "api_error"

    def __init__(
        self,
        message: str,
        status_code: int,
        api_error_code: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.api_error_code = api_error_code


class SPAPIRateLimitError(ClientRequestError):
    """Raised when SP-API rate limit is exceeded."""

    error_code = "rate_limit_exceeded"

    def __init__(self, message: str, retry_after: int = 60, details: Optional[Any] = None) -> None:
        super().__init__(message, status_code=429, api_error_code="QuotaExceeded", details=details)
        self.retry_after = retry_after


class SPAPIRequestError(SPAPIError):
    """Raised when a request keeps failing after every retry."""

    error_code = "network_error"

    def __init__(self, message: str, attempts: int, last_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error
