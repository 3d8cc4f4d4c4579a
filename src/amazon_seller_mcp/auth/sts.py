"""STS role assumption for SP-API request signing."""

import logging
import threading
from typing import Any, Optional

import boto3  # type: ignore[import-untyped]
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore[import-untyped]

from ..constants import EXPIRY_SAFETY_MARGIN, ROLE_SESSION_DURATION, ROLE_SESSION_NAME
from ..exceptions import CredentialAssumptionError
from .credentials import TemporaryAwsCredentials

logger = logging.getLogger(__name__)


class RoleAssumer:
    """Exchanges long-lived AWS keys for role-scoped temporary credentials."""

    def __init__(
        self,
        aws_access_key: str,
        aws_secret_key: str,
        role_arn: str,
        region: str,
        session_name: str = ROLE_SESSION_NAME,
        duration_seconds: int = ROLE_SESSION_DURATION,
        sts_client: Optional[Any] = None,
    ) -> None:
        self.aws_access_key = aws_access_key
        self.aws_secret_key = aws_secret_key
        self.role_arn = role_arn
        self.region = region
        self.session_name = session_name
        self.duration_seconds = duration_seconds
        self._client = sts_client
        self._client_lock = threading.Lock()

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client

        with self._client_lock:
            if self._client is None:
                self._client = boto3.client(
                    "sts",
                    region_name=self.region,
                    aws_access_key_id=self.aws_access_key,
                    aws_secret_access_key=self.aws_secret_key,
                )
            return self._client

    def assume(self) -> TemporaryAwsCredentials:
        """Assume the configured role for one session.

        Raises:
            CredentialAssumptionError: If STS rejects the call or cannot be reached
        """
        if not all([self.aws_access_key, self.aws_secret_key, self.role_arn]):
            raise CredentialAssumptionError(
                "Missing required AWS credentials. Set SP_API_AWS_ACCESS_KEY, "
                "SP_API_AWS_SECRET_KEY and SP_API_ROLE_ARN."
            )

        logger.debug(f"Assuming role {self.role_arn} for {self.duration_seconds}s")

        try:
            response = self._get_client().assume_role(
                RoleArn=self.role_arn,
                RoleSessionName=self.session_name,
                DurationSeconds=self.duration_seconds,
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "Unknown")
            logger.error(f"STS assume_role failed for {self.role_arn}: {code}: {error.get('Message', e)}")
            raise CredentialAssumptionError(
                f"Failed to assume IAM role for SP-API access: {code}", sts_error_code=code
            ) from e
        except BotoCoreError as e:
            logger.error(f"STS assume_role failed for {self.role_arn}: {e}")
            raise CredentialAssumptionError(f"Failed to assume IAM role for SP-API access: {e}") from e

        try:
            credentials = response["Credentials"]
            result = TemporaryAwsCredentials(
                access_key_id=credentials["AccessKeyId"],
                secret_access_key=credentials["SecretAccessKey"],
                session_token=credentials["SessionToken"],
                expires_at=credentials["Expiration"] - EXPIRY_SAFETY_MARGIN,
            )
        except (KeyError, TypeError) as e:
            raise CredentialAssumptionError(f"Unexpected STS response: missing {e}") from e

        logger.info(f"STS role assumption successful, credentials expire at {credentials['Expiration']}")
        return result
