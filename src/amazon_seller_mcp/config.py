"""Configuration for the SP-API client.

Values come from environment variables (a ``.env`` file is loaded by the
server entry point). The ``SP_API_*`` names are preferred; the older
``LWA_*`` / ``AWS_*`` names are accepted as fallbacks.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_REGION, MARKETPLACES
from .exceptions import ConfigurationError


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        value = os.getenv(key, "")
        if value:
            return value.strip().strip('"')
    return default


def resolve_marketplace(value: str) -> Optional[str]:
    """Accept a marketplace ID or a country key such as ``US`` or ``DE``."""
    if not value:
        return None
    marketplace = MARKETPLACES.get(value.upper())
    return marketplace["id"] if marketplace else value


@dataclass
class SPAPIConfig:
    """Long-lived credentials and defaults for one running process."""

    refresh_token: str
    client_id: str
    client_secret: str
    aws_access_key: str
    aws_secret_key: str
    role_arn: Optional[str] = None
    region: str = DEFAULT_REGION
    marketplace_id: Optional[str] = None
    log_file: str = "debug.log"
    log_level: str = "DEBUG"

    @classmethod
    def from_env(cls) -> "SPAPIConfig":
        return cls(
            refresh_token=_env("SP_API_REFRESH_TOKEN", "LWA_REFRESH_TOKEN"),
            client_id=_env("SP_API_CLIENT_ID", "LWA_CLIENT_ID"),
            client_secret=_env("SP_API_CLIENT_SECRET", "LWA_CLIENT_SECRET"),
            aws_access_key=_env("SP_API_AWS_ACCESS_KEY", "AWS_ACCESS_KEY_ID"),
            aws_secret_key=_env("SP_API_AWS_SECRET_KEY", "AWS_SECRET_ACCESS_KEY"),
            role_arn=_env("SP_API_ROLE_ARN", "AWS_ROLE_ARN") or None,
            region=_env("SP_API_REGION", default=DEFAULT_REGION),
            marketplace_id=resolve_marketplace(_env("SP_API_MARKETPLACE_ID")),
            log_file=_env("SP_API_LOG_FILE", default="debug.log"),
            log_level=_env("SP_API_LOG_LEVEL", default="DEBUG").upper(),
        )

    @property
    def uses_role_assumption(self) -> bool:
        return bool(self.role_arn)

    def validate(self) -> None:
        """Raise ConfigurationError naming every missing credential."""
        required = {
            "SP_API_REFRESH_TOKEN": self.refresh_token,
            "SP_API_CLIENT_ID": self.client_id,
            "SP_API_CLIENT_SECRET": self.client_secret,
            "SP_API_AWS_ACCESS_KEY": self.aws_access_key,
            "SP_API_AWS_SECRET_KEY": self.aws_secret_key,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required SP-API configuration: {', '.join(missing)}",
                details=missing,
            )
