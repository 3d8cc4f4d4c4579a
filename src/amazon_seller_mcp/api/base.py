"""Base class for the per-area SP-API clients."""

import logging
from typing import Any, Dict, List, Optional

from ..client import SPAPIClient
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """Builds paths, query strings and bodies for one SP-API area.

    Transport, signing and retry are delegated to the shared SPAPIClient.
    """

    def __init__(self, client: SPAPIClient) -> None:
        self.client = client

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Any] = None,
    ) -> Any:
        """Drop unset query parameters and hand the call to the executor."""
        query = {key: value for key, value in (params or {}).items() if value not in (None, "", [])}
        logger.debug(f"{type(self).__name__}: {method} {path} query_keys={sorted(query)}")
        return self.client.execute(method, path, body=data, query=query or None)

    def _marketplace(self, marketplace_id: Optional[str] = None) -> str:
        """Return the given marketplace ID or the configured default."""
        marketplace = marketplace_id or self.client.marketplace_id
        if not marketplace:
            raise ConfigurationError(
                "No marketplace ID given and SP_API_MARKETPLACE_ID is not set"
            )
        return marketplace

    def _marketplaces(self, marketplace_ids: Optional[List[str]] = None) -> List[str]:
        if marketplace_ids:
            return list(marketplace_ids)
        return [self._marketplace()]
