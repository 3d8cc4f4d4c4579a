"""Catalog Items API client."""

from typing import Any, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class CatalogAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Catalog Items (2022-04-01) endpoints."""

    def get_catalog_item(self, asin: str, marketplace_id: Optional[str] = None) -> Any:
        return self._request(
            "GET",
            f"{API_PATHS['catalog_items']}/{asin}",
            params={"marketplaceIds": self._marketplace(marketplace_id)},
        )

    def search_catalog_items(
        self,
        keywords: str,
        marketplace_id: Optional[str] = None,
        included_data: Optional[List[str]] = None,
    ) -> Any:
        params = {
            "keywords": keywords,
            "marketplaceIds": self._marketplace(marketplace_id),
            "includedData": included_data,
        }
        return self._request("GET", API_PATHS["catalog_items"], params=params)
