"""Listings Items API client for seller listings."""

from typing import Any, Dict, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class ListingsAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Listings Items (2021-08-01) endpoints."""

    def _item_path(self, seller_id: str, sku: str) -> str:
        return f"{API_PATHS['listings']}/{seller_id}/{sku}"

    def get_listings_item(
        self,
        seller_id: str,
        sku: str,
        marketplace_ids: Optional[List[str]] = None,
        issue_locale: Optional[str] = None,
    ) -> Any:
        params = {
            "marketplaceIds": self._marketplaces(marketplace_ids),
            "issueLocale": issue_locale,
        }
        return self._request("GET", self._item_path(seller_id, sku), params=params)

    def put_listings_item(
        self,
        seller_id: str,
        sku: str,
        product_type: str,
        attributes: Dict[str, Any],
        marketplace_ids: Optional[List[str]] = None,
        issue_locale: Optional[str] = None,
        requirements: Optional[str] = None,
    ) -> Any:
        """Create or fully replace a listings item."""
        params = {
            "marketplaceIds": self._marketplaces(marketplace_ids),
            "issueLocale": issue_locale,
        }
        body: Dict[str, Any] = {"productType": product_type, "attributes": attributes}
        if requirements:
            body["requirements"] = requirements
        return self._request("PUT", self._item_path(seller_id, sku), params=params, data=body)

    def delete_listings_item(
        self,
        seller_id: str,
        sku: str,
        marketplace_ids: Optional[List[str]] = None,
        issue_locale: Optional[str] = None,
    ) -> Any:
        params = {
            "marketplaceIds": self._marketplaces(marketplace_ids),
            "issueLocale": issue_locale,
        }
        return self._request("DELETE", self._item_path(seller_id, sku), params=params)
