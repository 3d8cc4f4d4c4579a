"""Product Pricing API client."""

from typing import Any, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class PricingAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Product Pricing (v0) endpoints."""

    def get_pricing(self, item_type: str, item_ids: List[str], marketplace_id: Optional[str] = None) -> Any:
        """Current prices for up to 20 ASINs or SKUs."""
        return self._request(
            "GET",
            API_PATHS["pricing"],
            params=self._items_query(item_type, item_ids, marketplace_id),
        )

    def get_competitive_pricing(
        self, item_type: str, item_ids: List[str], marketplace_id: Optional[str] = None
    ) -> Any:
        return self._request(
            "GET",
            API_PATHS["competitive_pricing"],
            params=self._items_query(item_type, item_ids, marketplace_id),
        )

    def get_listing_offers(
        self, seller_sku: str, item_condition: str, marketplace_id: Optional[str] = None
    ) -> Any:
        """Lowest priced offers for one of the seller's SKUs."""
        params = {
            "MarketplaceId": self._marketplace(marketplace_id),
            "ItemCondition": item_condition,
        }
        return self._request("GET", f"{API_PATHS['listing_offers']}/{seller_sku}/offers", params=params)

    def _items_query(self, item_type: str, item_ids: List[str], marketplace_id: Optional[str]) -> dict:
        # Asins for ItemType=Asin, Skus for ItemType=Sku
        id_key = "Asins" if item_type == "Asin" else "Skus"
        return {
            "ItemType": item_type,
            id_key: item_ids,
            "MarketplaceId": self._marketplace(marketplace_id),
        }
