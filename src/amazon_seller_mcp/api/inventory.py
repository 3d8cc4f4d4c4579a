"""Inventory API client for FBA summaries and merchant inventory updates."""

from typing import Any, Dict, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class InventoryAPIClient(BaseAPIClient):
    """Client for Amazon SP-API inventory endpoints."""

    def get_inventory_summaries(
        self,
        seller_skus: Optional[List[str]] = None,
        marketplace_id: Optional[str] = None,
        granularity_type: str = "Marketplace",
        granularity_id: Optional[str] = None,
    ) -> Any:
        """Get FBA inventory summaries, optionally restricted to some SKUs.

        Args:
            seller_skus: SKUs to include; all SKUs when empty
            marketplace_id: Marketplace, defaults to the configured one
            granularity_type: Marketplace, ASIN or Seller
            granularity_id: Granularity identifier, defaults to the marketplace
        """
        marketplace = self._marketplace(marketplace_id)
        params = {
            "marketplaceIds": marketplace,
            "granularityType": granularity_type,
            "granularityId": granularity_id or marketplace,
            "sellerSkus": seller_skus,
        }
        return self._request("GET", API_PATHS["inventory_summaries"], params=params)

    def update_inventory(
        self,
        seller_sku: str,
        quantity: int,
        fulfillment_latency: Optional[int] = None,
    ) -> Any:
        """Set the available quantity of a merchant-fulfilled SKU."""
        inventory: Dict[str, Any] = {"sellerSku": seller_sku, "availableQuantity": quantity}
        if fulfillment_latency is not None:
            inventory["fulfillmentLatency"] = fulfillment_latency
        return self._request(
            "PUT",
            f"{API_PATHS['inventories']}/{seller_sku}",
            data={"inventory": inventory},
        )
