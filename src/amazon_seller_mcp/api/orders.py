"""Orders API client for Amazon SP-API integration."""

from typing import Any, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class OrdersAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Orders endpoints."""

    def get_orders(
        self,
        created_after: Optional[str] = None,
        created_before: Optional[str] = None,
        order_statuses: Optional[List[str]] = None,
        marketplace_ids: Optional[List[str]] = None,
    ) -> Any:
        """Retrieve orders matching the given filters.

        Args:
            created_after: ISO 8601 date, orders created after it
            created_before: ISO 8601 date, orders created before it
            order_statuses: Order statuses to filter by
            marketplace_ids: Marketplaces to search, defaults to the configured one
        """
        params = {
            "MarketplaceIds": self._marketplaces(marketplace_ids),
            "CreatedAfter": created_after,
            "CreatedBefore": created_before,
            "OrderStatuses": order_statuses,
        }
        return self._request("GET", API_PATHS["orders"], params=params)

    def get_order(self, order_id: str) -> Any:
        """Retrieve a single order."""
        return self._request("GET", f"{API_PATHS['orders']}/{order_id}")

    def get_order_items(self, order_id: str) -> Any:
        """Retrieve the items of a single order."""
        return self._request("GET", f"{API_PATHS['orders']}/{order_id}/orderItems")
