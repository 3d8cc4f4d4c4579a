"""Fulfillment by Amazon (inbound and inventory) API client."""

from typing import Any, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class FBAAPIClient(BaseAPIClient):
    """Client for FBA inbound eligibility, inventory and shipment endpoints."""

    def get_inbound_eligibility(
        self, asin: str, program_type: str, marketplace_id: Optional[str] = None
    ) -> Any:
        params = {
            "asin": asin,
            "program": program_type,
            "marketplaceIds": self._marketplace(marketplace_id),
        }
        return self._request("GET", API_PATHS["inbound_eligibility"], params=params)

    def get_inventory_summaries(
        self,
        granularity_type: str,
        granularity_id: Optional[str] = None,
        details: bool = False,
        marketplace_id: Optional[str] = None,
    ) -> Any:
        params = {
            "details": details,
            "granularityType": granularity_type,
            "granularityId": granularity_id,
            "marketplaceIds": self._marketplace(marketplace_id),
        }
        return self._request("GET", API_PATHS["inventory_summaries"], params=params)

    def get_shipments(
        self,
        query_type: str,
        shipment_status_list: Optional[List[str]] = None,
        next_token: Optional[str] = None,
        marketplace_id: Optional[str] = None,
    ) -> Any:
        params = {
            "QueryType": query_type,
            "MarketplaceId": self._marketplace(marketplace_id),
            "ShipmentStatusList": shipment_status_list,
            "NextToken": next_token,
        }
        return self._request("GET", API_PATHS["inbound_shipments"], params=params)
