"""Notifications API client."""

from typing import Any, Dict, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class NotificationsAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Notifications (v1) subscriptions and destinations."""

    def get_subscription(self, notification_type: str, marketplace_id: Optional[str] = None) -> Any:
        return self._request(
            "GET",
            f"{API_PATHS['subscriptions']}/{notification_type}",
            params={"marketplaceIds": self._marketplace(marketplace_id)},
        )

    def create_subscription(
        self,
        notification_type: str,
        payload_version: str,
        destination_id: str,
        marketplace_id: Optional[str] = None,
    ) -> Any:
        return self._request(
            "POST",
            f"{API_PATHS['subscriptions']}/{notification_type}",
            params={"marketplaceIds": self._marketplace(marketplace_id)},
            data={"payloadVersion": payload_version, "destinationId": destination_id},
        )

    def get_destinations(self) -> Any:
        return self._request("GET", API_PATHS["destinations"])

    def create_destination(self, name: str, resource_specification: Dict[str, Any]) -> Any:
        """Create an SQS or EventBridge destination.

        Args:
            name: Destination name
            resource_specification: ``{"sqs": {"arn": ...}}`` or
                ``{"eventBridge": {"accountId": ..., "region": ...}}``
        """
        body = {"name": name, "resourceSpecification": resource_specification}
        return self._request("POST", API_PATHS["destinations"], data=body)
