"""Feeds API client."""

from typing import Any, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class FeedsAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Feeds (2021-06-30) operations."""

    def create_feed(
        self,
        feed_type: str,
        input_feed_document_id: str,
        marketplace_ids: Optional[List[str]] = None,
    ) -> Any:
        body = {
            "feedType": feed_type,
            "marketplaceIds": self._marketplaces(marketplace_ids),
            "inputFeedDocumentId": input_feed_document_id,
        }
        return self._request("POST", API_PATHS["feeds"], data=body)

    def get_feed(self, feed_id: str) -> Any:
        return self._request("GET", f"{API_PATHS['feeds']}/{feed_id}")

    def get_feed_document(self, feed_document_id: str) -> Any:
        return self._request("GET", f"{API_PATHS['feed_documents']}/{feed_document_id}")
