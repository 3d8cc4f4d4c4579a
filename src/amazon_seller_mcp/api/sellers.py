"""Sellers API client."""

from typing import Any

from ..constants import API_PATHS
from .base import BaseAPIClient


class SellersAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Sellers (v1) endpoints."""

    def get_marketplace_participations(self) -> Any:
        return self._request("GET", API_PATHS["marketplace_participations"])
