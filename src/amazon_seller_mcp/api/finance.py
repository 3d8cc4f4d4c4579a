"""Finances API client."""

from typing import Any, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class FinanceAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Finances (v0) endpoints."""

    def list_financial_event_groups(
        self,
        max_results_per_page: Optional[int] = None,
        started_after: Optional[str] = None,
        started_before: Optional[str] = None,
    ) -> Any:
        params = {
            "MaxResultsPerPage": max_results_per_page,
            "FinancialEventGroupStartedAfter": started_after,
            "FinancialEventGroupStartedBefore": started_before,
        }
        return self._request("GET", API_PATHS["financial_event_groups"], params=params)

    def list_financial_events(
        self,
        max_results_per_page: Optional[int] = None,
        posted_after: Optional[str] = None,
        posted_before: Optional[str] = None,
    ) -> Any:
        params = {
            "MaxResultsPerPage": max_results_per_page,
            "PostedAfter": posted_after,
            "PostedBefore": posted_before,
        }
        return self._request("GET", API_PATHS["financial_events"], params=params)

    def get_financial_event_group(self, event_group_id: str) -> Any:
        """Return the financial events belonging to one event group."""
        return self._request(
            "GET", f"{API_PATHS['financial_event_groups']}/{event_group_id}/financialEvents"
        )
