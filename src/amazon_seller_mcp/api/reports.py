"""Reports API client for Amazon SP-API bulk operations."""

from typing import Any, Dict, List, Optional

from ..constants import API_PATHS
from .base import BaseAPIClient


class ReportsAPIClient(BaseAPIClient):
    """Client for Amazon SP-API Reports (2021-06-30) operations."""

    def create_report(
        self,
        report_type: str,
        marketplace_ids: Optional[List[str]] = None,
        data_start_time: Optional[str] = None,
        data_end_time: Optional[str] = None,
    ) -> Any:
        """Request a report.

        Args:
            report_type: Report type, e.g. GET_MERCHANT_LISTINGS_ALL_DATA
            marketplace_ids: Marketplaces, defaults to the configured one
            data_start_time: ISO 8601 start of the data range
            data_end_time: ISO 8601 end of the data range

        Returns:
            Response containing the reportId
        """
        body: Dict[str, Any] = {
            "reportType": report_type,
            "marketplaceIds": self._marketplaces(marketplace_ids),
        }
        if data_start_time:
            body["dataStartTime"] = data_start_time
        if data_end_time:
            body["dataEndTime"] = data_end_time
        return self._request("POST", API_PATHS["reports"], data=body)

    def get_report(self, report_id: str) -> Any:
        return self._request("GET", f"{API_PATHS['reports']}/{report_id}")

    def get_report_document(self, report_document_id: str) -> Any:
        return self._request("GET", f"{API_PATHS['report_documents']}/{report_document_id}")

    def get_reports(
        self,
        report_types: Optional[List[str]] = None,
        processing_statuses: Optional[List[str]] = None,
        marketplace_ids: Optional[List[str]] = None,
        max_results: Optional[int] = None,
    ) -> Any:
        params = {
            "reportTypes": report_types,
            "processingStatuses": processing_statuses,
            "marketplaceIds": marketplace_ids,
            "maxResults": max_results,
        }
        return self._request("GET", API_PATHS["reports"], params=params)
