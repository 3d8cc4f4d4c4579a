#!/usr/bin/env python3
"""MCP Server for the Amazon Selling Partner API using FastMCP.

Each tool maps onto one SP-API operation. Authentication, request signing
and retries are handled by the shared SPAPIClient; tools only build the
request and return the JSON response.
"""

import json
import logging
from typing import Annotated, Any, Dict, List, Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from .api import (
    CatalogAPIClient,
    FBAAPIClient,
    FeedsAPIClient,
    FinanceAPIClient,
    InventoryAPIClient,
    ListingsAPIClient,
    NotificationsAPIClient,
    OrdersAPIClient,
    PricingAPIClient,
    ReportsAPIClient,
    SellersAPIClient,
)
from .client import get_client
from .config import SPAPIConfig
from .logging_config import configure_logging, mask
from .resources.api_docs import get_api_doc
from .utils.decorators import handle_sp_api_errors

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

mcp: FastMCP = FastMCP(
    "amazon-seller-mcp",
    instructions=(
        "Tools for the Amazon Selling Partner API: orders, catalog, inventory, "
        "reports, feeds, finances, notifications, pricing, listings and FBA. "
        "Documentation is available at amazon-sp-api://{category}."
    ),
)

MarketplaceId = Annotated[
    Optional[str], "The marketplace ID. Defaults to SP_API_MARKETPLACE_ID"
]
MarketplaceIds = Annotated[
    Optional[List[str]], "List of marketplace IDs. Defaults to SP_API_MARKETPLACE_ID"
]


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2)


# Auth


@handle_sp_api_errors
def get_access_token() -> str:
    """Get an access token for Amazon SP-API. Only a masked prefix is returned."""
    token = get_client().credentials.get_access_token()
    return f"Access token retrieved successfully. Token: {mask(token)}"


@handle_sp_api_errors
def check_credentials() -> str:
    """Check if the SP-API credentials are valid.

    Obtains an access token and AWS signing credentials, then reports how
    long each remains cached.
    """
    client = get_client()
    client.credentials.get_access_token()
    client.credentials.get_aws_credentials()
    return _to_json(
        {
            "success": True,
            "message": "Credentials are valid and working correctly.",
            "status": client.credentials.status(),
        }
    )


# Catalog


@handle_sp_api_errors
def get_catalog_item(
    asin: Annotated[str, "The Amazon Standard Identification Number (ASIN) of the item"],
    marketplace_id: MarketplaceId = None,
) -> str:
    """Get details about a specific catalog item by ASIN."""
    return _to_json(CatalogAPIClient(get_client()).get_catalog_item(asin, marketplace_id))


@handle_sp_api_errors
def search_catalog_items(
    keywords: Annotated[str, "Keywords to search for"],
    marketplace_id: MarketplaceId = None,
    included_data: Annotated[Optional[List[str]], "Additional data sets to include in the response"] = None,
) -> str:
    """Search for catalog items by keywords."""
    return _to_json(
        CatalogAPIClient(get_client()).search_catalog_items(keywords, marketplace_id, included_data)
    )


# Inventory


@handle_sp_api_errors
def get_inventory_summaries(
    seller_skus: Annotated[Optional[List[str]], "Seller SKUs to get inventory summaries for"] = None,
    marketplace_id: MarketplaceId = None,
    granularity_type: Annotated[
        Literal["Marketplace", "ASIN", "Seller"], "The granularity type for the inventory aggregation level"
    ] = "Marketplace",
    granularity_id: Annotated[Optional[str], "The granularity ID for the inventory aggregation level"] = None,
) -> str:
    """Get inventory summaries for the specified seller SKUs."""
    return _to_json(
        InventoryAPIClient(get_client()).get_inventory_summaries(
            seller_skus, marketplace_id, granularity_type, granularity_id
        )
    )


@handle_sp_api_errors
def update_inventory(
    seller_sku: Annotated[str, "The seller SKU for which to update the inventory"],
    quantity: Annotated[int, "The new available quantity"],
    fulfillment_latency: Annotated[Optional[int], "The new fulfillment latency in days"] = None,
) -> str:
    """Update the inventory level for a specific SKU."""
    return _to_json(
        InventoryAPIClient(get_client()).update_inventory(seller_sku, quantity, fulfillment_latency)
    )


# Orders


@handle_sp_api_errors
def get_orders(
    created_after: Annotated[Optional[str], "Orders created after this date (ISO 8601 format)"] = None,
    created_before: Annotated[Optional[str], "Orders created before this date (ISO 8601 format)"] = None,
    order_statuses: Annotated[Optional[List[str]], "Filter by order status"] = None,
    marketplace_ids: MarketplaceIds = None,
) -> str:
    """Get orders based on specified filters."""
    return _to_json(
        OrdersAPIClient(get_client()).get_orders(
            created_after, created_before, order_statuses, marketplace_ids
        )
    )


@handle_sp_api_errors
def get_order(order_id: Annotated[str, "The order ID"]) -> str:
    """Get details for a specific order."""
    return _to_json(OrdersAPIClient(get_client()).get_order(order_id))


@handle_sp_api_errors
def get_order_items(order_id: Annotated[str, "The order ID"]) -> str:
    """Get items for a specific order."""
    return _to_json(OrdersAPIClient(get_client()).get_order_items(order_id))


# Reports


@handle_sp_api_errors
def create_report(
    report_type: Annotated[str, "The report type, e.g. GET_MERCHANT_LISTINGS_ALL_DATA"],
    marketplace_ids: MarketplaceIds = None,
    data_start_time: Annotated[Optional[str], "The start of the data range, in ISO 8601 format"] = None,
    data_end_time: Annotated[Optional[str], "The end of the data range, in ISO 8601 format"] = None,
) -> str:
    """Create a report request."""
    return _to_json(
        ReportsAPIClient(get_client()).create_report(
            report_type, marketplace_ids, data_start_time, data_end_time
        )
    )


@handle_sp_api_errors
def get_report(report_id: Annotated[str, "The report ID"]) -> str:
    """Get information about a report."""
    return _to_json(ReportsAPIClient(get_client()).get_report(report_id))


@handle_sp_api_errors
def get_report_document(report_document_id: Annotated[str, "The report document ID"]) -> str:
    """Get information about a report document."""
    return _to_json(ReportsAPIClient(get_client()).get_report_document(report_document_id))


@handle_sp_api_errors
def get_reports(
    report_types: Annotated[Optional[List[str]], "A list of report types"] = None,
    processing_statuses: Annotated[Optional[List[str]], "A list of processing statuses"] = None,
    marketplace_ids: Annotated[Optional[List[str]], "A list of marketplace IDs"] = None,
    max_results: Annotated[Optional[int], "Maximum number of results to return"] = None,
) -> str:
    """Get a list of reports."""
    return _to_json(
        ReportsAPIClient(get_client()).get_reports(
            report_types, processing_statuses, marketplace_ids, max_results
        )
    )


# Feeds


@handle_sp_api_errors
def create_feed(
    feed_type: Annotated[str, "The feed type"],
    input_feed_document_id: Annotated[str, "The document ID of the feed content"],
    marketplace_ids: MarketplaceIds = None,
) -> str:
    """Create a feed."""
    return _to_json(
        FeedsAPIClient(get_client()).create_feed(feed_type, input_feed_document_id, marketplace_ids)
    )


@handle_sp_api_errors
def get_feed(feed_id: Annotated[str, "The feed ID"]) -> str:
    """Get information about a feed."""
    return _to_json(FeedsAPIClient(get_client()).get_feed(feed_id))


@handle_sp_api_errors
def get_feed_document(feed_document_id: Annotated[str, "The feed document ID"]) -> str:
    """Get information about a feed document."""
    return _to_json(FeedsAPIClient(get_client()).get_feed_document(feed_document_id))


# Finance


@handle_sp_api_errors
def list_financial_event_groups(
    max_results_per_page: Annotated[Optional[int], "The maximum number of results to return per page"] = None,
    financial_event_group_started_after: Annotated[
        Optional[str], "Select groups opened after (or at) this date and time"
    ] = None,
    financial_event_group_started_before: Annotated[
        Optional[str], "Select groups opened before (or at) this date and time"
    ] = None,
) -> str:
    """Lists financial event groups."""
    return _to_json(
        FinanceAPIClient(get_client()).list_financial_event_groups(
            max_results_per_page, financial_event_group_started_after, financial_event_group_started_before
        )
    )


@handle_sp_api_errors
def list_financial_events(
    max_results_per_page: Annotated[Optional[int], "The maximum number of results to return per page"] = None,
    posted_after: Annotated[Optional[str], "Select events posted after (or at) this date and time"] = None,
    posted_before: Annotated[Optional[str], "Select events posted before (or at) this date and time"] = None,
) -> str:
    """Lists financial events."""
    return _to_json(
        FinanceAPIClient(get_client()).list_financial_events(max_results_per_page, posted_after, posted_before)
    )


@handle_sp_api_errors
def get_financial_event_group(
    event_group_id: Annotated[str, "The identifier of the financial event group"],
) -> str:
    """Returns all financial events for the specified financial event group."""
    return _to_json(FinanceAPIClient(get_client()).get_financial_event_group(event_group_id))


# Notifications


@handle_sp_api_errors
def get_subscription(
    notification_type: Annotated[str, "The notification type"],
    marketplace_id: MarketplaceId = None,
) -> str:
    """Returns information about a subscription for the specified notification type."""
    return _to_json(NotificationsAPIClient(get_client()).get_subscription(notification_type, marketplace_id))


@handle_sp_api_errors
def create_subscription(
    notification_type: Annotated[str, "The notification type"],
    payload_version: Annotated[str, "The version of the payload object to be used in the notification"],
    destination_id: Annotated[str, "The identifier for the destination where notifications will be delivered"],
    marketplace_id: MarketplaceId = None,
) -> str:
    """Creates a subscription for the specified notification type."""
    return _to_json(
        NotificationsAPIClient(get_client()).create_subscription(
            notification_type, payload_version, destination_id, marketplace_id
        )
    )


@handle_sp_api_errors
def get_destinations() -> str:
    """Returns information about all destinations."""
    return _to_json(NotificationsAPIClient(get_client()).get_destinations())


@handle_sp_api_errors
def create_destination(
    name: Annotated[str, "The name of the destination"],
    sqs_arn: Annotated[Optional[str], "The ARN of the SQS queue"] = None,
    event_bridge_account_id: Annotated[Optional[str], "The AWS account ID for EventBridge"] = None,
    event_bridge_region: Annotated[Optional[str], "The AWS region for EventBridge"] = None,
) -> str:
    """Creates a destination resource to receive notifications.

    Provide either an SQS queue ARN or an EventBridge account ID.
    """
    specification: Dict[str, Any] = {}
    if sqs_arn:
        specification["sqs"] = {"arn": sqs_arn}
    if event_bridge_account_id:
        event_bridge = {"accountId": event_bridge_account_id}
        if event_bridge_region:
            event_bridge["region"] = event_bridge_region
        specification["eventBridge"] = event_bridge
    if not specification:
        raise ValueError("Either sqs_arn or event_bridge_account_id is required")

    return _to_json(NotificationsAPIClient(get_client()).create_destination(name, specification))


# Sellers


@handle_sp_api_errors
def get_marketplace_participations() -> str:
    """Returns a list of marketplaces that the seller participates in."""
    return _to_json(SellersAPIClient(get_client()).get_marketplace_participations())


# FBA


@handle_sp_api_errors
def get_inbound_eligibility(
    asin: Annotated[str, "The ASIN of the item"],
    program_type: Annotated[Literal["INBOUND", "COMMINGLING"], "The program to check eligibility against"],
    marketplace_id: MarketplaceId = None,
) -> str:
    """Returns the eligibility status of an item for the specified program."""
    return _to_json(FBAAPIClient(get_client()).get_inbound_eligibility(asin, program_type, marketplace_id))


@handle_sp_api_errors
def get_fba_inventory_summaries(
    granularity_type: Annotated[
        Literal["Marketplace", "ASIN", "Seller"], "The granularity type for the inventory aggregation level"
    ],
    granularity_id: Annotated[Optional[str], "The granularity ID for the inventory aggregation level"] = None,
    details: Annotated[bool, "Return additional summarized inventory details"] = False,
    marketplace_id: MarketplaceId = None,
) -> str:
    """Returns a list of inventory summaries for the specified criteria."""
    return _to_json(
        FBAAPIClient(get_client()).get_inventory_summaries(
            granularity_type, granularity_id, details, marketplace_id
        )
    )


@handle_sp_api_errors
def get_shipments(
    query_type: Annotated[
        Literal["SHIPMENT", "DATE_RANGE", "NEXT_TOKEN"], "How shipments are selected"
    ],
    shipment_status_list: Annotated[Optional[List[str]], "A list of ShipmentStatus values"] = None,
    next_token: Annotated[Optional[str], "Token returned by a previous request"] = None,
    marketplace_id: MarketplaceId = None,
) -> str:
    """Returns a list of inbound shipments based on the specified criteria."""
    return _to_json(
        FBAAPIClient(get_client()).get_shipments(query_type, shipment_status_list, next_token, marketplace_id)
    )


# Product pricing


@handle_sp_api_errors
def get_pricing(
    item_type: Annotated[Literal["Asin", "Sku"], "Whether item_ids are ASINs or seller SKUs"],
    item_ids: Annotated[List[str], "A list of item identifiers"],
    marketplace_id: MarketplaceId = None,
) -> str:
    """Returns pricing information for a list of products."""
    return _to_json(PricingAPIClient(get_client()).get_pricing(item_type, item_ids, marketplace_id))


@handle_sp_api_errors
def get_competitive_pricing(
    item_type: Annotated[Literal["Asin", "Sku"], "Whether item_ids are ASINs or seller SKUs"],
    item_ids: Annotated[List[str], "A list of item identifiers"],
    marketplace_id: MarketplaceId = None,
) -> str:
    """Returns competitive pricing information for a list of products."""
    return _to_json(PricingAPIClient(get_client()).get_competitive_pricing(item_type, item_ids, marketplace_id))


@handle_sp_api_errors
def get_listing_offers(
    seller_sku: Annotated[str, "The seller SKU of the item"],
    item_condition: Annotated[
        Literal["New", "Used", "Collectible", "Refurbished", "Club"], "The condition of the item"
    ],
    marketplace_id: MarketplaceId = None,
) -> str:
    """Returns the lowest priced offers for a single SKU listing."""
    return _to_json(PricingAPIClient(get_client()).get_listing_offers(seller_sku, item_condition, marketplace_id))


# Listings


@handle_sp_api_errors
def get_listings_item(
    seller_id: Annotated[str, "The seller identifier"],
    sku: Annotated[str, "The seller SKU of the listings item"],
    marketplace_ids: MarketplaceIds = None,
    issue_locale: Annotated[Optional[str], "A locale for localization of issues"] = None,
) -> str:
    """Returns details about a listings item for a selling partner."""
    return _to_json(
        ListingsAPIClient(get_client()).get_listings_item(seller_id, sku, marketplace_ids, issue_locale)
    )


@handle_sp_api_errors
def put_listings_item(
    seller_id: Annotated[str, "The seller identifier"],
    sku: Annotated[str, "The seller SKU of the listings item"],
    product_type: Annotated[str, "The Amazon product type of the listings item"],
    attributes: Annotated[Dict[str, Any], "Structured listings item attribute data"],
    marketplace_ids: MarketplaceIds = None,
    issue_locale: Annotated[Optional[str], "A locale for localization of issues"] = None,
    requirements: Annotated[Optional[str], "The name of the requirements set for the provided data"] = None,
) -> str:
    """Creates or updates a listings item for a selling partner."""
    return _to_json(
        ListingsAPIClient(get_client()).put_listings_item(
            seller_id, sku, product_type, attributes, marketplace_ids, issue_locale, requirements
        )
    )


@handle_sp_api_errors
def delete_listings_item(
    seller_id: Annotated[str, "The seller identifier"],
    sku: Annotated[str, "The seller SKU of the listings item"],
    marketplace_ids: MarketplaceIds = None,
    issue_locale: Annotated[Optional[str], "A locale for localization of issues"] = None,
) -> str:
    """Deletes a listings item for a selling partner."""
    return _to_json(
        ListingsAPIClient(get_client()).delete_listings_item(seller_id, sku, marketplace_ids, issue_locale)
    )


def api_docs(category: str) -> str:
    """Amazon SP-API documentation for a category (e.g. overview, orders, reports)."""
    return get_api_doc(category)


TOOLS = [
    get_access_token,
    check_credentials,
    get_catalog_item,
    search_catalog_items,
    get_inventory_summaries,
    update_inventory,
    get_orders,
    get_order,
    get_order_items,
    create_report,
    get_report,
    get_report_document,
    get_reports,
    create_feed,
    get_feed,
    get_feed_document,
    list_financial_event_groups,
    list_financial_events,
    get_financial_event_group,
    get_subscription,
    create_subscription,
    get_destinations,
    create_destination,
    get_marketplace_participations,
    get_inbound_eligibility,
    get_fba_inventory_summaries,
    get_shipments,
    get_pricing,
    get_competitive_pricing,
    get_listing_offers,
    get_listings_item,
    put_listings_item,
    delete_listings_item,
]

for _tool in TOOLS:
    mcp.tool()(_tool)

mcp.resource("amazon-sp-api://{category}")(api_docs)


def main() -> None:
    """Entry point for the MCP server."""
    config = SPAPIConfig.from_env()
    configure_logging(config.log_file, config.log_level)
    logger.info(f"Starting amazon-seller-mcp with {len(TOOLS)} tools (region={config.region})")
    mcp.run()


if __name__ == "__main__":
    main()
