"""Reference text served through the ``amazon-sp-api://{category}`` resource."""

API_DOCS = {
    "overview": """# Amazon Selling Partner API Overview

SP-API is the REST API Amazon selling partners use to work with listings,
orders, inventory, reports, feeds, finances and notifications.

Every request carries an LWA access token in `x-amz-access-token` and is
signed with AWS Signature Version 4 (service `execute-api`).

## Regional endpoints

- North America: https://sellingpartnerapi-na.amazon.com (us-east-1)
- Europe: https://sellingpartnerapi-eu.amazon.com (eu-west-1)
- Far East: https://sellingpartnerapi-fe.amazon.com (us-west-2)

Documentation: https://developer-docs.amazon.com/sp-api/
""",
    "authentication": """# Authentication

1. Exchange the refresh token for an access token at
   `POST https://api.amazon.com/auth/o2/token` (grant_type=refresh_token).
   Tokens live for one hour.
2. When a role ARN is configured, assume the IAM role through STS for
   temporary credentials (one hour session). Otherwise the configured AWS
   keys sign requests directly.
3. Sign each request with SigV4 over `host`, `x-amz-date` and, for
   temporary credentials, `x-amz-security-token`.

Both credentials are cached and refreshed 60 seconds before they expire.

## Configuration

- SP_API_REFRESH_TOKEN, SP_API_CLIENT_ID, SP_API_CLIENT_SECRET
- SP_API_AWS_ACCESS_KEY, SP_API_AWS_SECRET_KEY, SP_API_ROLE_ARN
- SP_API_REGION (default us-east-1), SP_API_MARKETPLACE_ID
""",
    "catalog": """# Catalog Items API (2022-04-01)

- GET /catalog/2022-04-01/items/{asin} - details for one ASIN
- GET /catalog/2022-04-01/items - keyword search

Tools: get_catalog_item, search_catalog_items
""",
    "orders": """# Orders API (v0)

- GET /orders/v0/orders - orders matching filters
- GET /orders/v0/orders/{orderId} - one order
- GET /orders/v0/orders/{orderId}/orderItems - items of an order

Statuses: PendingAvailability, Pending, Unshipped, PartiallyShipped,
Shipped, Canceled, Unfulfillable, InvoiceUnconfirmed.

Tools: get_orders, get_order, get_order_items
""",
    "inventory": """# Inventory

- GET /fba/inventory/v1/summaries - FBA inventory summaries
- PUT /inventory/v1/inventories/{sellerSku} - merchant inventory quantity

Tools: get_inventory_summaries, update_inventory
""",
    "reports": """# Reports API (2021-06-30)

- POST /reports/2021-06-30/reports - request a report
- GET /reports/2021-06-30/reports - list reports
- GET /reports/2021-06-30/reports/{reportId} - report status
- GET /reports/2021-06-30/documents/{reportDocumentId} - download location

Reports are processed asynchronously: create, poll until DONE, then fetch
the document.

Tools: create_report, get_reports, get_report, get_report_document
""",
    "feeds": """# Feeds API (2021-06-30)

- POST /feeds/2021-06-30/feeds - submit a feed
- GET /feeds/2021-06-30/feeds/{feedId} - feed status
- GET /feeds/2021-06-30/documents/{feedDocumentId} - feed document

Tools: create_feed, get_feed, get_feed_document
""",
    "finance": """# Finances API (v0)

- GET /finances/v0/financialEventGroups - event groups
- GET /finances/v0/financialEvents - events in a date range
- GET /finances/v0/financialEventGroups/{eventGroupId}/financialEvents

Tools: list_financial_event_groups, list_financial_events,
get_financial_event_group
""",
    "notifications": """# Notifications API (v1)

- GET/POST /notifications/v1/subscriptions/{notificationType}
- GET/POST /notifications/v1/destinations

Destinations are SQS queues or EventBridge accounts.

Tools: get_subscription, create_subscription, get_destinations,
create_destination
""",
    "productPricing": """# Product Pricing API (v0)

- GET /products/pricing/v0/price - prices for ASINs or SKUs
- GET /products/pricing/v0/competitivePrice - competitive prices
- GET /products/pricing/v0/listings/{sellerSku}/offers - lowest offers

Tools: get_pricing, get_competitive_pricing, get_listing_offers
""",
    "listings": """# Listings Items API (2021-08-01)

- GET /listings/2021-08-01/items/{sellerId}/{sku}
- PUT /listings/2021-08-01/items/{sellerId}/{sku}
- DELETE /listings/2021-08-01/items/{sellerId}/{sku}

Tools: get_listings_item, put_listings_item, delete_listings_item
""",
    "fba": """# Fulfillment by Amazon

- GET /fba/inbound/v1/eligibility/inboundEligibility - item eligibility
- GET /fba/inventory/v1/summaries - inventory summaries
- GET /fba/inbound/v0/shipments - inbound shipments

Tools: get_inbound_eligibility, get_fba_inventory_summaries, get_shipments
""",
    "sellers": """# Sellers API (v1)

- GET /sellers/v1/marketplaceParticipations - marketplaces the seller uses

Tools: get_marketplace_participations
""",
}


def get_api_doc(category: str) -> str:
    """Return the documentation for a category, or a list of valid ones."""
    if category not in API_DOCS:
        available = ", ".join(API_DOCS)
        return f"Documentation for category '{category}' not found. Available categories: {available}"
    return API_DOCS[category]
