"""Constants and configuration for Amazon SP-API."""

from datetime import timedelta

# Login with Amazon token endpoint
LWA_TOKEN_URL = "https://api.amazon.com/auth/o2/token"

# AWS region -> SP-API endpoint code. Signing and dispatch must agree on this.
REGION_ENDPOINT_CODES = {
    "us-east-1": "na",
    "eu-west-1": "eu",
    "us-west-2": "fe",
}

DEFAULT_REGION = "us-east-1"

# Marketplace configuration
MARKETPLACES = {
    "US": {"id": "ATVPDKIKX0DER", "region": "us-east-1", "country_code": "US"},
    "CA": {"id": "A2EUQ1WTGCTBG2", "region": "us-east-1", "country_code": "CA"},
    "MX": {"id": "A1AM78C64UM0Y8", "region": "us-east-1", "country_code": "MX"},
    "UK": {"id": "A1F83G8C2ARO7P", "region": "eu-west-1", "country_code": "GB"},
    "DE": {"id": "A1PA6795UKMFR9", "region": "eu-west-1", "country_code": "DE"},
    "FR": {"id": "A13V1IB3VIYZZH", "region": "eu-west-1", "country_code": "FR"},
    "IT": {"id": "APJ6JRA9NG5V4", "region": "eu-west-1", "country_code": "IT"},
    "ES": {"id": "A1RKKUPIHCS9HS", "region": "eu-west-1", "country_code": "ES"},
    "JP": {"id": "A1VC38T7YXB528", "region": "us-west-2", "country_code": "JP"},
    "AU": {"id": "A39IBJ37TRP1C6", "region": "us-west-2", "country_code": "AU"},
}

# SigV4 signing
SIGNING_SERVICE = "execute-api"

# Subtracted from every provider-reported expiry
EXPIRY_SAFETY_MARGIN = timedelta(seconds=60)

# STS role assumption
ROLE_SESSION_NAME = "SPAPISession"
ROLE_SESSION_DURATION = 3600

# Request timeouts (seconds)
LWA_TIMEOUT = 15
DEFAULT_TIMEOUT = 30

# Retry policy: 3 retries => 4 attempts, backoff 2**attempt * base
MAX_RETRIES = 3
RETRY_BASE_DELAY = 1.0

USER_AGENT = "AmazonSellerMCP/1.0 (Language=Python)"

# API Paths
API_PATHS = {
    "orders": "/orders/v0/orders",
    "catalog_items": "/catalog/2022-04-01/items",
    "inventory_summaries": "/fba/inventory/v1/summaries",
    "inventories": "/inventory/v1/inventories",
    "inbound_eligibility": "/fba/inbound/v1/eligibility/inboundEligibility",
    "inbound_shipments": "/fba/inbound/v0/shipments",
    "reports": "/reports/2021-06-30/reports",
    "report_documents": "/reports/2021-06-30/documents",
    "feeds": "/feeds/2021-06-30/feeds",
    "feed_documents": "/feeds/2021-06-30/documents",
    "financial_event_groups": "/finances/v0/financialEventGroups",
    "financial_events": "/finances/v0/financialEvents",
    "subscriptions": "/notifications/v1/subscriptions",
    "destinations": "/notifications/v1/destinations",
    "marketplace_participations": "/sellers/v1/marketplaceParticipations",
    "pricing": "/products/pricing/v0/price",
    "competitive_pricing": "/products/pricing/v0/competitivePrice",
    "listing_offers": "/products/pricing/v0/listings",
    "listings": "/listings/2021-08-01/items",
}
