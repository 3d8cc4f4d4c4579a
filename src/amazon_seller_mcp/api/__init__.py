"""Amazon SP-API client modules."""

from .base import BaseAPIClient
from .catalog import CatalogAPIClient
from .fba import FBAAPIClient
from .feeds import FeedsAPIClient
from .finance import FinanceAPIClient
from .inventory import InventoryAPIClient
from .listings import ListingsAPIClient
from .notifications import NotificationsAPIClient
from .orders import OrdersAPIClient
from .pricing import PricingAPIClient
from .reports import ReportsAPIClient
from .sellers import SellersAPIClient

__all__ = [
    "BaseAPIClient",
    "CatalogAPIClient",
    "FBAAPIClient",
    "FeedsAPIClient",
    "FinanceAPIClient",
    "InventoryAPIClient",
    "ListingsAPIClient",
    "NotificationsAPIClient",
    "OrdersAPIClient",
    "PricingAPIClient",
    "ReportsAPIClient",
    "SellersAPIClient",
]
