"""
Application DTOs
"""

from .catalog_dtos import Page
from .pricing_dtos import CheckoutReceipt, PriceBreakdown
from .snapshot_dtos import (
    AuthSnapshot,
    CartLineSnapshot,
    CartSnapshot,
    FilterSnapshot,
    ProductSnapshot,
    StoreSnapshot,
    UserSnapshot,
)

__all__ = [
    "AuthSnapshot",
    "CartLineSnapshot",
    "CartSnapshot",
    "CheckoutReceipt",
    "FilterSnapshot",
    "Page",
    "PriceBreakdown",
    "ProductSnapshot",
    "StoreSnapshot",
    "UserSnapshot",
]
