"""
Application use cases
"""

from .catalog_browsing_use_case import CatalogBrowsingUseCase, paginate, sort_products
from .pricing_use_case import PricingCalculator
from .session_use_case import SessionBinder

__all__ = [
    "CatalogBrowsingUseCase",
    "PricingCalculator",
    "SessionBinder",
    "paginate",
    "sort_products",
]
