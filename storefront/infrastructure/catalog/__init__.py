"""
Product catalog clients
"""

from .http_product_catalog import HttpProductCatalog

__all__ = ["HttpProductCatalog"]
