"""
Storefront core

Cart, favorites, session, filter and coupon state for a storefront client.
"""

__version__ = "1.0.0"
