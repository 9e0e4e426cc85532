"""
Storefront domain layer
"""
