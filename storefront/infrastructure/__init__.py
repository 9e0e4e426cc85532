"""
Infrastructure layer

Configuration, logging, persistence, the catalog client and shared
utilities.
"""
