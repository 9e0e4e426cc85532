"""
Shared utilities: constants and the exception hierarchy
"""
