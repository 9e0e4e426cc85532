"""
Logging Infrastructure

Structured logging on top of the standard library.
"""

from .logging_config import StorefrontJsonFormatter, get_structured_logger, setup_logging

__all__ = ["StorefrontJsonFormatter", "get_structured_logger", "setup_logging"]
