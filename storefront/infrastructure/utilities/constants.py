"""
Application constants for the storefront core

Centralizes the magic numbers and hard-coded strings shared by the domain,
the persistence adapter and the catalog client.
"""

from typing import Final


# Logging configuration constants
class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    MAIN_LOG_BACKUP_COUNT: Final[int] = 5


class FileSettings:
    """Log file names"""

    MAIN_LOG_FILE: Final[str] = "storefront.json.log"


# Money and pricing constants
class PricingSettings:
    """Currency and rounding rules"""

    DEFAULT_CURRENCY: Final[str] = "USD"
    DISPLAY_DECIMAL_PLACES: Final[str] = "0.01"
    MIN_DISCOUNT_PERCENT: Final[int] = 0
    MAX_DISCOUNT_PERCENT: Final[int] = 100


# Validation constants
class ValidationSettings:
    """Input validation limits and constraints"""

    MIN_CART_ITEM_QUANTITY: Final[int] = 1
    MAX_COUPON_CODE_LENGTH: Final[int] = 100


# Persistence constants
class StorageSettings:
    """Snapshot storage defaults"""

    DEFAULT_NAMESPACE: Final[str] = "ecommerce-store"
    SNAPSHOT_VERSION: Final[int] = 1
    MAX_NAMESPACE_LENGTH: Final[int] = 100
    SUPPORTED_BACKENDS: Final[tuple] = ("memory", "sqlalchemy")


# Product catalog constants
class CatalogSettings:
    """Upstream product catalog defaults"""

    DEFAULT_BASE_URL: Final[str] = "https://dummyjson.com"
    DEFAULT_TIMEOUT_SECONDS: Final[float] = 10.0
    DEFAULT_PAGE_SIZE: Final[int] = 12
    DEFAULT_PREFETCH_LIMIT: Final[int] = 100


# Mock authentication constants
class AuthSettings:
    """Values stamped onto identities created by the mock login flow"""

    MOCK_USER_ID: Final[int] = 1
    EMAIL_DOMAIN: Final[str] = "example.com"


# Error codes and messages
class ErrorCodes:
    """Standardized error codes and messages"""

    GENERAL_ERROR: Final[str] = "GENERAL_ERROR"
    VALIDATION_ERROR: Final[str] = "VALIDATION_ERROR"
    BUSINESS_ERROR: Final[str] = "BUSINESS_ERROR"
    CATALOG_ERROR: Final[str] = "CATALOG_ERROR"
    PERSISTENCE_ERROR: Final[str] = "PERSISTENCE_ERROR"

    # User-friendly messages
    GENERIC_ERROR_MESSAGE: Final[str] = "An error occurred. Please try again."
    INVALID_COUPON_MESSAGE: Final[str] = "Invalid coupon code"
    MISSING_CREDENTIALS_MESSAGE: Final[str] = "Please enter both username and password"
    EMPTY_CART_MESSAGE: Final[str] = "Your cart is empty"
    CATALOG_ERROR_MESSAGE: Final[str] = "Failed to load products. Please try again."
    PERSISTENCE_ERROR_MESSAGE: Final[str] = (
        "Sorry, we couldn't restore your saved session."
    )
