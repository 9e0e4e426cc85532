"""
Custom exceptions for the storefront core
"""

from typing import Optional

from storefront.infrastructure.utilities.constants import ErrorCodes


class StorefrontError(Exception):
    """Base exception for the storefront core"""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or ErrorCodes.GENERIC_ERROR_MESSAGE
        self.error_code = error_code or ErrorCodes.GENERAL_ERROR


class ValidationError(StorefrontError):
    """Input validation errors"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message, message, ErrorCodes.VALIDATION_ERROR  # Validation errors are user-friendly
        )
        self.field = field


class InvalidQuantityError(ValidationError):
    """Cart quantity below 1 or not a whole number"""

    def __init__(self, quantity):
        super().__init__(
            f"Quantity must be a whole number of at least 1, got {quantity!r}",
            "quantity",
        )
        self.quantity = quantity


class InvalidCredentialsError(ValidationError):
    """Login attempted without a username or password"""

    def __init__(self):
        super().__init__(ErrorCodes.MISSING_CREDENTIALS_MESSAGE, "credentials")


class BusinessLogicError(StorefrontError):
    """Business rule violations"""

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message, user_message or message, ErrorCodes.BUSINESS_ERROR)


class InvalidCouponError(BusinessLogicError):
    """Coupon code not found in the catalog"""

    def __init__(self, code: str):
        super().__init__(
            f"Coupon not found: {code!r}", ErrorCodes.INVALID_COUPON_MESSAGE
        )
        self.code = code


class CartEmptyError(BusinessLogicError):
    """Cart is empty when operation requires items"""

    def __init__(self):
        super().__init__("Cart is empty", ErrorCodes.EMPTY_CART_MESSAGE)


class ProductNotFoundError(BusinessLogicError):
    """Product not found in the upstream catalog"""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product not found: {product_id}",
            f"Product #{product_id} is not available right now.",
        )
        self.product_id = product_id


class CatalogError(StorefrontError):
    """Upstream product catalog request failed"""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(
            message, ErrorCodes.CATALOG_ERROR_MESSAGE, ErrorCodes.CATALOG_ERROR
        )
        self.endpoint = endpoint


class PersistenceError(StorefrontError):
    """Snapshot storage errors"""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message,
            ErrorCodes.PERSISTENCE_ERROR_MESSAGE,
            ErrorCodes.PERSISTENCE_ERROR,
        )
        self.operation = operation
