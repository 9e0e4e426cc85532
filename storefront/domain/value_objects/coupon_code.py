"""
Coupon code value object
"""

from dataclasses import dataclass

from storefront.infrastructure.utilities.constants import ValidationSettings


@dataclass(frozen=True)
class CouponCode:
    """Coupon code as typed, compared case-insensitively"""

    value: str

    def __post_init__(self):
        """Validate coupon code"""
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Coupon code cannot be empty")
        if len(self.value) > ValidationSettings.MAX_COUPON_CODE_LENGTH:
            raise ValueError("Coupon code is too long")

    @property
    def lookup_key(self) -> str:
        """Key used for case-insensitive matching"""
        return self.value.casefold()

    def matches(self, other: "CouponCode") -> bool:
        """Check whether two codes name the same coupon"""
        return self.lookup_key == other.lookup_key

    def __str__(self) -> str:
        return self.value
