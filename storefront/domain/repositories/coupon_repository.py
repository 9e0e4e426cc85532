"""
Coupon catalog interface

Defines the contract for looking up discount rules by code.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from storefront.domain.entities.coupon_entity import CouponRule


class CouponCatalog(ABC):
    """Read-only lookup of coupon rules"""

    @abstractmethod
    def find(self, code: str) -> Optional[CouponRule]:
        """Case-insensitive exact match; None when the code is unknown"""

    @abstractmethod
    def all(self) -> List[CouponRule]:
        """Every rule in the catalog"""
