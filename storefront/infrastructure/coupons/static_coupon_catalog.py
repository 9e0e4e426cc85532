"""
Static coupon catalog

The coupon rules shipped with the storefront, loaded once at start-up.
"""

import logging
from typing import Dict, Iterable, List, Optional

from storefront.domain.entities.coupon_entity import CouponRule
from storefront.domain.repositories.coupon_repository import CouponCatalog
from storefront.infrastructure.utilities.constants import PricingSettings

logger = logging.getLogger(__name__)

# (code, discount percent, max discount amount)
DEFAULT_COUPONS = (
    ("RAM50", 50, 100),
    ("SITA40", 40, 80),
    ("HANUMAN30", 30, 60),
    ("RAVAN20", 20, 40),
    ("LAXMAN10", 10, 20),
)


def default_coupon_rules(currency: str = PricingSettings.DEFAULT_CURRENCY) -> List[CouponRule]:
    """Build the shipped coupon rules in ``currency``"""
    return [
        CouponRule.create(code, percent, cap, currency)
        for code, percent, cap in DEFAULT_COUPONS
    ]


class StaticCouponCatalog(CouponCatalog):
    """In-memory, read-only coupon lookup"""

    def __init__(self, rules: Optional[Iterable[CouponRule]] = None):
        if rules is None:
            rules = default_coupon_rules()
        self._rules: Dict[str, CouponRule] = {}
        for rule in rules:
            key = rule.code.lookup_key
            if key in self._rules:
                raise ValueError(f"Duplicate coupon code: {rule.code}")
            self._rules[key] = rule
        logger.debug("Loaded %d coupon rules", len(self._rules))

    def find(self, code: str) -> Optional[CouponRule]:
        if not isinstance(code, str):
            return None
        return self._rules.get(code.casefold())

    def all(self) -> List[CouponRule]:
        return list(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)
