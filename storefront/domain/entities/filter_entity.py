"""
Filter Entity - the shopper's category / sort / search selection
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Union


class SortOption(Enum):
    """Product ordering choices"""

    NONE = ""
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"

    @classmethod
    def parse(cls, value: Union["SortOption", str, None]) -> "SortOption":
        """Accept an enum member, its wire value, or None"""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        return cls(value)


@dataclass(frozen=True)
class FilterState:
    """Current browsing filter; last write wins"""

    category: str = ""
    sort_by: SortOption = SortOption.NONE
    search_query: str = ""

    def __post_init__(self):
        object.__setattr__(self, "sort_by", SortOption.parse(self.sort_by))
        if not isinstance(self.category, str) or not isinstance(self.search_query, str):
            raise ValueError("Category and search query must be strings")

    @classmethod
    def field_names(cls) -> frozenset:
        return frozenset(f.name for f in fields(cls))

    def with_changes(self, **changes) -> "FilterState":
        """Merge a partial update into this filter"""
        unknown = set(changes) - self.field_names()
        if unknown:
            raise ValueError(f"Unknown filter fields: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    @property
    def is_active(self) -> bool:
        """True when a category or search narrows the product list"""
        return bool(self.category or self.search_query)
