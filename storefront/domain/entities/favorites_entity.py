"""
Favorites Entity - de-duplicated list of favorited products
"""

from typing import Dict, Iterable, Iterator, Tuple, Union

from storefront.domain.entities.product_entity import Product
from storefront.domain.value_objects.product_id import ProductId


class FavoritesSet:
    """Favorited product snapshots keyed by id, in the order they were added"""

    def __init__(self):
        self._products: Dict[int, Product] = {}

    @property
    def items(self) -> Tuple[Product, ...]:
        return tuple(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.items)

    def contains(self, product_id: Union[int, ProductId]) -> bool:
        return int(product_id) in self._products

    def add(self, product: Product) -> bool:
        """Add a product; False if it was already a favorite"""
        if product.product_id in self._products:
            return False
        self._products = {**self._products, product.product_id: product}
        return True

    def remove(self, product_id: Union[int, ProductId]) -> bool:
        key = int(product_id)
        if key not in self._products:
            return False
        self._products = {k: v for k, v in self._products.items() if k != key}
        return True

    def toggle(self, product: Product) -> bool:
        """Flip membership and return whether the product is now a favorite"""
        if self.remove(product.product_id):
            return False
        self.add(product)
        return True

    def clear(self) -> None:
        self._products = {}

    def restore(self, products: Iterable[Product]) -> None:
        """Replace the contents, keeping the first snapshot of each id"""
        restored: Dict[int, Product] = {}
        for product in products:
            restored.setdefault(product.product_id, product)
        self._products = restored
