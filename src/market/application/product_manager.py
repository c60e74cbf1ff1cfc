"""Application service: the product catalog."""

from __future__ import annotations

from market.application.reporter import NullReporter, Reporter
from market.domain.model.product import Product


class ProductManager:
    """Owns the catalog; at most one Product per id.

    Lookups never fail: a missing id simply yields ``None``.
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()
        self._products: dict[int, Product] = {}

    def add_product(self, product: Product) -> bool:
        if product.id in self._products:
            self._reporter.reject("duplicate_product", product_id=product.id)
            return False
        self._products[product.id] = product
        self._reporter.announce(
            "product_added", product_id=product.id, name=product.name, price=str(product.price)
        )
        return True

    def remove_product(self, product_id: int) -> bool:
        """Drop the product if present; unknown ids are ignored silently."""
        if self._products.pop(product_id, None) is None:
            return False
        self._reporter.announce("product_removed", product_id=product_id)
        return True

    def find_product(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def list_products(self) -> list[Product]:
        """Every product in insertion order (empty list for an empty catalog)."""
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products
