"""Product, an immutable catalog entry.

Products are owned by the ProductManager; carts and orders only refer
to them. Price is validated once, here, and can never change afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from market.domain.exceptions import ValidationError
from market.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog, keyed by ``id``."""

    id: int
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
        if self.price.is_zero:
            raise ValidationError("Product price must be greater than zero")

    @staticmethod
    def of(product_id: int, name: str, price: str | float | int) -> Product:
        """Build a product from a plain number, e.g. ``Product.of(1, "Laptop", 75000)``."""
        return Product(id=product_id, name=name, price=Money.of(price))
