"""CartItem: one (product, quantity) line in a shopping cart."""

from __future__ import annotations

from dataclasses import dataclass

from market.domain.model.product import Product
from market.domain.model.value_objects import Money, Quantity


@dataclass
class CartItem:
    """A line item owned by exactly one Cart.

    ``quantity`` may grow through ``increase()`` but never drops to zero;
    removing a product is done by dropping the whole line from the cart.
    """

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        # Reuse the Quantity invariant (positive integer)
        Quantity(self.quantity)

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity

    def increase(self, by: int) -> None:
        self.quantity += Quantity(by).value

    def copy(self) -> CartItem:
        # Product is frozen, so sharing the reference is safe
        return CartItem(product=self.product, quantity=self.quantity)
