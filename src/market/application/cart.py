"""Application service: a shopping cart for one session.

The cart validates every addition against the live catalog it was given
and keeps at most one line per product id. It is emptied when an order
is submitted from it.
"""

from __future__ import annotations

from market.application.dto import CartDTO, CartLineDTO
from market.application.product_manager import ProductManager
from market.application.reporter import NullReporter, Reporter
from market.domain.model.cart import CartItem
from market.domain.model.value_objects import Money


class Cart:

    def __init__(
        self,
        product_manager: ProductManager,
        reporter: Reporter | None = None,
    ) -> None:
        self._product_manager = product_manager
        self._reporter = reporter or NullReporter()
        self._items: list[CartItem] = []

    def add_item(self, product_id: int, quantity: int) -> bool:
        """Add *quantity* of a catalog product, merging with an existing line.

        Returns False (and leaves the cart unchanged) when the quantity is
        not a whole number, not positive, or the product is not in the catalog.
        """
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            self._reporter.reject(
                "invalid_quantity", product_id=product_id, quantity=quantity
            )
            return False
        if quantity <= 0:
            self._reporter.reject(
                "non_positive_quantity", product_id=product_id, quantity=quantity
            )
            return False

        product = self._product_manager.find_product(product_id)
        if product is None:
            self._reporter.reject("product_not_found", product_id=product_id)
            return False

        existing = self._find(product_id)
        if existing is not None:
            existing.increase(quantity)
            self._reporter.announce(
                "cart_item_increased", product_id=product_id, quantity=existing.quantity
            )
        else:
            self._items.append(CartItem(product=product, quantity=quantity))
            self._reporter.announce(
                "cart_item_added", product_id=product_id, quantity=quantity
            )
        return True

    def remove_item(self, product_id: int) -> bool:
        item = self._find(product_id)
        if item is None:
            self._reporter.reject("item_not_in_cart", product_id=product_id)
            return False
        self._items.remove(item)
        self._reporter.announce("cart_item_removed", product_id=product_id)
        return True

    def get_items(self) -> list[CartItem]:
        """Independent copies of the current lines."""
        return [item.copy() for item in self._items]

    def is_empty(self) -> bool:
        return not self._items

    def clear_cart(self) -> None:
        self._items = []
        self._reporter.announce("cart_cleared")

    @property
    def total(self) -> Money:
        if not self._items:
            return Money.zero()
        result = Money.zero(self._items[0].product.price.currency)
        for item in self._items:
            result = result + item.subtotal
        return result

    def view(self) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=item.product.id,
                    product_name=item.product.name,
                    quantity=item.quantity,
                    unit_price=str(item.product.price),
                    subtotal=str(item.subtotal),
                )
                for item in self._items
            ],
            total=str(self.total),
        )

    def __len__(self) -> int:
        return len(self._items)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: int) -> CartItem | None:
        for item in self._items:
            if item.product.id == product_id:
                return item
        return None
