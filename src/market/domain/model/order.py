"""Order aggregate — an immutable snapshot of a submitted cart.

The line items are frozen copies of the cart lines at submission time,
so later changes to the cart or to the catalog never leak into an order.
Only ``status`` changes after creation.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from market.domain.exceptions import ValidationError
from market.domain.model.cart import CartItem
from market.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PREPARING = "PREPARING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def label(self) -> str:
        return self.value.lower()


# ---------------------------------------------------------------------------
# Status transition table
# ---------------------------------------------------------------------------


class StatusTransitions:
    """Finite-state-machine table of legal status changes.

    ``permissive()`` allows any status to follow any other (including
    itself). ``lifecycle()`` enforces PREPARING -> SHIPPED -> DELIVERED
    with CANCELLED reachable until delivery.
    """

    def __init__(self, table: Mapping[OrderStatus, Iterable[OrderStatus]]) -> None:
        missing = set(OrderStatus) - set(table)
        if missing:
            names = ", ".join(sorted(s.value for s in missing))
            raise ValidationError(f"Transition table has no entry for: {names}")
        self._table = {status: frozenset(nxt) for status, nxt in table.items()}

    @classmethod
    def permissive(cls) -> StatusTransitions:
        return cls({status: set(OrderStatus) for status in OrderStatus})

    @classmethod
    def lifecycle(cls) -> StatusTransitions:
        return cls({
            OrderStatus.PREPARING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
            OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
            OrderStatus.DELIVERED: set(),
            OrderStatus.CANCELLED: set(),
        })

    def allows(self, current: OrderStatus, new: OrderStatus) -> bool:
        return new in self._table[current]

    def successors(self, status: OrderStatus) -> frozenset[OrderStatus]:
        return self._table[status]

    def is_terminal(self, status: OrderStatus) -> bool:
        return not self._table[status]


# ---------------------------------------------------------------------------
# Line items
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineItem:
    """Value snapshot of a cart line: price and name are copied, not referenced."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_item(item: CartItem) -> OrderLineItem:
        return OrderLineItem(
            product_id=item.product.id,
            product_name=item.product.name,
            quantity=Quantity(item.quantity),
            unit_price=item.product.price,  # <-- price snapshot
        )


class Order:
    """Aggregate root for submitted orders.

    Use ``Order.create()`` to build an order from cart lines; it enforces
    the non-empty rule and takes the snapshot. ``id`` and ``items`` are
    read-only, and ``status`` only moves through ``change_status()``.
    """

    def __init__(
        self,
        order_id: int,
        items: Iterable[OrderLineItem],
        status: OrderStatus = OrderStatus.PREPARING,
    ) -> None:
        self._id = order_id
        self._items = tuple(items)
        self._status = status

    @staticmethod
    def create(order_id: int, cart_items: Iterable[CartItem]) -> Order:
        items = tuple(OrderLineItem.from_cart_item(item) for item in cart_items)
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(order_id, items)

    @property
    def id(self) -> int:
        return self._id

    @property
    def items(self) -> tuple[OrderLineItem, ...]:
        return self._items

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def total(self) -> Money:
        if not self._items:
            return Money.zero()
        result = Money.zero(self._items[0].unit_price.currency)
        for item in self._items:
            result = result + item.line_total
        return result

    def change_status(
        self,
        new_status: OrderStatus,
        transitions: StatusTransitions | None = None,
    ) -> None:
        """Move to *new_status*; any change is allowed unless a table says otherwise."""
        if transitions is not None and not transitions.allows(self._status, new_status):
            raise ValidationError(
                f"Cannot change order #{self._id} from {self._status.value} "
                f"to {new_status.value}"
            )
        self._status = new_status

    def __repr__(self) -> str:
        return f"Order(id={self._id}, status={self._status.value}, items={len(self._items)})"
