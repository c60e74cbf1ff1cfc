"""Application service: order submission and status tracking.

Submitting a cart snapshots its lines into a new Order and empties the
cart. Status updates go through a StatusTransitions table, which by
default lets any status follow any other.
"""

from __future__ import annotations

from market.application.cart import Cart
from market.application.dto import OrderDTO, OrderLineItemDTO
from market.application.reporter import NullReporter, Reporter
from market.domain.model.order import Order, OrderStatus, StatusTransitions


class OrderManager:

    def __init__(
        self,
        reporter: Reporter | None = None,
        transitions: StatusTransitions | None = None,
    ) -> None:
        self._reporter = reporter or NullReporter()
        self._transitions = transitions or StatusTransitions.permissive()
        self._orders: list[Order] = []
        # Monotonic; never reused even if orders were ever dropped
        self._next_id = 1

    def add_order(self, cart: Cart) -> Order | None:
        """Turn a non-empty cart into a PREPARING order and clear the cart."""
        if cart.is_empty():
            self._reporter.reject("empty_cart")
            return None

        order = Order.create(order_id=self._next_id, cart_items=cart.get_items())
        self._next_id += 1
        self._orders.append(order)
        cart.clear_cart()

        self._reporter.announce("order_created", order_id=order.id, total=str(order.total))
        return order

    def update_order_status(self, order_id: int, new_status: OrderStatus) -> bool:
        order = self.find_order(order_id)
        if order is None:
            self._reporter.reject("order_not_found", order_id=order_id)
            return False

        if not self._transitions.allows(order.status, new_status):
            self._reporter.reject(
                "illegal_transition",
                order_id=order_id,
                current=order.status.value,
                requested=new_status.value,
            )
            return False

        previous = order.status
        order.change_status(new_status, self._transitions)
        self._reporter.announce(
            "order_status_changed",
            order_id=order_id,
            previous=previous.value,
            status=new_status.value,
        )
        return True

    def find_order(self, order_id: int) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    @property
    def transitions(self) -> StatusTransitions:
        return self._transitions

    def view_orders(self) -> list[OrderDTO]:
        """Display view of every order (empty list when there are none)."""
        return [self._to_dto(order) for order in self._orders]

    def __len__(self) -> int:
        return len(self._orders)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            status=order.status.value,
            status_label=order.status.label,
            items=[
                OrderLineItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
        )
