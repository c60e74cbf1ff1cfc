"""Composition root — wires one in-memory shopping session.

This is the only place in the codebase that knows about *all* layers.
Every session gets its own catalog, cart and order list; nothing is
shared between sessions.
"""

from __future__ import annotations

from dataclasses import dataclass

from market.application.cart import Cart
from market.application.order_manager import OrderManager
from market.application.product_manager import ProductManager
from market.application.reporter import Reporter
from market.domain.model.order import StatusTransitions
from market.infrastructure.logging import StructlogReporter


@dataclass
class Session:
    products: ProductManager
    cart: Cart
    orders: OrderManager


def build_session(
    reporter: Reporter | None = None,
    strict_status: bool = False,
) -> Session:
    reporter = reporter or StructlogReporter()
    transitions = (
        StatusTransitions.lifecycle() if strict_status else StatusTransitions.permissive()
    )
    products = ProductManager(reporter)
    return Session(
        products=products,
        cart=Cart(products, reporter),
        orders=OrderManager(reporter, transitions),
    )
