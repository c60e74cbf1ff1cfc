"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready data from the application services to the CLI
without exposing domain internals. Money values are pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "45000.00 RUB"
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    status: str
    status_label: str
    items: list[OrderLineItemDTO]
    total: str
