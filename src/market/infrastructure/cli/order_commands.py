"""CLI commands for orders."""

from __future__ import annotations

import click

from market.application.dto import OrderDTO
from market.domain.model.order import OrderStatus
from market.infrastructure.bootstrap import Session

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


@click.command("submit")
@click.pass_obj
def order_submit(session: Session) -> None:
    """Turn the current cart into a new order."""
    order = session.orders.add_order(session.cart)
    if order is None:
        click.echo("Cannot create order: cart is empty.")
        return
    click.echo(f"Order #{order.id} created  (status={order.status.value}, total={order.total})")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>16} {'Total':>16}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>16} {item.line_total:>16}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Order Total':<26} {dto.total:>33}")


@click.command("list")
@click.pass_obj
def order_list(session: Session) -> None:
    """Show every order with its items and total."""
    orders = session.orders.view_orders()

    if not orders:
        click.echo("No orders yet.")
        return

    for dto in orders:
        _display_order(dto)


@click.command("status")
@click.argument("order_id", type=int)
@click.argument("status", type=STATUS_CHOICE)
@click.pass_obj
def order_status(session: Session, order_id: int, status: str) -> None:
    """Set the status of an order."""
    order = session.orders.find_order(order_id)
    if order is None:
        click.echo(f"Order #{order_id} not found.")
        return

    new_status = OrderStatus(status.upper())
    current = order.status
    if session.orders.update_order_status(order_id, new_status):
        click.echo(f"Order #{order_id} status changed to {new_status.value}.")
    else:
        raise click.ClickException(
            f"Order #{order_id} cannot move from {current.value} to {new_status.value} "
            f"({_allowed_next(session, current)})"
        )


def _allowed_next(session: Session, current: OrderStatus) -> str:
    transitions = session.orders.transitions
    if transitions.is_terminal(current):
        return f"{current.value} is final"
    names = sorted(s.value for s in transitions.successors(current))
    return "allowed: " + ", ".join(names)
