"""CLI commands for the session's shopping cart."""

from __future__ import annotations

import click

from market.infrastructure.bootstrap import Session


@click.command("add", context_settings={"ignore_unknown_options": True})
@click.argument("product_id", type=int)
@click.argument("quantity", type=int)
@click.pass_obj
def cart_add(session: Session, product_id: int, quantity: int) -> None:
    """Put QUANTITY of a catalog product into the cart."""
    if session.cart.add_item(product_id, quantity):
        click.echo(f"Added {quantity} x product #{product_id} to the cart.")
    elif quantity <= 0:
        click.echo("Quantity must be positive.")
    else:
        click.echo(f"Product #{product_id} not found.")


@click.command("remove")
@click.argument("product_id", type=int)
@click.pass_obj
def cart_remove(session: Session, product_id: int) -> None:
    """Drop a product's line from the cart."""
    if session.cart.remove_item(product_id):
        click.echo(f"Product #{product_id} removed from the cart.")
    else:
        click.echo(f"Product #{product_id} is not in the cart.")


@click.command("show")
@click.pass_obj
def cart_show(session: Session) -> None:
    """Show cart contents with per-line subtotals."""
    view = session.cart.view()

    if view.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>16} {'Subtotal':>16}")
    click.echo(f"  {'-'*60}")
    for line in view.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>16} {line.subtotal:>16}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Cart Total':<26} {view.total:>33}")


@click.command("clear")
@click.pass_obj
def cart_clear(session: Session) -> None:
    """Empty the cart."""
    session.cart.clear_cart()
    click.echo("Cart cleared.")
