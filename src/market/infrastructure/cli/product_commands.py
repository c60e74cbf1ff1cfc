"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from market.domain.exceptions import DomainException
from market.domain.model.product import Product
from market.infrastructure.bootstrap import Session


@click.command("add", context_settings={"ignore_unknown_options": True})
@click.argument("product_id", type=int)
@click.argument("name")
@click.argument("price")
@click.pass_obj
def product_add(session: Session, product_id: int, name: str, price: str) -> None:
    """Add a product to the catalog."""
    try:
        product = Product.of(product_id, name, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if session.products.add_product(product):
        click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")
    else:
        click.echo(f"Product #{product.id} already exists.")


@click.command("remove")
@click.argument("product_id", type=int)
@click.pass_obj
def product_remove(session: Session, product_id: int) -> None:
    """Remove a product from the catalog."""
    if session.products.remove_product(product_id):
        click.echo(f"Product #{product_id} removed.")
    else:
        click.echo(f"Product #{product_id} not found.")


@click.command("find")
@click.argument("product_id", type=int)
@click.pass_obj
def product_find(session: Session, product_id: int) -> None:
    """Look up a single product by ID."""
    product = session.products.find_product(product_id)
    if product is None:
        click.echo(f"Product #{product_id} not found.")
        return
    click.echo(f"#{product.id} {product.name} - {product.price}")


@click.command("list")
@click.pass_obj
def product_list(session: Session) -> None:
    """List all products in the catalog."""
    products = session.products.list_products()

    if not products:
        click.echo("No products available.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>16}")
    click.echo("-" * 44)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>16}")
