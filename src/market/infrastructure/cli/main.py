import shlex

import click

from market.infrastructure.bootstrap import build_session
from market.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
)
from market.infrastructure.cli.order_commands import (
    order_list,
    order_status,
    order_submit,
)
from market.infrastructure.cli.product_commands import (
    product_add,
    product_find,
    product_list,
    product_remove,
)
from market.infrastructure.logging import LOG_LEVELS, configure_logging

EXIT_WORDS = {"exit", "quit"}


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    envvar="MARKET_LOG_LEVEL",
    show_default=True,
    help="Minimum level of operation events written to stderr.",
)
def cli(log_level: str) -> None:
    """Market — catalog, cart and order tracking"""
    configure_logging(log_level)


# --- Commands available inside a shell session -------------------------------


@click.group()
def session_cli() -> None:
    """Commands for the current session."""


@session_cli.group()
def product() -> None:
    """Manage the product catalog."""


@session_cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@session_cli.group()
def order() -> None:
    """Submit and track orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_find)
product.add_command(product_list)
product.add_command(product_remove)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_list)
order.add_command(order_status)
order.add_command(order_submit)


@cli.command("shell")
@click.option(
    "--strict-status",
    is_flag=True,
    default=False,
    envvar="MARKET_STRICT_STATUS",
    help="Only allow PREPARING -> SHIPPED -> DELIVERED (CANCELLED until delivery).",
)
def shell(strict_status: bool) -> None:
    """Start an interactive in-memory session."""
    session = build_session(strict_status=strict_status)
    click.echo("Market shell. Type 'help' for commands, 'exit' to quit.")

    while True:
        try:
            line = click.prompt("market", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break

        line = line.strip()
        if not line:
            continue
        if line in EXIT_WORDS:
            break

        try:
            args = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            continue
        if args == ["help"]:
            args = ["--help"]

        try:
            session_cli.main(args, prog_name="", obj=session, standalone_mode=False)
        except click.ClickException as exc:
            exc.show()
