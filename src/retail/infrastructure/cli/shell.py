"""Interactive text menu over a single in-memory session."""

from __future__ import annotations

import click

from retail.domain.exceptions import (
    DomainException,
    InsufficientInventoryError,
    ProductNotFoundError,
)
from retail.infrastructure.bootstrap import Container
from retail.infrastructure.cli import display

MENU = """
1. List Products
2. Place Order
3. View Inventory
4. Update Product Price
5. Update Inventory
6. Generate Sales Report
7. Exit"""

EXIT_CHOICE = 7


def _place_order(app: Container) -> None:
    product_id = click.prompt("Enter product ID", type=int)
    quantity = click.prompt("Enter quantity", type=int)
    try:
        order = app.ordering.place_order(product_id, quantity)
    except InsufficientInventoryError:
        click.echo("Not enough inventory to fulfill this order.")
        return
    except ProductNotFoundError:
        click.echo("Product not found.")
        return
    click.echo(f"Order placed successfully. Order details: {order}")


def _update_price(app: Container) -> None:
    product_id = click.prompt("Enter product ID", type=int)
    new_price = click.prompt("Enter new price", type=str)
    if app.update_price.handle(product_id, new_price):
        click.echo("Product price updated successfully.")
    else:
        click.echo("Product not found.")


def _update_inventory(app: Container) -> None:
    product_id = click.prompt("Enter product ID", type=int)
    quantity = click.prompt("Enter new quantity", type=int)
    app.set_inventory.handle(product_id, quantity)
    click.echo("Inventory updated successfully.")


ACTIONS = {
    1: lambda app: display.show_products(app.catalog.list_all()),
    2: _place_order,
    3: lambda app: display.show_inventory(app.show_inventory.handle()),
    4: _update_price,
    5: _update_inventory,
    6: lambda app: display.show_sales(app.reporter.summarize()),
}


@click.command("shell")
@click.pass_obj
def shell(app: Container) -> None:
    """Run the interactive retail menu."""
    while True:
        click.echo(MENU)
        choice = click.prompt("Enter choice", type=int)
        if choice == EXIT_CHOICE:
            click.echo("Exiting...")
            return

        action = ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice. Try again.")
            continue

        try:
            action(app)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
