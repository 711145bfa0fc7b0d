"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from retail.infrastructure.bootstrap import Container
from retail.infrastructure.cli import display


@click.command("products")
@click.pass_obj
def product_list(app: Container) -> None:
    """List all products in the catalog."""
    display.show_products(app.catalog.list_all())
