"""CLI commands for inventory."""

from __future__ import annotations

import click

from retail.infrastructure.bootstrap import Container
from retail.infrastructure.cli import display


@click.command("inventory")
@click.pass_obj
def inventory_show(app: Container) -> None:
    """Show current inventory levels."""
    display.show_inventory(app.show_inventory.handle())
