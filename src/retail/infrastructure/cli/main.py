import logging

import click

from retail.domain.exceptions import DomainException
from retail.infrastructure.bootstrap import build_container
from retail.infrastructure.cli.inventory_commands import inventory_show
from retail.infrastructure.cli.product_commands import product_list
from retail.infrastructure.cli.shell import shell
from retail.infrastructure.config import Settings


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Retail console: product catalog, inventory and orders"""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = build_container(settings)


# Register subcommands
cli.add_command(inventory_show)
cli.add_command(product_list)
cli.add_command(shell)
