import logging

import click

from storefront.infrastructure.cli.catalog_commands import catalog
from storefront.infrastructure.cli.shop_commands import shop
from storefront.infrastructure.config import load_environment


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Storefront — plant shop cart and checkout"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Subcommand options read their env vars after this runs.
    load_environment()


# Register subcommands
cli.add_command(catalog)
cli.add_command(shop)
