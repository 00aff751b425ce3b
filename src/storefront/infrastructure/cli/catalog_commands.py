"""CLI command for browsing the catalog."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.dto import CatalogCategoryDTO
from storefront.application.show_catalog import ShowCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import catalog_repository
from storefront.infrastructure.cli.options import catalog_option


def display_catalog(categories: list[CatalogCategoryDTO]) -> None:
    """Shared formatting for the catalog listing."""
    if not categories:
        click.echo("No plants found.")
        return

    for category in categories:
        click.echo(category.category)
        click.echo("-" * 60)
        for plant in category.plants:
            marker = "  [Added to Cart]" if plant.in_cart else ""
            click.echo(f"  {plant.name:<20} {plant.cost:>10}{marker}")
            if plant.description:
                click.echo(f"      {plant.description}")
        click.echo()


@click.command("catalog")
@catalog_option
def catalog(catalog_path: Path) -> None:
    """List the plants for sale, grouped by category."""
    handler = ShowCatalogHandler(catalog_repo=catalog_repository(catalog_path))

    try:
        categories = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_catalog(categories)
