"""Options shared by several commands.

Each option falls back to its ``STOREFRONT_*`` environment variable;
click converts and range-checks the value either way.
"""

from __future__ import annotations

from pathlib import Path

import click

from storefront.domain.model.checkout import DEFAULT_DISMISS_MS
from storefront.infrastructure.catalog.json_catalog_repository import (
    DEFAULT_CATALOG_PATH,
)
from storefront.infrastructure.config import (
    CATALOG_ENV,
    CLEAR_CART_ENV,
    DISMISS_MS_ENV,
)

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    envvar=CATALOG_ENV,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=DEFAULT_CATALOG_PATH,
    show_envvar=True,
    help="Catalog JSON file (defaults to the bundled plants).",
)

dismiss_ms_option = click.option(
    "--dismiss-ms",
    envvar=DISMISS_MS_ENV,
    type=click.IntRange(min=0),
    default=DEFAULT_DISMISS_MS,
    show_default=True,
    show_envvar=True,
    help="How long checkout notifications stay visible, in milliseconds.",
)

clear_on_purchase_option = click.option(
    "--clear-on-purchase",
    "clear_cart_on_purchase",
    envvar=CLEAR_CART_ENV,
    is_flag=True,
    default=False,
    show_envvar=True,
    help="Empty the cart after a confirmed purchase.",
)
