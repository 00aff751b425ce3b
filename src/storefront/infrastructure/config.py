"""Runtime settings.

Values come from the command line or from ``STOREFRONT_*`` environment
variables (click reads and validates those, see ``cli/options.py``).
``load_environment()`` pulls a ``.env`` file into the environment first;
variables that are already exported win.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from storefront.domain.model.checkout import DEFAULT_DISMISS_MS
from storefront.infrastructure.catalog.json_catalog_repository import (
    DEFAULT_CATALOG_PATH,
)

logger = logging.getLogger(__name__)

CATALOG_ENV = "STOREFRONT_CATALOG"
DISMISS_MS_ENV = "STOREFRONT_DISMISS_MS"
CLEAR_CART_ENV = "STOREFRONT_CLEAR_CART_ON_PURCHASE"


@dataclass(frozen=True)
class Settings:
    catalog_path: Path = DEFAULT_CATALOG_PATH
    dismiss_ms: int = DEFAULT_DISMISS_MS
    clear_cart_on_purchase: bool = False


def load_environment(dotenv_path: Path | None = None) -> bool:
    """Load *dotenv_path*, or the nearest ``.env`` above the working directory."""
    path = dotenv_path if dotenv_path is not None else find_dotenv(usecwd=True)
    if not path:
        return False
    loaded = load_dotenv(path, override=False)
    if loaded:
        logger.debug("Loaded environment from %s", path)
    return loaded
