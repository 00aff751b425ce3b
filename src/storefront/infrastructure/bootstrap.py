"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from storefront.domain.model.cart import Cart
from storefront.domain.model.checkout import CheckoutFlow
from storefront.infrastructure.catalog.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.scheduling.loop_scheduler import LoopScheduler


@dataclass
class ShopSession:
    """Everything one interactive shopping session needs."""

    cart: Cart
    catalog_repo: JsonCatalogRepository
    scheduler: LoopScheduler
    checkout: CheckoutFlow


def catalog_repository(catalog_path: Path) -> JsonCatalogRepository:
    return JsonCatalogRepository(catalog_path)


@contextmanager
def shop_session(settings: Settings) -> Iterator[ShopSession]:
    """Create an empty cart and mount a checkout flow for its lifetime."""
    cart = Cart()
    scheduler = LoopScheduler()
    flow = CheckoutFlow(
        cart,
        scheduler,
        dismiss_ms=settings.dismiss_ms,
        clear_cart_on_purchase=settings.clear_cart_on_purchase,
    )
    with flow:
        yield ShopSession(
            cart=cart,
            catalog_repo=catalog_repository(settings.catalog_path),
            scheduler=scheduler,
            checkout=flow,
        )
