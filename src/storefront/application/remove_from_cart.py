"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.domain.model.cart import Cart
from storefront.domain.repository.catalog_repository import CatalogRepository


class RemoveFromCartHandler:

    def __init__(self, cart: Cart, catalog_repo: CatalogRepository) -> None:
        self._cart = cart
        self._catalog_repo = catalog_repo

    def handle(self, product_name: str) -> CartDTO:
        # Stale names are a no-op, not an error.
        entry = self._catalog_repo.get_by_name(product_name)
        self._cart.remove_item(entry.name if entry is not None else product_name)
        return cart_to_dto(self._cart)
