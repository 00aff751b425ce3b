"""Application service: Add To Cart use case.

Resolves a product name against the catalog and hands the catalog entry
to the Cart aggregate, which decides between a new row and a quantity bump.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.catalog_repository import CatalogRepository


class AddToCartHandler:

    def __init__(self, cart: Cart, catalog_repo: CatalogRepository) -> None:
        self._cart = cart
        self._catalog_repo = catalog_repo

    def handle(self, product_name: str) -> CartDTO:
        entry = self._catalog_repo.get_by_name(product_name)
        if entry is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        self._cart.add_item(entry)
        return cart_to_dto(self._cart)
