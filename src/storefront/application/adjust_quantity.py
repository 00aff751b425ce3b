"""Application service: quantity +/- buttons and explicit quantity edits.

The store primitive ``update_quantity`` never clamps; the policies that
keep every row at quantity >= 1 live here.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.domain.model.cart import Cart, decrement, increment
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.catalog_repository import CatalogRepository


class AdjustQuantityHandler:

    def __init__(self, cart: Cart, catalog_repo: CatalogRepository) -> None:
        self._cart = cart
        self._catalog_repo = catalog_repo

    def increment(self, product_name: str) -> CartDTO:
        increment(self._cart, self._resolve(product_name))
        return cart_to_dto(self._cart)

    def decrement(self, product_name: str) -> CartDTO:
        """Quantity 1 removes the row; anything above drops by one."""
        decrement(self._cart, self._resolve(product_name))
        return cart_to_dto(self._cart)

    def set_quantity(self, product_name: str, quantity: int) -> CartDTO:
        # Quantity rejects zero and negatives before the store sees them.
        qty = Quantity(quantity)
        self._cart.update_quantity(self._resolve(product_name), qty.value)
        return cart_to_dto(self._cart)

    def _resolve(self, product_name: str) -> str:
        """Map user input to the catalog's spelling; unknown names pass through."""
        entry = self._catalog_repo.get_by_name(product_name)
        return entry.name if entry is not None else product_name
