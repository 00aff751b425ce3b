"""Application service: Show Catalog use case (query).

Marks every product that is already in the cart so the presentation
layer can render it as "Added to Cart".
"""

from __future__ import annotations

from storefront.application.dto import CatalogCategoryDTO, CatalogEntryDTO
from storefront.domain.model.cart import Cart
from storefront.domain.repository.catalog_repository import CatalogRepository


class ShowCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository, cart: Cart | None = None) -> None:
        self._catalog_repo = catalog_repo
        self._cart = cart

    def handle(self) -> list[CatalogCategoryDTO]:
        return [
            CatalogCategoryDTO(
                category=category.category,
                plants=[
                    CatalogEntryDTO(
                        name=entry.name,
                        image=entry.image,
                        description=entry.description,
                        cost=entry.cost,
                        in_cart=self._cart is not None and self._cart.contains(entry.name),
                    )
                    for entry in category.plants
                ],
            )
            for category in self._catalog_repo.list_categories()
        ]
