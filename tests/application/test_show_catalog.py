"""Tests for the catalog query."""

from storefront.application.show_catalog import ShowCatalogHandler
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import CatalogCategory
from tests.fakes import FakeCatalogRepository, plant


class TestShowCatalog:

    def test_marks_items_already_in_cart(self):
        snake = plant("Snake Plant", "$15.00", "Produces oxygen at night.")
        repo = FakeCatalogRepository([
            CatalogCategory("Air Purifying Plants", (snake, plant("Peace Lily", "$18.00"))),
        ])
        cart = Cart().add_item(snake)

        categories = ShowCatalogHandler(repo, cart).handle()

        assert [c.category for c in categories] == ["Air Purifying Plants"]
        plants = categories[0].plants
        assert [(p.name, p.in_cart) for p in plants] == [
            ("Snake Plant", True),
            ("Peace Lily", False),
        ]
        assert plants[0].description == "Produces oxygen at night."

    def test_without_cart_nothing_is_marked(self):
        repo = FakeCatalogRepository([
            CatalogCategory("Medicinal Plants", (plant("Aloe Vera", "$14.00"),)),
        ])
        categories = ShowCatalogHandler(repo).handle()
        assert not categories[0].plants[0].in_cart
