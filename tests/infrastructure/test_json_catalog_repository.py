"""Tests for the JSON-file catalog."""

import json

import pytest

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import parse_price
from storefront.infrastructure.catalog.json_catalog_repository import (
    DEFAULT_CATALOG_PATH,
    JsonCatalogRepository,
)


def _write(tmp_path, payload):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestJsonCatalogRepository:

    def test_loads_categories_in_order(self, tmp_path):
        path = _write(tmp_path, [
            {"category": "Ferns", "plants": [
                {"name": "Boston Fern", "image": "fern.jpg",
                 "description": "Humid.", "cost": "$20.00"},
            ]},
            {"category": "Herbs", "plants": [
                {"name": "Mint", "cost": "$12.00"},
            ]},
        ])
        categories = JsonCatalogRepository(path).list_categories()

        assert [c.category for c in categories] == ["Ferns", "Herbs"]
        fern = categories[0].plants[0]
        assert (fern.name, fern.image, fern.cost) == ("Boston Fern", "fern.jpg", "$20.00")
        assert categories[1].plants[0].description == ""

    def test_get_by_name(self, tmp_path):
        path = _write(tmp_path, [
            {"category": "Herbs", "plants": [{"name": "Mint", "cost": "$12.00"}]},
        ])
        repo = JsonCatalogRepository(path)
        assert repo.get_by_name("mint").name == "Mint"
        assert repo.get_by_name("Basil") is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(EntityNotFoundError, match="not found"):
            JsonCatalogRepository(tmp_path / "nope.json").list_categories()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            JsonCatalogRepository(path).list_categories()

    def test_missing_cost(self, tmp_path):
        path = _write(tmp_path, [{"category": "Herbs", "plants": [{"name": "Mint"}]}])
        with pytest.raises(ValidationError, match="malformed"):
            JsonCatalogRepository(path).list_categories()

    def test_bundled_catalog_prices_parse(self):
        categories = JsonCatalogRepository(DEFAULT_CATALOG_PATH).list_categories()
        assert categories
        for category in categories:
            for entry in category.plants:
                parse_price(entry.cost)
