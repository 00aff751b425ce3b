"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.catalog import CatalogCategory, CatalogEntry
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "plants.json"


class JsonCatalogRepository(CatalogRepository):
    """Reads ``[{category, plants: [{name, image, description, cost}]}]``.

    The file is parsed once, on first access, and cached: the catalog is
    immutable for the lifetime of a session.
    """

    def __init__(self, file_path: Path = DEFAULT_CATALOG_PATH) -> None:
        self._file_path = file_path
        self._categories: list[CatalogCategory] | None = None

    # --- CatalogRepository interface ------------------------------------------

    def list_categories(self) -> list[CatalogCategory]:
        if self._categories is None:
            self._categories = self._load()
        return list(self._categories)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[CatalogCategory]:
        if not self._file_path.exists():
            raise EntityNotFoundError(f"Catalog file not found: {self._file_path}")

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Catalog file {self._file_path} is not valid JSON: {exc}"
            ) from exc

        try:
            categories = [
                CatalogCategory(
                    category=group["category"],
                    plants=tuple(
                        CatalogEntry(
                            name=plant["name"],
                            image=plant.get("image", ""),
                            description=plant.get("description", ""),
                            cost=plant["cost"],
                        )
                        for plant in group["plants"]
                    ),
                )
                for group in raw
            ]
        except (KeyError, TypeError) as exc:
            raise ValidationError(
                f"Catalog file {self._file_path} is malformed: missing {exc}"
            ) from exc

        logger.debug(
            "Loaded %d categories from %s", len(categories), self._file_path
        )
        return categories
