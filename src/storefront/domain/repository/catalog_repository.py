"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is read-only: there is no ``save``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.catalog import CatalogCategory, CatalogEntry


class CatalogRepository(ABC):

    @abstractmethod
    def list_categories(self) -> list[CatalogCategory]:
        """Return every category in display order."""

    def get_by_name(self, name: str) -> CatalogEntry | None:
        """Return a catalog entry by name (case-insensitive), or None if not found."""
        for category in self.list_categories():
            for entry in category.plants:
                if entry.name.lower() == name.lower():
                    return entry
        return None
