"""Catalog records supplied by the outside world.

The core never mutates catalog data; entries are copied into the cart
when a shopper adds them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    image: str
    description: str
    cost: str  # display price, e.g. "$15.00"


@dataclass(frozen=True)
class CatalogCategory:
    category: str
    plants: tuple[CatalogEntry, ...]
