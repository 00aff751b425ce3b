"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted
(``"$15.00"``) so the presentation layer never does arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineItemDTO:
    """Output: a single cart row as displayed to the user."""

    name: str
    image: str
    unit_price: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart plus its derived totals."""

    items: list[CartLineItemDTO]
    total: str
    item_count: int


@dataclass(frozen=True)
class CheckoutDTO:
    phase: str
    notification: str | None
    pending_total: str | None


@dataclass(frozen=True)
class CatalogEntryDTO:
    name: str
    image: str
    description: str
    cost: str
    in_cart: bool


@dataclass(frozen=True)
class CatalogCategoryDTO:
    category: str
    plants: list[CatalogEntryDTO]
