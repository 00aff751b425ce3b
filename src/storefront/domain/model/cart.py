"""Cart aggregate: the shopper's line items and their totals.

The Cart is an aggregate root that owns its line items. Items are keyed by
product name: adding a product that is already present bumps its quantity
instead of creating a second row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from storefront.domain.model.catalog import CatalogEntry
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

CartListener = Callable[["Cart"], None]


@dataclass
class CartLineItem:
    """One distinct product in the cart.

    ``cost`` keeps the catalog's display string; it is parsed on every
    subtotal so a malformed price surfaces as a ParseError at the point
    of use.
    """

    name: str
    image: str
    cost: str
    quantity: int = 1
    description: str = ""

    @property
    def unit_price(self) -> Money:
        return Money.parse(self.cost)

    @property
    def subtotal(self) -> Money:
        return (self.unit_price * self.quantity).rounded()


@dataclass
class Cart:
    """In-memory cart for a single shopping session.

    Every mutator returns the cart itself and then notifies subscribers,
    so the presentation layer can re-render from the new state.
    """

    items: list[CartLineItem] = field(default_factory=list)
    _listeners: list[CartListener] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    # --- Mutators -------------------------------------------------------------

    def add_item(self, entry: CatalogEntry) -> Cart:
        """Add one unit of *entry*, merging with an existing row by name."""
        item = self.get(entry.name)
        if item is not None:
            item.quantity += 1
            logger.debug("Incremented %r to %d", item.name, item.quantity)
        else:
            self.items.append(
                CartLineItem(
                    name=entry.name,
                    image=entry.image,
                    cost=entry.cost,
                    description=entry.description,
                )
            )
            logger.debug("Added %r to cart", entry.name)
        self._notify()
        return self

    def update_quantity(self, name: str, quantity: int) -> Cart:
        """Set the quantity of *name*.

        No clamping happens here: keeping quantity >= 1 is the caller's
        policy (see ``decrement``). Unknown names are ignored.
        """
        item = self.get(name)
        if item is None:
            logger.debug("update_quantity ignored for unknown item %r", name)
            return self
        item.quantity = quantity
        self._notify()
        return self

    def remove_item(self, name: str) -> Cart:
        """Remove *name* from the cart; unknown names are ignored."""
        remaining = [item for item in self.items if item.name != name]
        if len(remaining) == len(self.items):
            logger.debug("remove_item ignored for unknown item %r", name)
            return self
        self.items = remaining
        logger.debug("Removed %r from cart", name)
        self._notify()
        return self

    def clear(self) -> Cart:
        self.items = []
        self._notify()
        return self

    # --- Queries --------------------------------------------------------------

    def get(self, name: str) -> CartLineItem | None:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def contains(self, name: str) -> bool:
        return self.get(name) is not None

    @property
    def total(self) -> Money:
        """Sum of per-line rounded subtotals, rounded to cents."""
        result = Money.zero()
        for item in self.items:
            result = result + item.subtotal
        return result.rounded()

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


def increment(cart: Cart, name: str) -> Cart:
    item = cart.get(name)
    if item is None:
        return cart
    return cart.update_quantity(name, item.quantity + 1)


def decrement(cart: Cart, name: str) -> Cart:
    """Drop one unit of *name*; the last unit removes the row entirely."""
    item = cart.get(name)
    if item is None:
        return cart
    if item.quantity > 1:
        return cart.update_quantity(name, item.quantity - 1)
    return cart.remove_item(name)
