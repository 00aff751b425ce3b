"""Interactive shopping session.

Reads one command per line from stdin. Between commands the loop runs
any due timers, so the checkout notification is dismissed on the same
thread that handles user input.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.adjust_quantity import AdjustQuantityHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_catalog import ShowCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.checkout import CheckoutFlow, CheckoutPhase
from storefront.infrastructure.bootstrap import ShopSession, shop_session
from storefront.infrastructure.cli.catalog_commands import display_catalog
from storefront.infrastructure.cli.options import (
    catalog_option,
    clear_on_purchase_option,
    dismiss_ms_option,
)
from storefront.infrastructure.config import Settings

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  plants              list the catalog
  add NAME            add one unit of a plant
  inc NAME            increase quantity by one
  dec NAME            decrease quantity by one (removes at zero)
  set NAME QTY        set an exact quantity
  remove NAME         remove a plant from the cart
  cart                show the cart and its total
  checkout            start checkout
  proceed             confirm the purchase
  cancel              cancel checkout
  help                show this message
  quit                leave the shop"""


def display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Plant':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total Cart Amount':<27} {dto.total:>20}")


def render_checkout(flow: CheckoutFlow) -> None:
    if flow.phase == CheckoutPhase.CONFIRM_PENDING:
        click.echo(
            f"Total due: {flow.pending_total}. "
            f"Type 'proceed' to pay or 'cancel' to go back."
        )
    elif flow.phase == CheckoutPhase.NOTIFY_VISIBLE:
        click.echo(f"*** {flow.notification} ***")


class ShopShell:
    """Maps text commands onto the application handlers."""

    def __init__(self, session: ShopSession) -> None:
        self._session = session
        cart, catalog_repo = session.cart, session.catalog_repo
        self._add = AddToCartHandler(cart, catalog_repo)
        self._adjust = AdjustQuantityHandler(cart, catalog_repo)
        self._remove = RemoveFromCartHandler(cart, catalog_repo)
        self._show_cart = ShowCartHandler(cart)
        self._show_catalog = ShowCatalogHandler(catalog_repo, cart)
        self._checkout = CheckoutHandler(session.checkout)
        self._commands: dict[str, Callable[[str], None]] = {
            "plants": self._plants,
            "add": self._add_item,
            "inc": self._increment,
            "dec": self._decrement,
            "set": self._set_quantity,
            "remove": self._remove_item,
            "cart": self._cart,
            "checkout": lambda _: self._checkout.checkout(),
            "proceed": lambda _: self._checkout.proceed(),
            "cancel": lambda _: self._checkout.cancel(),
            "help": lambda _: click.echo(HELP_TEXT),
        }

    @property
    def prompt(self) -> str:
        return f"cart({self._session.cart.item_count})"

    def execute(self, line: str) -> None:
        command, _, arg = line.strip().partition(" ")
        handler = self._commands.get(command.lower())
        if handler is None:
            click.echo(f"Unknown command '{command}'. Type 'help' for a list.")
            return

        try:
            handler(arg.strip())
        except DomainException as exc:
            click.echo(f"Error: {exc}")

    # --- Commands -------------------------------------------------------------

    def _plants(self, _: str) -> None:
        display_catalog(self._show_catalog.handle())

    def _add_item(self, name: str) -> None:
        name = self._require_name(name)
        if name is None:
            return
        dto = self._add.handle(name)
        click.echo(f"Added '{name}' to cart. Items in cart: {dto.item_count}")

    def _increment(self, name: str) -> None:
        if self._require_name(name) is not None:
            display_cart(self._adjust.increment(name))

    def _decrement(self, name: str) -> None:
        if self._require_name(name) is not None:
            display_cart(self._adjust.decrement(name))

    def _set_quantity(self, arg: str) -> None:
        name, _, raw_qty = arg.rpartition(" ")
        try:
            quantity = int(raw_qty)
        except ValueError:
            click.echo("Usage: set NAME QTY")
            return
        if self._require_name(name) is not None:
            display_cart(self._adjust.set_quantity(name.strip(), quantity))

    def _remove_item(self, name: str) -> None:
        if self._require_name(name) is not None:
            display_cart(self._remove.handle(name))

    def _cart(self, _: str) -> None:
        display_cart(self._show_cart.handle())

    @staticmethod
    def _require_name(name: str) -> str | None:
        if not name.strip():
            click.echo("Please give a plant name.")
            return None
        return name.strip()


@click.command("shop")
@catalog_option
@dismiss_ms_option
@clear_on_purchase_option
def shop(catalog_path: Path, dismiss_ms: int, clear_cart_on_purchase: bool) -> None:
    """Start an interactive shopping session."""
    settings = Settings(
        catalog_path=catalog_path,
        dismiss_ms=dismiss_ms,
        clear_cart_on_purchase=clear_cart_on_purchase,
    )

    with shop_session(settings) as session:
        session.checkout.subscribe(render_checkout)
        shell = ShopShell(session)
        click.echo("Welcome to Paradise Nursery. Type 'help' for commands.")

        while True:
            session.scheduler.run_pending()
            try:
                line = click.prompt(
                    shell.prompt, default="", show_default=False, prompt_suffix="> "
                )
            except click.Abort:
                click.echo()
                break
            session.scheduler.run_pending()

            if line.strip().lower() in ("quit", "exit"):
                break
            if line.strip():
                shell.execute(line)

    logger.debug("Shop session closed")
    click.echo("Goodbye!")
