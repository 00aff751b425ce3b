"""Checkout flow: a small state machine layered over the Cart.

IDLE --checkout()--> CONFIRM_PENDING --proceed()/cancel()--> NOTIFY_VISIBLE
IDLE --checkout() on an empty cart--> NOTIFY_VISIBLE
NOTIFY_VISIBLE --dismiss timer--> IDLE

The cart is only read here (total and emptiness), except when the flow
is configured to clear it after a purchase.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from storefront.domain.service.scheduler import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)

DEFAULT_DISMISS_MS = 3000

EMPTY_CART_MESSAGE = "Your cart is empty. Add items before checking out."
PURCHASE_MESSAGE = "Thank you for your purchase! Your card will be charged {total}."
CANCELED_MESSAGE = "Checkout canceled."

CheckoutListener = Callable[["CheckoutFlow"], None]


class CheckoutPhase(Enum):
    IDLE = "IDLE"
    CONFIRM_PENDING = "CONFIRM_PENDING"
    NOTIFY_VISIBLE = "NOTIFY_VISIBLE"


class CheckoutFlow:
    """Checkout state for one mounted cart view.

    Use as a context manager (or call ``close()``) so an outstanding
    dismiss timer never fires against a torn-down view.
    """

    def __init__(
        self,
        cart: Cart,
        scheduler: Scheduler,
        dismiss_ms: int = DEFAULT_DISMISS_MS,
        clear_cart_on_purchase: bool = False,
    ) -> None:
        if dismiss_ms < 0:
            raise ValidationError("Dismiss delay cannot be negative")
        self._cart = cart
        self._scheduler = scheduler
        self._dismiss_ms = dismiss_ms
        self._clear_cart_on_purchase = clear_cart_on_purchase

        self.phase = CheckoutPhase.IDLE
        self.pending_total: Money | None = None
        self.notification: str | None = None
        self._dismiss_task: ScheduledTask | None = None
        self._listeners: list[CheckoutListener] = []
        self._closed = False

    # --- Transitions ----------------------------------------------------------

    def checkout(self) -> None:
        """Start checkout: confirm a non-empty cart, or report an empty one.

        Allowed from IDLE and from NOTIFY_VISIBLE (the visible
        notification is replaced).
        """
        self._assert_open()
        if self.phase == CheckoutPhase.CONFIRM_PENDING:
            raise ValidationError("Checkout is already awaiting confirmation")

        total = self._cart.total
        if self._cart.is_empty or total.is_zero:
            self._show(EMPTY_CART_MESSAGE)
            return

        self._cancel_dismiss()
        self.notification = None
        self.pending_total = total
        self.phase = CheckoutPhase.CONFIRM_PENDING
        logger.info("Checkout awaiting confirmation for %s", total)
        self._notify()

    def proceed(self) -> None:
        """Confirm the purchase at the total captured by ``checkout()``."""
        self._assert_phase(CheckoutPhase.CONFIRM_PENDING, "proceed")
        total = self.pending_total
        if self._clear_cart_on_purchase:
            self._cart.clear()
        self._show(PURCHASE_MESSAGE.format(total=total))

    def cancel(self) -> None:
        self._assert_phase(CheckoutPhase.CONFIRM_PENDING, "cancel")
        self._show(CANCELED_MESSAGE)

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        """Release the dismiss timer; the flow is unusable afterwards."""
        self._cancel_dismiss()
        self._listeners.clear()
        self._closed = True

    def __enter__(self) -> CheckoutFlow:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def has_pending_dismiss(self) -> bool:
        return self._dismiss_task is not None and not self._dismiss_task.cancelled

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, listener: CheckoutListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Internal helpers -----------------------------------------------------

    def _show(self, message: str) -> None:
        # Every entry restarts the clock, even when a notice is already up.
        self._cancel_dismiss()
        self.phase = CheckoutPhase.NOTIFY_VISIBLE
        self.notification = message
        logger.info("Checkout notification: %s", message)
        self._start_dismiss()
        self._notify()

    def _start_dismiss(self) -> None:
        task: ScheduledTask | None = None

        def on_timeout() -> None:
            if self._dismiss_task is not task or self._closed:
                return
            self._dismiss_task = None
            self._to_idle()

        try:
            task = self._scheduler.call_later(self._dismiss_ms, on_timeout)
        except Exception:
            # The notice just stays up longer; the cart is unaffected.
            logger.exception("Could not schedule notification dismissal")
            return
        self._dismiss_task = task
        logger.debug("Dismiss scheduled in %d ms", self._dismiss_ms)

    def _cancel_dismiss(self) -> None:
        if self._dismiss_task is not None:
            self._dismiss_task.cancel()
            self._dismiss_task = None
            logger.debug("Pending dismiss cancelled")

    def _to_idle(self) -> None:
        self.phase = CheckoutPhase.IDLE
        self.notification = None
        self.pending_total = None
        logger.debug("Checkout back to idle")
        self._notify()

    def _assert_phase(self, expected: CheckoutPhase, action: str) -> None:
        self._assert_open()
        if self.phase != expected:
            raise ValidationError(
                f"Cannot {action} — current phase is {self.phase.value}, "
                f"expected {expected.value}"
            )

    def _assert_open(self) -> None:
        if self._closed:
            raise ValidationError("Checkout flow is closed")

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
