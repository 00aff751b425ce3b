"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.

Prices reach the core as display strings (``"$15.00"``); ``parse_price``
is the single place that turns them into Decimal amounts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ParseError, ValidationError

CURRENCY_SYMBOL = "$"
CENT = Decimal("0.01")

_PRICE_BODY = re.compile(r"\d+(\.\d*)?|\.\d+")


def round_cents(amount: Decimal) -> Decimal:
    """Round to 2 fractional digits, half-up (not banker's rounding)."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_price(text: str) -> Decimal:
    """Parse a currency-prefixed price such as ``"$9.99"`` into a Decimal.

    Raises ParseError instead of coercing bad input to zero: a silently
    wrong total is worse than a visible failure.
    """
    if not isinstance(text, str):
        raise ParseError(f"Price must be a string, got {type(text).__name__}")

    raw = text.strip()
    if not raw.startswith(CURRENCY_SYMBOL):
        raise ParseError(
            f"Invalid price {text!r}: expected a leading '{CURRENCY_SYMBOL}'"
        )

    body = raw[len(CURRENCY_SYMBOL):]
    if not _PRICE_BODY.fullmatch(body):
        raise ParseError(
            f"Invalid price {text!r}: expected a non-negative decimal "
            f"after '{CURRENCY_SYMBOL}'"
        )
    try:
        return Decimal(body)
    except InvalidOperation as exc:
        raise ParseError(f"Invalid price {text!r}") from exc


@dataclass(frozen=True)
class Money:
    """Monetary amount in the store's single currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def rounded(self) -> Money:
        return Money(round_cents(self.amount))

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{CURRENCY_SYMBOL}{round_cents(self.amount)}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def parse(text: str) -> Money:
        """Build Money from a display price like ``"$15.00"``."""
        return Money(parse_price(text))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
