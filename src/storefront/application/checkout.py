"""Application service: Checkout use cases.

Thin wrappers over the CheckoutFlow state machine that return a DTO
snapshot after every transition.
"""

from __future__ import annotations

from storefront.application.dto import CheckoutDTO
from storefront.application.mapping import checkout_to_dto
from storefront.domain.model.checkout import CheckoutFlow


class CheckoutHandler:

    def __init__(self, flow: CheckoutFlow) -> None:
        self._flow = flow

    def checkout(self) -> CheckoutDTO:
        self._flow.checkout()
        return checkout_to_dto(self._flow)

    def proceed(self) -> CheckoutDTO:
        self._flow.proceed()
        return checkout_to_dto(self._flow)

    def cancel(self) -> CheckoutDTO:
        self._flow.cancel()
        return checkout_to_dto(self._flow)

    def status(self) -> CheckoutDTO:
        return checkout_to_dto(self._flow)
