"""Domain -> DTO mapping shared by the cart and checkout handlers."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineItemDTO, CheckoutDTO
from storefront.domain.model.cart import Cart
from storefront.domain.model.checkout import CheckoutFlow


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[
            CartLineItemDTO(
                name=item.name,
                image=item.image,
                unit_price=str(item.unit_price),
                quantity=item.quantity,
                subtotal=str(item.subtotal),
            )
            for item in cart.items
        ],
        total=str(cart.total),
        item_count=cart.item_count,
    )


def checkout_to_dto(flow: CheckoutFlow) -> CheckoutDTO:
    return CheckoutDTO(
        phase=flow.phase.value,
        notification=flow.notification,
        pending_total=str(flow.pending_total) if flow.pending_total is not None else None,
    )
