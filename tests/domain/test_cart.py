"""Unit tests for the Cart aggregate and its totals."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ParseError
from storefront.domain.model.cart import Cart, CartLineItem, decrement, increment
from tests.fakes import plant

SNAKE = plant("Snake Plant", "$15.00")
FERN = plant("Boston Fern", "$10.50")
MINT = plant("Mint", "$9.99")


def _cart_with(*entries) -> Cart:
    cart = Cart()
    for entry in entries:
        cart.add_item(entry)
    return cart


class TestAddItem:

    def test_new_item_appended_with_quantity_one(self):
        cart = Cart().add_item(SNAKE)
        assert len(cart.items) == 1
        item = cart.items[0]
        assert item.name == "Snake Plant"
        assert item.cost == "$15.00"
        assert item.image == SNAKE.image
        assert item.quantity == 1

    def test_adding_again_increments_instead_of_duplicating(self):
        cart = _cart_with(SNAKE, SNAKE)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_quantity_equals_number_of_adds_per_name(self):
        sequence = [SNAKE, FERN, SNAKE, MINT, SNAKE, FERN]
        cart = _cart_with(*sequence)
        names = [item.name for item in cart.items]
        assert len(names) == len(set(names))
        for item in cart.items:
            assert item.quantity == sum(1 for e in sequence if e.name == item.name)

    def test_insertion_order_preserved(self):
        cart = _cart_with(FERN, SNAKE, FERN, MINT)
        assert [i.name for i in cart.items] == ["Boston Fern", "Snake Plant", "Mint"]


class TestUpdateQuantity:

    def test_sets_quantity(self):
        cart = _cart_with(SNAKE).update_quantity("Snake Plant", 5)
        assert cart.items[0].quantity == 5

    def test_unknown_name_is_noop(self):
        cart = _cart_with(SNAKE)
        before = [(i.name, i.quantity) for i in cart.items]
        cart.update_quantity("Cactus", 3)
        assert [(i.name, i.quantity) for i in cart.items] == before

    def test_store_does_not_clamp(self):
        # Keeping quantity >= 1 is the caller's job (see decrement).
        cart = _cart_with(SNAKE).update_quantity("Snake Plant", 0)
        assert cart.items[0].quantity == 0


class TestRemoveItem:

    def test_removes_matching_item(self):
        cart = _cart_with(SNAKE, FERN).remove_item("Snake Plant")
        assert [i.name for i in cart.items] == ["Boston Fern"]

    def test_unknown_name_is_noop(self):
        cart = _cart_with(SNAKE).remove_item("Cactus")
        assert [i.name for i in cart.items] == ["Snake Plant"]


class TestIncrementDecrement:

    def test_decrement_from_two_keeps_item(self):
        cart = _cart_with(SNAKE, SNAKE)
        decrement(cart, "Snake Plant")
        assert cart.contains("Snake Plant")
        assert cart.get("Snake Plant").quantity == 1

    def test_decrement_from_one_removes_item(self):
        cart = _cart_with(SNAKE)
        decrement(cart, "Snake Plant")
        assert not cart.contains("Snake Plant")
        assert cart.items == []

    def test_decrement_unknown_is_noop(self):
        cart = _cart_with(SNAKE)
        decrement(cart, "Cactus")
        assert cart.get("Snake Plant").quantity == 1

    def test_increment(self):
        cart = _cart_with(SNAKE)
        increment(cart, "Snake Plant")
        assert cart.get("Snake Plant").quantity == 2


class TestTotals:

    def test_item_subtotal(self):
        item = CartLineItem(name="Mint", image="", cost="$9.99", quantity=3)
        assert item.subtotal.amount == Decimal("29.97")

    def test_cart_total(self):
        cart = _cart_with(SNAKE, SNAKE, FERN)
        assert cart.total.amount == Decimal("40.50")
        assert str(cart.total) == "$40.50"

    def test_empty_cart_total_is_zero(self):
        assert Cart().total.amount == Decimal("0.00")

    def test_no_float_drift_across_many_items(self):
        cart = Cart()
        for _ in range(100):
            cart.add_item(plant("Penny Plant", "$0.10"))
        assert cart.total.amount == Decimal("10.00")

    def test_subtotals_rounded_before_summing(self):
        cart = Cart(items=[
            CartLineItem(name="A", image="", cost="$0.005", quantity=1),
            CartLineItem(name="B", image="", cost="$0.005", quantity=1),
        ])
        # Each line rounds up to 0.01 on its own.
        assert cart.total.amount == Decimal("0.02")

    def test_malformed_price_fails_loudly(self):
        cart = _cart_with(plant("Mystery Plant", "15.00"))
        with pytest.raises(ParseError):
            cart.total

    def test_item_count_sums_quantities(self):
        cart = _cart_with(SNAKE, SNAKE, FERN)
        assert cart.item_count == 3

    def test_contains(self):
        cart = _cart_with(SNAKE)
        assert cart.contains("Snake Plant")
        assert not cart.contains("Boston Fern")


class TestSubscriptions:

    def test_listener_called_after_each_mutation(self):
        cart = Cart()
        seen = []
        cart.subscribe(lambda c: seen.append(c.item_count))

        cart.add_item(SNAKE)
        cart.add_item(SNAKE)
        cart.update_quantity("Snake Plant", 5)
        cart.remove_item("Snake Plant")

        assert seen == [1, 2, 5, 0]

    def test_noops_do_not_notify(self):
        cart = _cart_with(SNAKE)
        seen = []
        cart.subscribe(lambda c: seen.append(c))

        cart.update_quantity("Cactus", 2)
        cart.remove_item("Cactus")

        assert seen == []

    def test_unsubscribe(self):
        cart = Cart()
        seen = []
        unsubscribe = cart.subscribe(lambda c: seen.append(c))
        unsubscribe()
        cart.add_item(SNAKE)
        assert seen == []

    def test_clear_empties_and_notifies(self):
        cart = _cart_with(SNAKE, FERN)
        seen = []
        cart.subscribe(lambda c: seen.append(len(c.items)))
        cart.clear()
        assert cart.is_empty
        assert seen == [0]
