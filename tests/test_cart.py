from __future__ import annotations

import random
from decimal import Decimal

import pytest

from foodhub_cart.core.domain.model.cart import Cart, CartSnapshot, LineItem
from foodhub_cart.core.domain.model.errors import InvalidLineItem
from foodhub_cart.core.domain.model.menu import MenuItem
from foodhub_cart.core.domain.model.money import Money


def test_new_cart_is_empty(cart):
    assert cart.is_empty()
    assert cart.item_count() == 0
    assert cart.subtotal() == Money.of(0)
    assert cart.snapshot == CartSnapshot.empty()


def test_add_same_item_twice_keeps_one_entry_with_quantity_two(cart, curry):
    cart.add(curry)
    cart.add(curry)

    assert len(cart) == 1
    assert cart.get(curry.id).quantity == 2


def test_add_keeps_insertion_order(cart, curry, naan):
    cart.add(naan)
    cart.add(curry)
    cart.add(naan)

    assert [it.id for it in cart.items()] == [naan.id, curry.id]


def test_remove_deletes_entry_and_ignores_unknown_id(cart, curry, naan):
    cart.add(curry)
    cart.add(naan)

    cart.remove(curry.id)
    cart.remove(999)

    assert [it.id for it in cart.items()] == [naan.id]


def test_set_quantity_updates_existing_entry_in_place(cart, curry, naan):
    cart.add(curry)
    cart.add(naan)

    cart.set_quantity(curry.id, 5)

    assert [(it.id, it.quantity) for it in cart.items()] == [(1, 5), (2, 1)]


def test_set_quantity_on_missing_entry_is_noop(cart, curry):
    cart.add(curry)
    cart.set_quantity(42, 3)

    assert cart.items() == (LineItem(1, "Butter Chicken", Money.of(250), 1),)


@pytest.mark.parametrize("quantity", [0, -1, -10])
def test_set_quantity_to_zero_or_below_equals_remove(curry, naan, quantity):
    via_set = Cart()
    via_remove = Cart()
    for c in (via_set, via_remove):
        c.add(curry)
        c.add(naan)

    via_set.set_quantity(curry.id, quantity)
    via_remove.remove(curry.id)

    assert via_set.snapshot == via_remove.snapshot


def test_subtotal_is_exact(cart, curry, naan):
    cart.add(curry)
    cart.add(curry)
    cart.add(naan)

    assert cart.subtotal() == Money.of(599)
    assert cart.subtotal().amount == Decimal("599.00")
    assert cart.item_count() == 3


def test_subtotal_has_no_float_drift(cart):
    for i in range(10):
        cart.add(MenuItem(id=i, name=f"item-{i}", price=Money.of("0.10")))

    assert cart.subtotal().amount == Decimal("1.00")


def test_clear_empties_ledger(cart, curry, naan):
    cart.add(curry)
    cart.add(naan)

    cart.clear()

    assert cart.is_empty()
    assert cart.item_count() == 0


def test_snapshot_is_replaced_not_mutated(cart, curry):
    before = cart.snapshot
    cart.add(curry)

    assert before.items == ()
    assert cart.snapshot is not before
    assert cart.snapshot.items == (LineItem.from_menu_item(curry),)


def test_subscribers_receive_snapshot_per_operation(cart, curry, naan):
    seen: list[CartSnapshot] = []
    unsubscribe = cart.subscribe(seen.append)

    cart.add(curry)
    cart.add(naan)
    cart.set_quantity(curry.id, 3)
    cart.remove(naan.id)

    assert [s.item_count for s in seen] == [1, 2, 4, 3]
    assert seen[-1] is cart.snapshot

    unsubscribe()
    cart.clear()
    assert len(seen) == 4


def test_random_operation_sequences_keep_invariants():
    rng = random.Random(20240611)
    menu = [MenuItem(id=i, name=f"dish-{i}", price=Money.of(i * 10 + 5)) for i in range(1, 6)]

    for _ in range(200):
        cart = Cart()
        for _ in range(30):
            op = rng.choice(("add", "remove", "set"))
            item = rng.choice(menu)
            if op == "add":
                cart.add(item)
            elif op == "remove":
                cart.remove(item.id)
            else:
                cart.set_quantity(item.id, rng.randint(-2, 5))

            ids = [it.id for it in cart.items()]
            assert len(ids) == len(set(ids))
            assert all(it.quantity >= 1 for it in cart.items())
            assert cart.subtotal() == Money.of(
                sum(it.price.amount * it.quantity for it in cart.items())
            )


def test_add_in_other_currency_is_refused_and_ledger_stays_usable(cart, curry, naan):
    cart.add(curry)
    before = cart.snapshot
    dollars = MenuItem(id=9, name="Burger", price=Money.of("5", currency="USD"))

    with pytest.raises(InvalidLineItem):
        cart.add(dollars)

    assert cart.snapshot == before
    assert cart.items() == before.items
    cart.add(naan)
    cart.set_quantity(curry.id, 2)
    assert cart.subtotal() == Money.of(599)


def test_negative_price_never_reaches_the_ledger(cart):
    with pytest.raises(InvalidLineItem):
        cart.add(MenuItem(id=5, name="Refund", price=Money.of(-5)))

    assert cart.is_empty()
    assert cart.snapshot == CartSnapshot.empty()


def test_line_item_rejects_quantity_below_one(curry):
    with pytest.raises(InvalidLineItem):
        LineItem.from_menu_item(curry).with_quantity(0)
