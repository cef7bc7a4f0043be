import math

import pytest

from bakery_pos.cart import (
    EMPTY_ORDER,
    add_item,
    apply_discount,
    change_quantity,
    compute_totals,
    discount_amount,
    remove_item,
)


def _assert_totals_consistent(order):
    subtotal = sum(line.price * line.quantity for line in order.items)
    assert order.subtotal == pytest.approx(subtotal)
    assert order.tax == pytest.approx(subtotal * 0.10)
    assert order.total == pytest.approx(subtotal + subtotal * 0.10 - order.discount)


def test_adding_same_item_merges_lines(kue_lapis):
    order = add_item(add_item(EMPTY_ORDER, kue_lapis), kue_lapis)

    assert len(order.items) == 1
    assert order.items[0].quantity == 2
    assert order.subtotal == pytest.approx(30000)
    assert order.tax == pytest.approx(3000)
    assert order.total == pytest.approx(33000)


def test_modifiers_and_notes_keep_lines_apart(kue_lapis):
    order = add_item(EMPTY_ORDER, kue_lapis, ["Reguler", "Biasa"])
    order = add_item(order, kue_lapis, ["Biasa", "Reguler"])
    order = add_item(order, kue_lapis, ["Reguler", "Biasa"], notes="tanpa gula")
    order = add_item(order, kue_lapis, ["Reguler", "Biasa"])

    assert [line.quantity for line in order.items] == [2, 1, 1]
    assert order.items[2].notes == "tanpa gula"
    _assert_totals_consistent(order)


def test_totals_hold_after_every_mutation(kue_lapis, bakwan):
    order = EMPTY_ORDER
    steps = [
        lambda o: add_item(o, kue_lapis),
        lambda o: add_item(o, bakwan),
        lambda o: add_item(o, bakwan),
        lambda o: change_quantity(o, 0, 3),
        lambda o: apply_discount(o, 5000),
        lambda o: change_quantity(o, 1, -1),
        lambda o: remove_item(o, 0),
    ]
    for step in steps:
        order = step(order)
        _assert_totals_consistent(order)


def test_decrement_to_zero_removes_line(kue_lapis, bakwan):
    order = add_item(add_item(EMPTY_ORDER, kue_lapis), bakwan)

    order = change_quantity(order, 0, -1)

    assert [line.id for line in order.items] == [bakwan.id]


def test_decrement_below_zero_is_removal(kue_lapis):
    order = add_item(EMPTY_ORDER, kue_lapis)

    assert change_quantity(order, 0, -5).is_empty


def test_bad_index_leaves_order_unchanged(kue_lapis):
    order = add_item(EMPTY_ORDER, kue_lapis)

    assert change_quantity(order, 3, 1) is order
    assert remove_item(order, -1) is order


def test_discount_clamps_to_subtotal(kue_lapis):
    order = add_item(add_item(EMPTY_ORDER, kue_lapis), kue_lapis)

    order = apply_discount(order, 50000)

    assert order.discount == pytest.approx(30000)
    assert order.total == pytest.approx(3000)


@pytest.mark.parametrize("amount", [-1, math.nan, math.inf, "1000", True])
def test_invalid_discount_is_refused(kue_lapis, amount):
    order = add_item(EMPTY_ORDER, kue_lapis)

    assert apply_discount(order, amount) is order


def test_discount_amount_translation():
    assert discount_amount("percentage", 10, 30000) == pytest.approx(3000)
    assert discount_amount("fixed", 5000, 30000) == 5000
    assert discount_amount("fixed", 0, 30000) is None
    assert discount_amount("bogus", 10, 30000) is None


def test_compute_totals_empty():
    assert compute_totals([]) == (0, 0, 0)
