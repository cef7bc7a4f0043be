from datetime import datetime, timezone

import pytest

from bakery_pos.models import OrderItem, Payment
from bakery_pos.shift_report import shift_report_lines, summarize_shift
from tests.pos_helpers import make_transaction

NOW = datetime(2026, 10, 19, 17, 0, tzinfo=timezone.utc)


def _at(hour, minute=0):
    return datetime(2026, 10, 19, hour, minute, tzinfo=timezone.utc)


def test_totals_for_one_cashier():
    transactions = [
        make_transaction(10000, tx_id="1"),
        make_transaction(20000, tx_id="2"),
        make_transaction(30000, tx_id="3"),
        make_transaction(99000, cashier="Sarah Johnson", tx_id="4"),
    ]

    summary = summarize_shift("Mike Chen", transactions, tz=timezone.utc, now=NOW)

    assert summary.total_sales == pytest.approx(60000)
    assert summary.transactions == 3
    assert summary.average_transaction == pytest.approx(20000)


def test_cashier_match_is_exact():
    transactions = [make_transaction(10000, cashier="mike chen")]

    summary = summarize_shift("Mike Chen", transactions, tz=timezone.utc, now=NOW)

    assert summary.transactions == 0
    assert summary.average_transaction == 0
    assert summary.start_time == NOW


def test_hourly_buckets_sorted_and_labelled():
    transactions = [
        make_transaction(5000, when=_at(14, 5), tx_id="1"),
        make_transaction(7000, when=_at(9, 30), tx_id="2"),
        make_transaction(3000, when=_at(14, 50), tx_id="3"),
    ]

    summary = summarize_shift("Mike Chen", transactions, tz=timezone.utc, now=NOW)

    assert [(b.label, b.transactions, b.sales) for b in summary.hourly_breakdown] == [
        ("9:00 - 10:00", 1, 7000),
        ("14:00 - 15:00", 2, 8000),
    ]
    assert summary.start_time == _at(9, 30)


def test_top_items_by_quantity_with_stable_ties():
    lapis = OrderItem(id="1", name="Kue Lapis", price=15000, quantity=2)
    bakwan = OrderItem(id="8", name="Bakwan", price=2000, quantity=2)
    risoles = OrderItem(id="12", name="Risoles", price=2500, quantity=5)
    transactions = [
        make_transaction(34000, items=(lapis, bakwan), tx_id="1"),
        make_transaction(12500, items=(risoles,), tx_id="2"),
    ]

    summary = summarize_shift("Mike Chen", transactions, tz=timezone.utc, now=NOW)

    assert [(i.name, i.quantity) for i in summary.top_items] == [
        ("Risoles", 5),
        ("Kue Lapis", 2),
        ("Bakwan", 2),
    ]
    assert summary.top_items[1].revenue == pytest.approx(30000)


def test_top_items_limited_to_five():
    items = tuple(OrderItem(id=str(n), name=f"Item {n}", price=1000, quantity=n) for n in range(1, 8))

    summary = summarize_shift("Mike Chen", [make_transaction(28000, items=items)], tz=timezone.utc, now=NOW)

    assert [i.name for i in summary.top_items] == ["Item 7", "Item 6", "Item 5", "Item 4", "Item 3"]


def test_payment_methods_and_cash_count():
    transactions = [
        make_transaction(30000, payments=(Payment("cash", 20000), Payment("card", 10000)), tx_id="1"),
        make_transaction(5000, tx_id="2"),
    ]

    summary = summarize_shift("Mike Chen", transactions, tz=timezone.utc, now=NOW)

    assert summary.sales_by_method["cash"] == pytest.approx(25000)
    assert summary.sales_by_method["card"] == pytest.approx(10000)
    assert summary.sales_by_method["qris"] == 0
    assert summary.cash_expected == pytest.approx(25000)
    assert summary.cash_difference(24000) == pytest.approx(-1000)
    assert summary.is_cash_balanced(25000)
    assert not summary.is_cash_balanced(24000)


def test_report_lines_include_counted_cash():
    summary = summarize_shift("Mike Chen", [make_transaction(10000)], tz=timezone.utc, now=NOW)

    lines = shift_report_lines(summary, cash_counted=9000)

    assert lines[1] == "Kasir: Mike Chen"
    assert any(line.startswith("Selisih") and line.endswith("Rp -1.000") for line in lines)
    assert all(len(line) <= 32 for line in lines if not line.startswith(("Kasir", "Mulai", "Sampai")))
