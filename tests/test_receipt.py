from datetime import datetime, timezone

import pytest

from bakery_pos.cart import EMPTY_ORDER, add_item, apply_discount
from bakery_pos.models import Payment
from bakery_pos.receipt import build_transaction, receipt_lines
from bakery_pos.settings import BusinessSettings

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


def test_build_transaction_freezes_the_order(kue_lapis):
    order = add_item(add_item(EMPTY_ORDER, kue_lapis), kue_lapis)
    payments = [Payment("cash", 20000), Payment("card", 13000)]

    transaction = build_transaction(order, "Mike Chen", payments, now=NOW)

    assert transaction.id == str(int(NOW.timestamp() * 1000))
    assert transaction.order_id == f"ORD-{transaction.id}"
    assert transaction.timestamp == NOW.isoformat()
    assert transaction.items == order.items
    assert transaction.total == pytest.approx(33000)
    assert transaction.payments == tuple(payments)


def test_transaction_dict_round_trip(kue_lapis):
    order = add_item(EMPTY_ORDER, kue_lapis, ["Reguler"], notes="potong dua")
    transaction = build_transaction(order, "Mike Chen", [Payment("qris", order.total)], now=NOW)

    data = transaction.to_dict()

    assert data["items"][0]["modifiers"] == ["Reguler"]
    assert type(transaction).from_dict(data) == transaction


def test_receipt_lines(kue_lapis, bakwan):
    order = add_item(add_item(EMPTY_ORDER, kue_lapis), bakwan)
    order = apply_discount(order, 2000)
    transaction = build_transaction(order, "Mike Chen", [Payment("cash", order.total)], now=NOW)

    lines = receipt_lines(transaction, BusinessSettings())

    assert lines[0].strip() == "Toko Kue"
    assert "Kasir: Mike Chen" in lines
    assert any(line.startswith("1x Kue Lapis") and line.endswith("Rp 15.000") for line in lines)
    assert any(line.startswith("Diskon") and line.endswith("-Rp 2.000") for line in lines)
    assert any(line.startswith("Pajak (10%)") and line.endswith("Rp 1.700") for line in lines)
    assert any(line.startswith("TOTAL") and line.endswith("Rp 16.700") for line in lines)
    assert any(line.startswith("Tunai") for line in lines)
    assert lines[-1].strip() == "Terima kasih!"


def test_receipt_without_discount_has_no_discount_line(kue_lapis):
    transaction = build_transaction(add_item(EMPTY_ORDER, kue_lapis), "Mike Chen", now=NOW)

    assert not any(line.startswith("Diskon") for line in receipt_lines(transaction, BusinessSettings()))
