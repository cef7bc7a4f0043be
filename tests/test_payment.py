import pytest

from bakery_pos.payment import PaymentSession


def test_split_cash_payments_complete_the_order():
    session = PaymentSession(33000)

    assert session.add_payment("cash", 20000)
    assert session.remaining == pytest.approx(13000)
    assert not session.can_complete

    assert session.add_payment("cash", 13000)
    assert session.remaining == pytest.approx(0)
    assert session.can_complete


def test_payment_over_remaining_is_rejected():
    session = PaymentSession(33000)
    session.add_payment("card", 20000)

    assert not session.add_payment("qris", 20000)
    assert len(session.payments) == 1
    assert session.remaining == pytest.approx(13000)


@pytest.mark.parametrize("amount", [0, -500, float("nan")])
def test_non_positive_amounts_are_rejected(amount):
    session = PaymentSession(10000)

    assert not session.add_payment("cash", amount)
    assert session.payments == []


def test_unknown_method_is_rejected():
    assert not PaymentSession(10000).add_payment("bitcoin", 5000)


def test_pay_remaining_cash_needs_enough_tendered():
    session = PaymentSession(33000)

    assert not session.pay_remaining("cash", 30000)
    assert not session.pay_remaining("cash")
    assert session.change_due(50000) == pytest.approx(17000)
    assert session.pay_remaining("cash", 50000)
    assert session.can_complete
    assert session.payments[0].amount == pytest.approx(33000)


def test_pay_remaining_card_needs_no_tendered():
    session = PaymentSession(12000)
    session.add_payment("voucher", 2000)

    assert session.pay_remaining("card")
    assert session.can_complete


def test_remove_payment_restores_remaining():
    session = PaymentSession(33000)
    session.add_payment("cash", 20000)
    session.add_payment("card", 13000)

    assert session.remove_payment(0)
    assert session.remaining == pytest.approx(20000)
    assert not session.remove_payment(5)


def test_tolerance_allows_rounding_leftovers():
    session = PaymentSession(10000.005)
    session.add_payment("cash", 10000)

    assert session.can_complete
