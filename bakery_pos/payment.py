"""Split-payment reconciliation for one order."""

from __future__ import annotations

import logging
import math

from bakery_pos.config import PAYMENT_TOLERANCE
from bakery_pos.constant import PAYMENT_METHOD_LABELS
from bakery_pos.models import Payment

logger = logging.getLogger(__name__)

PAYMENT_METHODS = tuple(PAYMENT_METHOD_LABELS)


class PaymentSession:
    """Collects partial payments until the order total is covered."""

    def __init__(self, total: float) -> None:
        self.total = total
        self.payments: list[Payment] = []

    @property
    def total_paid(self) -> float:
        return sum(payment.amount for payment in self.payments)

    @property
    def remaining(self) -> float:
        return self.total - self.total_paid

    @property
    def can_complete(self) -> bool:
        return self.remaining <= PAYMENT_TOLERANCE

    def add_payment(self, method: str, amount: float) -> bool:
        """Record a payment; returns False (and changes nothing) when rejected."""
        if method not in PAYMENT_METHODS:
            logger.warning("payment rejected method=%r", method)
            return False
        if not isinstance(amount, (int, float)) or not math.isfinite(amount):
            logger.warning("payment rejected amount=%r", amount)
            return False
        if amount <= 0 or amount > self.remaining:
            logger.info("payment rejected method=%s amount=%s remaining=%s", method, amount, self.remaining)
            return False
        self.payments.append(Payment(method=method, amount=amount))
        logger.info("payment added method=%s amount=%s remaining=%s", method, amount, self.remaining)
        return True

    def pay_remaining(self, method: str, tendered: float | None = None) -> bool:
        """Settle the whole balance. Cash needs a tendered amount that covers it."""
        if method == "cash" and (tendered is None or tendered < self.remaining):
            logger.info("cash payment rejected tendered=%r remaining=%s", tendered, self.remaining)
            return False
        return self.add_payment(method, self.remaining)

    def remove_payment(self, index: int) -> bool:
        if not (0 <= index < len(self.payments)):
            return False
        del self.payments[index]
        return True

    def change_due(self, tendered: float) -> float:
        return max(0.0, tendered - self.remaining)
