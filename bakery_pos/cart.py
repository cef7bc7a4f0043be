"""Cart arithmetic.

Every operation takes the previous :class:`Order` snapshot and returns a new
one with ``subtotal``, ``tax`` and ``total`` recomputed. None of them raise:
bad input leaves the order unchanged and is logged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Iterable

from bakery_pos.config import TAX_RATE
from bakery_pos.models import MenuItem, Order, OrderItem

logger = logging.getLogger(__name__)

EMPTY_ORDER = Order()


def compute_totals(
    items: Iterable[OrderItem], discount: float = 0, tax_rate: float = TAX_RATE
) -> tuple[float, float, float]:
    """Return ``(subtotal, tax, total)`` for the given lines and discount."""
    subtotal = sum(item.price * item.quantity for item in items)
    tax = subtotal * tax_rate
    return subtotal, tax, subtotal + tax - discount


def _with_items(order: Order, items: list[OrderItem], discount: float | None = None) -> Order:
    discount = order.discount if discount is None else discount
    subtotal, tax, total = compute_totals(items, discount)
    return Order(items=tuple(items), subtotal=subtotal, discount=discount, tax=tax, total=total)


def add_item(order: Order, menu_item: MenuItem, modifiers: Iterable[str] = (), notes: str = "") -> Order:
    """Add one unit, merging with a line of the same item, modifiers and notes."""
    modifiers = tuple(modifiers)
    notes = notes or ""
    items = list(order.items)
    for idx, line in enumerate(items):
        if line.id == menu_item.id and line.modifiers == modifiers and line.notes == notes:
            items[idx] = replace(line, quantity=line.quantity + 1)
            break
    else:
        items.append(
            OrderItem(
                id=menu_item.id,
                name=menu_item.name,
                price=menu_item.price,
                quantity=1,
                modifiers=modifiers,
                notes=notes,
            )
        )
    return _with_items(order, items)


def change_quantity(order: Order, index: int, delta: int) -> Order:
    """Adjust a line's quantity; lines that reach zero or below are dropped."""
    if not (0 <= index < len(order.items)):
        logger.warning("change_quantity index=%s out of range (lines=%s)", index, len(order.items))
        return order
    items = list(order.items)
    quantity = items[index].quantity + delta
    if quantity <= 0:
        del items[index]
    else:
        items[index] = replace(items[index], quantity=quantity)
    return _with_items(order, items)


def remove_item(order: Order, index: int) -> Order:
    if not (0 <= index < len(order.items)):
        logger.warning("remove_item index=%s out of range (lines=%s)", index, len(order.items))
        return order
    items = [line for idx, line in enumerate(order.items) if idx != index]
    return _with_items(order, items)


def is_valid_discount(amount: object) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    return math.isfinite(amount) and amount >= 0


def apply_discount(order: Order, amount: float) -> Order:
    """Set the order discount, clamped to the subtotal.

    Negative or non-numeric amounts are refused and the order is returned as is.
    """
    if not is_valid_discount(amount):
        logger.warning("apply_discount refused amount=%r", amount)
        return order
    return _with_items(order, list(order.items), discount=min(amount, order.subtotal))


def discount_amount(kind: str, value: float, subtotal: float) -> float | None:
    """Translate a percentage or fixed discount into currency.

    Returns ``None`` for values that should not be applied at all.
    """
    if not is_valid_discount(value) or value <= 0:
        return None
    if kind == "percentage":
        return subtotal * value / 100
    if kind == "fixed":
        return value
    return None
