"""Transaction snapshots and receipt text."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from bakery_pos.config import TAX_RATE
from bakery_pos.constant import PAYMENT_METHOD_LABELS
from bakery_pos.models import Order, Payment, Transaction
from bakery_pos.rendering import format_rupiah
from bakery_pos.settings import BusinessSettings

RECEIPT_WIDTH = 32


def build_transaction(
    order: Order, cashier: str, payments: Iterable[Payment] = (), now: datetime | None = None
) -> Transaction:
    """Freeze a paid order into a transaction record."""
    now = now or datetime.now(timezone.utc)
    stamp = str(int(now.timestamp() * 1000))
    return Transaction(
        id=stamp,
        order_id=f"ORD-{stamp}",
        items=order.items,
        subtotal=order.subtotal,
        discount=order.discount,
        tax=order.tax,
        total=order.total,
        timestamp=now.isoformat(),
        cashier=cashier,
        payments=tuple(payments),
    )


def _two_column(left: str, right: str, width: int = RECEIPT_WIDTH) -> str:
    gap = max(1, width - len(left) - len(right))
    return f"{left}{' ' * gap}{right}"


def receipt_lines(transaction: Transaction, business: BusinessSettings, width: int = RECEIPT_WIDTH) -> list[str]:
    """Plain-text receipt, one printer line per entry."""
    printed_at = datetime.fromisoformat(transaction.timestamp).astimezone()
    lines = [
        business.store_name.center(width).rstrip(),
        business.store_address.center(width).rstrip(),
        business.store_phone.center(width).rstrip(),
        "-" * width,
        printed_at.strftime("%d/%m/%Y %H:%M"),
        f"ID Transaksi: {transaction.id}",
        f"Kasir: {transaction.cashier}",
        "-" * width,
    ]
    for item in transaction.items:
        lines.append(_two_column(f"{item.quantity}x {item.name}", format_rupiah(item.line_total), width))
        if item.modifiers:
            lines.append(f"  {', '.join(item.modifiers)}")
        if item.notes:
            lines.append(f"  Catatan: {item.notes}")
    lines.append("-" * width)
    lines.append(_two_column("Subtotal", format_rupiah(transaction.subtotal), width))
    if transaction.discount > 0:
        lines.append(_two_column("Diskon", f"-{format_rupiah(transaction.discount)}", width))
    lines.append(_two_column(f"Pajak ({TAX_RATE * 100:g}%)", format_rupiah(transaction.tax), width))
    lines.append(_two_column("TOTAL", format_rupiah(transaction.total), width))
    for payment in transaction.payments:
        label = PAYMENT_METHOD_LABELS.get(payment.method, payment.method)
        lines.append(_two_column(label, format_rupiah(payment.amount), width))
    lines.append("-" * width)
    lines.append("Terima kasih!".center(width).rstrip())
    return lines
