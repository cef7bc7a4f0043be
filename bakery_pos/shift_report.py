"""Per-cashier shift summary folded from the full transaction history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Iterable

from bakery_pos.config import PAYMENT_TOLERANCE
from bakery_pos.constant import PAYMENT_METHOD_LABELS
from bakery_pos.models import Transaction
from bakery_pos.rendering import format_rupiah

TOP_ITEMS_LIMIT = 5


@dataclass(frozen=True)
class ItemSales:
    name: str
    quantity: int
    revenue: float


@dataclass(frozen=True)
class HourlySales:
    hour: int
    sales: float
    transactions: int

    @property
    def label(self) -> str:
        return f"{self.hour}:00 - {self.hour + 1}:00"


@dataclass
class ShiftSummary:
    cashier: str
    start_time: datetime
    current_time: datetime
    total_sales: float = 0
    transactions: int = 0
    average_transaction: float = 0
    sales_by_method: dict[str, float] = field(default_factory=dict)
    top_items: list[ItemSales] = field(default_factory=list)
    hourly_breakdown: list[HourlySales] = field(default_factory=list)

    @property
    def cash_expected(self) -> float:
        return self.sales_by_method.get("cash", 0)

    def cash_difference(self, counted: float) -> float:
        return counted - self.cash_expected

    def is_cash_balanced(self, counted: float) -> bool:
        return abs(self.cash_difference(counted)) < PAYMENT_TOLERANCE


def _local(stamp: str, tz: tzinfo | None) -> datetime:
    parsed = datetime.fromisoformat(stamp)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz)


def summarize_shift(
    cashier: str,
    transactions: Iterable[Transaction],
    tz: tzinfo | None = None,
    now: datetime | None = None,
) -> ShiftSummary:
    """Aggregate every transaction recorded under ``cashier``.

    There is no shift boundary: the whole history is scanned and the shift
    start shown is the oldest matching transaction. Hours are bucketed in
    ``tz`` (local time when omitted).
    """
    now = (now or datetime.now(timezone.utc)).astimezone(tz)
    mine = [t for t in transactions if t.cashier == cashier]

    total_sales = 0.0
    by_method: dict[str, float] = {method: 0.0 for method in PAYMENT_METHOD_LABELS}
    items: dict[str, list[float]] = {}
    hourly: dict[int, list[float]] = {}
    start_time: datetime | None = None

    for transaction in mine:
        total_sales += transaction.total

        if transaction.payments:
            for payment in transaction.payments:
                by_method[payment.method] = by_method.get(payment.method, 0.0) + payment.amount
        else:
            by_method["cash"] += transaction.total

        for item in transaction.items:
            bucket = items.setdefault(item.name, [0, 0.0])
            bucket[0] += item.quantity
            bucket[1] += item.price * item.quantity

        when = _local(transaction.timestamp, tz)
        if start_time is None or when < start_time:
            start_time = when
        hour_bucket = hourly.setdefault(when.hour, [0.0, 0])
        hour_bucket[0] += transaction.total
        hour_bucket[1] += 1

    # sorted() is stable, so equal quantities keep first-seen order.
    top_items = sorted(
        (ItemSales(name=name, quantity=int(qty), revenue=revenue) for name, (qty, revenue) in items.items()),
        key=lambda row: -row.quantity,
    )[:TOP_ITEMS_LIMIT]
    hourly_breakdown = [
        HourlySales(hour=hour, sales=sales, transactions=int(count)) for hour, (sales, count) in sorted(hourly.items())
    ]

    return ShiftSummary(
        cashier=cashier,
        start_time=start_time or now,
        current_time=now,
        total_sales=total_sales,
        transactions=len(mine),
        average_transaction=total_sales / len(mine) if mine else 0,
        sales_by_method=by_method,
        top_items=top_items,
        hourly_breakdown=hourly_breakdown,
    )


def shift_report_lines(summary: ShiftSummary, cash_counted: float | None = None, width: int = 32) -> list[str]:
    """Printable shift report."""

    def row(left: str, right: str) -> str:
        return f"{left}{' ' * max(1, width - len(left) - len(right))}{right}"

    lines = [
        "LAPORAN SHIFT".center(width).rstrip(),
        f"Kasir: {summary.cashier}",
        f"Mulai: {summary.start_time.strftime('%d/%m/%Y %H:%M')}",
        f"Sampai: {summary.current_time.strftime('%d/%m/%Y %H:%M')}",
        "-" * width,
        row("Total Penjualan", format_rupiah(summary.total_sales)),
        row("Transaksi", str(summary.transactions)),
        row("Rata-rata", format_rupiah(summary.average_transaction)),
        "-" * width,
    ]
    for method, label in PAYMENT_METHOD_LABELS.items():
        lines.append(row(label, format_rupiah(summary.sales_by_method.get(method, 0))))
    if cash_counted is not None:
        lines.append(row("Tunai Dihitung", format_rupiah(cash_counted)))
        lines.append(row("Selisih", format_rupiah(summary.cash_difference(cash_counted))))
    lines.append("-" * width)
    lines.append("Item Terlaris")
    for item in summary.top_items:
        lines.append(row(f"{item.quantity}x {item.name}", format_rupiah(item.revenue)))
    lines.append("-" * width)
    lines.append("Per Jam")
    for bucket in summary.hourly_breakdown:
        lines.append(row(f"{bucket.label} ({bucket.transactions})", format_rupiah(bucket.sales)))
    return lines
