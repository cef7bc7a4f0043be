"""Back-office figures computed from the stored transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterable

from bakery_pos.models import InventoryItem, MenuItem, Transaction


@dataclass(frozen=True)
class DailySales:
    day: date
    transactions: int
    sales: float

    @property
    def average(self) -> float:
        return self.sales / self.transactions if self.transactions else 0


@dataclass
class SalesReport:
    rows: list[DailySales] = field(default_factory=list)

    @property
    def total_transactions(self) -> int:
        return sum(row.transactions for row in self.rows)

    @property
    def total_sales(self) -> float:
        return sum(row.sales for row in self.rows)

    @property
    def average(self) -> float:
        count = self.total_transactions
        return self.total_sales / count if count else 0


@dataclass(frozen=True)
class TopSeller:
    name: str
    quantity: int
    revenue: float
    share_percent: float


@dataclass
class DashboardSummary:
    sales_today: float
    transactions_today: int
    average_today: float
    low_stock_count: int
    recent: list[Transaction]
    sales_by_category: dict[str, float]


def transaction_day(transaction: Transaction, tz: tzinfo | None = None) -> date:
    parsed = datetime.fromisoformat(transaction.timestamp)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz).date()


def range_start(range_name: str, today: date) -> date:
    """First day included in a ``today|week|month|year`` report."""
    if range_name == "today":
        return today
    if range_name == "week":
        return today - timedelta(days=6)
    if range_name == "month":
        return today.replace(day=1)
    if range_name == "year":
        return today.replace(month=1, day=1)
    raise ValueError(f"Unknown report range: {range_name!r}")


def daily_sales(
    transactions: Iterable[Transaction], range_name: str, today: date, tz: tzinfo | None = None
) -> SalesReport:
    start = range_start(range_name, today)
    buckets: dict[date, list[float]] = {}
    for transaction in transactions:
        day = transaction_day(transaction, tz)
        if not (start <= day <= today):
            continue
        bucket = buckets.setdefault(day, [0, 0.0])
        bucket[0] += 1
        bucket[1] += transaction.total
    return SalesReport(
        rows=[DailySales(day=day, transactions=int(count), sales=sales) for day, (count, sales) in sorted(buckets.items())]
    )


def transaction_history(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Newest first."""
    return list(reversed(list(transactions)))


def top_selling_items(transactions: Iterable[Transaction], limit: int = 5) -> list[TopSeller]:
    totals: dict[str, list[float]] = {}
    for transaction in transactions:
        for item in transaction.items:
            bucket = totals.setdefault(item.name, [0, 0.0])
            bucket[0] += item.quantity
            bucket[1] += item.line_total
    ranked = sorted(totals.items(), key=lambda entry: -entry[1][0])[:limit]
    revenue_total = sum(revenue for _, (_, revenue) in ranked)
    return [
        TopSeller(
            name=name,
            quantity=int(qty),
            revenue=revenue,
            share_percent=revenue / revenue_total * 100 if revenue_total else 0,
        )
        for name, (qty, revenue) in ranked
    ]


def dashboard_summary(
    transactions: list[Transaction],
    inventory: Iterable[InventoryItem],
    menu: Iterable[MenuItem],
    today: date,
    tz: tzinfo | None = None,
) -> DashboardSummary:
    todays = [t for t in transactions if transaction_day(t, tz) == today]
    sales_today = sum(t.total for t in todays)

    category_by_id = {item.id: item.category for item in menu}
    by_category: dict[str, float] = {}
    for transaction in transactions:
        for item in transaction.items:
            category = category_by_id.get(item.id, "Lainnya")
            by_category[category] = by_category.get(category, 0) + item.line_total

    return DashboardSummary(
        sales_today=sales_today,
        transactions_today=len(todays),
        average_today=sales_today / len(todays) if todays else 0,
        low_stock_count=sum(1 for item in inventory if item.is_low_stock),
        recent=transaction_history(transactions)[:5],
        sales_by_category=by_category,
    )
