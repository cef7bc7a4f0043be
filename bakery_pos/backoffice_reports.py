"""Dashboard and sales report sections."""

from __future__ import annotations

from datetime import date, datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Key
from textual.widgets import Static

from bakery_pos.backoffice_base import BackOfficeScreen
from bakery_pos.constant import REPORT_RANGES
from bakery_pos.rendering import format_rupiah
from bakery_pos.reports import daily_sales, dashboard_summary, top_selling_items

RANGE_LABELS = {
    "today": "Hari ini",
    "week": "7 hari",
    "month": "Bulan ini",
    "year": "Tahun ini",
}


class DashboardScreen(BackOfficeScreen):
    SECTION = "dashboard"

    CSS = BackOfficeScreen.CSS + """
    .dashboard-column {
        width: 1fr;
        padding: 0 1;
    }
    """

    def compose_section(self) -> ComposeResult:
        with Horizontal():
            with Vertical(classes="dashboard-column"):
                yield Static("Ringkasan Hari Ini", classes="pane-title")
                yield Static(id="dashboard-today")
                yield Static("Penjualan per Kategori", classes="pane-title")
                yield Static(id="dashboard-categories")
            with Vertical(classes="dashboard-column"):
                yield Static("Transaksi Terbaru", classes="pane-title")
                yield Static(id="dashboard-recent")

    def help_text(self) -> str:
        return "R muat ulang  " + super().help_text()

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if (event.character or "").lower() == "r":
            self._refresh_content()
            event.stop()
            return
        super().on_key(event)

    def _refresh_content(self) -> None:
        storage = self.pos.storage
        summary = dashboard_summary(
            storage.get_transactions(), storage.get_inventory(), storage.get_menu(), date.today()
        )

        today = Text()
        today.append(f"Penjualan      {format_rupiah(summary.sales_today):>18}\n", style="bold")
        today.append(f"Transaksi      {summary.transactions_today:>18}\n")
        today.append(f"Rata-rata      {format_rupiah(summary.average_today):>18}\n")
        low_style = "bold #ff8a8a" if summary.low_stock_count else ""
        today.append(f"Stok rendah    {summary.low_stock_count:>18}\n", style=low_style)
        self.query_one("#dashboard-today", Static).update(today)

        by_category = Text()
        total = sum(summary.sales_by_category.values())
        for category, sales in sorted(summary.sales_by_category.items(), key=lambda entry: -entry[1]):
            share = sales / total * 100 if total else 0
            by_category.append(f"{category:<12.12} {format_rupiah(sales):>14} {share:5.1f}%\n")
        self.query_one("#dashboard-categories", Static).update(by_category or "Belum ada penjualan")

        recent = Text()
        for transaction in summary.recent:
            when = datetime.fromisoformat(transaction.timestamp).astimezone().strftime("%d/%m %H:%M")
            items = sum(item.quantity for item in transaction.items)
            recent.append(f"{when}  {transaction.cashier:<14.14} {items:>3} item {format_rupiah(transaction.total):>14}\n")
        self.query_one("#dashboard-recent", Static).update(recent or "Belum ada transaksi")


class ReportsScreen(BackOfficeScreen):
    SECTION = "reports"

    CSS = BackOfficeScreen.CSS + """
    .report-column {
        width: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.range_name = "week"

    def compose_section(self) -> ComposeResult:
        yield Static(id="report-range")
        with Horizontal():
            with Vertical(classes="report-column"):
                yield Static("Penjualan Harian", classes="pane-title")
                yield Static(id="report-daily")
            with Vertical(classes="report-column"):
                yield Static("Item Terlaris", classes="pane-title")
                yield Static(id="report-top")

    def help_text(self) -> str:
        return "R ganti periode  " + super().help_text()

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if (event.character or "").lower() == "r":
            idx = REPORT_RANGES.index(self.range_name)
            self.range_name = REPORT_RANGES[(idx + 1) % len(REPORT_RANGES)]
            self._refresh_content()
            event.stop()
            return
        super().on_key(event)

    def _refresh_content(self) -> None:
        transactions = self.pos.storage.get_transactions()
        report = daily_sales(transactions, self.range_name, date.today())

        header = Text()
        for idx, name in enumerate(REPORT_RANGES):
            if idx > 0:
                header.append("  ")
            header.append(f" {RANGE_LABELS[name]} ", style="bold reverse" if name == self.range_name else "dim")
        self.query_one("#report-range", Static).update(header)

        daily = Text()
        daily.append(f"{'Tanggal':<12}{'Trx':>5}{'Penjualan':>16}{'Rata-rata':>16}\n", style="bold")
        for row in report.rows:
            daily.append(
                f"{row.day.strftime('%d/%m/%Y'):<12}{row.transactions:>5}"
                f"{format_rupiah(row.sales):>16}{format_rupiah(row.average):>16}\n"
            )
        daily.append(
            f"{'Total':<12}{report.total_transactions:>5}"
            f"{format_rupiah(report.total_sales):>16}{format_rupiah(report.average):>16}",
            style="bold",
        )
        self.query_one("#report-daily", Static).update(daily)

        top = Text()
        for idx, seller in enumerate(top_selling_items(transactions), start=1):
            top.append(
                f"{idx}. {seller.name:<16.16} {seller.quantity:>4}x "
                f"{format_rupiah(seller.revenue):>14} {seller.share_percent:5.1f}%\n"
            )
        self.query_one("#report-top", Static).update(top or "Belum ada penjualan")
