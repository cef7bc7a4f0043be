"""End-of-shift report for the logged-in cashier."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Key
from textual.widgets import Header, Static

from bakery_pos.amount_modal import AmountModal
from bakery_pos.constant import PAYMENT_METHOD_LABELS
from bakery_pos.rendering import format_rupiah
from bakery_pos.screen_base import POSScreen
from bakery_pos.shift_report import ShiftSummary, shift_report_lines, summarize_shift


class ShiftReportScreen(POSScreen):
    CSS = """
    #shift-layout {
        height: 1fr;
    }

    #shift-left, #shift-right {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }
    """

    BINDINGS = [
        ("escape", "back", "Kembali"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.summary: ShiftSummary | None = None
        self.cash_counted: float | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="shift-layout"):
            with Vertical(id="shift-left"):
                yield Static("Laporan Shift", classes="pane-title")
                yield Static(id="shift-totals")
                yield Static(id="shift-cash")
            with Vertical(id="shift-right"):
                yield Static("Item Terlaris", classes="pane-title")
                yield Static(id="shift-top")
                yield Static("Per Jam", classes="pane-title")
                yield Static(id="shift-hourly")
        yield Static("C hitung kas   P cetak laporan   Esc kembali", classes="help")

    def on_mount(self) -> None:
        cashier = self.pos.current_user.name if self.pos.current_user else ""
        self.summary = summarize_shift(cashier, self.pos.storage.get_transactions())
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        character = (event.character or "").lower()
        if character == "c":
            self.app.push_screen(AmountModal("Hitung Kas", "Jumlah tunai di laci (Rp)"), self._on_cash_counted)
            event.stop()
        elif character == "p":
            if self.summary is not None:
                self.pos.print_document(shift_report_lines(self.summary, self.cash_counted), "Laporan shift")
            event.stop()

    def action_back(self) -> None:
        self.pos.show_sales()

    def _on_cash_counted(self, value: float | None) -> None:
        if value is None:
            return
        self.cash_counted = value
        self._refresh_content()

    def _refresh_content(self) -> None:
        summary = self.summary
        if summary is None:
            return

        totals = Text()
        totals.append(f"Kasir: {summary.cashier}\n", style="bold")
        totals.append(f"Mulai: {summary.start_time.strftime('%d/%m/%Y %H:%M')}\n")
        totals.append(f"Sampai: {summary.current_time.strftime('%d/%m/%Y %H:%M')}\n\n")
        totals.append(f"Total Penjualan {format_rupiah(summary.total_sales):>18}\n", style="bold")
        totals.append(f"Transaksi       {summary.transactions:>18}\n")
        totals.append(f"Rata-rata       {format_rupiah(summary.average_transaction):>18}\n\n")
        for method, label in PAYMENT_METHOD_LABELS.items():
            totals.append(f"{label:<16}{format_rupiah(summary.sales_by_method.get(method, 0)):>18}\n")
        self.query_one("#shift-totals", Static).update(totals)

        cash = Text()
        cash.append(f"\nKas diharapkan  {format_rupiah(summary.cash_expected):>18}\n")
        if self.cash_counted is None:
            cash.append("Tekan C untuk memasukkan kas yang dihitung", style="dim")
        else:
            difference = summary.cash_difference(self.cash_counted)
            style = "bold #7bd88f" if summary.is_cash_balanced(self.cash_counted) else "bold #ff8a8a"
            cash.append(f"Kas dihitung    {format_rupiah(self.cash_counted):>18}\n")
            cash.append(f"Selisih         {format_rupiah(difference):>18}", style=style)
        self.query_one("#shift-cash", Static).update(cash)

        top = Text()
        if not summary.top_items:
            top.append("Belum ada penjualan", style="dim")
        for idx, item in enumerate(summary.top_items, start=1):
            if idx > 1:
                top.append("\n")
            top.append(f"{idx}. {item.name:<18.18} {item.quantity:>4}x {format_rupiah(item.revenue):>12}")
        self.query_one("#shift-top", Static).update(top)

        hourly = Text()
        for idx, bucket in enumerate(summary.hourly_breakdown):
            if idx > 0:
                hourly.append("\n")
            hourly.append(f"{bucket.label:<14} {bucket.transactions:>3} trx {format_rupiah(bucket.sales):>14}")
        self.query_one("#shift-hourly", Static).update(hourly)
