"""Read-only transaction history modal."""

from __future__ import annotations

from datetime import datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from bakery_pos.constant import PAYMENT_METHOD_LABELS
from bakery_pos.models import Transaction
from bakery_pos.rendering import format_rupiah, render_selectable
from bakery_pos.reports import transaction_history


def _short_time(stamp: str) -> str:
    try:
        return datetime.fromisoformat(stamp).astimezone().strftime("%d/%m %H:%M")
    except ValueError:
        return stamp


class HistoryModal(ModalScreen[None]):
    """Browse stored transactions, newest first."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
    ]

    CSS = """
    HistoryModal {
        align: center middle;
        background: $background 60%;
    }

    #history-dialog {
        width: 100;
        height: 80%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #history-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #history-list {
        width: 1fr;
        height: 1fr;
    }

    #history-detail {
        width: 1fr;
        height: 1fr;
        border-left: solid $secondary;
        padding: 0 1;
    }

    #history-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, transactions: list[Transaction]) -> None:
        super().__init__()
        self.transactions = transaction_history(transactions)

    def compose(self) -> ComposeResult:
        with Container(id="history-dialog"):
            yield Static("Riwayat Transaksi", id="history-title")
            with Horizontal():
                yield Static(id="history-list")
                yield Static(id="history-detail")
            yield Static("J/K/↑/↓ pindah, Esc/q tutup", id="history-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        if not self.transactions:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.transactions)
        self._refresh_content()

    def _refresh_content(self) -> None:
        list_widget = self.query_one("#history-list", Static)
        detail_widget = self.query_one("#history-detail", Static)

        if not self.transactions:
            list_widget.update("Belum ada transaksi")
            detail_widget.update("")
            return

        rows = [
            f"{_short_time(t.timestamp)}  {t.cashier:<14.14} {format_rupiah(t.total):>14}" for t in self.transactions
        ]
        height = list_widget.size.height or 12
        list_widget.update(render_selectable(rows, self.cursor_index, height))

        selected = self.transactions[self.cursor_index]
        detail = Text()
        detail.append(f"{selected.order_id}\n", style="bold")
        detail.append(f"Kasir: {selected.cashier}\n")
        detail.append(f"Waktu: {_short_time(selected.timestamp)}\n\n")
        for item in selected.items:
            detail.append(f"{item.quantity}x {item.name:<18.18} {format_rupiah(item.line_total):>12}\n")
        detail.append("\n")
        detail.append(f"Subtotal {format_rupiah(selected.subtotal):>21}\n")
        if selected.discount > 0:
            detail.append(f"Diskon   {'-' + format_rupiah(selected.discount):>21}\n")
        detail.append(f"Pajak    {format_rupiah(selected.tax):>21}\n")
        detail.append(f"Total    {format_rupiah(selected.total):>21}\n", style="bold")
        for payment in selected.payments:
            label = PAYMENT_METHOD_LABELS.get(payment.method, payment.method)
            detail.append(f"{label:<9}{format_rupiah(payment.amount):>21}\n", style="dim")
        detail_widget.update(detail)
