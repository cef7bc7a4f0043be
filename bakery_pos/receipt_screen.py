"""Receipt screen shown after a completed payment."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.widgets import Header, Static

from bakery_pos.models import Order, Payment, Transaction
from bakery_pos.receipt import build_transaction, receipt_lines
from bakery_pos.screen_base import POSScreen

logger = logging.getLogger(__name__)


class ReceiptScreen(POSScreen):
    """Stores the sale on entry, then offers print / no receipt / new order."""

    CSS = """
    ReceiptScreen {
        align: center middle;
    }

    #receipt-dialog {
        width: 48;
        height: auto;
        max-height: 100%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #receipt-title {
        text-style: bold;
        color: #7bd88f;
        margin-bottom: 1;
    }

    #receipt-body {
        border: tall $surface;
        padding: 0 1;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("enter", "new_order", "Pesanan Baru"),
    ]

    def __init__(self, order: Order, payments: list[Payment]) -> None:
        super().__init__()
        self.order = order
        self.payments = payments
        self.transaction: Transaction | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="receipt-dialog"):
            yield Static("Pembayaran Berhasil", id="receipt-title")
            yield Static(id="receipt-body")
            yield Static("P cetak struk   N tanpa struk   Enter pesanan baru", classes="help")

    def on_mount(self) -> None:
        cashier = self.pos.current_user.name if self.pos.current_user else "Unknown"
        self.transaction = build_transaction(self.order, cashier, self.payments)
        self.pos.storage.add_transaction(self.transaction)
        logger.info("transaction saved id=%s total=%s cashier=%s", self.transaction.id, self.transaction.total, cashier)

        self.query_one("#receipt-body", Static).update("\n".join(self._lines()))
        if self.pos.settings.printer.printer_enabled and self.pos.settings.printer.auto_print_receipts:
            self.pos.print_document(self._lines(), "Struk")

    def on_key(self, event: Key) -> None:
        character = (event.character or "").lower()
        if character == "p":
            self.pos.print_document(self._lines(), "Struk")
            event.stop()
        elif character == "n":
            self.toast("Transaksi selesai tanpa struk")
            self.pos.new_order()
            event.stop()

    def action_new_order(self) -> None:
        self.pos.new_order()

    def _lines(self) -> list[str]:
        if self.transaction is None:
            return []
        return receipt_lines(self.transaction, self.pos.settings.business)
