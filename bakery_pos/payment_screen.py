"""Split-payment screen."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from bakery_pos.constant import PAYMENT_METHOD_LABELS, QUICK_CASH_AMOUNTS
from bakery_pos.models import Order
from bakery_pos.payment import PaymentSession
from bakery_pos.rendering import format_line_label, format_order_summary, format_rupiah, window_bounds
from bakery_pos.screen_base import POSScreen

logger = logging.getLogger(__name__)

_QUICK_KEYS = ("z", "x", "c", "v")
COMPLETE_DELAY = 0.5


class PaymentScreen(POSScreen):
    """Collect one or more payments until the order total is covered."""

    CSS = """
    #payment-layout {
        height: 1fr;
    }

    #order-pane {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }

    #pay-pane {
        width: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #amount-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin: 1 0;
        height: 3;
    }

    #payments-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }
    """

    payment_selected_index = reactive(None)

    BINDINGS = [
        ("enter", "complete", "Selesaikan"),
        ("escape", "back", "Kembali"),
        ("backspace", "backspace_amount", "Hapus"),
    ]

    def __init__(self, order: Order) -> None:
        super().__init__()
        self.order = order
        self.session = PaymentSession(order.total)
        self.methods: list[str] = []
        self.method = "cash"
        self.amount_text = ""
        self.completing = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="payment-layout"):
            with Vertical(id="order-pane"):
                yield Static("Ringkasan Pesanan", classes="pane-title")
                yield Static(id="order-lines")
                yield Static(id="order-summary")
            with Vertical(id="pay-pane"):
                yield Static("Pembayaran", classes="pane-title")
                yield Static(id="balance")
                yield Static(id="method-bar")
                yield Static(id="amount-bar")
                yield Static(id="payments-list")
                yield Static(
                    "M metode  angka nominal  Z/X/C/V cepat  A tambah  F bayar sisa\n"
                    "J/K pilih  D hapus pembayaran  Enter selesai  Esc kembali",
                    classes="help",
                )

    def on_mount(self) -> None:
        payments = self.pos.settings.payments
        self.methods = payments.enabled_methods() or ["cash"]
        default = payments.default_payment_method
        self.method = default if default in self.methods else self.methods[0]
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if self.completing:
            event.stop()
            return

        character = event.character or ""
        if character.isdecimal() and len(character) == 1:
            if len(self.amount_text) < 12:
                self.amount_text += character
            self._refresh_amount()
            event.stop()
            return

        if not event.is_printable or len(character) != 1 or not character.isalpha():
            return

        key = character.lower()
        if key in _QUICK_KEYS:
            self.amount_text = str(QUICK_CASH_AMOUNTS[_QUICK_KEYS.index(key)])
            self._refresh_amount()
        elif key == "m":
            self._cycle_method()
        elif key == "a":
            self._add_payment()
        elif key == "f":
            self._pay_remaining()
        elif key == "j":
            self._move_payment_selection(1)
        elif key == "k":
            self._move_payment_selection(-1)
        elif key == "d":
            self._remove_selected_payment()
        else:
            return
        event.stop()

    def action_backspace_amount(self) -> None:
        if self.amount_text:
            self.amount_text = self.amount_text[:-1]
            self._refresh_amount()

    def action_back(self) -> None:
        if self.completing:
            return
        self.pos.show_sales()

    def action_complete(self) -> None:
        if self.completing:
            return
        if not self.session.can_complete:
            self.toast("Pembayaran belum lengkap", severity="error")
            return
        self.completing = True
        logger.info("payment complete total=%s payments=%s", self.order.total, len(self.session.payments))
        self.toast("Pembayaran berhasil!")
        payments = list(self.session.payments)
        self.set_timer(COMPLETE_DELAY, lambda: self.pos.complete_payment(self.order, payments))

    def _entered_amount(self) -> float | None:
        if not self.amount_text:
            return None
        return float(self.amount_text)

    def _cycle_method(self) -> None:
        idx = self.methods.index(self.method) if self.method in self.methods else -1
        self.method = self.methods[(idx + 1) % len(self.methods)]
        self._refresh_amount()

    def _add_payment(self) -> None:
        amount = self._entered_amount()
        if amount is None:
            self.toast("Masukkan nominal pembayaran", severity="warning")
            return
        if not self.session.add_payment(self.method, amount):
            self.toast("Jumlah pembayaran tidak valid", severity="error")
            return
        self.toast(f"Pembayaran {PAYMENT_METHOD_LABELS.get(self.method, self.method)} ditambahkan")
        self.amount_text = ""
        self.payment_selected_index = len(self.session.payments) - 1
        self._refresh_all()

    def _pay_remaining(self) -> None:
        if self.session.remaining <= 0:
            return
        tendered = self._entered_amount()
        remaining = self.session.remaining
        if not self.session.pay_remaining(self.method, tendered):
            self.toast("Jumlah tunai tidak cukup", severity="error")
            return
        if self.method == "cash" and tendered is not None and tendered > remaining:
            self.toast(f"Kembalian: {format_rupiah(tendered - remaining)}")
        self.amount_text = ""
        self.payment_selected_index = len(self.session.payments) - 1
        self._refresh_all()

    def _move_payment_selection(self, delta: int) -> None:
        count = len(self.session.payments)
        if not count:
            return
        if self.payment_selected_index is None:
            self.payment_selected_index = 0 if delta > 0 else count - 1
        else:
            self.payment_selected_index = (self.payment_selected_index + delta) % count
        self._refresh_payments()

    def _remove_selected_payment(self) -> None:
        if self.payment_selected_index is None:
            return
        if not self.session.remove_payment(self.payment_selected_index):
            return
        count = len(self.session.payments)
        self.payment_selected_index = min(self.payment_selected_index, count - 1) if count else None
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_order()
        self._refresh_balance()
        self._refresh_amount()
        self._refresh_payments()

    def _refresh_order(self) -> None:
        try:
            lines_widget = self.query_one("#order-lines", Static)
            summary_widget = self.query_one("#order-summary", Static)
        except NoMatches:
            return
        lines = Text()
        for idx, item in enumerate(self.order.items):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_line_label(item))
            lines.append(f"   {format_rupiah(item.line_total)}")
        lines_widget.update(lines)
        summary_widget.update(format_order_summary(self.order))

    def _refresh_balance(self) -> None:
        try:
            widget = self.query_one("#balance", Static)
        except NoMatches:
            return
        text = Text()
        text.append(f"Total      {format_rupiah(self.session.total):>16}\n")
        text.append(f"Dibayar    {format_rupiah(self.session.total_paid):>16}\n")
        remaining_style = "bold #7bd88f" if self.session.can_complete else "bold #ff8a8a"
        text.append(f"Sisa       {format_rupiah(max(0.0, self.session.remaining)):>16}", style=remaining_style)
        widget.update(text)

    def _refresh_amount(self) -> None:
        try:
            method_widget = self.query_one("#method-bar", Static)
            amount_widget = self.query_one("#amount-bar", Static)
        except NoMatches:
            return
        methods = Text()
        for idx, method in enumerate(self.methods):
            if idx > 0:
                methods.append("  ")
            label = f" {PAYMENT_METHOD_LABELS.get(method, method)} "
            methods.append(label, style="bold reverse" if method == self.method else "dim")
        methods.append("\nCepat: " + "  ".join(
            f"{key.upper()}={format_rupiah(amount)}" for key, amount in zip(_QUICK_KEYS, QUICK_CASH_AMOUNTS)
        ), style="dim")
        method_widget.update(methods)

        amount = self._entered_amount()
        text = f"Nominal: {format_rupiah(amount) if amount is not None else ''}"
        if self.method == "cash" and amount is not None and amount > self.session.remaining > 0:
            text += f"   Kembalian {format_rupiah(self.session.change_due(amount))}"
        amount_widget.update(text)

    def _refresh_payments(self) -> None:
        try:
            widget = self.query_one("#payments-list", Static)
        except NoMatches:
            return
        payments = self.session.payments
        if not payments:
            self.payment_selected_index = None
            widget.update("(belum ada pembayaran)")
            return
        start, end = window_bounds(len(payments), self.visible_rows(widget), self.payment_selected_index)
        lines = Text()
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.payment_selected_index else "  "
            payment = payments[idx]
            label = PAYMENT_METHOD_LABELS.get(payment.method, payment.method)
            lines.append(f"{pointer}{label:<10}{format_rupiah(payment.amount):>16}")
        widget.update(lines)
