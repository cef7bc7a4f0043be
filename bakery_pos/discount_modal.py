"""Discount picker modal."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from bakery_pos.amount_modal import AmountModal
from bakery_pos.cart import discount_amount
from bakery_pos.constant import DISCOUNT_PRESETS
from bakery_pos.rendering import format_rupiah


class DiscountModal(ModalScreen[float | None]):
    """Pick a preset, enter a custom percentage or amount, or remove the discount.

    Dismisses with the discount in currency, or ``None`` when cancelled.
    """

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "choose", "Apply"),
    ]

    CSS = """
    DiscountModal {
        align: center middle;
        background: $background 60%;
    }

    #discount-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #discount-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #discount-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, current_discount: float, subtotal: float) -> None:
        super().__init__()
        self.current_discount = current_discount
        self.subtotal = subtotal

    def compose(self) -> ComposeResult:
        with Container(id="discount-dialog"):
            yield Static("Terapkan Diskon", id="discount-title")
            yield Static(id="discount-body")
            yield Static("J/K/↑/↓ pindah, Enter terapkan, Esc/q tutup", id="discount-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def _rows(self) -> list[tuple[str, str, float]]:
        rows: list[tuple[str, str, float]] = []
        if self.current_discount > 0:
            rows.append((f"Hapus diskon ({format_rupiah(self.current_discount)})", "remove", 0))
        rows.extend(DISCOUNT_PRESETS)
        rows.append(("Persentase kustom...", "custom_percentage", 0))
        rows.append(("Nominal tetap kustom...", "custom_fixed", 0))
        return rows

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_choose(self) -> None:
        _, kind, value = self._rows()[self.cursor_index]
        if kind == "remove":
            self.dismiss(0)
            return
        if kind in {"percentage", "fixed"}:
            self.dismiss(discount_amount(kind, value, self.subtotal))
            return

        custom_kind = kind.removeprefix("custom_")
        prompt = "Masukkan %" if custom_kind == "percentage" else "Masukkan Rp"

        def on_value(entered: float | None) -> None:
            if entered is None:
                return
            amount = discount_amount(custom_kind, entered, self.subtotal)
            if amount is None:
                self.app.notify("Nilai diskon tidak valid", severity="error")
                return
            self.dismiss(min(amount, self.subtotal))

        self.app.push_screen(AmountModal("Diskon Kustom", prompt, allow_zero=False), on_value)

    def _refresh_content(self) -> None:
        content = Text(style="white")
        content.append(f"Subtotal: {format_rupiah(self.subtotal)}\n\n")
        for idx, (label, kind, value) in enumerate(self._rows()):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            content.append(f"{pointer}{label}")
            if kind in {"percentage", "fixed"}:
                preview = discount_amount(kind, value, self.subtotal) or 0
                content.append(f"  (-{format_rupiah(min(preview, self.subtotal))})", style="dim")
        self.query_one("#discount-body", Static).update(content)
