"""Sales screen: menu search on the right, the current cart on the left."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from bakery_pos.cart import add_item, apply_discount, change_quantity, remove_item
from bakery_pos.data import search_menu
from bakery_pos.discount_modal import DiscountModal
from bakery_pos.history_modal import HistoryModal
from bakery_pos.models import MenuItem, Order
from bakery_pos.modifier_modal import ModifierChoice, ModifierModal
from bakery_pos.rendering import badge_style, format_line_label, format_order_summary, format_rupiah, window_bounds
from bakery_pos.screen_base import POSScreen

logger = logging.getLogger(__name__)


class SalesScreen(POSScreen):
    """Build an order by searching the menu and adjusting cart lines."""

    CSS = """
    #main-layout {
        height: 1fr;
    }

    #cart-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #search-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 3;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-summary {
        height: auto;
        margin-top: 1;
    }
    """

    input_state = reactive("normal")
    search_by_code = reactive(False)
    search_query = reactive("")
    selected_index = reactive(0)
    line_selected_index = reactive(None)

    BINDINGS = [
        ("tab", "cycle_results(1)", "Next result"),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "add_selected", "Add item"),
        ("ctrl+e", "customize_selected", "Modifiers"),
        ("backspace", "backspace_query", "Delete query char"),
        ("escape", "cancel_search", "Exit search"),
        ("ctrl+c", "cancel_search", "Exit search"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.menu: list[MenuItem] = []

    @property
    def order(self) -> Order:
        return self.pos.current_order

    @order.setter
    def order(self, value: Order) -> None:
        self.pos.current_order = value

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="cart-pane"):
                yield Static(id="cart-title", classes="pane-title")
                yield Static(id="cart-list")
                yield Static(id="cart-summary")
                yield Static(
                    "J/K pilih  +/- jumlah  D hapus  T diskon  P bayar  H riwayat  R laporan shift  O keluar",
                    classes="help",
                )
            with Vertical(id="search-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        self.menu = self.pos.storage.get_menu()
        if self.order.items:
            self.line_selected_index = 0
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        character = event.character or ""
        if self.input_state == "active":
            if event.is_printable and len(character) == 1:
                self.search_query += character
                self.selected_index = 0
                self._refresh_search()
                event.stop()
            return

        if character in {"+", "="}:
            self._change_selected_quantity(1)
            event.stop()
            return
        if character == "-":
            self._change_selected_quantity(-1)
            event.stop()
            return

        if not event.is_printable or len(character) != 1 or not character.isalnum():
            return

        key = character.lower()
        handlers = {
            "j": lambda: self._move_line_selection(1),
            "k": lambda: self._move_line_selection(-1),
            "d": self._delete_selected_line,
            "t": self._open_discount,
            "p": self._checkout,
            "h": self._open_history,
            "r": self.pos.show_shift_report,
            "b": self._open_back_office,
            "o": self.pos.logout,
        }
        if key in handlers:
            handlers[key]()
            event.stop()
            return

        if key not in {"s", "c"}:
            return

        self.search_by_code = key == "c"
        self.input_state = "active"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()
        event.stop()

    def action_cancel_search(self) -> None:
        if self.input_state == "normal":
            return
        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if self.input_state != "active":
            self._move_line_selection(delta)
            return

        results = self._filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_add_selected(self) -> None:
        item = self._selected_result()
        if item is None:
            return
        self._add(item)

    def action_customize_selected(self) -> None:
        item = self._selected_result()
        if item is None:
            return

        def on_choice(choice: ModifierChoice | None) -> None:
            if choice is None:
                return
            modifiers, notes = choice
            self._add(item, modifiers, notes)

        self.app.push_screen(ModifierModal(item), on_choice)

    def action_backspace_query(self) -> None:
        if self.input_state != "active" or not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_search()

    def _add(self, item: MenuItem, modifiers: list[str] | tuple[str, ...] = (), notes: str = "") -> None:
        self.order = add_item(self.order, item, modifiers, notes)
        self.line_selected_index = next(
            (
                idx
                for idx, line in enumerate(self.order.items)
                if line.id == item.id and line.modifiers == tuple(modifiers) and line.notes == (notes or "")
            ),
            len(self.order.items) - 1,
        )
        logger.info("cart add item=%s lines=%s total=%s", item.id, len(self.order.items), self.order.total)
        self.toast(f"{item.name} ditambahkan ke pesanan")
        self._refresh_cart()

    def _selected_result(self) -> MenuItem | None:
        if self.input_state != "active":
            return None
        results = self._filtered_results()
        if not results:
            return None
        return results[self.selected_index % len(results)]

    def _filtered_results(self) -> list[MenuItem]:
        return search_menu(self.menu, self.search_query, by_code=self.search_by_code)

    def _move_line_selection(self, delta: int) -> None:
        count = len(self.order.items)
        if not count:
            return
        if self.line_selected_index is None:
            self.line_selected_index = 0 if delta > 0 else count - 1
        else:
            self.line_selected_index = (self.line_selected_index + delta) % count
        self._refresh_cart()

    def _change_selected_quantity(self, delta: int) -> None:
        if self.line_selected_index is None:
            return
        self.order = change_quantity(self.order, self.line_selected_index, delta)
        self._clamp_line_selection()
        self._refresh_cart()

    def _delete_selected_line(self) -> None:
        if self.line_selected_index is None:
            return
        self.order = remove_item(self.order, self.line_selected_index)
        self._clamp_line_selection()
        self._refresh_cart()

    def _clamp_line_selection(self) -> None:
        if not self.order.items:
            self.line_selected_index = None
        elif self.line_selected_index is not None:
            self.line_selected_index = min(self.line_selected_index, len(self.order.items) - 1)

    def _open_discount(self) -> None:
        if self.order.is_empty:
            self.toast("Keranjang kosong", severity="warning")
            return

        def on_discount(amount: float | None) -> None:
            if amount is None:
                return
            self.order = apply_discount(self.order, amount)
            if amount > 0:
                self.toast(f"Diskon {format_rupiah(self.order.discount)} diterapkan")
            self._refresh_cart()

        self.app.push_screen(DiscountModal(self.order.discount, self.order.subtotal), on_discount)

    def _checkout(self) -> None:
        if self.order.is_empty:
            self.toast("Keranjang kosong. Tambahkan item terlebih dahulu.", severity="error")
            return
        self.pos.checkout(self.order)

    def _open_history(self) -> None:
        self.app.push_screen(HistoryModal(self.pos.storage.get_transactions()))

    def _open_back_office(self) -> None:
        self.pos.open_back_office()

    def _refresh_all(self) -> None:
        self._refresh_cart()
        self._refresh_search()

    def _refresh_cart(self) -> None:
        try:
            title = self.query_one("#cart-title", Static)
            cart_widget = self.query_one("#cart-list", Static)
            summary_widget = self.query_one("#cart-summary", Static)
        except NoMatches:
            return

        heading = Text("Pesanan Saat Ini")
        user = self.pos.current_user
        if user is not None:
            heading.append(f"   Kasir: {user.name} ")
            if user.is_manager:
                heading.append(" Manager ", style=badge_style("manager"))
        title.update(heading)
        summary_widget.update(format_order_summary(self.order))

        items = self.order.items
        if not items:
            self.line_selected_index = None
            cart_widget.update("(keranjang kosong)")
            return

        visible_rows = self.visible_rows(cart_widget)
        start, end = window_bounds(len(items), visible_rows, self.line_selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.line_selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_line_label(items[idx]))
            lines.append(f"   {format_rupiah(items[idx].line_total)}", style="bold")
        if end < len(items):
            lines.append("\n⋮", style="dim")
        cart_widget.update(lines)

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            bar.update("S: cari nama   C: cari kode")
            return
        label = "Kode" if self.search_by_code else "Nama"
        bar.update(f"{label}: {self.search_query}▏")

    def _refresh_results(self, results: list[MenuItem]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return

        if self.input_state == "normal":
            results_widget.update(
                "Tekan S atau C untuk mencari menu.\n"
                "Enter tambah, Ctrl+E modifier, Tab/↑/↓ pindah, Esc keluar."
            )
            return
        if not results:
            results_widget.update("Menu tidak ditemukan")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self.visible_rows(results_widget)
        start, end = window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            item = results[idx]
            pointer = "➤ " if idx == self.selected_index else "  "
            style = "bold" if idx == self.selected_index else ""
            lines.append(f"{pointer}{item.code:<4} {item.name:<18} {format_rupiah(item.price):>10}", style=style)
        if end < len(results):
            lines.append("\n⋮", style="dim")
        results_widget.update(lines)
