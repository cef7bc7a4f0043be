"""Shared layout and key handling for the manager back office."""

from __future__ import annotations

from typing import Any, Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from bakery_pos.forms import ConfirmModal
from bakery_pos.rendering import render_selectable
from bakery_pos.screen_base import POSScreen

SECTIONS: list[tuple[str, str]] = [
    ("dashboard", "Dashboard"),
    ("reports", "Laporan"),
    ("inventory", "Inventaris"),
    ("menu", "Menu"),
    ("employees", "Karyawan"),
    ("settings", "Pengaturan"),
]


class BackOfficeScreen(POSScreen):
    """One back-office section with the section bar on top.

    Digits switch sections, ``t`` returns to the tablet and ``o`` logs out.
    """

    SECTION = "dashboard"

    CSS = """
    #section-bar {
        height: 1;
        margin: 0 1;
    }

    #section-body {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(self._section_bar(), id="section-bar")
        with Vertical(id="section-body"):
            yield from self.compose_section()
        yield Static(self.help_text(), id="section-help", classes="help")

    def compose_section(self) -> ComposeResult:
        yield Static(id="section-content")

    def help_text(self) -> str:
        return "1-6 pindah bagian   T tablet   O keluar"

    def on_key(self, event: Key) -> None:
        if self.handle_nav_key(event.character or ""):
            event.stop()

    def handle_nav_key(self, character: str) -> bool:
        if character.isdecimal() and len(character) == 1 and 1 <= int(character) <= len(SECTIONS):
            section = SECTIONS[int(character) - 1][0]
            if section != self.SECTION:
                self.pos.open_back_office(section)
            return True
        key = character.lower()
        if key == "t":
            self.pos.show_sales()
            return True
        if key == "o":
            self.pos.logout()
            return True
        return False

    def _section_bar(self) -> Text:
        bar = Text()
        for idx, (section, label) in enumerate(SECTIONS, start=1):
            if idx > 1:
                bar.append("  ")
            style = "bold reverse" if section == self.SECTION else "dim"
            bar.append(f" {idx} {label} ", style=style)
        return bar


class ListSectionScreen(BackOfficeScreen):
    """Searchable list with a detail pane and add/edit/delete keys.

    Subclasses provide the records, how they match the search text, and how
    rows and details are drawn. Extra single-letter actions go in
    :meth:`section_keys`.
    """

    CSS = BackOfficeScreen.CSS + """
    #list-status {
        height: auto;
        margin-bottom: 1;
    }

    #list-pane {
        width: 3fr;
    }

    #detail-pane {
        width: 2fr;
        border-left: solid $secondary;
        padding: 0 1;
    }

    #record-list {
        height: 1fr;
    }
    """

    input_state = reactive("normal")
    search_query = reactive("")
    selected_index = reactive(0)

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "edit_selected", "Edit"),
        ("backspace", "backspace_query", "Delete query char"),
        ("escape", "cancel_search", "Clear search"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.records: list[Any] = []

    def compose_section(self) -> ComposeResult:
        yield Static(id="list-status")
        with Horizontal():
            with Vertical(id="list-pane"):
                yield Static(id="record-list")
            yield Static(id="detail-pane")

    def help_text(self) -> str:
        return "S cari  J/K pilih  A tambah  E/Enter ubah  D hapus  " + super().help_text()

    def on_mount(self) -> None:
        self.reload()

    # Hooks

    def load_records(self) -> list[Any]:
        raise NotImplementedError

    def filter_records(self, records: list[Any], query: str) -> list[Any]:
        raise NotImplementedError

    def row_text(self, record: Any) -> Text | str:
        raise NotImplementedError

    def detail_text(self, record: Any) -> Text | str:
        return ""

    def filter_label(self) -> str:
        return ""

    def section_keys(self) -> dict[str, Callable[[], None]]:
        return {}

    def add_record(self) -> None:
        raise NotImplementedError

    def edit_record(self, record: Any) -> None:
        raise NotImplementedError

    def delete_record(self, record: Any) -> None:
        raise NotImplementedError

    def record_name(self, record: Any) -> str:
        return str(getattr(record, "name", record))

    # Key handling

    def on_key(self, event: Key) -> None:
        character = event.character or ""
        if self.input_state == "active":
            if event.is_printable and len(character) == 1:
                self.search_query += character
                self.selected_index = 0
                self.refresh_content()
                event.stop()
            return

        if not event.is_printable or len(character) != 1:
            return

        key = character.lower()
        extra = self.section_keys()
        if key in extra:
            extra[key]()
            event.stop()
            return

        if key == "s":
            self.input_state = "active"
            self.refresh_content()
        elif key == "j":
            self.action_move_cursor(1)
        elif key == "k":
            self.action_move_cursor(-1)
        elif key == "a":
            self.add_record()
        elif key == "e":
            self.action_edit_selected()
        elif key == "d":
            self._confirm_delete()
        elif not self.handle_nav_key(character):
            return
        event.stop()

    def action_move_cursor(self, delta: int) -> None:
        visible = self.visible_records()
        if not visible:
            return
        self.selected_index = (self.selected_index + delta) % len(visible)
        self.refresh_content()

    def action_edit_selected(self) -> None:
        if self.input_state == "active":
            self.input_state = "normal"
            self.refresh_content()
            return
        record = self.selected_record()
        if record is not None:
            self.edit_record(record)

    def action_backspace_query(self) -> None:
        if self.input_state != "active" or not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self.refresh_content()

    def action_cancel_search(self) -> None:
        if self.input_state == "active":
            self.input_state = "normal"
        else:
            self.search_query = ""
        self.selected_index = 0
        self.refresh_content()

    def _confirm_delete(self) -> None:
        record = self.selected_record()
        if record is None:
            return

        def on_answer(confirmed: bool | None) -> None:
            if confirmed:
                self.delete_record(record)

        self.app.push_screen(ConfirmModal(f"Hapus {self.record_name(record)}?"), on_answer)

    # Data

    def reload(self) -> None:
        self.records = self.load_records()
        self.refresh_content()

    def visible_records(self) -> list[Any]:
        return self.filter_records(self.records, self.search_query.strip())

    def selected_record(self) -> Any | None:
        visible = self.visible_records()
        if not visible:
            return None
        self.selected_index = min(self.selected_index, len(visible) - 1)
        return visible[self.selected_index]

    def refresh_content(self) -> None:
        try:
            status = self.query_one("#list-status", Static)
            list_widget = self.query_one("#record-list", Static)
            detail = self.query_one("#detail-pane", Static)
        except NoMatches:
            return

        cursor = "▏" if self.input_state == "active" else ""
        status_text = Text()
        status_text.append(f"Cari: {self.search_query}{cursor}", style="bold" if self.input_state == "active" else "")
        label = self.filter_label()
        if label:
            status_text.append(f"   {label}", style="dim")
        status.update(status_text)

        visible = self.visible_records()
        if not visible:
            list_widget.update("Tidak ada data")
            detail.update("")
            return

        self.selected_index = min(self.selected_index, len(visible) - 1)
        list_widget.update(
            render_selectable([self.row_text(record) for record in visible], self.selected_index, self.visible_rows(list_widget))
        )
        detail.update(self.detail_text(visible[self.selected_index]))
