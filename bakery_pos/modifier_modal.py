"""Modifier and special-notes modal for one menu item."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from bakery_pos.constant import MODIFIER_OPTIONS
from bakery_pos.models import MenuItem
from bakery_pos.rendering import format_rupiah

ModifierChoice = tuple[list[str], str]


class ModifierModal(ModalScreen[ModifierChoice | None]):
    """Toggle modifiers and type a note, then add the item to the cart."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "toggle_current", "Toggle"),
        ("a", "confirm", "Add"),
    ]

    CSS = """
    ModifierModal {
        align: center middle;
        background: $background 60%;
    }

    #modifier-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #modifier-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #modifier-body {
        margin-bottom: 1;
        color: white;
    }

    #modifier-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)
    _NOTES_ROW = "__notes__"

    def __init__(self, item: MenuItem) -> None:
        super().__init__()
        self.item = item
        # Selection order matters: two lines only merge on identical modifier order.
        self.selected: list[str] = []
        self.notes = ""
        self.typing_notes = False

    def compose(self) -> ComposeResult:
        with Container(id="modifier-dialog"):
            yield Static(f"{self.item.name}  {format_rupiah(self.item.price)}", id="modifier-title")
            yield Static(id="modifier-body")
            yield Static(id="modifier-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if not self.typing_notes:
            return

        if event.key == "escape":
            self.typing_notes = False
            self._refresh_content()
            event.stop()
            return

        if event.key == "enter":
            self.notes = self.notes.strip()
            self.typing_notes = False
            self._refresh_content()
            event.stop()
            return

        if event.key == "backspace":
            self.notes = self.notes[:-1]
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.notes += event.character
            self._refresh_content()
            event.stop()
            return

        # Ignore all non-text keys while typing.
        event.stop()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_confirm(self) -> None:
        self.dismiss((list(self.selected), self.notes.strip()))

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_toggle_current(self) -> None:
        _, value = self._rows()[self.cursor_index]
        if value == self._NOTES_ROW:
            self.typing_notes = True
        elif value in self.selected:
            self.selected.remove(value)
        else:
            self.selected.append(value)
        self._refresh_content()

    def _rows(self) -> list[tuple[str, str]]:
        rows = [(category, option) for category, options in MODIFIER_OPTIONS.items() for option in options]
        rows.append(("Catatan Khusus", self._NOTES_ROW))
        return rows

    def _refresh_content(self) -> None:
        body = self.query_one("#modifier-body", Static)
        help_text = self.query_one("#modifier-help", Static)

        content = Text(style="white")
        last_category = None
        for idx, (category, value) in enumerate(self._rows()):
            if category != last_category:
                if last_category is not None:
                    content.append("\n")
                content.append(f"{category}\n", style="bold")
                last_category = category
            pointer = "➤ " if idx == self.cursor_index else "  "
            if value == self._NOTES_ROW:
                cursor = "|" if self.typing_notes else ""
                content.append(f"{pointer}{self.notes or '(tanpa catatan)'}{cursor}\n")
                continue
            checked = "[x]" if value in self.selected else "[ ]"
            style = "bold white" if value in self.selected else "white"
            content.append(f"{pointer}{checked} {value}\n", style=style)

        if self.typing_notes:
            help_text.update("Ketik catatan, Enter selesai, Esc batal")
        else:
            help_text.update("J/K/↑/↓ pindah, Enter pilih, A tambah ke pesanan, Esc/q tutup")
        body.update(content)
