"""Numeric entry modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class AmountModal(ModalScreen[float | None]):
    """Prompt for a number (cash counted, stock level, custom amounts)."""

    CSS = """
    AmountModal {
        align: center middle;
        background: $background 60%;
    }

    #amount-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #amount-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #amount-prompt {
        color: white;
        margin-bottom: 1;
    }

    #amount-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #amount-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #amount-help {
        color: #dddddd;
    }
    """

    def __init__(
        self,
        title: str,
        prompt: str,
        initial: str = "",
        allow_zero: bool = True,
        allow_decimal: bool = True,
        allow_negative: bool = False,
        max_digits: int = 12,
    ) -> None:
        super().__init__()
        self.title_text = title
        self.prompt = prompt
        self.value = initial
        self.allow_zero = allow_zero
        self.allow_decimal = allow_decimal
        self.allow_negative = allow_negative
        self.max_digits = max_digits
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="amount-dialog"):
            yield Static(self.title_text, id="amount-title")
            yield Static(self.prompt, id="amount-prompt")
            yield Static(id="amount-value")
            yield Static(id="amount-error")
            digits = "Angka, - di awal untuk minus." if self.allow_negative else "Angka saja."
            yield Static(f"{digits} Enter konfirmasi. Backspace hapus. Esc batal.", id="amount-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        char = event.character or ""
        if char == "-" and self.allow_negative and not self.value:
            self.value = "-"
            self.error = ""
            self._refresh_content()
            event.stop()
            return

        if char.isdecimal() or (char == "." and self.allow_decimal and "." not in self.value):
            if len(self.value) < self.max_digits:
                self.value += char
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        if self.value in {"", ".", "-", "-."}:
            self.error = "Nilai wajib diisi."
            self._refresh_content()
            return

        parsed = float(self.value)
        if parsed == 0 and not self.allow_zero:
            self.error = "Nilai harus lebih dari 0."
            self._refresh_content()
            return

        self.dismiss(parsed)

    def _refresh_content(self) -> None:
        value_widget = self.query_one("#amount-value", Static)
        error_widget = self.query_one("#amount-error", Static)
        value_widget.update(self.value or "")
        error_widget.update(self.error or "")
