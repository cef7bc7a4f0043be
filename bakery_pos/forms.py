"""Record form and confirmation modals used by the back office."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Input, Static


@dataclass
class FormField:
    """One editable value. ``kind`` is text, int, float, pin or choice."""

    key: str
    label: str
    value: Any = ""
    kind: str = "text"
    required: bool = True
    choices: list[str] = field(default_factory=list)


def parse_form(fields: list[FormField], raw: dict[str, str]) -> tuple[dict[str, Any], dict[str, str]]:
    """Convert typed text into values; returns ``(values, errors)``.

    ``errors`` maps field keys to messages and is empty when the form is valid.
    """
    values: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for form_field in fields:
        text = raw.get(form_field.key, "").strip()
        if not text:
            if form_field.required:
                errors[form_field.key] = f"{form_field.label} wajib diisi"
            else:
                values[form_field.key] = None
            continue

        if form_field.kind == "int":
            try:
                values[form_field.key] = int(text)
            except ValueError:
                errors[form_field.key] = f"{form_field.label} harus bilangan bulat"
                continue
            if values[form_field.key] < 0:
                errors[form_field.key] = f"{form_field.label} tidak boleh negatif"
        elif form_field.kind == "float":
            try:
                values[form_field.key] = float(text)
            except ValueError:
                errors[form_field.key] = f"{form_field.label} harus berupa angka"
                continue
            if values[form_field.key] < 0:
                errors[form_field.key] = f"{form_field.label} tidak boleh negatif"
        elif form_field.kind == "pin":
            if len(text) != 4 or not text.isdecimal():
                errors[form_field.key] = "PIN harus 4 digit angka"
            values[form_field.key] = text
        elif form_field.kind == "choice":
            if text not in form_field.choices:
                errors[form_field.key] = f"{form_field.label} harus salah satu dari: {', '.join(form_field.choices)}"
            values[form_field.key] = text
        else:
            values[form_field.key] = text
    return values, errors


class RecordFormModal(ModalScreen[dict[str, Any] | None]):
    """Edit a flat record. Dismisses with parsed values, or ``None`` on cancel."""

    BINDINGS = [
        Binding("ctrl+s", "save", "Simpan", priority=True),
        Binding("escape", "cancel", "Batal", priority=True),
    ]

    CSS = """
    RecordFormModal {
        align: center middle;
        background: $background 60%;
    }

    #form-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #form-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .form-row {
        height: 3;
    }

    .form-label {
        width: 22;
        padding: 1 1 0 0;
    }

    .form-row Input {
        width: 1fr;
    }

    #form-error {
        color: #ffb3b3;
        height: auto;
        margin-top: 1;
    }
    """

    def __init__(self, title: str, fields: list[FormField]) -> None:
        super().__init__()
        self.title_text = title
        self.fields = fields

    def compose(self) -> ComposeResult:
        with Container(id="form-dialog"):
            yield Static(self.title_text, id="form-title")
            for form_field in self.fields:
                label = form_field.label if form_field.required else f"{form_field.label} (opsional)"
                placeholder = " / ".join(form_field.choices) if form_field.choices else ""
                value = "" if form_field.value is None else str(form_field.value)
                with Horizontal(classes="form-row"):
                    yield Static(label, classes="form-label")
                    yield Input(value=value, placeholder=placeholder, id=f"field-{form_field.key}")
            yield Static(id="form-error")
            yield Static("Tab pindah kolom, Ctrl+S simpan, Esc batal", classes="help")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.focus_next()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def action_save(self) -> None:
        raw = {
            form_field.key: self.query_one(f"#field-{form_field.key}", Input).value for form_field in self.fields
        }
        values, errors = parse_form(self.fields, raw)
        if errors:
            self.query_one("#form-error", Static).update("\n".join(errors.values()))
            return
        self.dismiss(values)


class ConfirmModal(ModalScreen[bool]):
    """Yes/no question."""

    BINDINGS = [
        ("y", "answer(True)", "Ya"),
        ("enter", "answer(True)", "Ya"),
        ("n", "answer(False)", "Tidak"),
        ("escape", "answer(False)", "Tidak"),
    ]

    CSS = """
    ConfirmModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 56;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }
    """

    def __init__(self, question: str) -> None:
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static(self.question)
            yield Static("Y/Enter ya   N/Esc tidak", classes="help")

    def action_answer(self, value: bool) -> None:
        self.dismiss(value)
