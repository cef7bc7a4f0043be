"""Settings section: edit a draft of every sub-config, then save it."""

from __future__ import annotations

import copy
import logging
from dataclasses import fields
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Static

from bakery_pos.backoffice_base import BackOfficeScreen
from bakery_pos.forms import FormField, RecordFormModal
from bakery_pos.rendering import render_selectable
from bakery_pos.settings import AppSettings, coerce_setting

logger = logging.getLogger(__name__)

SECTION_LABELS: dict[str, str] = {
    "business": "Bisnis",
    "notifications": "Notifikasi",
    "payments": "Pembayaran",
    "printer": "Printer",
    "network": "Jaringan",
}


def setting_rows(settings: AppSettings) -> list[tuple[str, str, Any]]:
    """Flatten settings into ``(section, field, value)`` rows in display order."""
    rows: list[tuple[str, str, Any]] = []
    for section in SECTION_LABELS:
        config = getattr(settings, section)
        for config_field in fields(config):
            rows.append((section, config_field.name, getattr(config, config_field.name)))
    return rows


class SettingsScreen(BackOfficeScreen):
    SECTION = "settings"

    CSS = BackOfficeScreen.CSS + """
    #settings-status {
        height: auto;
        margin-bottom: 1;
    }

    #settings-list {
        height: 1fr;
    }
    """

    selected_index = reactive(0)

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "edit_selected", "Edit"),
        ("ctrl+s", "save", "Simpan"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.draft = AppSettings()
        self.dirty = False

    def compose_section(self) -> ComposeResult:
        yield Static(id="settings-status")
        yield Static(id="settings-list")

    def help_text(self) -> str:
        return "J/K pilih  Enter ubah (ya/tidak dibalik)  W/Ctrl+S simpan  " + super().help_text()

    def on_mount(self) -> None:
        self.draft = copy.deepcopy(self.pos.storage.get_settings())
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        key = (event.character or "").lower()
        if key == "j":
            self.action_move_cursor(1)
        elif key == "k":
            self.action_move_cursor(-1)
        elif key == "e":
            self.action_edit_selected()
        elif key == "w":
            self.action_save()
        elif not self.handle_nav_key(event.character or ""):
            return
        event.stop()

    def action_move_cursor(self, delta: int) -> None:
        rows = setting_rows(self.draft)
        self.selected_index = (self.selected_index + delta) % len(rows)
        self._refresh_content()

    def action_edit_selected(self) -> None:
        section, name, value = setting_rows(self.draft)[self.selected_index]
        if isinstance(value, bool):
            self._set_value(section, name, not value)
            return

        def on_values(values: dict[str, Any] | None) -> None:
            if values is None:
                return
            try:
                parsed = coerce_setting(value, values[name] or "")
            except ValueError:
                self.toast(f"Nilai tidak valid untuk {name}", severity="error")
                return
            self._set_value(section, name, parsed)

        form = RecordFormModal(
            f"{SECTION_LABELS[section]}: {name}",
            [FormField(name, name, value, required=False)],
        )
        self.app.push_screen(form, on_values)

    def action_save(self) -> None:
        self.pos.storage.save_settings(self.draft)
        self.pos.reload_settings()
        self.dirty = False
        logger.info("settings saved")
        self.toast("Pengaturan berhasil disimpan")
        self._refresh_content()

    def _set_value(self, section: str, name: str, value: Any) -> None:
        setattr(getattr(self.draft, section), name, value)
        self.dirty = True
        self._refresh_content()

    def _refresh_content(self) -> None:
        status = self.query_one("#settings-status", Static)
        list_widget = self.query_one("#settings-list", Static)

        if self.dirty:
            status.update(Text("Ada perubahan yang belum disimpan", style="bold #e08a3c"))
        else:
            status.update(Text("Semua perubahan tersimpan", style="dim"))

        lines: list[Text | str] = []
        for section, name, value in setting_rows(self.draft):
            line = Text()
            line.append(f"{SECTION_LABELS[section]:<11}", style="dim")
            line.append(f"{name:<24}")
            if isinstance(value, bool):
                line.append("Ya" if value else "Tidak", style="bold" if value else "")
            else:
                line.append(str(value))
            lines.append(line)
        list_widget.update(render_selectable(lines, self.selected_index, self.visible_rows(list_widget, fallback=20)))
