"""Menu section: prices, costs, availability."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from rich.text import Text

from bakery_pos.backoffice_base import ListSectionScreen
from bakery_pos.data import categories, filter_menu, new_record_id
from bakery_pos.forms import FormField, RecordFormModal
from bakery_pos.models import MenuItem
from bakery_pos.rendering import badge_style, format_rupiah

logger = logging.getLogger(__name__)


class MenuScreen(ListSectionScreen):
    SECTION = "menu"

    def __init__(self) -> None:
        super().__init__()
        self.category = "all"

    def help_text(self) -> str:
        return "F kategori  V tersedia/habis  " + super().help_text()

    def load_records(self) -> list[MenuItem]:
        return self.pos.storage.get_menu()

    def filter_records(self, records: list[MenuItem], query: str) -> list[MenuItem]:
        return filter_menu(records, query, self.category)

    def filter_label(self) -> str:
        return f"Kategori: {self.category}"

    def section_keys(self) -> dict[str, Callable[[], None]]:
        return {"f": self._cycle_category, "v": self._toggle_available}

    def row_text(self, item: MenuItem) -> Text:
        text = Text()
        style = "" if item.available else "dim"
        text.append(f"{item.code:<4} {item.name:<18.18} {format_rupiah(item.price):>10} ", style=style)
        if not item.available:
            text.append(" Habis ", style=badge_style("inactive"))
        return text

    def detail_text(self, item: MenuItem) -> Text:
        text = Text()
        text.append(f"{item.name}\n", style="bold")
        text.append(f"Kode: {item.code or '-'}\n")
        text.append(f"Kategori: {item.category}\n")
        text.append(f"Harga: {format_rupiah(item.price)}\n")
        text.append(f"Biaya: {format_rupiah(item.cost)}\n")
        text.append(f"Margin: {item.margin_percent:.1f}%\n")
        text.append(f"Status: {'Tersedia' if item.available else 'Habis'}\n")
        return text

    def _cycle_category(self) -> None:
        options = categories(self.records)
        idx = options.index(self.category) if self.category in options else 0
        self.category = options[(idx + 1) % len(options)]
        self.selected_index = 0
        self.refresh_content()

    def _toggle_available(self) -> None:
        item = self.selected_record()
        if item is None:
            return
        self.pos.storage.update_menu_item(replace(item, available=not item.available))
        logger.info("menu availability item=%s available=%s", item.id, not item.available)
        self.toast("Ketersediaan item diperbarui")
        self.reload()

    def _form_fields(self, item: MenuItem | None) -> list[FormField]:
        return [
            FormField("name", "Nama", item.name if item else ""),
            FormField("code", "Kode", item.code if item else "", required=False),
            FormField("category", "Kategori", item.category if item else "Kue"),
            FormField("price", "Harga", item.price if item else "", kind="float"),
            FormField("cost", "Biaya", item.cost if item else 0, kind="float"),
        ]

    @staticmethod
    def _clean(values: dict[str, Any]) -> dict[str, Any]:
        values = dict(values)
        values["code"] = (values.get("code") or "").upper()
        return values

    def add_record(self) -> None:
        def on_values(values: dict[str, Any] | None) -> None:
            if values is None:
                return
            item = MenuItem(id=new_record_id(), **self._clean(values))
            self.pos.storage.add_menu_item(item)
            logger.info("menu added item=%s", item.id)
            self.toast("Item berhasil ditambahkan")
            self.reload()

        self.app.push_screen(RecordFormModal("Tambah Item Menu", self._form_fields(None)), on_values)

    def edit_record(self, item: MenuItem) -> None:
        def on_values(values: dict[str, Any] | None) -> None:
            if values is None:
                return
            self.pos.storage.update_menu_item(replace(item, **self._clean(values)))
            logger.info("menu updated item=%s", item.id)
            self.toast("Item berhasil diperbarui")
            self.reload()

        self.app.push_screen(RecordFormModal(f"Ubah {item.name}", self._form_fields(item)), on_values)

    def delete_record(self, item: MenuItem) -> None:
        self.pos.storage.delete_menu_item(item.id)
        logger.info("menu deleted item=%s", item.id)
        self.toast("Item berhasil dihapus")
        self.reload()
