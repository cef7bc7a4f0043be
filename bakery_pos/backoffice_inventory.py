"""Inventory section: stock list, filters, manual stock updates."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Callable

from rich.text import Text

from bakery_pos.amount_modal import AmountModal
from bakery_pos.backoffice_base import ListSectionScreen
from bakery_pos.constant import INVENTORY_UNITS
from bakery_pos.data import categories, filter_inventory, new_record_id
from bakery_pos.forms import FormField, RecordFormModal
from bakery_pos.models import InventoryItem
from bakery_pos.rendering import format_stock_tag

logger = logging.getLogger(__name__)


def _format_stock(value: float) -> str:
    return f"{value:g}"


def stock_number(value: float) -> int | float:
    """Whole stock levels are kept as ints; fractional ones (kg, liter) stay floats."""
    return int(value) if float(value).is_integer() else value


def _with_stock_number(values: dict[str, Any]) -> dict[str, Any]:
    return {**values, "stock": stock_number(values["stock"])}


class InventoryScreen(ListSectionScreen):
    SECTION = "inventory"

    def __init__(self) -> None:
        super().__init__()
        self.category = "all"
        self.low_stock_only = False

    def help_text(self) -> str:
        return "F kategori  L stok rendah  U ubah stok  " + super().help_text()

    def load_records(self) -> list[InventoryItem]:
        return self.pos.storage.get_inventory()

    def filter_records(self, records: list[InventoryItem], query: str) -> list[InventoryItem]:
        return filter_inventory(records, query, self.category, self.low_stock_only)

    def filter_label(self) -> str:
        low = sum(1 for item in self.records if item.is_low_stock)
        label = f"Kategori: {self.category}   Stok rendah: {low}"
        if self.low_stock_only:
            label += "   [hanya stok rendah]"
        return label

    def section_keys(self) -> dict[str, Callable[[], None]]:
        return {
            "f": self._cycle_category,
            "l": self._toggle_low_stock,
            "u": self._update_stock,
        }

    def row_text(self, item: InventoryItem) -> Text:
        text = Text()
        text.append(f"{item.name:<20.20} {_format_stock(item.stock):>7} {item.unit:<8} ")
        text.append_text(format_stock_tag(item))
        return text

    def detail_text(self, item: InventoryItem) -> Text:
        text = Text()
        text.append(f"{item.name}\n", style="bold")
        text.append(f"Kategori: {item.category}\n")
        text.append(f"Stok: {_format_stock(item.stock)} {item.unit}\n")
        text.append(f"Batas stok rendah: {item.low_stock_threshold}\n")
        text.append(f"Diperbarui: {item.last_updated}\n\n")
        text.append_text(format_stock_tag(item))
        return text

    def _cycle_category(self) -> None:
        options = categories(self.records)
        idx = options.index(self.category) if self.category in options else 0
        self.category = options[(idx + 1) % len(options)]
        self.selected_index = 0
        self.refresh_content()

    def _toggle_low_stock(self) -> None:
        self.low_stock_only = not self.low_stock_only
        self.selected_index = 0
        self.refresh_content()

    def _update_stock(self) -> None:
        item = self.selected_record()
        if item is None:
            return

        def on_value(value: float | None) -> None:
            if value is None:
                return
            stock = stock_number(value)
            self.pos.storage.update_inventory_item(
                replace(item, stock=stock, last_updated=date.today().isoformat())
            )
            logger.info("stock updated item=%s stock=%s", item.id, stock)
            self.toast("Stok berhasil diperbarui")
            self.reload()

        self.app.push_screen(
            AmountModal(
                f"Ubah Stok: {item.name}",
                f"Stok baru ({item.unit})",
                initial=_format_stock(item.stock),
                allow_negative=True,
            ),
            on_value,
        )

    def _form_fields(self, item: InventoryItem | None) -> list[FormField]:
        return [
            FormField("name", "Nama", item.name if item else ""),
            FormField("category", "Kategori", item.category if item else "Kue"),
            FormField("stock", "Stok", item.stock if item else 0, kind="float"),
            FormField("unit", "Satuan", item.unit if item else "pcs", kind="choice", choices=INVENTORY_UNITS),
            FormField("low_stock_threshold", "Batas stok rendah", item.low_stock_threshold if item else 0, kind="int"),
        ]

    def add_record(self) -> None:
        def on_values(values: dict[str, Any] | None) -> None:
            if values is None:
                return
            item = InventoryItem(
                id=new_record_id(), last_updated=date.today().isoformat(), **_with_stock_number(values)
            )
            self.pos.storage.add_inventory_item(item)
            logger.info("inventory added item=%s", item.id)
            self.toast("Item berhasil ditambahkan")
            self.reload()

        self.app.push_screen(RecordFormModal("Tambah Item Inventaris", self._form_fields(None)), on_values)

    def edit_record(self, item: InventoryItem) -> None:
        def on_values(values: dict[str, Any] | None) -> None:
            if values is None:
                return
            self.pos.storage.update_inventory_item(
                replace(item, last_updated=date.today().isoformat(), **_with_stock_number(values))
            )
            logger.info("inventory updated item=%s", item.id)
            self.toast("Item berhasil diperbarui")
            self.reload()

        self.app.push_screen(RecordFormModal(f"Ubah {item.name}", self._form_fields(item)), on_values)

    def delete_record(self, item: InventoryItem) -> None:
        self.pos.storage.delete_inventory_item(item.id)
        logger.info("inventory deleted item=%s", item.id)
        self.toast("Item berhasil dihapus")
        self.reload()
