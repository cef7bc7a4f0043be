"""Employee section."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from rich.text import Text

from bakery_pos.backoffice_base import ListSectionScreen
from bakery_pos.constant import EMPLOYEE_ROLES
from bakery_pos.data import filter_employees, new_record_id
from bakery_pos.forms import FormField, RecordFormModal
from bakery_pos.models import Employee
from bakery_pos.rendering import badge_style, format_rupiah

logger = logging.getLogger(__name__)


class EmployeesScreen(ListSectionScreen):
    SECTION = "employees"

    def help_text(self) -> str:
        return "X aktif/nonaktif  " + super().help_text()

    def load_records(self) -> list[Employee]:
        return self.pos.storage.get_employees()

    def filter_records(self, records: list[Employee], query: str) -> list[Employee]:
        return filter_employees(records, query)

    def filter_label(self) -> str:
        active = sum(1 for employee in self.records if employee.is_active is not False)
        return f"Aktif: {active}/{len(self.records)}"

    def section_keys(self) -> dict[str, Callable[[], None]]:
        return {"x": self._toggle_active}

    def row_text(self, employee: Employee) -> Text:
        text = Text()
        text.append(f"{employee.name:<20.20} {employee.position or '-':<12.12} ")
        if employee.is_manager:
            text.append(" Manager ", style=badge_style("manager"))
        if employee.is_active is False:
            text.append(" Nonaktif ", style=badge_style("inactive"))
        return text

    def detail_text(self, employee: Employee) -> Text:
        text = Text()
        text.append(f"{employee.name}\n", style="bold")
        text.append(f"Peran: {employee.role}\n")
        text.append(f"Posisi: {employee.position or '-'}\n")
        text.append(f"Telepon: {employee.phone or '-'}\n")
        rate = format_rupiah(employee.hourly_rate) if employee.hourly_rate is not None else "-"
        text.append(f"Tarif per jam: {rate}\n")
        text.append(f"PIN: {'*' * len(employee.pin)}\n")
        text.append(f"Status: {'Nonaktif' if employee.is_active is False else 'Aktif'}\n")
        return text

    def _toggle_active(self) -> None:
        employee = self.selected_record()
        if employee is None:
            return
        active = employee.is_active is False
        self.pos.storage.update_employee(replace(employee, is_active=active))
        logger.info("employee status employee=%s active=%s", employee.id, active)
        self.toast("Status karyawan berhasil diperbarui")
        self.reload()

    def _form_fields(self, employee: Employee | None) -> list[FormField]:
        return [
            FormField("name", "Nama", employee.name if employee else ""),
            FormField("pin", "PIN", employee.pin if employee else "", kind="pin"),
            FormField("role", "Peran", employee.role if employee else "cashier", kind="choice", choices=EMPLOYEE_ROLES),
            FormField("position", "Posisi", employee.position if employee else ""),
            FormField("phone", "Telepon", employee.phone if employee else ""),
            FormField("hourly_rate", "Tarif per jam", employee.hourly_rate if employee else "", kind="float"),
        ]

    def add_record(self) -> None:
        def on_values(values: dict[str, Any] | None) -> None:
            if values is None:
                return
            employee = Employee(id=new_record_id(), is_active=True, **values)
            self.pos.storage.add_employee(employee)
            logger.info("employee added employee=%s", employee.id)
            self.toast("Karyawan berhasil ditambahkan")
            self.reload()

        self.app.push_screen(RecordFormModal("Tambah Karyawan", self._form_fields(None)), on_values)

    def edit_record(self, employee: Employee) -> None:
        def on_values(values: dict[str, Any] | None) -> None:
            if values is None:
                return
            self.pos.storage.update_employee(replace(employee, **values))
            logger.info("employee updated employee=%s", employee.id)
            self.toast("Karyawan berhasil diperbarui")
            self.reload()

        self.app.push_screen(RecordFormModal(f"Ubah {employee.name}", self._form_fields(employee)), on_values)

    def delete_record(self, employee: Employee) -> None:
        current = self.pos.current_user
        if current is not None and current.id == employee.id:
            self.toast("Tidak dapat menghapus akun yang sedang digunakan", severity="error")
            return
        self.pos.storage.delete_employee(employee.id)
        logger.info("employee deleted employee=%s", employee.id)
        self.toast("Karyawan berhasil dihapus")
        self.reload()
