"""Seed records, menu search and back-office list filters."""

from __future__ import annotations

import time
from datetime import date
from typing import Iterable

from bakery_pos.constant import DEFAULT_EMPLOYEES, DEFAULT_INVENTORY, DEFAULT_MENU
from bakery_pos.models import Employee, InventoryItem, MenuItem


def default_employees() -> list[Employee]:
    return [Employee.from_dict(raw) for raw in DEFAULT_EMPLOYEES]


def default_inventory(today: date | None = None) -> list[InventoryItem]:
    stamp = (today or date.today()).isoformat()
    return [
        InventoryItem(
            id=item_id,
            name=name,
            category="Kue",
            stock=stock,
            unit="pcs",
            low_stock_threshold=threshold,
            last_updated=stamp,
        )
        for item_id, name, stock, threshold in DEFAULT_INVENTORY
    ]


def default_menu() -> list[MenuItem]:
    return [MenuItem.from_dict(raw) for raw in DEFAULT_MENU]


def search_menu(menu: list[MenuItem], query: str, by_code: bool = False) -> list[MenuItem]:
    """Filter available menu items by case-insensitive substring on name or code."""
    available = [item for item in menu if item.available]
    if not query:
        return available
    q = query.lower()
    # Items without a code fall back to name matching in code mode.
    return [
        item
        for item in available
        if q in (item.code if by_code and item.code else item.name).lower()
    ]


def new_record_id() -> str:
    """Millisecond timestamp id, the same scheme transactions use."""
    return str(int(time.time() * 1000))


def categories(records: Iterable[InventoryItem | MenuItem]) -> list[str]:
    """``"all"`` followed by each distinct category in first-seen order."""
    seen: list[str] = ["all"]
    for record in records:
        if record.category not in seen:
            seen.append(record.category)
    return seen


def filter_inventory(
    items: Iterable[InventoryItem], query: str = "", category: str = "all", low_stock_only: bool = False
) -> list[InventoryItem]:
    q = query.lower()
    return [
        item
        for item in items
        if q in item.name.lower()
        and (category == "all" or item.category == category)
        and (not low_stock_only or item.is_low_stock)
    ]


def filter_menu(menu: Iterable[MenuItem], query: str = "", category: str = "all") -> list[MenuItem]:
    """Back-office menu filter; unlike :func:`search_menu` it keeps unavailable items."""
    q = query.lower()
    return [
        item
        for item in menu
        if (q in item.name.lower() or q in item.code.lower()) and (category == "all" or item.category == category)
    ]


def filter_employees(employees: Iterable[Employee], query: str = "") -> list[Employee]:
    q = query.lower()
    return [
        employee
        for employee in employees
        if q in employee.name.lower()
        or q in (employee.position or "").lower()
        or q in (employee.phone or "")
    ]
