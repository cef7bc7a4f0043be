"""SQLite-backed key-value storage for the POS collections.

Each collection is one JSON document under a fixed key. Every mutation reads
the whole collection, edits it in memory and writes it back; there is no
locking, so the last writer wins.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, TypeVar

from bakery_pos.config import DB_PATH
from bakery_pos.data import default_employees, default_inventory, default_menu
from bakery_pos.models import Employee, InventoryItem, MenuItem, Transaction
from bakery_pos.settings import AppSettings

logger = logging.getLogger(__name__)

EMPLOYEES_KEY = "employees"
INVENTORY_KEY = "inventory"
TRANSACTIONS_KEY = "transactions"
SETTINGS_KEY = "settings"
MENU_KEY = "menu"

T = TypeVar("T")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class StorageGateway:
    """Owns every persisted collection.

    Read failures come back as empty collections (or default settings) and
    write failures are logged and dropped, so callers cannot tell "nothing
    stored" apart from "storage failed".
    """

    def __init__(self, db_path: str | Path = DB_PATH) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(self.db_path)

    def bootstrap_schema(self) -> None:
        """Create the key-value table if it does not already exist."""
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                    """
                )
        except (sqlite3.Error, OSError):
            logger.exception("Error creating storage schema at %s", self.db_path)

    # Raw key-value access

    def get(self, key: str, default: Any = None) -> Any:
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except (sqlite3.Error, OSError):
            logger.exception("Error getting %s", key)
            return default
        if row is None:
            return default
        try:
            return json.loads(row[0])
        except ValueError:
            logger.exception("Error decoding %s", key)
            return default

    def set(self, key: str, value: Any) -> None:
        try:
            payload = json.dumps(value, ensure_ascii=False)
            with self._connect() as conn:
                with conn:
                    conn.execute(
                        """
                        INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                        ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                        """,
                        (key, payload, _utc_now_iso()),
                    )
        except (sqlite3.Error, OSError, TypeError, ValueError):
            logger.exception("Error saving %s", key)

    def _get_records(self, key: str, parse: Callable[[dict[str, Any]], T]) -> list[T]:
        raw = self.get(key, [])
        if not isinstance(raw, list):
            logger.error("Error getting %s: expected a list, found %s", key, type(raw).__name__)
            return []
        try:
            return [parse(entry) for entry in raw]
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.exception("Error parsing %s", key)
            return []

    def _set_records(self, key: str, records: list[Any]) -> None:
        self.set(key, [record.to_dict() for record in records])

    # Employees

    def get_employees(self) -> list[Employee]:
        return self._get_records(EMPLOYEES_KEY, Employee.from_dict)

    def save_employees(self, employees: list[Employee]) -> None:
        self._set_records(EMPLOYEES_KEY, employees)

    def add_employee(self, employee: Employee) -> None:
        employees = self.get_employees()
        employees.append(employee)
        self.save_employees(employees)

    def update_employee(self, employee: Employee) -> None:
        employees = self.get_employees()
        for idx, existing in enumerate(employees):
            if existing.id == employee.id:
                employees[idx] = employee
                self.save_employees(employees)
                return

    def delete_employee(self, employee_id: str) -> None:
        self.save_employees([e for e in self.get_employees() if e.id != employee_id])

    # Inventory

    def get_inventory(self) -> list[InventoryItem]:
        return self._get_records(INVENTORY_KEY, InventoryItem.from_dict)

    def save_inventory(self, inventory: list[InventoryItem]) -> None:
        self._set_records(INVENTORY_KEY, inventory)

    def add_inventory_item(self, item: InventoryItem) -> None:
        inventory = self.get_inventory()
        inventory.append(item)
        self.save_inventory(inventory)

    def update_inventory_item(self, item: InventoryItem) -> None:
        inventory = self.get_inventory()
        for idx, existing in enumerate(inventory):
            if existing.id == item.id:
                inventory[idx] = item
                self.save_inventory(inventory)
                return

    def delete_inventory_item(self, item_id: str) -> None:
        self.save_inventory([i for i in self.get_inventory() if i.id != item_id])

    # Menu

    def get_menu(self) -> list[MenuItem]:
        return self._get_records(MENU_KEY, MenuItem.from_dict)

    def save_menu(self, menu: list[MenuItem]) -> None:
        self._set_records(MENU_KEY, menu)

    def add_menu_item(self, item: MenuItem) -> None:
        menu = self.get_menu()
        menu.append(item)
        self.save_menu(menu)

    def update_menu_item(self, item: MenuItem) -> None:
        menu = self.get_menu()
        for idx, existing in enumerate(menu):
            if existing.id == item.id:
                menu[idx] = item
                self.save_menu(menu)
                return

    def delete_menu_item(self, item_id: str) -> None:
        self.save_menu([m for m in self.get_menu() if m.id != item_id])

    # Transactions

    def get_transactions(self) -> list[Transaction]:
        return self._get_records(TRANSACTIONS_KEY, Transaction.from_dict)

    def save_transactions(self, transactions: list[Transaction]) -> None:
        self._set_records(TRANSACTIONS_KEY, transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        transactions = self.get_transactions()
        transactions.append(transaction)
        self.save_transactions(transactions)

    def delete_transaction(self, transaction_id: str) -> None:
        self.save_transactions([t for t in self.get_transactions() if t.id != transaction_id])

    # Settings

    def get_settings(self) -> AppSettings:
        return AppSettings.from_dict(self.get(SETTINGS_KEY, {}))

    def save_settings(self, settings: AppSettings) -> None:
        self.set(SETTINGS_KEY, settings.to_dict())

    def initialize_default_data(self) -> None:
        """Seed employees, inventory and menu when their collections are empty."""
        self.bootstrap_schema()
        if not self.get_employees():
            self.save_employees(default_employees())
            logger.info("seeded default employees")
        if not self.get_inventory():
            self.save_inventory(default_inventory())
            logger.info("seeded default inventory")
        if not self.get_menu():
            self.save_menu(default_menu())
            logger.info("seeded default menu")
