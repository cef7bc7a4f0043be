import sqlite3
from dataclasses import replace

from bakery_pos.cart import EMPTY_ORDER, add_item
from bakery_pos.models import Employee, MenuItem
from bakery_pos.receipt import build_transaction
from bakery_pos.settings import AppSettings
from bakery_pos.storage import EMPLOYEES_KEY, StorageGateway


def test_initialize_seeds_empty_collections(storage):
    employees = storage.get_employees()

    assert [(e.name, e.pin, e.role) for e in employees] == [
        ("Sarah Johnson", "1234", "manager"),
        ("Mike Chen", "5678", "cashier"),
    ]
    assert len(storage.get_inventory()) == 12
    assert len(storage.get_menu()) == 12
    assert storage.get_transactions() == []


def test_initialize_does_not_overwrite_existing_data(storage):
    storage.save_employees([Employee(id="9", name="Dewi", pin="4321")])

    storage.initialize_default_data()

    assert [e.name for e in storage.get_employees()] == ["Dewi"]


def test_employee_crud(storage):
    storage.add_employee(Employee(id="3", name="Budi", pin="1111", position="Baker"))
    budi = storage.get_employees()[-1]
    assert budi.name == "Budi"

    storage.update_employee(replace(budi, phone="0812"))
    assert storage.get_employees()[-1].phone == "0812"

    storage.delete_employee("3")
    assert "3" not in {e.id for e in storage.get_employees()}


def test_update_of_unknown_id_changes_nothing(storage):
    before = storage.get_menu()

    storage.update_menu_item(MenuItem(id="nope", name="Ghost", price=1))

    assert storage.get_menu() == before


def test_inventory_and_menu_round_trip(storage):
    item = storage.get_inventory()[0]
    storage.update_inventory_item(replace(item, stock=3))
    assert storage.get_inventory()[0].stock == 3

    storage.add_menu_item(MenuItem(id="13", name="Onde-onde", price=4000, code="OO"))
    assert storage.get_menu()[-1].code == "OO"
    storage.delete_menu_item("13")
    assert len(storage.get_menu()) == 12


def test_transactions_append_in_order(storage, kue_lapis):
    order = add_item(EMPTY_ORDER, kue_lapis)
    storage.add_transaction(build_transaction(order, "Mike Chen"))
    storage.add_transaction(build_transaction(order, "Sarah Johnson"))

    stored = storage.get_transactions()

    assert [t.cashier for t in stored] == ["Mike Chen", "Sarah Johnson"]
    assert stored[0].items[0].name == "Kue Lapis"


def test_corrupt_json_reads_as_empty(storage):
    with sqlite3.connect(storage.db_path) as conn:
        conn.execute("UPDATE kv SET value = ? WHERE key = ?", ("{not json", EMPLOYEES_KEY))

    assert storage.get_employees() == []


def test_malformed_records_read_as_empty(storage):
    storage.set(EMPLOYEES_KEY, [{"name": "no id"}])

    assert storage.get_employees() == []


def test_settings_default_when_missing(tmp_path):
    gateway = StorageGateway(tmp_path / "fresh.db")
    gateway.bootstrap_schema()

    assert gateway.get_settings() == AppSettings()


def test_settings_round_trip(storage):
    settings = AppSettings()
    settings.business.store_name = "Toko Roti Sari"
    settings.printer.printer_enabled = True

    storage.save_settings(settings)

    assert storage.get_settings() == settings


def test_last_writer_wins(tmp_path):
    first = StorageGateway(tmp_path / "shared.db")
    second = StorageGateway(tmp_path / "shared.db")
    first.initialize_default_data()

    snapshot = first.get_employees()
    second.add_employee(Employee(id="3", name="Budi", pin="1111"))
    first.save_employees(snapshot)

    assert [e.id for e in second.get_employees()] == ["1", "2"]


def test_unreadable_database_masks_errors(tmp_path):
    # A directory where the database file should be makes every connect fail.
    db_dir = tmp_path / "db"
    db_dir.mkdir()
    gateway = StorageGateway(db_dir)

    gateway.set(EMPLOYEES_KEY, [])

    assert gateway.get_employees() == []
    assert gateway.get_settings() == AppSettings()


def test_delete_transaction(storage, kue_lapis):
    order = add_item(EMPTY_ORDER, kue_lapis)
    first = build_transaction(order, "Mike Chen")
    storage.add_transaction(first)
    storage.add_transaction(replace(first, id="other", order_id="ORD-other"))

    storage.delete_transaction(first.id)

    assert [t.id for t in storage.get_transactions()] == ["other"]
