from dataclasses import replace

from bakery_pos.data import (
    categories,
    default_employees,
    default_inventory,
    default_menu,
    filter_employees,
    filter_inventory,
    filter_menu,
    search_menu,
)


def test_search_menu_by_name_and_code():
    menu = default_menu()

    assert [item.name for item in search_menu(menu, "bakwan")] == ["Bakwan", "Bakwan Udang"]
    assert [item.name for item in search_menu(menu, "ba", by_code=True)] == ["Bacang Ayam"]


def test_search_menu_hides_unavailable_items():
    menu = [replace(item, available=item.name != "Lemper") for item in default_menu()]

    assert "Lemper" not in [item.name for item in search_menu(menu, "")]
    assert "Lemper" in [item.name for item in filter_menu(menu, "lemper")]


def test_code_search_falls_back_to_name_without_code():
    menu = [replace(default_menu()[0], code="")]

    assert search_menu(menu, "lapis", by_code=True) == menu


def test_inventory_filters():
    inventory = default_inventory()

    low = filter_inventory(inventory, low_stock_only=True)
    assert [item.name for item in low] == ["Kue Mangkok", "Bacang T. Asin", "Risoles"]
    assert [item.name for item in filter_inventory(inventory, "kue")] == ["Kue Lapis", "Kue Mangkok", "Kue Ku"]
    assert filter_inventory(inventory, category="Roti") == []


def test_categories_in_first_seen_order():
    assert categories(default_menu()) == ["all", "Kue", "Gorengan", "Paket"]


def test_filter_menu_by_category():
    assert [item.name for item in filter_menu(default_menu(), category="Paket")] == ["Paketku"]


def test_filter_employees_by_name_position_or_phone():
    employees = default_employees()

    assert [e.name for e in filter_employees(employees, "cashier")] == ["Mike Chen"]
    assert [e.name for e in filter_employees(employees, "3456")] == ["Sarah Johnson"]
    assert len(filter_employees(employees, "")) == 2
