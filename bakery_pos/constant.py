"""Editable static seed data, menu and option catalogues."""

from __future__ import annotations

DEFAULT_EMPLOYEES: list[dict[str, str | int | bool]] = [
    {
        "id": "1",
        "name": "Sarah Johnson",
        "pin": "1234",
        "role": "manager",
        "position": "Manager",
        "phone": "+62 812 3456 7890",
        "hourly_rate": 25000,
        "is_active": True,
    },
    {
        "id": "2",
        "name": "Mike Chen",
        "pin": "5678",
        "role": "cashier",
        "position": "Cashier",
        "phone": "+62 813 4567 8901",
        "hourly_rate": 18000,
        "is_active": True,
    },
]

# (id, name, stock, low_stock_threshold); every seed item is a "Kue" counted in pcs.
DEFAULT_INVENTORY: list[tuple[str, str, int, int]] = [
    ("1", "Kue Lapis", 45, 20),
    ("2", "Kue Mangkok", 15, 20),
    ("3", "Lemper", 35, 25),
    ("4", "Pastel", 18, 15),
    ("5", "Wajik", 12, 10),
    ("6", "Bacang Ayam", 25, 10),
    ("7", "Bacang T. Asin", 8, 15),
    ("8", "Bakwan", 24, 20),
    ("9", "Bakwan Udang", 18, 15),
    ("10", "Kue Ku", 9, 8),
    ("11", "Paketku", 450, 200),
    ("12", "Risoles", 180, 200),
]

DEFAULT_MENU: list[dict[str, str | int | bool]] = [
    {"id": "1", "name": "Kue Lapis", "code": "KL", "category": "Kue", "price": 15000, "cost": 2000},
    {"id": "2", "name": "Kue Mangkok", "code": "KM", "category": "Kue", "price": 12000, "cost": 1500},
    {"id": "3", "name": "Lemper", "code": "LP", "category": "Kue", "price": 10000, "cost": 1200},
    {"id": "4", "name": "Pastel", "code": "PS", "category": "Kue", "price": 13000, "cost": 1800},
    {"id": "5", "name": "Wajik", "code": "WJ", "category": "Kue", "price": 8000, "cost": 1000},
    {"id": "6", "name": "Bacang Ayam", "code": "BA", "category": "Kue", "price": 16000, "cost": 2500},
    {"id": "7", "name": "Bacang T. Asin", "code": "BTA", "category": "Kue", "price": 14000, "cost": 2000},
    {"id": "8", "name": "Bakwan", "code": "BK", "category": "Gorengan", "price": 2000, "cost": 800},
    {"id": "9", "name": "Bakwan Udang", "code": "BU", "category": "Gorengan", "price": 3000, "cost": 1500},
    {"id": "10", "name": "Kue Ku", "code": "KK", "category": "Kue", "price": 9000, "cost": 1200},
    {"id": "11", "name": "Paketku", "code": "PK", "category": "Paket", "price": 25000, "cost": 3000},
    {"id": "12", "name": "Risoles", "code": "RS", "category": "Gorengan", "price": 2500, "cost": 1000},
]

# Modifier labels are informational; they never change the line price.
MODIFIER_OPTIONS: dict[str, list[str]] = {
    "Ukuran": ["Kecil (-Rp 5.000)", "Reguler", "Besar (+Rp 5.000)"],
    "Topping": ["Keju (+Rp 3.000)", "Coklat (+Rp 2.500)", "Kacang (+Rp 2.000)", "Kelapa (+Rp 1.500)"],
    "Kemasan": ["Biasa", "Premium (+Rp 1.000)", "Eksklusif (+Rp 2.000)"],
}

# (label, kind, value)
DISCOUNT_PRESETS: list[tuple[str, str, float]] = [
    ("10%", "percentage", 10),
    ("20%", "percentage", 20),
    ("50%", "percentage", 50),
    ("Rp 5.000", "fixed", 5000),
    ("Rp 10.000", "fixed", 10000),
]

PAYMENT_METHOD_LABELS: dict[str, str] = {
    "cash": "Tunai",
    "card": "Kartu",
    "qris": "QRIS",
    "voucher": "Voucher",
}

QUICK_CASH_AMOUNTS: list[int] = [20000, 50000, 100000, 200000]

INVENTORY_UNITS: list[str] = ["pcs", "kg", "g", "L", "ml", "bottles", "boxes", "packages"]

EMPLOYEE_ROLES: list[str] = ["cashier", "manager"]

REPORT_RANGES: list[str] = ["today", "week", "month", "year"]
