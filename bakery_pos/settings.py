"""Typed store settings, persisted as one object under the settings key."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any


@dataclass
class BusinessSettings:
    store_name: str = "Toko Kue"
    store_address: str = "Jl. Merdeka No. 123, Jakarta"
    store_phone: str = "+62 21 1234 5678"
    tax_rate: float = 10.0
    currency: str = "IDR"
    timezone: str = "Asia/Jakarta"


@dataclass
class NotificationSettings:
    low_stock_alerts: bool = True
    order_notifications: bool = True
    shift_reports: bool = True


@dataclass
class PaymentSettings:
    cash_enabled: bool = True
    card_enabled: bool = True
    qris_enabled: bool = True
    voucher_enabled: bool = True
    default_payment_method: str = "cash"

    def enabled_methods(self) -> list[str]:
        flags = {
            "cash": self.cash_enabled,
            "card": self.card_enabled,
            "qris": self.qris_enabled,
            "voucher": self.voucher_enabled,
        }
        return [method for method, enabled in flags.items() if enabled]


@dataclass
class PrinterSettings:
    printer_enabled: bool = False
    printer_name: str = ""
    auto_print_receipts: bool = False


@dataclass
class NetworkSettings:
    # Stored for the settings screen only; nothing broadcasts.
    enable_broadcasting: bool = False
    broadcast_interval: int = 30
    auto_sync: bool = False


_SECTIONS: dict[str, type] = {
    "business": BusinessSettings,
    "notifications": NotificationSettings,
    "payments": PaymentSettings,
    "printer": PrinterSettings,
    "network": NetworkSettings,
}


def _section_from_dict(section_cls: type, data: Any) -> Any:
    if not isinstance(data, dict):
        return section_cls()
    known = {f.name for f in fields(section_cls)}
    return section_cls(**{key: value for key, value in data.items() if key in known})


@dataclass
class AppSettings:
    business: BusinessSettings = field(default_factory=BusinessSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    payments: PaymentSettings = field(default_factory=PaymentSettings)
    printer: PrinterSettings = field(default_factory=PrinterSettings)
    network: NetworkSettings = field(default_factory=NetworkSettings)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> AppSettings:
        """Build settings, filling missing sections and keys with defaults."""
        if not isinstance(data, dict):
            return cls()
        return cls(**{name: _section_from_dict(section_cls, data.get(name)) for name, section_cls in _SECTIONS.items()})


def coerce_setting(current: Any, raw: str) -> Any:
    """Parse text typed into a settings field into the current value's type."""
    if isinstance(current, bool):
        lowered = raw.strip().lower()
        if lowered in {"1", "true", "yes", "y", "on", "ya"}:
            return True
        if lowered in {"0", "false", "no", "n", "off", "tidak"}:
            return False
        raise ValueError(f"Not a yes/no value: {raw!r}")
    if isinstance(current, int):
        return int(raw.strip())
    if isinstance(current, float):
        return float(raw.strip())
    return raw
