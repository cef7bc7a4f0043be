"""Domain models for the bakery POS."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class Employee:
    """A staff member; the PIN is the only credential."""

    id: str
    name: str
    pin: str
    role: str = "cashier"
    position: str | None = None
    phone: str | None = None
    hourly_rate: float | None = None
    is_active: bool | None = True

    @property
    def is_manager(self) -> bool:
        return self.role == "manager"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Employee:
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            pin=str(data["pin"]),
            role=str(data.get("role") or "cashier"),
            position=data.get("position"),
            phone=data.get("phone"),
            hourly_rate=data.get("hourly_rate"),
            is_active=data.get("is_active", True),
        )


@dataclass
class InventoryItem:
    """A stocked ingredient or product."""

    id: str
    name: str
    category: str
    stock: float
    unit: str
    low_stock_threshold: int
    last_updated: str

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.low_stock_threshold

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InventoryItem:
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            category=str(data.get("category") or "Other"),
            stock=data["stock"],
            unit=str(data.get("unit") or "pcs"),
            low_stock_threshold=int(data.get("low_stock_threshold", 0)),
            last_updated=str(data.get("last_updated") or ""),
        )


@dataclass
class MenuItem:
    """A sellable menu entry."""

    id: str
    name: str
    price: float
    code: str = ""
    category: str = "Kue"
    cost: float = 0
    available: bool = True

    @property
    def margin_percent(self) -> float:
        if not self.price:
            return 0.0
        return (self.price - self.cost) / self.price * 100

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MenuItem:
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            price=data["price"],
            code=str(data.get("code") or ""),
            category=str(data.get("category") or "Kue"),
            cost=data.get("cost", 0),
            available=bool(data.get("available", True)),
        )


@dataclass(frozen=True)
class OrderItem:
    """One cart line."""

    id: str
    name: str
    price: float
    quantity: int = 1
    modifiers: tuple[str, ...] = ()
    notes: str = ""

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "price": self.price, "quantity": self.quantity}
        if self.modifiers:
            data["modifiers"] = list(self.modifiers)
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderItem:
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            price=data["price"],
            quantity=int(data["quantity"]),
            modifiers=tuple(data.get("modifiers") or ()),
            notes=str(data.get("notes") or ""),
        )


@dataclass(frozen=True)
class Order:
    """Cart snapshot; totals always reflect `items` and `discount`."""

    items: tuple[OrderItem, ...] = ()
    subtotal: float = 0
    discount: float = 0
    tax: float = 0
    total: float = 0

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class Payment:
    method: str
    amount: float

    def to_dict(self) -> dict[str, Any]:
        return {"method": self.method, "amount": self.amount}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Payment:
        return cls(method=str(data["method"]), amount=data["amount"])


@dataclass(frozen=True)
class Transaction:
    """Completed sale. Written once, never edited."""

    id: str
    order_id: str
    items: tuple[OrderItem, ...]
    subtotal: float
    discount: float
    tax: float
    total: float
    timestamp: str
    cashier: str
    payments: tuple[Payment, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "order_id": self.order_id,
            "items": [item.to_dict() for item in self.items],
            "subtotal": self.subtotal,
            "discount": self.discount,
            "tax": self.tax,
            "total": self.total,
            "timestamp": self.timestamp,
            "cashier": self.cashier,
            "payments": [payment.to_dict() for payment in self.payments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        return cls(
            id=str(data["id"]),
            order_id=str(data["order_id"]),
            items=tuple(OrderItem.from_dict(item) for item in data.get("items", [])),
            subtotal=data["subtotal"],
            discount=data.get("discount", 0),
            tax=data["tax"],
            total=data["total"],
            timestamp=str(data["timestamp"]),
            cashier=str(data["cashier"]),
            payments=tuple(Payment.from_dict(p) for p in data.get("payments") or ()),
        )
