from datetime import datetime, timezone

from bakery_pos.models import OrderItem, Payment, Transaction


def make_transaction(
    total: float,
    cashier: str = "Mike Chen",
    when: datetime | None = None,
    items: tuple[OrderItem, ...] = (),
    payments: tuple[Payment, ...] = (),
    tx_id: str = "1",
) -> Transaction:
    when = when or datetime(2026, 10, 19, 9, 15, tzinfo=timezone.utc)
    return Transaction(
        id=tx_id,
        order_id=f"ORD-{tx_id}",
        items=items,
        subtotal=total,
        discount=0,
        tax=0,
        total=total,
        timestamp=when.isoformat(),
        cashier=cashier,
        payments=payments,
    )
