"""Formatting and rich rendering helpers shared by the screens."""

from __future__ import annotations

from rich.text import Text

from bakery_pos.models import InventoryItem, Order, OrderItem


def format_rupiah(amount: float) -> str:
    """Format like id-ID: ``Rp 12.500`` with a comma for any cents."""
    grouped = f"{amount:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    if grouped.endswith(",00"):
        grouped = grouped[:-3]
    return f"Rp {grouped}"


def badge_style(kind: str) -> str:
    """Return a consistent badge style for role and stock tags."""
    if kind in {"manager", "low"}:
        return "bold #ffffff on #b23a48"
    if kind == "inactive":
        return "bold #ffffff on #6b6b6b"
    return "bold #0b1f0f on #e08a3c"


def format_line_label(item: OrderItem) -> Text:
    text = Text()
    text.append(f"{item.quantity}x ", style="bold")
    text.append(item.name)
    if item.modifiers:
        text.append(f"\n      {', '.join(item.modifiers)}", style="dim")
    if item.notes:
        text.append(f"\n      Catatan: {item.notes}", style="italic dim")
    return text


def format_order_summary(order: Order) -> Text:
    rows = [("Subtotal", format_rupiah(order.subtotal), "")]
    if order.discount > 0:
        rows.append(("Diskon", f"-{format_rupiah(order.discount)}", "#e08a3c"))
    rows.append(("Pajak (10%)", format_rupiah(order.tax), ""))
    rows.append(("Total", format_rupiah(order.total), "bold"))

    text = Text()
    for idx, (label, value, style) in enumerate(rows):
        if idx > 0:
            text.append("\n")
        text.append(f"{label:<14}{value:>16}", style=style)
    return text


def format_stock_tag(item: InventoryItem) -> Text:
    if item.is_low_stock:
        return Text(" Low Stock ", style=badge_style("low"))
    return Text(" In Stock ", style=badge_style("ok"))


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Visible slice of a list that keeps the selected row roughly centred."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        half = rows // 2
        start = selected - half
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)


def render_selectable(lines: list[Text | str], selected: int | None, visible_rows: int) -> Text:
    """Render a pointer list with ellipsis markers when it scrolls."""
    start, end = window_bounds(len(lines), visible_rows, selected)
    out = Text()
    if start > 0:
        out.append("⋮\n", style="dim")
    for idx in range(start, end):
        if idx > start:
            out.append("\n")
        out.append("➤ " if idx == selected else "  ")
        line = lines[idx]
        if isinstance(line, Text):
            out.append_text(line)
        else:
            out.append(line)
    if end < len(lines):
        out.append("\n⋮", style="dim")
    return out
