"""Shared screen plumbing."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from textual.screen import Screen
from textual.widgets import Static

if TYPE_CHECKING:
    from bakery_pos.pos_app import BakeryPOSApp


class POSScreen(Screen[None]):
    """Screen with typed access to the running POS app and its services."""

    @property
    def pos(self) -> BakeryPOSApp:
        return cast("BakeryPOSApp", self.app)

    def toast(self, message: str, severity: str = "information") -> None:
        self.app.notify(message, severity=severity)  # type: ignore[arg-type]

    def visible_rows(self, widget: Static, fallback: int = 8) -> int:
        height = widget.size.height
        if height <= 0:
            return fallback
        return max(1, height)
