"""Entry point for the bakery POS Textual app."""

from __future__ import annotations

from bakery_pos.config import DB_PATH
from bakery_pos.log import configure_logging
from bakery_pos.pos_app import BakeryPOSApp
from bakery_pos.printer import ReceiptPrinter
from bakery_pos.storage import StorageGateway


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    BakeryPOSApp(StorageGateway(DB_PATH), ReceiptPrinter()).run()


if __name__ == "__main__":
    main()
