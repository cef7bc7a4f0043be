"""Main Textual app class and screen flow."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from bakery_pos.backoffice import back_office_screen
from bakery_pos.cart import EMPTY_ORDER
from bakery_pos.login_screen import ClockInScreen, LoginScreen
from bakery_pos.models import Employee, Order, Payment
from bakery_pos.payment_screen import PaymentScreen
from bakery_pos.printer import PrinterError, ReceiptPrinter, check_printer_dependencies
from bakery_pos.receipt_screen import ReceiptScreen
from bakery_pos.sales_screen import SalesScreen
from bakery_pos.settings import AppSettings
from bakery_pos.shift_report_screen import ShiftReportScreen
from bakery_pos.storage import StorageGateway

logger = logging.getLogger(__name__)


class BakeryPOSApp(App):
    """Tablet-style bakery till: login, sales, payment, receipt and back office.

    The current screen, user and cart live here and are never persisted.
    """

    TITLE = "Bakery POS"
    SUB_TITLE = "Toko Kue"

    CSS = """
    Screen {
        layout: vertical;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .help {
        color: $text-muted;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, storage: StorageGateway, printer: ReceiptPrinter | None = None) -> None:
        super().__init__()
        self.storage = storage
        self.printer = printer
        self.settings = AppSettings()
        self.current_user: Employee | None = None
        self.is_clocked_in = False
        self.current_order: Order = EMPTY_ORDER

    def on_mount(self) -> None:
        self.storage.initialize_default_data()
        self.reload_settings()
        if self.printer is not None and self.settings.printer.printer_enabled:
            _, status = check_printer_dependencies()
            logger.info("printer status=%r", status)
        self.push_screen(LoginScreen())

    def reload_settings(self) -> None:
        self.settings = self.storage.get_settings()
        self.sub_title = self.settings.business.store_name

    # Flow

    def login(self, employee: Employee) -> None:
        self.current_user = employee
        logger.info("session start employee=%s", employee.id)
        self.switch_screen(ClockInScreen(employee))

    def logout(self) -> None:
        if self.current_user is not None:
            logger.info("session end employee=%s", self.current_user.id)
        self.current_user = None
        self.is_clocked_in = False
        self.current_order = EMPTY_ORDER
        self._replace_stack(LoginScreen())

    def clock_in(self) -> None:
        self.is_clocked_in = True
        self.show_sales()

    def show_sales(self) -> None:
        if not self.is_clocked_in and self.current_user is not None:
            self._replace_stack(ClockInScreen(self.current_user))
            return
        self._replace_stack(SalesScreen())

    def checkout(self, order: Order) -> None:
        self.current_order = order
        self.switch_screen(PaymentScreen(order))

    def complete_payment(self, order: Order, payments: list[Payment]) -> None:
        self.switch_screen(ReceiptScreen(order, payments))

    def new_order(self) -> None:
        self.current_order = EMPTY_ORDER
        self.show_sales()

    def show_shift_report(self) -> None:
        self.switch_screen(ShiftReportScreen())

    def open_back_office(self, section: str = "dashboard") -> None:
        if self.current_user is None or not self.current_user.is_manager:
            self.notify("Hanya manajer yang dapat membuka back office", severity="error")
            return
        self._replace_stack(back_office_screen(section))

    def _replace_stack(self, screen) -> None:
        # Modal screens may be stacked on top; drop them before switching.
        while len(self.screen_stack) > 2:
            self.pop_screen()
        self.switch_screen(screen)

    # Services

    def print_document(self, lines: list[str], what: str = "Struk") -> bool:
        """Print through the configured printer; failures become toasts."""
        if not self.settings.printer.printer_enabled or self.printer is None:
            self.notify("Printer tidak aktif. Aktifkan di Pengaturan.", severity="warning")
            return False
        try:
            self.printer.print_lines(lines)
        except PrinterError as exc:
            logger.warning("print failed what=%s error=%s", what, exc)
            self.notify(f"Gagal mencetak {what.lower()}. Periksa koneksi printer.", severity="error")
            return False
        self.notify(f"{what} berhasil dicetak!")
        return True
