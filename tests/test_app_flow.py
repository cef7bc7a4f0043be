import pytest

from bakery_pos.backoffice_inventory import InventoryScreen
from bakery_pos.backoffice_reports import DashboardScreen
from bakery_pos.login_screen import ClockInScreen, LoginScreen
from bakery_pos.payment_screen import PaymentScreen
from bakery_pos.pos_app import BakeryPOSApp
from bakery_pos.printer import PrinterError
from bakery_pos.receipt_screen import ReceiptScreen
from bakery_pos.sales_screen import SalesScreen
from bakery_pos.settings import AppSettings


class FakePrinter:
    def __init__(self, fail=False):
        self.fail = fail
        self.documents = []

    def print_lines(self, lines):
        if self.fail:
            raise PrinterError("USB device not found")
        self.documents.append(list(lines))


def _enable_printing(storage, auto_print=True):
    settings = AppSettings()
    settings.printer.printer_enabled = True
    settings.printer.auto_print_receipts = auto_print
    storage.save_settings(settings)


async def _login(pilot, pin):
    await pilot.press(*pin)
    await pilot.pause(0.5)


async def _start_sale(pilot):
    await _login(pilot, "5678")
    await pilot.press("enter")
    await pilot.pause()
    await pilot.press("s", "l", "a", "p", "i", "s", "enter", "escape")
    await pilot.pause()


async def _pay_in_cash(pilot):
    await pilot.press("p")
    await pilot.pause()
    await pilot.press("5", "0", "0", "0", "0", "f")
    await pilot.pause()
    await pilot.press("enter")
    await pilot.pause(1.0)


async def test_manager_pin_logs_in(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "1234")

        assert app.current_user.name == "Sarah Johnson"
        assert isinstance(app.screen, ClockInScreen)


async def test_wrong_pin_is_cleared(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await pilot.press("0", "0", "0", "0")
        login = app.screen
        assert isinstance(login, LoginScreen)
        assert login.locked

        await pilot.pause(0.8)

        assert app.current_user is None
        assert login.pad.value == ""
        assert not login.locked


async def test_cash_sale_is_stored(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "5678")
        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, SalesScreen)

        await pilot.press("s", "l", "a", "p", "i", "s", "enter", "escape")
        await pilot.pause()
        assert [line.name for line in app.current_order.items] == ["Kue Lapis"]
        assert app.current_order.total == pytest.approx(16500)

        await pilot.press("p")
        await pilot.pause()
        assert isinstance(app.screen, PaymentScreen)

        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, PaymentScreen)

        await pilot.press("5", "0", "0", "0", "0", "f")
        await pilot.pause()
        assert app.screen.session.can_complete

        await pilot.press("enter")
        await pilot.pause(1.0)
        assert isinstance(app.screen, ReceiptScreen)

        stored = storage.get_transactions()
        assert len(stored) == 1
        assert stored[0].cashier == "Mike Chen"
        assert stored[0].total == pytest.approx(16500)
        assert [(p.method, p.amount) for p in stored[0].payments] == [("cash", 16500)]

        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, SalesScreen)
        assert app.current_order.is_empty


async def test_checkout_blocked_on_empty_cart(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "5678")
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("p")
        await pilot.pause()

        assert isinstance(app.screen, SalesScreen)


async def test_cashier_cannot_open_back_office(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "5678")
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("b")
        await pilot.pause()

        assert isinstance(app.screen, SalesScreen)


async def test_manager_back_office_inventory_filter(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "1234")
        await pilot.press("b")
        await pilot.pause()
        assert isinstance(app.screen, DashboardScreen)

        await pilot.press("3")
        await pilot.pause()
        assert isinstance(app.screen, InventoryScreen)

        await pilot.press("l")
        await pilot.pause()
        assert [item.name for item in app.screen.visible_records()] == ["Kue Mangkok", "Bacang T. Asin", "Risoles"]


async def test_logout_resets_session(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "5678")
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("s", "l", "a", "p", "i", "s", "enter", "escape", "o")
        await pilot.pause()

        assert isinstance(app.screen, LoginScreen)
        assert app.current_user is None
        assert not app.is_clocked_in
        assert app.current_order.is_empty


async def test_receipt_auto_prints_once(storage):
    _enable_printing(storage)
    printer = FakePrinter()
    app = BakeryPOSApp(storage, printer)
    async with app.run_test() as pilot:
        await _start_sale(pilot)
        await _pay_in_cash(pilot)

        assert isinstance(app.screen, ReceiptScreen)
        assert len(printer.documents) == 1
        assert any("Kue Lapis" in line for line in printer.documents[0])


async def test_printer_failure_keeps_sale(storage):
    _enable_printing(storage)
    app = BakeryPOSApp(storage, FakePrinter(fail=True))
    async with app.run_test() as pilot:
        await _start_sale(pilot)
        await _pay_in_cash(pilot)
        assert isinstance(app.screen, ReceiptScreen)

        await pilot.press("p")
        await pilot.pause()

        assert isinstance(app.screen, ReceiptScreen)
        assert len(storage.get_transactions()) == 1


async def test_disabled_printer_prints_nothing(storage):
    printer = FakePrinter()
    app = BakeryPOSApp(storage, printer)
    async with app.run_test() as pilot:
        await _start_sale(pilot)
        await _pay_in_cash(pilot)

        await pilot.press("p")
        await pilot.pause()

        assert isinstance(app.screen, ReceiptScreen)
        assert printer.documents == []
        assert not app.print_document(["Toko Kue"])


async def test_manual_print_with_auto_print_off(storage):
    _enable_printing(storage, auto_print=False)
    printer = FakePrinter()
    app = BakeryPOSApp(storage, printer)
    async with app.run_test() as pilot:
        await _start_sale(pilot)
        await _pay_in_cash(pilot)
        assert printer.documents == []

        await pilot.press("p")
        await pilot.pause()

        assert len(printer.documents) == 1


async def test_preset_discount_lowers_total(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _start_sale(pilot)
        assert app.current_order.total == pytest.approx(16500)

        await pilot.press("t")
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, SalesScreen)
        assert app.current_order.discount == pytest.approx(1500)
        assert app.current_order.total == pytest.approx(15000)


async def test_modifier_is_added_with_item(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "5678")
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("s", "l", "a", "p", "i", "s", "ctrl+e")
        await pilot.pause()

        await pilot.press("enter", "a")
        await pilot.pause()

        assert [(line.name, line.modifiers) for line in app.current_order.items] == [
            ("Kue Lapis", ("Kecil (-Rp 5.000)",))
        ]


async def test_stock_can_be_set_negative(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "1234")
        await pilot.press("b")
        await pilot.pause()
        await pilot.press("3")
        await pilot.pause()
        item = app.screen.selected_record()

        await pilot.press("u")
        await pilot.pause()
        await pilot.press(*["backspace"] * 12, "minus", "5", "enter")
        await pilot.pause()

        stored = next(entry for entry in storage.get_inventory() if entry.id == item.id)
        assert stored.stock == -5
        assert isinstance(stored.stock, int)


async def test_edited_inventory_keeps_whole_stock_as_int(storage):
    app = BakeryPOSApp(storage)
    async with app.run_test() as pilot:
        await _login(pilot, "1234")
        await pilot.press("b")
        await pilot.pause()
        await pilot.press("3")
        await pilot.pause()
        item = app.screen.selected_record()

        await pilot.press("e")
        await pilot.pause()
        await pilot.press("ctrl+s")
        await pilot.pause()

        stored = next(entry for entry in storage.get_inventory() if entry.id == item.id)
        assert stored.stock == item.stock
        assert isinstance(stored.stock, int)
