"""PIN login and clock-in screens."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.widgets import Header, Static

from bakery_pos.auth import PinAttempt, PinPad
from bakery_pos.config import LOGIN_FAILURE_CLEAR_DELAY, LOGIN_SUCCESS_DELAY
from bakery_pos.models import Employee
from bakery_pos.screen_base import POSScreen

_KEYPAD = "  1   2   3\n  4   5   6\n  7   8   9\n Hapus 0"


class LoginScreen(POSScreen):
    """Four-digit PIN pad that submits on the last digit."""

    CSS = """
    LoginScreen {
        align: center middle;
    }

    #login-dialog {
        width: 44;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #login-title {
        text-style: bold;
    }

    #pin-dots {
        border: heavy $secondary;
        padding: 0 1;
        margin: 1 0;
        content-align: center middle;
    }

    #keypad {
        margin-bottom: 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.pad = PinPad([])
        self.locked = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="login-dialog"):
            yield Static("Login Karyawan", id="login-title")
            yield Static("Masukkan PIN 4 digit Anda")
            yield Static(id="pin-dots")
            yield Static(_KEYPAD, id="keypad")
            yield Static("Angka untuk PIN. Backspace hapus satu, Esc hapus semua.", classes="help")
            yield Static("PIN Demo: 1234 (Manager), 5678 (Kasir)", classes="help")

    def on_mount(self) -> None:
        self.pad = PinPad(self.pos.storage.get_employees())
        self._refresh_pin()

    def on_key(self, event: Key) -> None:
        if self.locked:
            event.stop()
            return

        if event.key == "backspace":
            self.pad.backspace()
            self._refresh_pin()
            event.stop()
            return

        if event.key in {"escape", "delete"}:
            self.pad.clear()
            self._refresh_pin()
            event.stop()
            return

        if event.character and event.character.isdecimal():
            attempt = self.pad.press(event.character)
            self._refresh_pin()
            if attempt is not None:
                self._handle_attempt(attempt)
            event.stop()

    def _handle_attempt(self, attempt: PinAttempt) -> None:
        self.locked = True
        if attempt.employee is not None:
            employee = attempt.employee
            self.toast(f"Selamat Datang, {employee.name}!")
            self.set_timer(LOGIN_SUCCESS_DELAY, lambda: self.pos.login(employee))
            return
        self.toast("PIN Tidak Valid", severity="error")
        self.set_timer(LOGIN_FAILURE_CLEAR_DELAY, self._reset_pin)

    def _reset_pin(self) -> None:
        self.pad.clear()
        self.locked = False
        self._refresh_pin()

    def _refresh_pin(self) -> None:
        dots = Text()
        for idx in range(self.pad.length):
            if idx > 0:
                dots.append("  ")
            dots.append("●" if idx < len(self.pad.value) else "○", style="bold #e08a3c")
        self.query_one("#pin-dots", Static).update(dots)


class ClockInScreen(POSScreen):
    """Shift start prompt shown after login."""

    CSS = """
    ClockInScreen {
        align: center middle;
    }

    #clock-dialog {
        width: 52;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #clock-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("enter", "clock_in", "Masuk"),
        ("escape", "logout", "Keluar"),
    ]

    def __init__(self, employee: Employee) -> None:
        super().__init__()
        self.employee = employee

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="clock-dialog"):
            yield Static(f"Selamat Datang, {self.employee.name}", id="clock-title")
            yield Static("Silakan masuk untuk memulai shift Anda")
            help_text = "Enter: Masuk   Esc: Keluar"
            if self.employee.is_manager:
                help_text += "   B: Back office"
            yield Static(help_text, classes="help")

    def on_key(self, event: Key) -> None:
        if event.character in {"b", "B"} and self.employee.is_manager:
            self.pos.open_back_office()
            event.stop()

    def action_clock_in(self) -> None:
        self.pos.clock_in()

    def action_logout(self) -> None:
        self.pos.logout()
