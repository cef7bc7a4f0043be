"""PIN lookup and keypad state for the login screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from bakery_pos.config import PIN_LENGTH
from bakery_pos.models import Employee

logger = logging.getLogger(__name__)


def find_employee_by_pin(employees: Iterable[Employee], pin: str) -> Employee | None:
    """First employee whose PIN matches; PINs are not guaranteed unique."""
    for employee in employees:
        if employee.pin == pin:
            return employee
    return None


@dataclass(frozen=True)
class PinAttempt:
    pin: str
    employee: Employee | None

    @property
    def ok(self) -> bool:
        return self.employee is not None


class PinPad:
    """Collects digits and auto-submits once the PIN is complete."""

    def __init__(self, employees: list[Employee], length: int = PIN_LENGTH) -> None:
        self.employees = employees
        self.length = length
        self.value = ""

    @property
    def is_full(self) -> bool:
        return len(self.value) >= self.length

    def press(self, digit: str) -> PinAttempt | None:
        """Append a digit; returns the attempt when this digit completes the PIN."""
        if len(digit) != 1 or not digit.isdecimal() or self.is_full:
            return None
        self.value += digit
        if not self.is_full:
            return None
        employee = find_employee_by_pin(self.employees, self.value)
        if employee is None:
            logger.info("login failed")
        else:
            logger.info("login ok employee=%s role=%s", employee.id, employee.role)
        return PinAttempt(pin=self.value, employee=employee)

    def backspace(self) -> None:
        self.value = self.value[:-1]

    def clear(self) -> None:
        self.value = ""
