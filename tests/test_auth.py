from bakery_pos.auth import PinPad, find_employee_by_pin
from bakery_pos.data import default_employees
from bakery_pos.models import Employee


def _press_all(pad, digits):
    attempt = None
    for digit in digits:
        attempt = pad.press(digit)
    return attempt


def test_manager_pin_authenticates():
    attempt = _press_all(PinPad(default_employees()), "1234")

    assert attempt.ok
    assert attempt.employee.name == "Sarah Johnson"
    assert attempt.employee.is_manager


def test_unknown_pin_fails():
    pad = PinPad(default_employees())

    attempt = _press_all(pad, "0000")

    assert not attempt.ok
    pad.clear()
    assert pad.value == ""


def test_submits_only_on_last_digit():
    pad = PinPad(default_employees())

    assert pad.press("5") is None
    assert pad.press("6") is None
    assert pad.press("7") is None
    assert pad.press("8").employee.name == "Mike Chen"


def test_full_pad_ignores_extra_digits_and_non_digits():
    pad = PinPad(default_employees())
    _press_all(pad, "1234")

    assert pad.press("5") is None
    assert pad.press("x") is None
    assert pad.value == "1234"


def test_backspace_drops_last_digit():
    pad = PinPad(default_employees())
    pad.press("1")
    pad.press("2")

    pad.backspace()

    assert pad.value == "1"


def test_first_matching_pin_wins():
    employees = [
        Employee(id="a", name="First", pin="1111"),
        Employee(id="b", name="Second", pin="1111"),
    ]

    assert find_employee_by_pin(employees, "1111").name == "First"


def test_inactive_employee_can_still_log_in():
    employees = [Employee(id="a", name="Off Duty", pin="2222", is_active=False)]

    assert find_employee_by_pin(employees, "2222") is not None


def test_superscript_digits_are_not_pin_digits():
    pad = PinPad(default_employees())

    assert pad.press("²") is None
    assert pad.value == ""
