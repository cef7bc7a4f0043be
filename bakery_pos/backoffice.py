"""Back-office section lookup."""

from __future__ import annotations

from bakery_pos.backoffice_base import BackOfficeScreen
from bakery_pos.backoffice_employees import EmployeesScreen
from bakery_pos.backoffice_inventory import InventoryScreen
from bakery_pos.backoffice_menu import MenuScreen
from bakery_pos.backoffice_reports import DashboardScreen, ReportsScreen
from bakery_pos.backoffice_settings import SettingsScreen

SECTION_SCREENS: dict[str, type[BackOfficeScreen]] = {
    "dashboard": DashboardScreen,
    "reports": ReportsScreen,
    "inventory": InventoryScreen,
    "menu": MenuScreen,
    "employees": EmployeesScreen,
    "settings": SettingsScreen,
}


def back_office_screen(section: str = "dashboard") -> BackOfficeScreen:
    """Instantiate the screen for ``section``; unknown names fall back to the dashboard."""
    return SECTION_SCREENS.get(section, DashboardScreen)()
