# cli/menu.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from employee_manager.cli.employee_list import ListScreen
from employee_manager.cli.screen import Screen, print_banner
from employee_manager.models.employee import Employee
from employee_manager.models.permissions import GENERAL_PERMS, HR_PERMS, MANAGEMENT_PERMS
from employee_manager.utils.input_handler import is_menu_choice, prompt_until

LOGGER = logging.getLogger(__name__)

# (screen name, label, any of these bits makes the option visible)
MENU_ITEMS = (
    ("list", "View Employees", HR_PERMS | MANAGEMENT_PERMS),
    ("search", "Search Employees", HR_PERMS | MANAGEMENT_PERMS),
    ("add", "Add Employee", HR_PERMS),
    ("remove", "Remove Employee", HR_PERMS),
    ("file", "View Your File", GENERAL_PERMS),
)


@dataclass
class MenuOption:
    menu_position: int
    screen_name: str
    name: str


def build_menu_options(employee: Employee) -> List[MenuOption]:
    """Visible options numbered 1..n with no gaps for hidden ones."""
    options = []
    for screen_name, label, mask in MENU_ITEMS:
        if employee.has_permission(mask):
            options.append(MenuOption(len(options) + 1, screen_name, label))
    return options


class MenuScreen(Screen):
    name = "menu"
    header_text = "Welcome!"

    def __init__(self):
        self.options: Optional[List[MenuOption]] = None

    def print_screen_header(self, app):
        employee = app.logged_in_employee
        self.header_text = f"Welcome {employee.first_name} {employee.last_name}!"
        super().print_screen_header(app)

    def render_screen_body(self):
        print_banner("What do you need to do today?")

    def render_interactive_content(self, app):
        if self.options is None:
            self.options = build_menu_options(app.logged_in_employee)

        for o in self.options:
            print(f"{o.menu_position}. {o.name}")
        print("\n0. Exit Application\n")

        choice = int(prompt_until("Choice", lambda v: is_menu_choice(v, len(self.options))))
        if choice == 0:
            LOGGER.info("Exit requested by %r", app.logged_in_employee.username)
            return

        option = self.options[choice - 1]
        if option.screen_name == "remove":
            ListScreen(remove=True).display(app)
            return
        app.navigate_to_screen(option.screen_name)
