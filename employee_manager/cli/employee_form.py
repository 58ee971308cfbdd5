# cli/employee_form.py
from __future__ import annotations

from employee_manager.cli.screen import Screen, print_banner
from employee_manager.exceptions import CancelAction
from employee_manager.models.employee import Employee
from employee_manager.models.permissions import HR_PERMS, MANAGEMENT_PERMS, compose_permissions
from employee_manager.utils.input_handler import (
    is_optional_token, is_token, is_yes_no, prompt_until,
)

SINGLE_WORD = "Value must be a single word without spaces."


def _ask_flag(question: str, current: int | None = None) -> bool:
    label = f"Is employee {question}? (0: no, 1: yes"
    if current is not None:
        label += f"; Current: {current}"
    label += ")"
    return prompt_until(label, is_yes_no, cancellable=True) == "1"


class AddEmployeeScreen(Screen):
    name = "add"
    header_text = "Add a new Employee"

    def render_screen_body(self):
        print_banner("Answer prompts to add new employee (type 'cancel' to go back).")

    def render_interactive_content(self, app):
        try:
            first_name = prompt_until("First Name", is_token, SINGLE_WORD, cancellable=True)
            last_name = prompt_until("Last Name", is_token, SINGLE_WORD, cancellable=True)
            username = prompt_until(
                "Username",
                lambda v: is_token(v) and app.unique_username(v),
                "Username must be a single word and not already taken.",
                cancellable=True,
            )
            password = prompt_until("Password", is_token, SINGLE_WORD, cancellable=True)
            is_hr = _ask_flag("hr")
            is_management = _ask_flag("management")
        except CancelAction:
            print("\nCancelled, nothing was saved.")
            app.navigate_to_screen("menu")
            return

        app.add_employee(first_name, last_name, username, password,
                         compose_permissions(is_hr, is_management))
        app.navigate_to_screen("menu")


class EditScreen(Screen):
    name = "edit"
    header_text = "Edit Employee"

    def __init__(self, employee: Employee):
        self.employee = employee

    def render_screen_body(self):
        print_banner("Answer prompts to employee information (Leave blank for no change).")

    def render_interactive_content(self, app):
        emp = self.employee
        try:
            first_name = prompt_until("First Name", is_optional_token, SINGLE_WORD,
                                      current=emp.first_name, cancellable=True)
            last_name = prompt_until("Last Name", is_optional_token, SINGLE_WORD,
                                     current=emp.last_name, cancellable=True)
            username = prompt_until(
                "Username",
                lambda v: v == "" or (is_token(v) and app.unique_username(v, skip_id=emp.id)),
                "Username must be a single word and not already taken.",
                current=emp.username,
                cancellable=True,
            )
            password = prompt_until("Password", is_optional_token, SINGLE_WORD, cancellable=True)
            is_hr = _ask_flag("hr", int(emp.has_permission(HR_PERMS)))
            is_management = _ask_flag("management", int(emp.has_permission(MANAGEMENT_PERMS)))
        except CancelAction:
            print("\nCancelled, nothing was changed.")
            app.navigate_to_screen("menu")
            return

        app.update_employee(
            emp,
            first_name=first_name,
            last_name=last_name,
            username=username,
            password=password,
            permissions=compose_permissions(is_hr, is_management),
        )
        app.navigate_to_screen("menu")
