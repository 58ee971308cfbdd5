# cli/profile.py
from __future__ import annotations

from typing import Optional

from employee_manager.cli.employee_form import EditScreen
from employee_manager.cli.screen import Screen
from employee_manager.models.employee import Employee
from employee_manager.models.permissions import HR_PERMS
from employee_manager.utils.input_handler import prompt_until


class FileScreen(Screen):
    """Your own file, or (given an employee) someone else's with an optional edit entry."""

    def __init__(self, employee: Optional[Employee] = None):
        self.employee = employee
        if employee is None:
            self.name = "file"
            self.header_text = "Viewing Your Profile"
        else:
            self.name = "specific-file"
            self.header_text = "Viewing Profile"

    def get_employee(self, app) -> Employee:
        if self.employee is not None:
            return self.employee
        return app.logged_in_employee

    def can_edit(self, app) -> bool:
        viewer = app.logged_in_employee
        return viewer.id != self.get_employee(app).id and viewer.has_permission(HR_PERMS)

    def render_interactive_content(self, app):
        employee = self.get_employee(app)
        can_edit = self.can_edit(app)

        print(employee.to_string(1), end="")
        print("\n0. Return to Menu")
        if can_edit:
            print("1. Edit Employee")
        print()

        choice = prompt_until("Choice", lambda v: v == "0" or (can_edit and v == "1"))
        if choice == "1":
            EditScreen(employee).display(app)
            return
        app.navigate_to_screen("menu")
