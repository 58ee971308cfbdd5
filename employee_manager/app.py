# app.py
from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Dict, List, Optional

from employee_manager.cli.employee_form import AddEmployeeScreen
from employee_manager.cli.employee_list import ListScreen, SearchScreen
from employee_manager.cli.login import LoginScreen
from employee_manager.cli.menu import MenuScreen
from employee_manager.cli.profile import FileScreen
from employee_manager.cli.screen import Screen
from employee_manager.config import AppConfig
from employee_manager.data.record_store import RecordStore
from employee_manager.exceptions import UnknownScreenError
from employee_manager.models.employee import Employee

LOGGER = logging.getLogger(__name__)


class Application:
    """
    Owns the employee collection, the logged-in slot and the screen registry.
    Screens receive this object in display() and call back into it.
    """

    def __init__(self, config: AppConfig, store: Optional[RecordStore] = None):
        self.config = config
        self.store = store or RecordStore(config.employee_dir)
        self.employee: Optional[Employee] = None
        self.employees: List[Employee] = []
        self.current_id = 1
        self.screens: Dict[str, Callable[[], Screen]] = {}

        self.store.seed_if_new()
        self.load_employees()
        self.load_screens()

    # ---------- setup ----------
    def load_employees(self) -> None:
        self.employees = self.store.load_all()
        self.current_id = self.store.highest_id()
        LOGGER.info("Loaded %d employees, next id %d", len(self.employees), self.current_id + 1)

    def load_screens(self) -> None:
        # built fresh on every navigation
        self.screens = {
            "login": LoginScreen,
            "menu": MenuScreen,
            "list": ListScreen,
            "search": SearchScreen,
            "add": AddEmployeeScreen,
            "file": FileScreen,
        }

    def register_screen(self, name: str, factory: Callable[[], Screen]) -> None:
        self.screens[name] = factory

    # ---------- navigation ----------
    def start(self) -> None:
        self.navigate_to_screen("login")

    def navigate_to_screen(self, screen_name: str) -> None:
        factory = self.screens.get(screen_name)
        if factory is None:
            LOGGER.error("Navigation to unknown screen %r", screen_name)
            raise UnknownScreenError(screen_name)
        factory().display(self)

    # ---------- session ----------
    @property
    def logged_in_employee(self) -> Optional[Employee]:
        return self.employee

    def login(self, username: str, password: str) -> bool:
        for e in self.employees:
            if e.is_valid_login(username, password):
                self.employee = dataclasses.replace(e)
                LOGGER.info("Login succeeded for %r", username)
                return True
        LOGGER.info("Login failed for %r", username)
        return False

    # ---------- queries ----------
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return next((e for e in self.employees if e.id == employee_id), None)

    def search_employees(self, query: str) -> List[Employee]:
        q = query.lower()
        return [
            e for e in self.employees
            if q in e.first_name.lower() or q in e.last_name.lower() or q in e.username.lower()
        ]

    def unique_username(self, username: str, skip_id: Optional[int] = None) -> bool:
        return not any(
            e.username == username and (skip_id is None or e.id != skip_id)
            for e in self.employees
        )

    # ---------- mutations ----------
    def add_employee(self, first_name: str, last_name: str, username: str,
                     password: str, permissions: int) -> Employee:
        self.current_id += 1
        employee = Employee(self.current_id, first_name, last_name, username, password, permissions)
        if not self.store.write(employee):
            LOGGER.error("Employee %d kept in memory only", employee.id)
        self.employees.append(employee)
        LOGGER.info("Added employee %d (%s)", employee.id, username)
        return employee

    def update_employee(self, employee: Employee, first_name: str = "", last_name: str = "",
                        username: str = "", password: str = "",
                        permissions: Optional[int] = None) -> bool:
        """Blank fields keep their value. Writes the record only if something changed."""
        dirty = False
        if first_name and first_name != employee.first_name:
            employee.first_name = first_name
            dirty = True
        if last_name and last_name != employee.last_name:
            employee.last_name = last_name
            dirty = True
        if username and username != employee.username:
            employee.username = username
            dirty = True
        if password and password != employee.password:
            employee.update_password(password)
            dirty = True
        if permissions is not None and permissions != employee.permissions:
            employee.update_permissions(permissions)
            dirty = True

        if dirty:
            self.store.write(employee)
            LOGGER.info("Updated employee %d", employee.id)
        return dirty

    def remove_by_id(self, employee_id: int) -> bool:
        if self.employee is not None and employee_id == self.employee.id:
            LOGGER.warning("Refusing to remove the logged-in employee %d", employee_id)
            return False

        employee = self.find_by_id(employee_id)
        if employee is None:
            return False

        self.store.remove(employee)
        self.employees = [e for e in self.employees if e is not employee]
        LOGGER.info("Removed employee %d", employee_id)
        return True
