# cli/employee_list.py
from __future__ import annotations

from typing import List, Optional

from employee_manager.cli.profile import FileScreen
from employee_manager.cli.screen import Screen, print_banner
from employee_manager.models.employee import Employee
from employee_manager.utils.input_handler import get_input, is_int, prompt_until


class ListScreen(Screen):
    """
    Three modes:
    - plain list of every employee (pick one to view)
    - search results for a query (pick one to view)
    - remove mode (pick one to delete, list shows again afterwards)
    """

    def __init__(self, employees: Optional[List[Employee]] = None,
                 search_query: Optional[str] = None, remove: bool = False):
        self.employees = employees
        self.is_remove = remove
        if remove:
            self.name = "remove"
            self.header_text = "Remove Employee"
        elif employees is not None:
            self.name = "search-list"
            self.header_text = f'Showing employees like "{search_query}"'
        else:
            self.name = "list"
            self.header_text = "Viewing All Employees"

    def get_employees(self, app) -> List[Employee]:
        if self.employees is not None:
            return self.employees
        return app.employees

    def visible_employees(self, app) -> List[Employee]:
        own_id = app.logged_in_employee.id
        return [e for e in self.get_employees(app) if not (self.is_remove and e.id == own_id)]

    def render_screen_body(self):
        if self.is_remove:
            print_banner("Insert Id of Employee to Remove")
        else:
            print_banner("Insert Id of Employee to Edit/View")

    def render_interactive_content(self, app):
        shown = self.visible_employees(app)
        for e in shown:
            print(e.to_string(0), end="")
        print("\n0. Return to Menu\n")

        ids = {e.id for e in shown}
        choice = prompt_until(
            "Choice",
            lambda v: is_int(v) and (int(v) == 0 or int(v) in ids),
            error="Please input the ID of a listed employee.",
        )
        employee_id = int(choice)

        if employee_id == 0:
            app.navigate_to_screen("menu")
            return

        if self.is_remove:
            app.remove_by_id(employee_id)
            self.display(app)
            return

        FileScreen(app.find_by_id(employee_id)).display(app)


class SearchScreen(Screen):
    name = "search"
    header_text = "Search Employees"

    def render_screen_body(self):
        print_banner("Insert Search Query by names, or username to Search")

    def render_interactive_content(self, app):
        query = get_input("Query")
        results = app.search_employees(query)
        ListScreen(results, search_query=query).display(app)
