# cli/login.py
from __future__ import annotations

from employee_manager.cli.screen import Screen, print_banner


class LoginScreen(Screen):
    name = "login"
    header_text = "Welcome to FooBar Employee Management"

    def render_screen_body(self):
        print_banner("Login to Continue")

    def render_interactive_content(self, app):
        # no lockout: ask until a pair matches
        while True:
            username = input("Username> ").strip()
            password = input("Password> ").strip()
            if app.login(username, password):
                break
            print("\nInvalid login, please try again.")

        app.navigate_to_screen("menu")
