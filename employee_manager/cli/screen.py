# cli/screen.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from employee_manager.utils.terminal import HEADER_WIDTH, clear_screen, print_header

if TYPE_CHECKING:
    from employee_manager.app import Application


class Screen(ABC):
    """
    One full terminal page. display() always runs
    header -> body -> interactive content, in that order.
    The interactive part may navigate on to another screen before returning.
    """
    name = ""
    header_text = ""
    header_width = HEADER_WIDTH

    def display(self, app: Application) -> None:
        if app.config.clear_screen:
            clear_screen()
        self.print_screen_header(app)
        self.render_screen_body()
        self.render_interactive_content(app)

    def print_screen_header(self, app: Application) -> None:
        print_header(self.header_text, self.header_width)

    def render_screen_body(self) -> None:
        pass

    @abstractmethod
    def render_interactive_content(self, app: Application) -> None:
        ...


def print_banner(text: str) -> None:
    print(f"***  {text}  ***")
    print()
