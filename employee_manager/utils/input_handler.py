# utils/input_handler.py
from typing import Callable, Optional

from employee_manager.exceptions import CancelAction

INVALID_OPTION = "Please input a valid option."


def get_input(prompt: str, allow_empty: bool = False, current: Optional[str] = None,
              cancellable: bool = False) -> str:
    label = prompt
    if current is not None:
        label += f" (Current: {current})"
    label += "> "

    while True:
        v = input(label).strip()

        if cancellable and v.lower() == "cancel":
            raise CancelAction()

        if not v and allow_empty:
            return ""
        if not v:
            print("Please enter a value." + (" Type 'cancel' to go back." if cancellable else ""))
            continue
        return v


def prompt_until(prompt: str, is_valid: Callable[[str], bool], error: str = INVALID_OPTION,
                 current: Optional[str] = None, cancellable: bool = False) -> str:
    """Keep asking until is_valid accepts the answer (empty answers are passed to it too)."""
    while True:
        v = get_input(prompt, allow_empty=True, current=current, cancellable=cancellable)
        if is_valid(v):
            return v
        print(f"\n{error}")


# ---------- predicates ----------
def is_int(text: str) -> bool:
    try:
        int(text)
    except ValueError:
        return False
    return True


def is_yes_no(text: str) -> bool:
    return text in ("0", "1")


def is_token(text: str) -> bool:
    # records are space separated on disk, so fields are single words
    return bool(text) and not any(c.isspace() for c in text)


def is_optional_token(text: str) -> bool:
    return text == "" or is_token(text)


def is_menu_choice(text: str, option_count: int) -> bool:
    return is_int(text) and 0 <= int(text) <= option_count
