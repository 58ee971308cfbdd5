# utils/terminal.py
import math
import os
from typing import List

HEADER_WIDTH = 44
MIN_HEADER_HEIGHT = 5


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def header_height(title: str, width: int = HEADER_WIDTH) -> int:
    line_count = math.ceil(len(title) / (width - 4))
    return max(line_count + 2, MIN_HEADER_HEIGHT)


def _bordered(text: str, width: int) -> str:
    left = " " * math.ceil((width - len(text)) / 2)
    right = " " * (width - len(left) - len(text))
    return "*" + left[1:] + text + right[:-1] + "*"


def render_header(title: str, width: int = HEADER_WIDTH) -> List[str]:
    """
    Asterisk box around a centered title, e.g. for width 20:
        ********************
        *                  *
        *      Title       *
        *                  *
        ********************
    Titles wider than width - 4 continue on the following rows.
    """
    inner = width - 4
    chunks = [title[i:i + inner] for i in range(0, len(title), inner)] or [""]
    height = header_height(title, width)
    start = max(1, _round_half_up(height / 2 - math.floor(len(chunks) / 2)) - 1)

    rows = []
    for i in range(height):
        if i in (0, height - 1):
            rows.append("*" * width)
        elif start <= i < start + len(chunks):
            rows.append(_bordered(chunks[i - start], width))
        else:
            rows.append("*" + " " * (width - 2) + "*")
    return rows


def print_header(title: str, width: int = HEADER_WIDTH) -> None:
    for row in render_header(title, width):
        print(row)
    print()


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")
