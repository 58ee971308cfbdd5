"""Tests for the boxed screen header."""

from employee_manager.utils.terminal import header_height, print_header, render_header


def test_short_title_layout() -> None:
    rows = render_header("0123456789", 44)

    assert header_height("0123456789", 44) == 5
    assert len(rows) == 5
    assert all(len(row) == 44 for row in rows)
    assert rows[0] == rows[-1] == "*" * 44
    assert rows[1] == rows[3] == "*" + " " * 42 + "*"

    title_row = rows[2]
    left, _, right = title_row.partition("0123456789")
    assert left.startswith("*") and right.endswith("*")
    assert abs(len(left) - len(right)) <= 1


def test_odd_padding_is_within_one() -> None:
    title_row = render_header("abc", 44)[2]
    left, _, right = title_row.partition("abc")
    assert abs(len(left) - len(right)) <= 1


def test_long_title_wraps_into_taller_box() -> None:
    title = "x" * 130
    rows = render_header(title, 44)

    assert header_height(title, 44) == 6
    assert len(rows) == 6
    assert all(len(row) == 44 for row in rows)
    assert "".join(row.strip("* ") for row in rows[1:-1]) == title


def test_print_header_adds_blank_line(capsys) -> None:
    print_header("Search Employees")
    out = capsys.readouterr().out.split("\n")

    assert out[5] == ""
    assert "Search Employees" in out[2]
