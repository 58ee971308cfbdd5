"""Tests for the flat-file record store."""

import logging

from employee_manager.data.record_store import RecordStore, parse_record
from employee_manager.models.employee import Employee
from employee_manager.models.permissions import FULL_PERMS


def test_write_then_read(store: RecordStore) -> None:
    store.ensure_directory()
    employee = Employee(5, "Ada", "Lovelace", "ada", "engine", 3)

    assert store.write(employee)
    assert employee.file == store.directory / "5.txt"
    assert (store.directory / "5.txt").read_text() == "5 ada Ada Lovelace engine 3\n"

    loaded = store.read(store.directory / "5.txt")
    assert loaded == employee
    assert loaded.file == employee.file


def test_write_overwrites_whole_record(store: RecordStore) -> None:
    store.ensure_directory()
    employee = Employee(2, "Bob", "Builder", "bobthebuilderofthings", "pw", 1)
    store.write(employee)
    employee.username = "bob"
    store.write(employee)

    assert (store.directory / "2.txt").read_text() == "2 bob Bob Builder pw 1\n"
    assert not (store.directory / "2.txt.tmp").exists()


def test_write_failure_returns_false(store: RecordStore) -> None:
    # directory never created
    assert not store.write(Employee(1, "a", "b", "c", "d", 1))


def test_load_all_creates_missing_directory(store: RecordStore) -> None:
    assert store.load_all() == []
    assert store.directory.is_dir()


def test_seed_if_new(store: RecordStore) -> None:
    seeded = store.seed_if_new()

    assert seeded.id == 1
    assert (store.directory / "1.txt").read_text() == f"1 testing Titus Moore password {FULL_PERMS}\n"
    assert store.seed_if_new() is None


def test_seed_skipped_for_existing_empty_directory(store: RecordStore) -> None:
    store.directory.mkdir(parents=True)

    assert store.seed_if_new() is None
    assert store.load_all() == []


def test_highest_id_uses_filename_stems(store: RecordStore, caplog) -> None:
    store.ensure_directory()
    for i in (1, 3, 7):
        store.write(Employee(i, "F", "L", f"user{i}", "pw", 1))
    (store.directory / "notes.txt").write_text("hello\n")

    with caplog.at_level(logging.WARNING):
        assert store.highest_id() == 7
    assert "notes.txt" in caplog.text


def test_highest_id_empty_is_one(store: RecordStore) -> None:
    store.ensure_directory()
    assert store.highest_id() == 1


def test_malformed_records_are_admitted(store: RecordStore) -> None:
    store.ensure_directory()
    (store.directory / "4.txt").write_text("4 shorty Sam\n")
    (store.directory / "6.txt").write_text("x bad First Last pw notanumber\n")
    store.write(Employee(2, "Good", "Record", "good", "pw", 1))

    employees = store.load_all()

    assert [e.username for e in employees] == ["good", "shorty", "bad"]
    shorty = employees[1]
    assert (shorty.id, shorty.first_name, shorty.last_name, shorty.password, shorty.permissions) == (4, "Sam", "", "", 0)
    bad = employees[2]
    assert (bad.id, bad.permissions) == (0, 0)


def test_non_record_files_ignored(store: RecordStore) -> None:
    store.ensure_directory()
    store.write(Employee(1, "A", "B", "ab", "pw", 1))
    (store.directory / "1.txt.tmp").write_text("junk")
    (store.directory / "README").write_text("junk")

    assert [e.id for e in store.load_all()] == [1]


def test_last_line_wins(store: RecordStore) -> None:
    store.ensure_directory()
    (store.directory / "9.txt").write_text("9 early E Arly pw 1\n9 late L8 Er pw 2\n\n")

    employee = store.read(store.directory / "9.txt")

    assert (employee.username, employee.permissions) == ("late", 2)


def test_remove(store: RecordStore) -> None:
    store.ensure_directory()
    employee = Employee(3, "A", "B", "ab", "pw", 1)
    store.write(employee)

    assert store.remove(employee)
    assert not (store.directory / "3.txt").exists()
    # already gone
    assert store.remove(employee)


def test_parse_record_ignores_extra_tokens() -> None:
    employee = parse_record("8 user First Last pw 5 trailing")
    assert (employee.id, employee.username, employee.permissions) == (8, "user", 5)
