"""Shared fixtures: temporary storage, scripted terminal input."""

import builtins
from pathlib import Path

import pytest

from employee_manager.app import Application
from employee_manager.config import AppConfig
from employee_manager.data.record_store import RecordStore
from employee_manager.models.employee import Employee
from employee_manager.models.permissions import FULL_PERMS, GENERAL_PERMS, MANAGEMENT_PERMS


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(employee_dir=tmp_path / "employees", clear_screen=False)


@pytest.fixture
def store(config: AppConfig) -> RecordStore:
    return RecordStore(config.employee_dir)


@pytest.fixture
def populated_store(store: RecordStore) -> RecordStore:
    """Store holding an HR admin, a manager and a general employee."""
    store.ensure_directory()
    for employee in (
        Employee(1, "Titus", "Moore", "testing", "password", FULL_PERMS),
        Employee(2, "John", "Moore", "jmoore", "pw2", MANAGEMENT_PERMS | GENERAL_PERMS),
        Employee(3, "Ada", "Camp", "moosecamp", "pw3", GENERAL_PERMS),
    ):
        store.write(employee)
    return store


@pytest.fixture
def app(config: AppConfig, populated_store: RecordStore) -> Application:
    return Application(config, populated_store)


class ScriptedInput:
    """Replays answers to input(); raises EOFError once the script runs out."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)


@pytest.fixture
def scripted_input(monkeypatch):
    def install(*answers):
        script = ScriptedInput(answers)
        monkeypatch.setattr(builtins, "input", script)
        return script

    return install
