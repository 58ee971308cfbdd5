# data/record_store.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from employee_manager.exceptions import StorageError
from employee_manager.models.employee import Employee
from employee_manager.models.permissions import FULL_PERMS

LOGGER = logging.getLogger(__name__)

RECORD_SUFFIX = ".txt"

# first-run account, the only way into an empty system
BOOTSTRAP_EMPLOYEE = dict(
    id=1,
    first_name="Titus",
    last_name="Moore",
    username="testing",
    password="password",
    permissions=FULL_PERMS,
)


def _to_int(token: str, default: int = 0) -> int:
    try:
        return int(token)
    except ValueError:
        return default


def parse_record(line: str) -> Employee:
    """
    'id username first last password permissions' -> Employee
    Short or damaged lines keep defaults (0 / '') for what is missing.
    """
    tokens = line.split()
    tokens += [""] * (6 - len(tokens))
    id_tok, username, first_name, last_name, password, perms_tok = tokens[:6]
    return Employee(
        id=_to_int(id_tok),
        first_name=first_name,
        last_name=last_name,
        username=username,
        password=password,
        permissions=_to_int(perms_tok),
    )


def _stem_key(path: Path):
    # numeric ids first in ascending order, anything else after by name
    try:
        return (0, int(path.stem), "")
    except ValueError:
        return (1, 0, path.name)


class RecordStore:
    def __init__(self, directory: str | Path = "employees"):
        self.directory = Path(directory)

    def path_for(self, employee_id: int) -> Path:
        return self.directory / f"{employee_id}{RECORD_SUFFIX}"

    def ensure_directory(self) -> bool:
        """Create the storage directory. True if it had to be created."""
        if self.directory.is_dir():
            return False
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create storage directory {self.directory}: {exc}") from exc
        return True

    def seed_if_new(self) -> Optional[Employee]:
        """Create the directory on first run and write the bootstrap record into it."""
        if not self.ensure_directory():
            return None
        employee = Employee(**BOOTSTRAP_EMPLOYEE)
        self.write(employee)
        LOGGER.info("Created %s with bootstrap user %r", self.directory, employee.username)
        return employee

    def record_files(self) -> List[Path]:
        if not self.directory.is_dir():
            return []
        files = [p for p in self.directory.iterdir() if p.is_file() and p.suffix == RECORD_SUFFIX]
        return sorted(files, key=_stem_key)

    def read(self, path: Path) -> Optional[Employee]:
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Skipping unreadable record %s: %s", path, exc)
            return None

        lines = [ln for ln in raw.splitlines() if ln.strip()]
        last = lines[-1] if lines else ""
        if len(last.split()) != 6:
            LOGGER.warning("Malformed record %s, loaded with defaults", path)
        employee = parse_record(last)
        employee.file = path
        return employee

    def load_all(self) -> List[Employee]:
        if self.ensure_directory():
            return []
        employees = []
        for path in self.record_files():
            employee = self.read(path)
            if employee is not None:
                employees.append(employee)
        return employees

    def highest_id(self) -> int:
        """Largest numeric filename stem, at least 1."""
        current = 1
        for path in self.record_files():
            try:
                current = max(current, int(path.stem))
            except ValueError:
                LOGGER.warning("Invalid file name: %s", path.name)
        return current

    def write(self, employee: Employee) -> bool:
        """Overwrite the whole record file for this employee."""
        path = self.path_for(employee.id)
        employee.file = path
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            tmp.write_text(employee.to_record() + "\n", encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            LOGGER.error("Could not write record %s: %s", path, exc)
            return False
        return True

    def remove(self, employee: Employee) -> bool:
        path = employee.file or self.path_for(employee.id)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            LOGGER.error("Could not remove record %s: %s", path, exc)
            return False
        return True
