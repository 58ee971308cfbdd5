# models/employee.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from employee_manager.models.permissions import has_permission


def credentials_match(stored: str, given: str) -> bool:
    # plain text comparison; hashing would go here
    return stored == given


@dataclass
class Employee:
    id: int
    first_name: str
    last_name: str
    username: str
    password: str = field(repr=False)
    permissions: int = 0
    file: Optional[Path] = field(default=None, compare=False)   # where the record was read/written

    def is_valid_login(self, username: str, password: str) -> bool:
        return self.username == username and credentials_match(self.password, password)

    def has_permission(self, mask: int) -> bool:
        return has_permission(self.permissions, mask)

    def update_password(self, password: str) -> None:
        self.password = password

    def update_permissions(self, permissions: int) -> None:
        self.permissions = permissions

    def to_string(self, mode: int = 0) -> str:
        """
        mode 0: one line summary  '3: John Moore, jmoore'
        mode 1: detail block with id, name and username
        """
        if mode == 1:
            return (
                f"ID: {self.id}\n"
                f"Name: {self.first_name} {self.last_name}\n"
                f"Username: {self.username}\n"
            )
        return f"{self.id}: {self.first_name} {self.last_name}, {self.username}\n"

    def to_record(self) -> str:
        return f"{self.id} {self.username} {self.first_name} {self.last_name} {self.password} {self.permissions}"
