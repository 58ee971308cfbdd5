# models/permissions.py
# Permission bits stored on each employee record.
#   bit 0      view own record
#   bit 1      view all / search
#   bits 2..4  modify, create, delete

GENERAL_PERMS = 1       # 0b00001
MANAGEMENT_PERMS = 2    # 0b00010
HR_PERMS = 28           # 0b11100
FULL_PERMS = HR_PERMS | MANAGEMENT_PERMS | GENERAL_PERMS  # 31


def has_permission(permissions: int, mask: int) -> bool:
    # any bit of mask, not all of them
    return (permissions & mask) != 0


def compose_permissions(is_hr: bool, is_management: bool) -> int:
    """Every created or edited employee keeps GENERAL."""
    return (HR_PERMS * int(is_hr)) | (MANAGEMENT_PERMS * int(is_management)) | GENERAL_PERMS
