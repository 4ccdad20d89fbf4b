from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_NAME_RE = re.compile(r"^[A-Za-z\s\-']+$")
# Letters are optional but must come before at least one digit: EMP001, 12345, STF2024.
_EMPLOYEE_ID_RE = re.compile(r"^[A-Za-z]*\d+[A-Za-z\d]*$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def validate_employee_name(value: str) -> str:
    name = require_non_empty(value, "Employee name")
    if not _NAME_RE.match(name):
        raise ValidationError("Employee name should only contain letters, spaces, hyphens, and apostrophes")
    return name


def validate_employee_id(value: str) -> str:
    employee_id = require_non_empty(value, "Employee ID")
    if not _EMPLOYEE_ID_RE.match(employee_id):
        raise ValidationError(
            "Employee ID should contain numbers. Letters are optional but must be followed by numbers."
        )
    return employee_id
