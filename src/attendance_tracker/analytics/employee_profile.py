from __future__ import annotations

from ..core.constants import EMAIL_DOMAIN

POSITIONS = ("Manager", "Developer", "Analyst", "Specialist", "Coordinator", "Assistant")


def id_hash(employee_id: str) -> int:
    """Sum of character codes; stable across runs unlike built-in hash()."""
    return sum(ord(ch) for ch in employee_id or "")


def position_for(employee_id: str) -> str:
    return POSITIONS[id_hash(employee_id) % len(POSITIONS)]


def email_for(employee_name: str, employee_id: str) -> str:
    clean_name = ".".join((employee_name or "").lower().split())
    return f"{clean_name}.{(employee_id or '').lower()}@{EMAIL_DOMAIN}"
