from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Please enter {field_name}.")
    return value.strip()


def normalize_email(value: str) -> str:
    return (value or "").strip().lower()


def normalize_room_code(value: str) -> str:
    return (value or "").strip().upper()
