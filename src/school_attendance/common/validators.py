from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")
_HHMM_RE = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def require_uuid(value: Optional[str], field_name: str = "id") -> str:
    if not value or not _UUID_RE.match(str(value)):
        raise ValidationError(f"{field_name} must be a UUID")
    return str(value).lower()


def require_iso_date(value: str, field_name: str = "Date") -> str:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError(f"{field_name} must use the YYYY-MM-DD format")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid calendar date")
    return value


def require_int_range(value, field_name: str, *, min_value: int, max_value: Optional[int] = None) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be an integer")
    if number < min_value or (max_value is not None and number > max_value):
        bound = f"between {min_value} and {max_value}" if max_value is not None else f">= {min_value}"
        raise ValidationError(f"{field_name} must be {bound}")
    return number


def require_float_range(value, field_name: str, *, min_value: float, max_value: float) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not (min_value <= number <= max_value):
        raise ValidationError(f"{field_name} must be between {min_value} and {max_value}")
    return number


def require_hhmm(value: Optional[str], field_name: str) -> str:
    """24h ``HH:MM``; zero-padded so strings compare in time order."""
    if not isinstance(value, str) or not _HHMM_RE.match(value):
        raise ValidationError(f"{field_name} must use the HH:MM format")
    return value


def optional_text(value: Optional[str], field_name: str, *, max_length: int, min_length: int = 0) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if len(value) > max_length or len(value) < min_length:
        raise ValidationError(f"{field_name} must be between {min_length} and {max_length} characters")
    return value


def require_choice(enum_cls, value, field_name: str):
    """Member of ``enum_cls`` whose value is ``value``."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
