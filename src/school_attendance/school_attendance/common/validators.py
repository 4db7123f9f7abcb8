from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from ..core.constants import MAX_STATUS_LENGTH
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(payload: Mapping[str, Any], names: Iterable[str]) -> None:
    """Raise one ValidationError listing every missing field."""

    missing = [name for name in names if is_missing(payload.get(name))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", fields=missing)


def require_non_empty(value: Any, field_name: str) -> str:
    if is_missing(value) or not isinstance(value, str):
        raise ValidationError(f"{field_name} is required", fields=[field_name])
    return value.strip()


def require_positive_int(value: Any, field_name: str) -> int:
    if is_missing(value):
        raise ValidationError(f"{field_name} is required", fields=[field_name])
    # Only real ints and digit strings; floats and bools are never truncated into an id.
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        number = int(value.strip())
    else:
        raise ValidationError(f"{field_name} must be an integer", fields=[field_name])
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer", fields=[field_name])
    return number


def require_date(value: Any, field_name: str) -> date:
    if is_missing(value):
        raise ValidationError(f"{field_name} is required", fields=[field_name])
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date", fields=[field_name])
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date", fields=[field_name])


def require_status(value: Any, field_name: str = "status") -> str:
    status = require_non_empty(value, field_name)
    if len(status) > MAX_STATUS_LENGTH:
        raise ValidationError(f"{field_name} is limited to {MAX_STATUS_LENGTH} characters", fields=[field_name])
    return status


def optional_bool(value: Any, field_name: str) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValidationError(f"{field_name} must be a boolean", fields=[field_name])
