from __future__ import annotations

from datetime import date, time
from typing import Any, Optional

from flask import request

from ..core.exceptions import ValidationError
from .datetime_utils import parse_hhmm, parse_iso_date, today_local


def json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def date_value(raw: Any, field_name: str, *, default: Optional[date] = None) -> date:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    try:
        return parse_iso_date(str(raw).strip())
    except ValueError as err:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from err


def time_value(raw: Any, field_name: str) -> Optional[time]:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    try:
        return parse_hhmm(str(raw))
    except ValueError as err:
        raise ValidationError(f"{field_name} must be an HH:MM time") from err


def int_value(raw: Any, field_name: str) -> Optional[int]:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as err:
        raise ValidationError(f"{field_name} must be an integer") from err


def query_date(name: str, *, default_today: bool = True) -> date:
    return date_value(request.args.get(name), name, default=today_local() if default_today else None)
