# fitdiet/utils.py
import math
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from flask import request

from .errors import ValidationError


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what SQLite stores for DATETIME columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    # "today" is always the server's UTC calendar day
    return utcnow().date()


def iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def round_half_up(value) -> int:
    if value is None:
        return 0
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any, field: str, cast=float, positive=False):
    """
    Convert a JSON value to ``cast`` (int or float).

    Integers are accepted as "500", 500 or 500.0; fractional input for an
    int field is rounded half-up.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be a number")

    result = round_half_up(number) if cast is int else number
    if positive and result <= 0:
        raise ValidationError(f"{field} must be greater than 0")
    return result


def parse_optional_number(value: Any, field: str, cast=float):
    if is_blank(value):
        return None
    return parse_number(value, field, cast=cast)


def parse_date(value: Any, field: str = "date") -> date:
    """ISO ``YYYY-MM-DD``; missing values mean today (UTC)."""
    if is_blank(value):
        return utc_today()
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD)")
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD)")


def json_body() -> dict:
    """The request's JSON object; an empty or unparsable body reads as ``{}``."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
