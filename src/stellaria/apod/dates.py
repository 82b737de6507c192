"""Calendar date codec for the APOD wire format (YYYY-MM-DD)."""

from __future__ import annotations

import re
from datetime import date, datetime

from ..core.errors import DateFormatError

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def ensure_calendar_date(value: object, *, name: str = "date") -> date:
    # datetime is a date subclass; only naive calendar dates are accepted.
    if isinstance(value, datetime) or not isinstance(value, date):
        raise TypeError(f"{name} must be datetime.date")
    return value


def encode_date(value: date) -> str:
    return ensure_calendar_date(value).isoformat()


def decode_date(text: str) -> date:
    if not isinstance(text, str) or _DATE_PATTERN.fullmatch(text) is None:
        raise DateFormatError(f"date must match YYYY-MM-DD: {text!r}")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise DateFormatError(f"invalid calendar date: {text!r}") from exc


__all__ = [
    "DATE_FORMAT",
    "ensure_calendar_date",
    "encode_date",
    "decode_date",
]
