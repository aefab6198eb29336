from __future__ import annotations
import datetime as dt
import re

_DATE_KEY = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

class ValidationError(Exception):
    pass

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]

def parse_date_key(key) -> dt.date | None:
    """Return the calendar date named by a ``YYYY-MM-DD`` key, or None.

    Out-of-range fields are rejected rather than normalized, so
    ``2020-02-30`` and ``2020-13-01`` both come back as None.
    """
    if not isinstance(key, str):
        return None
    m = _DATE_KEY.fullmatch(key)
    if m is None:
        return None
    year, month, day = (int(g) for g in m.groups())
    if year < dt.MINYEAR or not 1 <= month <= 12:
        return None
    if not 1 <= day <= days_in_month(year, month):
        return None
    return dt.date(year, month, day)

def is_valid_date_key(key) -> bool:
    return parse_date_key(key) is not None
