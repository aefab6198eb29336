from __future__ import annotations
import datetime as dt
from collections.abc import Mapping
from weekprofile.core.data_validation import parse_date_key

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONDAY = 0
SUNDAY = len(WEEKDAYS) - 1

def weekday_index(d: dt.date) -> int:
    # isoweekday() is Mon=1..Sun=7
    return d.isoweekday() - 1

def accumulate(entries: Mapping[str, int]) -> list[int | None]:
    """Sum values into seven Monday-first slots; unpopulated slots stay None."""
    slots: list[int | None] = [None] * len(WEEKDAYS)
    for key, value in entries.items():
        d = parse_date_key(key)
        if d is None:
            continue
        idx = weekday_index(d)
        slots[idx] = value if slots[idx] is None else slots[idx] + value
    return slots
