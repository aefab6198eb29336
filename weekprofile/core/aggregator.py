from __future__ import annotations
import logging
from collections.abc import Mapping
import pandas as pd
from weekprofile.core.buckets import WEEKDAYS, MONDAY, SUNDAY, accumulate
from weekprofile.core.data_validation import ValidationError, is_valid_date_key
from weekprofile.core.preprocessing import fill_missing_weekdays, round_half_away_from_zero

logger = logging.getLogger(__name__)

BOUNDARY_MESSAGE = "Input must contain at least Monday and Sunday"
FRAME_COLUMNS = ["day", "value", "interpolated"]

def _resolve(entries: Mapping[str, int]) -> list[tuple[str, int, bool]]:
    slots = accumulate(entries)
    missing = [WEEKDAYS[i] for i, v in enumerate(slots) if v is None]
    if logger.isEnabledFor(logging.DEBUG):
        accepted = sum(1 for key in entries if is_valid_date_key(key))
        logger.debug("accepted %d of %d entries, interpolating %s", accepted, len(entries), missing or "nothing")

    if not missing:
        return [(day, value, False) for day, value in zip(WEEKDAYS, slots)]

    if slots[MONDAY] is None or slots[SUNDAY] is None:
        raise ValidationError(BOUNDARY_MESSAGE)

    filled = fill_missing_weekdays(slots)
    rows = []
    for day, value in zip(WEEKDAYS, slots):
        if value is None:
            rows.append((day, int(round_half_away_from_zero(filled[day])), True))
        else:
            rows.append((day, value, False))
    return rows

def aggregate(entries: Mapping[str, int] | None) -> dict[str, int]:
    """Sum values per weekday and fill missing weekdays by linear interpolation.

    Keys that are not valid ``YYYY-MM-DD`` calendar dates are ignored. Raises
    ValidationError when some weekday is missing and Monday or Sunday has no
    data. The result is keyed Mon..Sun in that order.
    """
    if not entries:
        return {}
    return {day: value for day, value, _ in _resolve(entries)}

def aggregate_frame(entries: Mapping[str, int] | None) -> pd.DataFrame:
    if not entries:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    return pd.DataFrame(_resolve(entries), columns=FRAME_COLUMNS)
