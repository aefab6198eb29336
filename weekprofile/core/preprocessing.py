from __future__ import annotations
from collections.abc import Sequence
import numpy as np
import pandas as pd
from weekprofile.core.buckets import WEEKDAYS

def round_half_away_from_zero(x):
    x = np.asarray(x, dtype=float)
    return np.sign(x) * np.floor(np.abs(x) + 0.5)

def fill_missing_weekdays(slots: Sequence[int | None]) -> pd.Series:
    if len(slots) != len(WEEKDAYS):
        raise ValueError(f"expected {len(WEEKDAYS)} weekday slots, got {len(slots)}")
    if slots[0] is None or slots[-1] is None:
        raise ValueError("first and last weekday slots must be populated")
    out = pd.Series([np.nan if v is None else float(v) for v in slots], index=list(WEEKDAYS), dtype=float)
    # positions are evenly spaced, so "linear" matches index-based interpolation
    return out.interpolate(method="linear", limit_area="inside")
