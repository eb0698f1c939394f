from __future__ import annotations

import logging
from typing import Any

import numpy as np

from ._convert import as_date_column
from .weekday import weekdays
from .weekmask import WeekMask

logger = logging.getLogger(__name__)


def normalise_holidays(holidays: Any, week_mask: WeekMask) -> np.ndarray:
    """
    Sort and deduplicate holidays, and drop those that are not business days.

    A holiday on a weekend is never counted as a business day in the first
    place, so keeping it would subtract it twice.  Null entries are dropped.
    Returns a read-only int64 array of epoch days.
    """
    column = as_date_column(holidays)
    raw = column.values[~column.nulls]

    # np.unique sorts and keeps one of each value.
    unique = np.unique(raw)
    out = unique[week_mask.as_array()[weekdays(unique)]]
    out.setflags(write=False)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "normalised %d holidays to %d (%d null, %d duplicate, %d off-mask)",
            column.values.size,
            out.size,
            int(column.nulls.sum()),
            raw.size - unique.size,
            unique.size - out.size,
        )
    return out
