from __future__ import annotations

import logging
from typing import Any, Optional, Union

import numpy as np

from ._convert import DateColumn, as_date_column
from ._exceptions import CalendarError
from .count import business_day_count_array, business_day_count_pair
from .holidays import normalise_holidays
from .weekmask import DEFAULT_WEEK_MASK, WeekMask, WeekMaskLike

logger = logging.getLogger(__name__)

CountResult = Union[Optional[int], np.ma.MaskedArray]


def business_day_count(
    start: Any,
    end: Any,
    week_mask: WeekMaskLike = DEFAULT_WEEK_MASK,
    holidays: Any = (),
) -> CountResult:
    """
    Count the business days between ``start`` and ``end``, excluding ``end``.

    ``start`` and ``end`` are epoch days (or ``datetime64``), each a scalar or
    a 1-D column; a unit-length side is broadcast against the other.  Nulls
    (``None``, ``NaT`` or masked entries) give null results.  The count is
    negative when ``end`` is before ``start``.

    Two scalars give an ``int`` (``None`` if either is null); anything else
    gives an int32 masked array.

    Raises :class:`CalendarError` if ``week_mask`` has no business day, before
    any date is looked at.
    """
    mask = WeekMask.parse(week_mask)
    normalised = normalise_holidays(holidays, mask)
    return count_columns(
        as_date_column(start), as_date_column(end), mask, normalised
    )


def count_columns(
    start: DateColumn,
    end: DateColumn,
    week_mask: WeekMask,
    holidays: np.ndarray,
) -> CountResult:
    """Broadcast the pairwise count over two columns; holidays pre-normalised."""
    n_business_days = week_mask.n_business_days

    if start.scalar and end.scalar:
        if start.nulls[0] or end.nulls[0]:
            return None
        return business_day_count_pair(
            int(start.values[0]),
            int(end.values[0]),
            week_mask,
            n_business_days,
            holidays,
        )

    n_start, n_end = start.values.size, end.values.size

    if n_end == 1:
        logger.debug("broadcasting scalar end over %d start dates", n_start)
        if end.nulls[0]:
            return _all_null(n_start)
        values = business_day_count_array(
            start.values, end.values[0], week_mask, n_business_days, holidays
        )
        nulls = start.nulls
    elif n_start == 1:
        logger.debug("broadcasting scalar start over %d end dates", n_end)
        if start.nulls[0]:
            return _all_null(n_end)
        values = business_day_count_array(
            start.values[0], end.values, week_mask, n_business_days, holidays
        )
        nulls = end.nulls
    else:
        if n_start != n_end:
            raise CalendarError(
                f"start and end must have the same length or length 1; "
                f"got {n_start} and {n_end}."
            )
        logger.debug("counting %d date pairs elementwise", n_start)
        values = business_day_count_array(
            start.values, end.values, week_mask, n_business_days, holidays
        )
        nulls = start.nulls | end.nulls

    values = values.astype(np.int32)
    values[nulls] = 0
    return np.ma.MaskedArray(values, mask=nulls.copy())


def _all_null(n: int) -> np.ma.MaskedArray:
    return np.ma.MaskedArray(np.zeros(n, dtype=np.int32), mask=np.ones(n, dtype=bool))
