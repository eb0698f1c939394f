"""
Business-day counting between pairs of dates.

Both functions count business days in ``[start, end)``.  When ``end`` comes
before ``start`` the bounds are swapped and both shifted forward by one day,
and the count is negated: for ``a < b``, ``count(b, a) == -count(a + 1, b + 1)``.
This is the rule ``numpy.busday_count`` uses.  It equals ``-count(a, b)``
only when ``a`` and ``b`` are both business days or both are not; Monday to
Saturday counts 5, Saturday to Monday counts -4.

``holidays`` must already be normalised (see
:func:`busday.holidays.normalise_holidays`) and ``n_business_days`` must be
``week_mask.n_business_days``.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence, Union

import numpy as np

from .weekday import increment_weekday, weekday, weekdays
from .weekmask import WeekMask

ArrayLike = Union[int, "np.ndarray"]


def business_day_count_pair(
    start: int,
    end: int,
    week_mask: WeekMask,
    n_business_days: int,
    holidays: Sequence[int],
) -> int:
    swapped = start > end
    if swapped:
        start, end = end + 1, start + 1

    holidays_begin = bisect_left(holidays, start)
    holidays_end = bisect_left(holidays, end, lo=holidays_begin)

    whole_weeks = (end - start) // 7
    count = -(holidays_end - holidays_begin) + whole_weeks * n_business_days

    # At most 6 days remain after the whole weeks.
    start += whole_weeks * 7
    wd = weekday(start)
    while start < end:
        if week_mask.is_business_day(wd):
            count += 1
        start += 1
        wd = increment_weekday(wd)

    return -count if swapped else count


def business_day_count_array(
    start: ArrayLike,
    end: ArrayLike,
    week_mask: WeekMask,
    n_business_days: int,
    holidays: np.ndarray,
) -> np.ndarray:
    """
    Vectorised :func:`business_day_count_pair`.

    ``start`` and ``end`` are broadcast against each other; the result is an
    int64 array of the broadcast shape.
    """
    s, e = np.broadcast_arrays(
        np.asarray(start, dtype=np.int64), np.asarray(end, dtype=np.int64)
    )

    swapped = s > e
    lo = np.where(swapped, e + 1, s)
    hi = np.where(swapped, s + 1, e)

    n_holidays = (
        np.searchsorted(holidays, hi, side="left")
        - np.searchsorted(holidays, lo, side="left")
    )

    whole_weeks = (hi - lo) // 7
    count = whole_weeks * n_business_days - n_holidays

    lo = lo + whole_weeks * 7
    remaining = hi - lo
    wd = weekdays(lo)
    mask = week_mask.as_array()
    for offset in range(6):
        hit = mask[(wd + offset) % 7] & (offset < remaining)
        count += hit

    return np.where(swapped, -count, count)
