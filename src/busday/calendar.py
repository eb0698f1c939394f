from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

from ._convert import as_date_column
from .driver import CountResult, count_columns
from .holidays import normalise_holidays
from .weekday import weekdays
from .weekmask import DEFAULT_WEEK_MASK, WeekMask, WeekMaskLike


class BusinessCalendar:
    """
    A week mask and holiday list, validated and normalised once, for running
    many business-day computations against the same configuration.
    """

    def __init__(
        self,
        week_mask: WeekMaskLike = DEFAULT_WEEK_MASK,
        holidays: Any = (),
    ) -> None:
        self._week_mask: WeekMask = WeekMask.parse(week_mask)
        self._holidays: np.ndarray = normalise_holidays(holidays, self._week_mask)

    # ── counting ─────────────────────────────────────────────────────────

    def count(self, start: Any, end: Any) -> CountResult:
        """Same as :func:`busday.business_day_count` with this configuration."""
        return count_columns(
            as_date_column(start),
            as_date_column(end),
            self._week_mask,
            self._holidays,
        )

    def is_business_day(self, dates: Any) -> Union[Optional[bool], np.ma.MaskedArray]:
        column = as_date_column(dates)
        on_mask = self._week_mask.as_array()[weekdays(column.values)]
        is_holiday = np.isin(column.values, self._holidays)
        result = on_mask & ~is_holiday
        result[column.nulls] = False

        if column.scalar:
            return None if column.nulls[0] else bool(result[0])
        return np.ma.MaskedArray(result, mask=column.nulls.copy())

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def week_mask(self) -> WeekMask:
        return self._week_mask

    @property
    def holidays(self) -> np.ndarray:
        return self._holidays

    @property
    def n_business_days(self) -> int:
        return self._week_mask.n_business_days

    def __repr__(self) -> str:
        return (
            f"BusinessCalendar(week_mask={str(self._week_mask)!r}, "
            f"n_business_days={self.n_business_days}, "
            f"holidays={self._holidays.size})"
        )
