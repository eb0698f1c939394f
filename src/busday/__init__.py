"""
busday
~~~~~~

Business-day counting over columns of epoch-day dates.  A week mask marks
which weekdays are business days; holidays are removed on top of it.  Dates
are whole days since 1970-01-01, or ``datetime64`` values.

Basic usage::

    from busday import business_day_count

    business_day_count(4, 11)                         # Mon → next Mon: 5
    business_day_count(4, 11, holidays=[5])           # Tuesday off: 4
    business_day_count(11, 4)                         # reversed: -5

Columns are broadcast against scalars, and nulls propagate::

    import numpy as np
    starts = np.ma.masked_array([4, 5, 6], mask=[False, True, False])
    business_day_count(starts, 11)                    # [5, --, 3]

For many calls against one configuration::

    from busday import BusinessCalendar

    cal = BusinessCalendar("Mon Tue Wed Thu", holidays=[5, 12])
    cal.count(starts, 25)
    cal.is_business_day(np.arange(4, 11))

Public API
----------
business_day_count  Count business days between pairs of dates.
BusinessCalendar    Reusable week mask + holiday configuration.
WeekMask            Validated 7-day business-day mask.
normalise_holidays  Sort, deduplicate and mask-filter a holiday list.
CalendarError       Raised for invalid configuration or operands.
"""

from __future__ import annotations

import logging

from busday._exceptions import CalendarError
from busday.calendar import BusinessCalendar
from busday.driver import business_day_count
from busday.holidays import normalise_holidays
from busday.weekmask import DEFAULT_WEEK_MASK, WeekMask

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BusinessCalendar",
    "CalendarError",
    "DEFAULT_WEEK_MASK",
    "WeekMask",
    "business_day_count",
    "normalise_holidays",
]
