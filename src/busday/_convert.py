from __future__ import annotations

from typing import Any, NamedTuple

import numpy as np

from ._exceptions import CalendarError


class DateColumn(NamedTuple):
    values: np.ndarray   # int64 epoch days, 0 where null
    nulls: np.ndarray    # bool, True where null
    scalar: bool


def as_date_column(x: Any) -> DateColumn:
    """
    Read a scalar, sequence, ndarray or masked array of dates as a 1-D column
    of epoch days plus a null mask.

    Integers are taken as epoch days; ``datetime64`` values are floored to
    days with ``NaT`` as null; ``None`` (scalar or in an object array) and
    masked entries are null.
    """
    if x is None or x is np.ma.masked:
        return DateColumn(np.zeros(1, dtype=np.int64), np.ones(1, dtype=bool), True)

    if isinstance(x, np.ma.MaskedArray):
        nulls = np.ma.getmaskarray(x)
        arr = np.ma.getdata(x)
    else:
        arr = np.asarray(x)
        nulls = np.zeros(arr.shape, dtype=bool)

    scalar = arr.ndim == 0
    if arr.ndim > 1:
        raise CalendarError(f"Dates must be a scalar or 1-D; got shape {arr.shape}.")
    arr = np.atleast_1d(arr)
    nulls = np.atleast_1d(nulls)
    if arr.size == 0 and arr.dtype.kind != "M":
        # np.asarray([]) is float64
        arr = arr.astype(np.int64)

    kind = arr.dtype.kind
    if kind == "M":
        days = arr.astype("datetime64[D]")
        nulls = nulls | np.isnat(days)
        values = days.view(np.int64).copy()
    elif kind in "iu":
        values = arr.astype(np.int64)
    elif kind == "O":
        nulls = nulls | np.array([v is None for v in arr], dtype=bool)
        for v in arr[~nulls]:
            if not _is_integer(v):
                raise CalendarError(
                    f"Object date arrays may only hold integers and None; got {v!r}."
                )
        values = np.where(nulls, 0, arr).astype(np.int64)
    else:
        raise CalendarError(f"Unsupported dtype for dates: {arr.dtype}.")

    values[nulls] = 0
    return DateColumn(values, nulls, scalar)


def _is_integer(v: Any) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, (bool, np.bool_))
