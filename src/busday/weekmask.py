from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from ._exceptions import CalendarError

_DAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

WeekMaskLike = Union["WeekMask", str, Sequence[bool], Sequence[int], np.ndarray]


@dataclass(frozen=True, slots=True)
class WeekMask:
    """
    Which weekdays are business days, indexed Monday (0) to Sunday (6).

    At least one day must be a business day; a mask without one can never
    count anything and is rejected at construction.
    """

    days: tuple[bool, ...]

    def __post_init__(self) -> None:
        days = tuple(bool(d) for d in self.days)
        if len(days) != 7:
            raise CalendarError(
                f"Week mask must have exactly 7 entries; got {len(days)}."
            )
        if not any(days):
            raise CalendarError("Week mask must have at least one business day.")
        object.__setattr__(self, "days", days)

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def parse(cls, value: WeekMaskLike) -> WeekMask:
        """
        Build a mask from any of the accepted spellings::

            WeekMask.parse("1111100")
            WeekMask.parse("Mon Tue Wed Thu Fri")
            WeekMask.parse([1, 1, 1, 1, 1, 0, 0])
        """
        if isinstance(value, WeekMask):
            return value
        if isinstance(value, str):
            return cls._parse_str(value)

        arr = np.asarray(value)
        if arr.ndim != 1 or arr.dtype.kind not in "biu":
            raise CalendarError(
                f"Week mask must be a 1-D sequence of booleans; got {value!r}."
            )
        if arr.dtype.kind != "b" and not np.isin(arr, (0, 1)).all():
            raise CalendarError(f"Week mask entries must be 0 or 1; got {value!r}.")
        return cls(tuple(bool(x) for x in arr))

    @classmethod
    def _parse_str(cls, value: str) -> WeekMask:
        text = value.strip()
        if len(text) == 7 and set(text) <= {"0", "1"}:
            return cls(tuple(c == "1" for c in text))

        days = [False] * 7
        for token in text.split():
            name = token.capitalize()
            if name not in _DAY_NAMES:
                raise CalendarError(f"Unrecognised weekday {token!r} in week mask.")
            days[_DAY_NAMES.index(name)] = True
        return cls(tuple(days))

    # ── lookups ──────────────────────────────────────────────────────────

    def is_business_day(self, weekday: int) -> bool:
        if not 0 <= weekday <= 6:
            raise IndexError(f"weekday must be in 0..6; got {weekday}.")
        return self.days[weekday]

    @property
    def n_business_days(self) -> int:
        return sum(self.days)

    def as_array(self) -> np.ndarray:
        arr = np.array(self.days, dtype=bool)
        arr.setflags(write=False)
        return arr

    def __str__(self) -> str:
        return "".join("1" if d else "0" for d in self.days)


DEFAULT_WEEK_MASK: WeekMask = WeekMask((True, True, True, True, True, False, False))
