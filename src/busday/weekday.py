import numpy as np

# 1970-01-01 (epoch day 0) is a Thursday; Monday is weekday 0.
_EPOCH_OFFSET: int = 4


def weekday(day: int) -> int:
    # Python's % takes the sign of the divisor, so negative days stay in 0..6.
    return (day - _EPOCH_OFFSET) % 7


def increment_weekday(wd: int) -> int:
    return 0 if wd == 6 else wd + 1


def weekdays(days: np.ndarray) -> np.ndarray:
    """Vectorised :func:`weekday`; ``np.mod`` is floored like ``%``."""
    return np.mod(np.asarray(days, dtype=np.int64) - _EPOCH_OFFSET, 7)
