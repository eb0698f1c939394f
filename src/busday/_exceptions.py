class CalendarError(ValueError):
    """Raised for an invalid week mask or operands the calendar cannot count."""
