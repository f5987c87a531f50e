class CalconvError(Exception):
    """Base error."""

class UnknownCalendarError(CalconvError, KeyError):
    """Raised when a calendar tag is not registered."""

class UnknownHolidayError(CalconvError, KeyError):
    """Raised when a holiday name is not registered."""

class UndefinedAbsoluteDateError(CalconvError, TypeError):
    """Raised when an absolute date is requested for a purely cyclical date
    (a bare Mayan Haab or Tzolkin date has no year to anchor it)."""
