"""calconv public API.

Keep this surface small: users should mostly interact with functions re-exported here.
The per-calendar conversion functions live in calconv.engines.<calendar>, the
holiday functions in calconv.holidays.<group>.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_engine,
    get_calendar,
    register_calendar,
    from_absolute,
    to_absolute,
    convert,
    format_date,
    day_info,
    explain,
    holiday,
    holiday_dates,
    list_holidays,
)
from .core.errors import (
    CalconvError,
    UnknownCalendarError,
    UnknownHolidayError,
    UndefinedAbsoluteDateError,
)
from .core.types import (
    Date,
    Gregorian,
    Iso,
    Julian,
    Islamic,
    Hebrew,
    MayanLongCount,
    MayanHaab,
    MayanTzolkin,
    French,
    OldHinduSolar,
    OldHinduLunar,
)

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_engine",
    "get_calendar",
    "register_calendar",
    "from_absolute",
    "to_absolute",
    "convert",
    "format_date",
    "day_info",
    "explain",
    "holiday",
    "holiday_dates",
    "list_holidays",
    "CalconvError",
    "UnknownCalendarError",
    "UnknownHolidayError",
    "UndefinedAbsoluteDateError",
    "Date",
    "Gregorian",
    "Iso",
    "Julian",
    "Islamic",
    "Hebrew",
    "MayanLongCount",
    "MayanHaab",
    "MayanTzolkin",
    "French",
    "OldHinduSolar",
    "OldHinduLunar",
]
