from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Union

from .core.engine import CalendarEngine, CalendarRegistry
from .core.errors import UnknownCalendarError
from .core.time import to_rd
from .core.types import CalendarDate, Date
from . import holidays as _holidays

DateLike = Union[Date, CalendarDate]
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_engine(calendar: str) -> CalendarEngine:
    return _reg().get(calendar)

def get_calendar(name: str, **options: Any) -> CalendarEngine:
    """
    Fresh engine for a standard calendar, optionally with overridden options,
    e.g. get_calendar("mayanLongCount", correlation=1137140).
    """
    from .engines.specs import ALL_SPECS
    from .engines.calendar import CalendarEngine as _Engine
    if name not in ALL_SPECS:
        raise UnknownCalendarError(f"Unknown calendar spec '{name}'. Available: {list(ALL_SPECS)}")
    spec = ALL_SPECS[name]
    if options:
        spec = spec.tweak(**options)
    return _Engine(spec)

def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversion
# ============================================================

def from_absolute(calendar: str, rd: int) -> Optional[Date]:
    """Generic date of rd in a calendar, or None outside the calendar's domain."""
    eng = _reg().get(calendar)
    d = eng.from_absolute(rd)
    return None if d is None else eng.to_date(d)

def to_absolute(d: Union[DateLike, date]) -> Optional[int]:
    if isinstance(d, date):
        return to_rd(d)
    return d.to_absolute()

def convert(d: Union[DateLike, date], calendar: str) -> Optional[Date]:
    rd = to_absolute(d)
    return None if rd is None else from_absolute(calendar, rd)

def format_date(d: DateLike) -> str:
    return d.format()

def day_info(rd: Union[int, date]) -> Dict[str, Optional[Date]]:
    """Every registered calendar's view of one day."""
    if isinstance(rd, date):
        rd = to_rd(rd)
    return {name: from_absolute(name, rd) for name in _reg().list()}

def explain(rd: Union[int, date]) -> Dict[str, Optional[str]]:
    """Like day_info, formatted for display."""
    return {name: (None if d is None else d.format()) for name, d in day_info(rd).items()}

# ============================================================
# Holidays
# ============================================================

def holiday(name: str, year: int) -> List[int]:
    """Absolute dates of a named holiday in a Gregorian year."""
    return _holidays.compute_holiday(name, year)

def holiday_dates(name: str, year: int, *, calendar: str = "gregorian") -> List[Date]:
    out = []
    for rd in holiday(name, year):
        d = from_absolute(calendar, rd)
        if d is not None:
            out.append(d)
    return out

def list_holidays() -> List[str]:
    return _holidays.list_holidays()
