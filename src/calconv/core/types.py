from __future__ import annotations
from dataclasses import astuple, dataclass, field
from typing import Any, ClassVar, Optional, Tuple


class CalendarDate:
    """
    Capability shared by all calendar records: to_date, to_absolute, format.
    Each record names its calendar tag; the registered engine for that tag
    does the actual work.
    """
    calendar: ClassVar[str]

    def _engine(self):
        from ..api import get_engine
        return get_engine(self.calendar)

    def to_date(self) -> "Date":
        return self._engine().to_date(self)

    def to_absolute(self) -> Optional[int]:
        return self._engine().to_absolute(self)

    def format(self) -> str:
        return self._engine().format(self)


@dataclass(frozen=True)
class Gregorian(CalendarDate):
    calendar: ClassVar[str] = "gregorian"
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class Iso(CalendarDate):
    calendar: ClassVar[str] = "iso"
    year: int
    week: int
    day: int

@dataclass(frozen=True)
class Julian(CalendarDate):
    calendar: ClassVar[str] = "julian"
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class Islamic(CalendarDate):
    calendar: ClassVar[str] = "islamic"
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class Hebrew(CalendarDate):
    calendar: ClassVar[str] = "hebrew"
    year: int
    month: int  # 1 = Nisan, 7 = Tishri, 13 = Adar II (leap years only)
    day: int

@dataclass(frozen=True)
class MayanLongCount(CalendarDate):
    calendar: ClassVar[str] = "mayanLongCount"
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int

@dataclass(frozen=True)
class MayanHaab(CalendarDate):
    calendar: ClassVar[str] = "mayanHaab"
    day: int    # 0..19
    month: int  # 1..19, month 19 (Uayeb) has 5 days

@dataclass(frozen=True)
class MayanTzolkin(CalendarDate):
    calendar: ClassVar[str] = "mayanTzolkin"
    number: int  # 1..13
    name: int    # 1..20

@dataclass(frozen=True)
class French(CalendarDate):
    calendar: ClassVar[str] = "french"
    year: int
    month: int  # 13 = sansculottides
    day: int

@dataclass(frozen=True)
class OldHinduSolar(CalendarDate):
    calendar: ClassVar[str] = "oldHinduSolar"
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class OldHinduLunar(CalendarDate):
    calendar: ClassVar[str] = "oldHinduLunar"
    year: int
    month: int
    leap_month: bool
    day: int


@dataclass(frozen=True)
class Date:
    """
    Calendar-agnostic view of a date: a calendar tag plus its raw integer
    components (booleans are stored as 0/1).

    Conversion between calendars always goes through the absolute date.
    """
    calendar: str
    components: Tuple[int, ...]
    component_names: Tuple[str, ...] = field(default=(), compare=False)
    month_names: Tuple[str, ...] = field(default=(), compare=False, repr=False)
    # engine that built this date; None means the registered one for the tag
    engine: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(int(c) for c in self.components))
        if self.component_names and len(self.component_names) != len(self.components):
            raise ValueError(
                f"{self.calendar}: expected {len(self.component_names)} components "
                f"{self.component_names}, got {len(self.components)}"
            )

    @classmethod
    def of(cls, calendar: str, *components: int) -> "Date":
        """Build a Date for a registered calendar, filling in its name tables."""
        from ..api import get_engine
        eng = get_engine(calendar)
        return cls(calendar, tuple(components), eng.fields, eng.month_names)

    def _engine(self):
        if self.engine is not None:
            return self.engine
        from ..api import get_engine
        return get_engine(self.calendar)

    def to_calendar_date(self) -> CalendarDate:
        return self._engine().from_components(self.components)

    def to_absolute(self) -> Optional[int]:
        return self._engine().to_absolute(self.to_calendar_date())

    def convert_to(self, calendar: str) -> Optional["Date"]:
        from ..api import get_engine
        target = get_engine(calendar)
        rd = self.to_absolute()
        if rd is None:
            return None
        d = target.from_absolute(rd)
        return None if d is None else target.to_date(d)

    def format(self) -> str:
        return self._engine().format(self.to_calendar_date())

    def __str__(self) -> str:
        return f"{self.calendar}: {list(self.components)}"


def components_of(d: Any) -> Tuple[int, ...]:
    """Field values of a calendar record as plain ints."""
    return tuple(int(v) for v in astuple(d))
