"""
calconv.engines.specs
---------------------
Pure-data descriptions of the supported calendars. ALL_SPECS is the closed
set of calendar tags the registry is built from.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..core.types import (
    French,
    Gregorian,
    Hebrew,
    Islamic,
    Iso,
    Julian,
    MayanHaab,
    MayanLongCount,
    MayanTzolkin,
    OldHinduLunar,
    OldHinduSolar,
)
from . import french, gregorian, hebrew, hindu, islamic, iso, julian, mayan
from .names import (
    FRENCH_MONTH_NAMES,
    GREGORIAN_MONTH_NAMES,
    HEBREW_MONTH_NAMES,
    HINDU_LUNAR_MONTH_NAMES,
    HINDU_SOLAR_MONTH_NAMES,
    ISLAMIC_MONTH_NAMES,
    MAYAN_HAAB_MONTH_NAMES,
)


@dataclass(frozen=True)
class CalendarSpec:
    """
    name:          calendar tag used by the generic Date
    record:        frozen dataclass holding the calendar's components
    from_absolute: rd -> record (or None outside the calendar's domain)
    to_absolute:   record -> rd (or None for impossible dates);
                   None for cyclical calendars without a year
    formatter:     record -> display string
    options:       keyword arguments passed to both conversions
    """
    name: str
    record: type
    from_absolute: Callable[..., Any]
    to_absolute: Optional[Callable[..., Optional[int]]]
    formatter: Callable[[Any], str]
    month_names: Tuple[str, ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(self.record))

    @property
    def field_types(self) -> Tuple[type, ...]:
        return tuple(bool if f.type in (bool, "bool") else int for f in dataclasses.fields(self.record))

    def tweak(self, **options: Any) -> "CalendarSpec":
        unknown = set(options) - set(self.options)
        if unknown:
            raise ValueError(f"Calendar '{self.name}' has no option(s) {sorted(unknown)}; available: {sorted(self.options)}")
        return replace(self, options={**self.options, **options})


def _mayan_options() -> Dict[str, Any]:
    return {"correlation": mayan.MAYAN_CORRELATION}


GREGORIAN = CalendarSpec(
    name="gregorian",
    record=Gregorian,
    from_absolute=gregorian.gregorian_from_absolute,
    to_absolute=gregorian.absolute_from_gregorian,
    formatter=gregorian.format_gregorian,
    month_names=GREGORIAN_MONTH_NAMES,
)

ISO = CalendarSpec(
    name="iso",
    record=Iso,
    from_absolute=iso.iso_from_absolute,
    to_absolute=iso.absolute_from_iso,
    formatter=iso.format_iso,
)

JULIAN = CalendarSpec(
    name="julian",
    record=Julian,
    from_absolute=julian.julian_from_absolute,
    to_absolute=julian.absolute_from_julian,
    formatter=julian.format_julian,
    month_names=GREGORIAN_MONTH_NAMES,
)

ISLAMIC = CalendarSpec(
    name="islamic",
    record=Islamic,
    from_absolute=islamic.islamic_from_absolute,
    to_absolute=islamic.absolute_from_islamic,
    formatter=islamic.format_islamic,
    month_names=ISLAMIC_MONTH_NAMES,
)

HEBREW = CalendarSpec(
    name="hebrew",
    record=Hebrew,
    from_absolute=hebrew.hebrew_from_absolute,
    to_absolute=hebrew.absolute_from_hebrew,
    formatter=hebrew.format_hebrew,
    month_names=HEBREW_MONTH_NAMES,
)

MAYAN_LONG_COUNT = CalendarSpec(
    name="mayanLongCount",
    record=MayanLongCount,
    from_absolute=mayan.mayan_long_count_from_absolute,
    to_absolute=mayan.absolute_from_mayan_long_count,
    formatter=mayan.format_mayan_long_count,
    options=_mayan_options(),
)

MAYAN_HAAB = CalendarSpec(
    name="mayanHaab",
    record=MayanHaab,
    from_absolute=mayan.mayan_haab_from_absolute,
    to_absolute=None,
    formatter=mayan.format_mayan_haab,
    month_names=MAYAN_HAAB_MONTH_NAMES,
    options=_mayan_options(),
)

MAYAN_TZOLKIN = CalendarSpec(
    name="mayanTzolkin",
    record=MayanTzolkin,
    from_absolute=mayan.mayan_tzolkin_from_absolute,
    to_absolute=None,
    formatter=mayan.format_mayan_tzolkin,
    options=_mayan_options(),
)

FRENCH = CalendarSpec(
    name="french",
    record=French,
    from_absolute=french.french_from_absolute,
    to_absolute=french.absolute_from_french,
    formatter=french.format_french,
    month_names=FRENCH_MONTH_NAMES,
)

OLD_HINDU_SOLAR = CalendarSpec(
    name="oldHinduSolar",
    record=OldHinduSolar,
    from_absolute=hindu.old_hindu_solar_from_absolute,
    to_absolute=hindu.absolute_from_old_hindu_solar,
    formatter=hindu.format_old_hindu_solar,
    month_names=HINDU_SOLAR_MONTH_NAMES,
)

OLD_HINDU_LUNAR = CalendarSpec(
    name="oldHinduLunar",
    record=OldHinduLunar,
    from_absolute=hindu.old_hindu_lunar_from_absolute,
    to_absolute=hindu.absolute_from_old_hindu_lunar,
    formatter=hindu.format_old_hindu_lunar,
    month_names=HINDU_LUNAR_MONTH_NAMES,
)


ALL_SPECS: Dict[str, CalendarSpec] = {
    spec.name: spec
    for spec in (
        GREGORIAN,
        ISO,
        JULIAN,
        ISLAMIC,
        HEBREW,
        MAYAN_LONG_COUNT,
        MAYAN_HAAB,
        MAYAN_TZOLKIN,
        FRENCH,
        OLD_HINDU_SOLAR,
        OLD_HINDU_LUNAR,
    )
}
