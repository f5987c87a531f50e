"""
calconv.engines.calendar
------------------------
Binds a pure-data CalendarSpec to the generic capability set: conversion to
and from absolute dates, construction from raw components, and formatting.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from calconv.core.errors import UndefinedAbsoluteDateError
from calconv.core.types import CalendarDate, Date, components_of
from calconv.engines.specs import CalendarSpec


class CalendarEngine:
    """
    One calendar, fully configured. All methods are pure; options from the
    spec (e.g. the Mayan correlation) are passed to every conversion call.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.fields: Tuple[str, ...] = spec.fields
        self.month_names: Tuple[str, ...] = spec.month_names

    @property
    def cyclical(self) -> bool:
        return self.spec.to_absolute is None

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "record": self.spec.record.__name__,
            "fields": list(self.fields),
            "month_names": list(self.month_names),
            "cyclical": self.cyclical,
            "options": dict(self.spec.options),
        }

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def from_absolute(self, rd: int) -> Optional[CalendarDate]:
        return self.spec.from_absolute(rd, **self.spec.options)

    def to_absolute(self, d: CalendarDate) -> Optional[int]:
        if self.spec.to_absolute is None:
            raise UndefinedAbsoluteDateError(
                f"A {self.name} date repeats every cycle and has no absolute date; "
                "anchor it with an *_on_or_before function instead."
            )
        return self.spec.to_absolute(d, **self.spec.options)

    # ---------------------------------------------------------
    # Generic date
    # ---------------------------------------------------------

    def from_components(self, components: Sequence[int]) -> CalendarDate:
        if len(components) != len(self.fields):
            raise ValueError(f"{self.name} takes {len(self.fields)} components {self.fields}, got {len(components)}")
        values = [
            bool(c) if kind is bool else int(c)
            for c, kind in zip(components, self.spec.field_types)
        ]
        return self.spec.record(*values)

    def components(self, d: CalendarDate) -> Tuple[int, ...]:
        return components_of(d)

    def to_date(self, d: CalendarDate) -> Date:
        return Date(self.name, self.components(d), self.fields, self.month_names, engine=self)

    def format(self, d: CalendarDate) -> str:
        return self.spec.formatter(d)
