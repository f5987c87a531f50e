from __future__ import annotations
from calconv.core.engine import CalendarRegistry
from calconv.engines.calendar import CalendarEngine
from calconv.engines.specs import ALL_SPECS

def build_registry() -> CalendarRegistry:
    """One engine per standard calendar, in canonical order, with default options."""
    return CalendarRegistry({name: CalendarEngine(spec) for name, spec in ALL_SPECS.items()})
