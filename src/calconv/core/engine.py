from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from .errors import UnknownCalendarError
from .types import CalendarDate, Date

log = logging.getLogger(__name__)

class CalendarEngine(Protocol):
    name: str
    fields: Tuple[str, ...]
    month_names: Tuple[str, ...]

    def info(self) -> Dict[str, Any]: ...
    def from_absolute(self, rd: int) -> Optional[CalendarDate]: ...
    def to_absolute(self, d: CalendarDate) -> Optional[int]: ...
    def from_components(self, components: Sequence[int]) -> CalendarDate: ...
    def to_date(self, d: CalendarDate) -> Date: ...
    def format(self, d: CalendarDate) -> str: ...

@dataclass
class CalendarRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return list(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        log.debug("registering calendar %r", name)
        self._engines[name] = engine
