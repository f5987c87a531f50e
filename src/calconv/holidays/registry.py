from __future__ import annotations
import logging
from typing import Callable, Dict, List, Union

from ..core.errors import UnknownHolidayError

log = logging.getLogger(__name__)

HolidayResult = Union[int, List[int]]
HolidayFunc = Callable[[int], HolidayResult]
_REGISTRY: Dict[str, HolidayFunc] = {}

def register_holiday(name: str, fn: HolidayFunc) -> None:
    log.debug("registering holiday %r", name)
    _REGISTRY[name] = fn

def get_holiday(name: str) -> HolidayFunc:
    if name not in _REGISTRY:
        raise UnknownHolidayError(f"Unknown holiday '{name}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[name]

def compute_holiday(name: str, year: int) -> List[int]:
    """Absolute dates of a named holiday in a Gregorian year, as a sorted list."""
    out = get_holiday(name)(year)
    return sorted(out) if isinstance(out, list) else [out]

def list_holidays() -> List[str]:
    return sorted(_REGISTRY)
