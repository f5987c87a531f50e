"""Holiday functions, keyed by name in the holiday registry.

Importing this package registers the standard holidays.
"""

from . import christian, islamic, jewish, us  # noqa: F401
from .registry import compute_holiday, get_holiday, list_holidays, register_holiday

__all__ = ["compute_holiday", "get_holiday", "list_holidays", "register_holiday"]
