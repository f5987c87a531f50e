"""Install the standard calendars into the API registry (import side-effect)."""
import logging

from .api import list_calendars, set_registry
from .bootstrap import build_registry

set_registry(build_registry())
logging.getLogger(__name__).debug("calendars ready: %s", ", ".join(list_calendars()))
