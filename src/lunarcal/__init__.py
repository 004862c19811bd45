"""lunarcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    convert,
    generate_month_grid,
    lunisolar_components,
    list_backends,
    register_backend,
)
from .core.types import CalendarCell, EMPTY_DETAIL, GridSpec, LunarDetail, LunisolarComponents
from .engines.grid import weeks
from .view import CalendarView, ViewPolicy

__all__ = [
    "convert",
    "generate_month_grid",
    "lunisolar_components",
    "list_backends",
    "register_backend",
    "weeks",
    "CalendarCell",
    "EMPTY_DETAIL",
    "GridSpec",
    "LunarDetail",
    "LunisolarComponents",
    "CalendarView",
    "ViewPolicy",
]
