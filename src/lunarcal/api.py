from __future__ import annotations

from datetime import date
from functools import partial
from typing import List, Optional, Tuple

from .core.backend import BackendRegistry, CalendarBackend
from .core.types import CalendarCell, GridSpec, LunarDetail, LunisolarComponents
from .engines import converter as _converter
from .engines.grid import month_grid

DEFAULT_BACKEND = "lunar_python"
_registry: Optional[BackendRegistry] = None

def set_registry(reg: BackendRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> BackendRegistry:
    if _registry is None:
        raise RuntimeError("Backend registry not initialized")
    return _registry

def list_backends() -> List[str]:
    return _reg().list()

def register_backend(name: str, backend: CalendarBackend, *, overwrite: bool = False) -> None:
    _reg().register(name, backend, overwrite=overwrite)

def lunisolar_components(d: date, *, backend: str = DEFAULT_BACKEND) -> LunisolarComponents:
    """Raw (cyclic_year, month, day); raises ConversionError where convert() degrades."""
    return _reg().get(backend).components(d)

def convert(d: date, *, backend: str = DEFAULT_BACKEND) -> LunarDetail:
    return _converter.convert(d, _reg().get(backend))

def generate_month_grid(
    anchor: date,
    *,
    spec: GridSpec = GridSpec(),
    backend: str = DEFAULT_BACKEND,
) -> Tuple[CalendarCell, ...]:
    """
    Grid of spec.cells days around the month containing anchor.

    Raises GridRangeError for the first month of year 1 (unless it starts the
    week) and the last month of year 9999.
    """
    be = _reg().get(backend)
    return month_grid(anchor, partial(_converter.convert, backend=be), spec)
