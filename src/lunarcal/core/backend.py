from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Protocol

from .types import LunisolarComponents

class CalendarBackend(Protocol):
    """Civil-to-lunisolar primitive. Raises ConversionError when it cannot convert."""
    def components(self, d: date) -> LunisolarComponents: ...

@dataclass
class BackendRegistry:
    """Named calendar backends; convert() and the grid pick one by name."""
    _backends: Dict[str, CalendarBackend]

    def get(self, name: str) -> CalendarBackend:
        try:
            return self._backends[name]
        except KeyError:
            raise KeyError(
                f"No calendar backend named '{name}'; registered backends: {', '.join(self.list())}"
            ) from None

    def list(self) -> List[str]:
        return sorted(self._backends)

    def register(self, name: str, backend: CalendarBackend, *, overwrite: bool = False) -> None:
        if name in self._backends and not overwrite:
            raise KeyError(f"Calendar backend '{name}' is already registered (pass overwrite=True to replace it)")
        if not callable(getattr(backend, "components", None)):
            raise TypeError(f"Calendar backend '{name}' has no components(date) method")
        self._backends[name] = backend
