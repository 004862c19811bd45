"""
lunarcal.engines.lunar_backend
------------------------------
Default civil-to-lunisolar backend, built on the lunar_python library.
The new-moon and leap-month astronomy is entirely the library's.
"""

from __future__ import annotations

from datetime import date

from ..core.errors import BackendUnavailableError, ConversionError
from ..core.types import LunisolarComponents

# Lunar year 1984 opened a sexagenary cycle (Jia-Zi, Wood Rat).
CYCLE_EPOCH_YEAR = 1984


def _need_lunar_python():
    try:
        import lunar_python
        return lunar_python
    except ImportError as e:
        raise BackendUnavailableError('Need lunar_python. Install: pip install lunar_python') from e


def cyclic_year(lunar_year: int) -> int:
    """1-based position of a lunar year in the 60-year cycle."""
    return (lunar_year - CYCLE_EPOCH_YEAR) % 60 + 1


class LunarPythonBackend:
    name = "lunar_python"

    def components(self, d: date) -> LunisolarComponents:
        lp = _need_lunar_python()
        try:
            lunar = lp.Solar.fromYmd(d.year, d.month, d.day).getLunar()
            y, m, day = lunar.getYear(), lunar.getMonth(), lunar.getDay()
        except (AttributeError, NameError, TypeError):
            # library API mismatch, not a date the library rejects
            raise
        # lunar_python rejects dates with plain Exception
        except Exception as e:
            raise ConversionError(f"lunar_python cannot convert {d.isoformat()}: {e}") from e
        return LunisolarComponents(cyclic_year=cyclic_year(y), month=m, day=day)
