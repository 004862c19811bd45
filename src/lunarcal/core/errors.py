class LunarCalError(Exception):
    """Base error."""

class ConversionError(LunarCalError):
    """Raised by a backend that cannot produce lunisolar components for a date."""

class BackendUnavailableError(LunarCalError):
    """Raised when a backend's calendar library is not installed."""

class GridRangeError(LunarCalError):
    """Raised when a month grid's padding days fall outside date.min..date.max."""
