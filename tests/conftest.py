# tests/conftest.py

from datetime import date

import pytest

import lunarcal
from lunarcal.core.errors import ConversionError
from lunarcal.core.types import LunisolarComponents


class StubBackend:
    """Cheap deterministic backend: lunar month/day mirror the Gregorian ones."""

    def components(self, d: date) -> LunisolarComponents:
        return LunisolarComponents(cyclic_year=(d.year - 1984) % 60 + 1, month=d.month, day=min(d.day, 30))


class FailingBackend:
    def components(self, d: date) -> LunisolarComponents:
        raise ConversionError(f"outside supported era: {d}")


@pytest.fixture
def stub_backend():
    lunarcal.register_backend("stub", StubBackend(), overwrite=True)
    return "stub"


@pytest.fixture
def failing_backend():
    lunarcal.register_backend("failing", FailingBackend(), overwrite=True)
    return "failing"
