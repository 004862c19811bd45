# tests/test_backend.py

import sys
from datetime import date
from unittest.mock import patch

import pytest

import lunarcal
from lunarcal.core.errors import BackendUnavailableError, ConversionError
from lunarcal.engines.lunar_backend import LunarPythonBackend, cyclic_year


def test_default_backend_registered():
    assert "lunar_python" in lunarcal.list_backends()

def test_unknown_backend():
    with pytest.raises(KeyError):
        lunarcal.convert(date(2024, 1, 1), backend="nope")

def test_duplicate_registration_needs_overwrite(stub_backend):
    with pytest.raises(KeyError):
        lunarcal.register_backend(stub_backend, LunarPythonBackend())
    lunarcal.register_backend(stub_backend, LunarPythonBackend(), overwrite=True)
    assert stub_backend in lunarcal.list_backends()

@pytest.mark.parametrize(
    "lunar_year, expected",
    [(1984, 1), (2025, 42), (2043, 60), (2044, 1), (1924, 1), (1900, 37)],
)
def test_cyclic_year(lunar_year, expected):
    assert cyclic_year(lunar_year) == expected

def test_library_failure_becomes_conversion_error():
    be = LunarPythonBackend()
    with patch("lunar_python.Solar.Solar.fromYmd", side_effect=Exception("wrong solar year")):
        with pytest.raises(ConversionError):
            be.components(date(2024, 1, 1))
        assert lunarcal.convert(date(2024, 1, 1)) == lunarcal.EMPTY_DETAIL

def test_failing_backend_surfaces_in_raw_components(failing_backend):
    with pytest.raises(ConversionError):
        lunarcal.lunisolar_components(date(2024, 1, 1), backend=failing_backend)

def test_missing_library(monkeypatch):
    monkeypatch.setitem(sys.modules, "lunar_python", None)
    with pytest.raises(BackendUnavailableError):
        LunarPythonBackend().components(date(2024, 1, 1))

def test_library_api_mismatch_is_not_swallowed():
    with patch("lunar_python.Solar.Solar.fromYmd", side_effect=AttributeError("getLunar")):
        with pytest.raises(AttributeError):
            LunarPythonBackend().components(date(2024, 1, 1))
        with pytest.raises(AttributeError):
            lunarcal.convert(date(2024, 1, 1))

def test_unknown_backend_message_lists_registered():
    with pytest.raises(KeyError, match="lunar_python"):
        lunarcal.lunisolar_components(date(2024, 1, 1), backend="nope")

def test_register_rejects_object_without_components():
    with pytest.raises(TypeError):
        lunarcal.register_backend("broken", object())
    assert "broken" not in lunarcal.list_backends()
