from __future__ import annotations
from lunarcal.core.backend import BackendRegistry
from lunarcal.engines.lunar_backend import LunarPythonBackend

def build_registry() -> BackendRegistry:
    backends = {}
    for be in (LunarPythonBackend(),):
        backends[be.name] = be
    return BackendRegistry(backends)
