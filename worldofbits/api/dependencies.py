"""FastAPI dependency injection: provides the EngineManager for the running app."""

from __future__ import annotations

from worldofbits.api.engine_manager import EngineManager

_engine_manager: EngineManager | None = None


def set_engine_manager(manager: EngineManager | None) -> None:
    global _engine_manager
    _engine_manager = manager


def get_engine_manager() -> EngineManager:
    if _engine_manager is None:
        raise RuntimeError("EngineManager not initialized; server not started correctly.")
    return _engine_manager
