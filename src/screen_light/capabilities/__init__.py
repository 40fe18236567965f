"""Capability backends - wake lock and fullscreen."""

from .base import FullscreenService, WakeLockHandle, WakeLockService
from .mock import MockFullscreen, MockWakeLock, UnsupportedFullscreen, UnsupportedWakeLock

DEFAULT_BACKEND = "mock"


def get_wake_lock(backend: str = "auto") -> WakeLockService:
    """Get wake lock backend by name ("mock", "unsupported", "auto")."""
    if backend == "auto":
        backend = DEFAULT_BACKEND

    if backend == "unsupported":
        return UnsupportedWakeLock()
    return MockWakeLock()


def get_fullscreen(backend: str = "auto") -> FullscreenService:
    """Get fullscreen backend by name ("mock", "unsupported", "auto")."""
    if backend == "auto":
        backend = DEFAULT_BACKEND

    if backend == "unsupported":
        return UnsupportedFullscreen()
    return MockFullscreen()


__all__ = [
    "WakeLockHandle",
    "WakeLockService",
    "FullscreenService",
    "MockWakeLock",
    "MockFullscreen",
    "UnsupportedWakeLock",
    "UnsupportedFullscreen",
    "get_wake_lock",
    "get_fullscreen",
]
