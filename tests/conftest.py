"""
Shared test fixtures for the screen-light test suite.

Everything runs on ManualTimers: nothing fires until a test advances the
clock, so timing assertions are exact.
"""

import pytest

from screen_light.capabilities import MockFullscreen, MockWakeLock
from screen_light.config import ScreenLightConfig
from screen_light.light import ScreenLight
from screen_light.timers import ManualTimers
from screen_light.visibility import VisibilityController
from screen_light.gestures import GestureRecognizer


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def timers():
    """Virtual clock starting at t=0."""
    return ManualTimers()


# ---------------------------------------------------------------------------
# Core components
# ---------------------------------------------------------------------------

@pytest.fixture
def controller(timers):
    """VisibilityController in its launch state (panel open)."""
    return VisibilityController(timers)


@pytest.fixture
def recognizer(controller):
    return GestureRecognizer(controller)


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

@pytest.fixture
def wake_lock():
    return MockWakeLock()


@pytest.fixture
def fullscreen():
    return MockFullscreen()


# ---------------------------------------------------------------------------
# ScreenLight factories
# ---------------------------------------------------------------------------

def make_light(timers=None, wake_lock=None, fullscreen=None, config=None) -> ScreenLight:
    """
    Create a ScreenLight wired to in-memory backends.

    Plain function (not a fixture) for inline use with overrides.
    Importable as:

        from conftest import make_light
    """
    return ScreenLight(
        timers=timers or ManualTimers(),
        wake_lock=wake_lock or MockWakeLock(),
        fullscreen=fullscreen or MockFullscreen(),
        config=config or ScreenLightConfig(),
    )


@pytest.fixture
def light(timers, wake_lock, fullscreen):
    """ScreenLight with default config, sharing the timers/capability fixtures."""
    return make_light(timers=timers, wake_lock=wake_lock, fullscreen=fullscreen)
