"""Transient indicators: show, then hide on their own after a fixed delay."""

from .timers import TimerScheduler

BRIGHTNESS_INDICATOR_MS = 1500


class TransientIndicator:
    """
    A flag that turns itself off ``duration_ms`` after the last ``show()``.

    Each indicator owns one timer on the scheduler, keyed by its name, so
    indicators sharing a scheduler never cancel each other.
    """

    def __init__(self, timers: TimerScheduler, name: str, duration_ms: int):
        self._timers = timers
        self._timer_name = f"indicator:{name}"
        self.name = name
        self.duration_ms = duration_ms
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def show(self) -> None:
        self._visible = True
        self._timers.arm(self._timer_name, self.duration_ms, self._expire)

    def hide(self) -> None:
        self._timers.cancel(self._timer_name)
        self._visible = False

    def _expire(self) -> None:
        self._visible = False
