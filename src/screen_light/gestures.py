"""
Gesture Recognizer - touch start/end pairs to swipe and double-tap intents.

Swipe: fast (< 300 ms) and long (> 50 units) vertical movement.
  up -> open panel, down -> close panel
Tap: anything else. Two taps ending < 300 ms apart -> toggle panel.

Swipe classification wins over tap detection for the same gesture, but every
non-swipe gesture still updates the last-tap timestamp.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .visibility import VisibilityController

logger = logging.getLogger(__name__)

# Fixed design constants
SWIPE_MAX_DURATION_MS = 300
SWIPE_MIN_DISTANCE = 50
DOUBLE_TAP_WINDOW_MS = 300


class TouchKind(Enum):
    START = "start"
    END = "end"


class Gesture(Enum):
    """What a completed touch was recognized as."""
    SWIPE_UP = "swipe_up"
    SWIPE_DOWN = "swipe_down"
    TAP = "tap"
    DOUBLE_TAP = "double_tap"


@dataclass(frozen=True)
class TouchEvent:
    kind: TouchKind
    y: float
    timestamp_ms: int


@dataclass(frozen=True)
class PendingGesture:
    """A touch that has started but not ended."""
    start_y: float
    start_time_ms: int


class GestureRecognizer:
    """Classifies touch sequences and drives the visibility controller."""

    def __init__(self, controller: VisibilityController):
        self._controller = controller
        self._pending: Optional[PendingGesture] = None
        self._last_tap_ms: Optional[int] = None

    @property
    def pending(self) -> Optional[PendingGesture]:
        return self._pending

    @property
    def last_tap_ms(self) -> Optional[int]:
        return self._last_tap_ms

    def handle(self, event: TouchEvent) -> Optional[Gesture]:
        if event.kind is TouchKind.START:
            self.touch_start(event.y, event.timestamp_ms)
            return None
        return self.touch_end(event.y, event.timestamp_ms)

    def touch_start(self, y: float, timestamp_ms: int) -> None:
        self._pending = PendingGesture(start_y=y, start_time_ms=timestamp_ms)

    def touch_end(self, y: float, timestamp_ms: int) -> Optional[Gesture]:
        """
        Complete the pending touch.

        Returns:
            The recognized gesture, or None if there was no matching start
        """
        pending = self._pending
        if pending is None:
            logger.debug("touch end at t=%s without start, ignored", timestamp_ms)
            return None
        self._pending = None

        gesture = self._classify(pending, y, timestamp_ms)
        logger.debug("gesture: %s", gesture.value)

        if gesture is Gesture.SWIPE_UP:
            self._controller.open_panel()
        elif gesture is Gesture.SWIPE_DOWN:
            self._controller.close_panel()
        elif gesture is Gesture.DOUBLE_TAP:
            self._controller.toggle_panel()
        return gesture

    def _classify(self, pending: PendingGesture, end_y: float, now_ms: int) -> Gesture:
        duration = now_ms - pending.start_time_ms
        delta = end_y - pending.start_y

        if duration < SWIPE_MAX_DURATION_MS and abs(delta) > SWIPE_MIN_DISTANCE:
            return Gesture.SWIPE_UP if delta < 0 else Gesture.SWIPE_DOWN

        is_double = (
            self._last_tap_ms is not None
            and now_ms - self._last_tap_ms < DOUBLE_TAP_WINDOW_MS
        )
        self._last_tap_ms = now_ms
        return Gesture.DOUBLE_TAP if is_double else Gesture.TAP
