"""
Visibility Controller - control panel and toggle affordance.

States (panel_open, toggle_visible):
- (True, False): panel open, affordance hidden
- (False, True): panel closed, affordance offered
- (False, False): idle/faded, nothing but light on screen

The affordance is never shown while the panel is open.

Two idle timers:
- menu idle: armed when the panel is opened; expiry closes the panel
- pointer idle: armed on pointer movement; expiry hides the affordance
  (only matters while the panel is closed)
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .timers import TimerScheduler

logger = logging.getLogger(__name__)

MENU_IDLE_MS = 3000
POINTER_IDLE_MS = 2000

MENU_IDLE_TIMER = "menu_idle"
POINTER_IDLE_TIMER = "pointer_idle"


@dataclass(frozen=True)
class VisibilityState:
    """Panel and affordance flags."""
    panel_open: bool = True
    toggle_visible: bool = False

    @property
    def toggle_affordance_shown(self) -> bool:
        """What the presentation layer should draw: panel takes precedence."""
        return self.toggle_visible and not self.panel_open


class VisibilityController:
    """State machine over VisibilityState, driven by user actions and idle timers."""

    def __init__(
        self,
        timers: TimerScheduler,
        menu_idle_ms: int = MENU_IDLE_MS,
        pointer_idle_ms: int = POINTER_IDLE_MS,
        initial: Optional[VisibilityState] = None,
    ):
        self._timers = timers
        self._menu_idle_ms = menu_idle_ms
        self._pointer_idle_ms = pointer_idle_ms
        self._state = initial or VisibilityState()
        self._listeners: List[Callable[[VisibilityState], None]] = []

    @property
    def state(self) -> VisibilityState:
        return self._state

    @property
    def panel_open(self) -> bool:
        return self._state.panel_open

    @property
    def toggle_visible(self) -> bool:
        return self._state.toggle_visible

    def subscribe(self, listener: Callable[[VisibilityState], None]) -> None:
        """Call ``listener`` with the new state after every change."""
        self._listeners.append(listener)

    def _set(self, panel_open: bool, toggle_visible: bool) -> None:
        new_state = VisibilityState(panel_open=panel_open, toggle_visible=toggle_visible)
        if new_state == self._state:
            return
        logger.debug("visibility: %s -> %s", self._state, new_state)
        self._state = new_state
        for listener in self._listeners:
            listener(new_state)

    # === User actions ===

    def open_panel(self) -> None:
        self._set(panel_open=True, toggle_visible=False)
        self._timers.arm(MENU_IDLE_TIMER, self._menu_idle_ms, self._on_menu_idle)

    def close_panel(self) -> None:
        self._timers.cancel(MENU_IDLE_TIMER)
        self._set(panel_open=False, toggle_visible=True)

    def toggle_panel(self) -> None:
        """
        Double-tap: close an open panel, open a closed one.

        Opening this way also arms the menu-idle timer and hides the
        affordance, exactly like ``open_panel``, so an opened panel always
        fades out again on its own.
        """
        if self._state.panel_open:
            self.close_panel()
        else:
            self.open_panel()

    def on_pointer_activity(self) -> None:
        self._set(panel_open=self._state.panel_open, toggle_visible=True)
        self._timers.arm(POINTER_IDLE_TIMER, self._pointer_idle_ms, self._on_pointer_idle)

    # === Timer expiry ===

    def _on_menu_idle(self) -> None:
        self._set(panel_open=False, toggle_visible=True)

    def _on_pointer_idle(self) -> None:
        if not self._state.panel_open:
            self._set(panel_open=False, toggle_visible=False)

    def shutdown(self) -> None:
        """Cancel both idle timers."""
        self._timers.cancel(MENU_IDLE_TIMER)
        self._timers.cancel(POINTER_IDLE_TIMER)
