"""
ScreenLight - the dispatcher.

Owns the light setting, the visibility controller, the gesture recognizer,
the brightness indicator and the capability flags. Every input event enters
here; ``snapshot()`` is everything the presentation layer needs.

Capability failures stop here: they become ``wake_lock_active = False`` /
unchanged fullscreen flag plus ``last_error``, never an exception.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .capabilities import FullscreenService, WakeLockHandle, WakeLockService, get_fullscreen, get_wake_lock
from .color import LightSetting, RGBColor, compute_color, snap_temperature
from .config import ScreenLightConfig
from .errors import safe_call_async
from .gestures import Gesture, GestureRecognizer, TouchEvent
from .indicator import TransientIndicator
from .timers import AsyncioTimers, TimerScheduler
from .visibility import VisibilityController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LightSnapshot:
    """All outputs at one instant."""
    setting: LightSetting
    color: RGBColor
    panel_visible: bool
    toggle_visible: bool
    brightness_indicator_visible: bool
    wake_lock_active: bool
    fullscreen_active: bool
    last_error: Optional[str] = None

    @property
    def background(self) -> str:
        return self.color.css()


class ScreenLight:
    """One light panel and its controls."""

    def __init__(
        self,
        timers: Optional[TimerScheduler] = None,
        wake_lock: Optional[WakeLockService] = None,
        fullscreen: Optional[FullscreenService] = None,
        config: Optional[ScreenLightConfig] = None,
    ):
        self.config = config or ScreenLightConfig()
        self.timers = timers or AsyncioTimers()
        self.wake_lock = wake_lock or get_wake_lock(self.config.wake_lock_backend)
        self.fullscreen = fullscreen or get_fullscreen(self.config.fullscreen_backend)

        timing = self.config.timing
        self._setting = LightSetting(
            self.config.light.default_temperature,
            self.config.light.default_brightness,
        )
        self._color = compute_color(self._setting)
        self.visibility = VisibilityController(
            self.timers,
            menu_idle_ms=timing.menu_idle_ms,
            pointer_idle_ms=timing.pointer_idle_ms,
        )
        self.gestures = GestureRecognizer(self.visibility)
        self.brightness_indicator = TransientIndicator(self.timers, "brightness", timing.indicator_ms)

        self._wake_lock_handle: Optional[WakeLockHandle] = None
        self._wake_lock_wanted = False
        self._wake_lock_seq = 0
        self._wake_lock_inflight = 0
        # Handles whose release failed after being superseded; retried on close()
        self._stray_wake_locks: List[WakeLockHandle] = []
        self._fullscreen_active = False
        self._fullscreen_wanted = False
        self._fullscreen_seq = 0
        self.last_error: Optional[str] = None

    # === Light setting ===

    @property
    def setting(self) -> LightSetting:
        return self._setting

    @property
    def color(self) -> RGBColor:
        return self._color

    def _apply(self, setting: LightSetting) -> None:
        previous = self._setting
        self._setting = setting
        self._color = compute_color(setting)
        if setting.brightness_percent != previous.brightness_percent:
            self.brightness_indicator.show()

    def _snap(self, kelvin):
        return snap_temperature(kelvin, self.config.light.temperature_step)

    def set_temperature(self, kelvin) -> LightSetting:
        self._apply(self._setting.with_temperature(self._snap(kelvin)))
        return self._setting

    def set_brightness(self, percent) -> LightSetting:
        self._apply(self._setting.with_brightness(percent))
        return self._setting

    def slider_change(self, temperature=None, brightness=None) -> LightSetting:
        """Apply one slider event. Values are clamped, never rejected."""
        setting = self._setting
        if temperature is not None:
            setting = setting.with_temperature(self._snap(temperature))
        if brightness is not None:
            setting = setting.with_brightness(brightness)
        self._apply(setting)
        return self._setting

    # === Pointer / touch ===

    def pointer_move(self) -> None:
        self.visibility.on_pointer_activity()

    def touch_start(self, y: float, timestamp_ms: int) -> None:
        self.gestures.touch_start(y, timestamp_ms)

    def touch_end(self, y: float, timestamp_ms: int) -> Optional[Gesture]:
        return self.gestures.touch_end(y, timestamp_ms)

    def handle_touch(self, event: TouchEvent) -> Optional[Gesture]:
        return self.gestures.handle(event)

    def show_menu(self) -> None:
        """The toggle affordance was pressed."""
        self.visibility.open_panel()

    # === Wake lock ===

    @property
    def wake_lock_active(self) -> bool:
        return self._wake_lock_handle is not None

    @property
    def wake_lock_pending(self) -> bool:
        return self._wake_lock_inflight > 0

    async def toggle_wake_lock(self) -> bool:
        """
        Flip the requested wake-lock state.

        Overlapping toggles resolve last-writer-wins: a result for a request
        that has since been superseded is discarded, and a lock it acquired is
        released again.

        Returns:
            Whether the wake lock is active afterwards
        """
        self._wake_lock_seq += 1
        seq = self._wake_lock_seq
        self._wake_lock_wanted = not self._wake_lock_wanted
        self._wake_lock_inflight += 1
        try:
            if self._wake_lock_wanted:
                await self._acquire_wake_lock(seq)
            else:
                await self._release_wake_lock(seq)
        finally:
            self._wake_lock_inflight -= 1
        return self.wake_lock_active

    async def _acquire_wake_lock(self, seq: int) -> None:
        try:
            handle = await self.wake_lock.acquire()
        except Exception as e:
            if seq == self._wake_lock_seq:
                self._wake_lock_wanted = False
                self.last_error = f"Wake lock not active: {e}"
            logger.warning("Wake lock request failed (%s): %s", type(e).__name__, e)
            return

        if seq != self._wake_lock_seq:
            # Superseded while waiting; the newer request decides
            logger.info("Discarding wake lock from superseded request")
            await safe_call_async(lambda: self.wake_lock.release(handle))
            return

        self._wake_lock_handle = handle
        self.last_error = None
        logger.info("Wake lock acquired")

    async def _release_wake_lock(self, seq: int) -> None:
        handle = self._wake_lock_handle
        self._wake_lock_handle = None
        if handle is None:
            # Acquire still in flight; it will see it was superseded
            return
        try:
            await self.wake_lock.release(handle)
        except Exception as e:
            if seq == self._wake_lock_seq:
                logger.warning("Wake lock release failed (%s): %s", type(e).__name__, e)
                self._wake_lock_handle = handle
                self._wake_lock_wanted = True
                self.last_error = f"Wake lock release failed: {e}"
            else:
                logger.error("Superseded wake lock release failed, lock may still be held (%s): %s",
                             type(e).__name__, e)
                self._stray_wake_locks.append(handle)
            return
        self.last_error = None
        logger.info("Wake lock released")

    def on_wake_lock_revoked(self) -> None:
        """The platform dropped the lock on its own (screen off, tab hidden...)."""
        if self._wake_lock_handle is not None:
            logger.info("Wake lock revoked by platform")
        self._wake_lock_handle = None
        self._wake_lock_wanted = False

    # === Fullscreen ===

    @property
    def fullscreen_active(self) -> bool:
        return self._fullscreen_active

    async def toggle_fullscreen(self) -> bool:
        """Request the opposite fullscreen state. Best effort; returns the flag afterwards."""
        self._fullscreen_seq += 1
        seq = self._fullscreen_seq
        self._fullscreen_wanted = not self._fullscreen_wanted
        target = self._fullscreen_wanted

        async def request() -> bool:
            if target:
                await self.fullscreen.enter()
            else:
                await self.fullscreen.exit()
            return True

        def record(error: Exception) -> None:
            self.last_error = f"Fullscreen request failed: {error}"

        ok = await safe_call_async(request, default=False, on_error=record)
        if seq != self._fullscreen_seq:
            # A newer press owns the flag
            return self._fullscreen_active
        if ok:
            self._fullscreen_active = target
            logger.info("Fullscreen %s", "entered" if target else "exited")
        else:
            self._fullscreen_wanted = self._fullscreen_active
        return self._fullscreen_active

    def on_fullscreen_changed(self, active: bool) -> None:
        """The platform left/entered fullscreen on its own (e.g. Escape)."""
        self._fullscreen_active = bool(active)
        self._fullscreen_wanted = self._fullscreen_active

    # === Output ===

    def snapshot(self) -> LightSnapshot:
        vis = self.visibility.state
        return LightSnapshot(
            setting=self._setting,
            color=self._color,
            panel_visible=vis.panel_open,
            toggle_visible=vis.toggle_affordance_shown,
            brightness_indicator_visible=self.brightness_indicator.visible,
            wake_lock_active=self.wake_lock_active,
            fullscreen_active=self._fullscreen_active,
            last_error=self.last_error,
        )

    async def close(self) -> None:
        """Cancel every timer and let go of the wake lock."""
        self.visibility.shutdown()
        self.brightness_indicator.hide()
        handle = self._wake_lock_handle
        self._wake_lock_handle = None
        self._wake_lock_wanted = False
        self._wake_lock_seq += 1
        strays, self._stray_wake_locks = self._stray_wake_locks, []
        if handle is not None:
            strays.append(handle)
        for stray in strays:
            await safe_call_async(lambda: self.wake_lock.release(stray))
