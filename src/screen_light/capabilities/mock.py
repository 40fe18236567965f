"""
In-memory capability backends.

Mock*: always available, scriptable failures and delays (tests, headless runs).
Unsupported*: every request fails with PlatformUnsupported.
"""

import asyncio
import itertools
from typing import List, Optional, Set

from ..errors import PlatformUnsupported
from .base import FullscreenService, WakeLockHandle, WakeLockService


class MockWakeLock(WakeLockService):
    """Wake lock that lives only in this process."""

    def __init__(self, fail_with: Optional[Exception] = None, delay: float = 0.0):
        """
        Args:
            fail_with: Exception raised by every acquire() while set
            delay: Seconds each call takes before answering
        """
        self.fail_with = fail_with
        self.delay = delay
        # When set, acquire() waits for it before answering
        self.gate: Optional[asyncio.Event] = None
        # Same for release(); release_fail_with makes release() raise
        self.release_gate: Optional[asyncio.Event] = None
        self.release_fail_with: Optional[Exception] = None
        self.held: Set[WakeLockHandle] = set()
        self.acquire_calls = 0
        self.released: List[WakeLockHandle] = []
        self._ids = itertools.count(1)

    async def _wait(self) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.gate is not None:
            await self.gate.wait()

    async def acquire(self) -> WakeLockHandle:
        self.acquire_calls += 1
        await self._wait()
        if self.fail_with is not None:
            raise self.fail_with
        handle = WakeLockHandle(lock_id=next(self._ids))
        self.held.add(handle)
        return handle

    async def release(self, handle: WakeLockHandle) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.release_gate is not None:
            await self.release_gate.wait()
        if self.release_fail_with is not None:
            raise self.release_fail_with
        self.held.discard(handle)
        self.released.append(handle)

    @property
    def is_held(self) -> bool:
        return bool(self.held)


class MockFullscreen(FullscreenService):
    """Fullscreen flag that lives only in this process."""

    def __init__(self, fail_with: Optional[Exception] = None):
        self.fail_with = fail_with
        self.active = False
        self.calls: List[str] = []
        # When set, enter()/exit() wait for it before answering
        self.gate: Optional[asyncio.Event] = None

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()

    async def enter(self) -> None:
        self.calls.append("enter")
        await self._wait()
        if self.fail_with is not None:
            raise self.fail_with
        self.active = True

    async def exit(self) -> None:
        self.calls.append("exit")
        await self._wait()
        if self.fail_with is not None:
            raise self.fail_with
        self.active = False


class UnsupportedWakeLock(WakeLockService):
    async def acquire(self) -> WakeLockHandle:
        raise PlatformUnsupported("screen wake lock is not supported on this platform")

    async def release(self, handle: WakeLockHandle) -> None:
        raise PlatformUnsupported("screen wake lock is not supported on this platform")


class UnsupportedFullscreen(FullscreenService):
    async def enter(self) -> None:
        raise PlatformUnsupported("fullscreen is not supported on this platform")

    async def exit(self) -> None:
        raise PlatformUnsupported("fullscreen is not supported on this platform")
