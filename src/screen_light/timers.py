"""
Named single-shot timers.

Every delayed side effect (menu auto-hide, pointer idle, indicator auto-hide)
goes through a TimerScheduler, keyed by purpose:

- Arming a name cancels whatever instance of that name is still pending
- A cancelled timer never fires
- Different names never interfere

Two backends:
- AsyncioTimers: real time, on the running event loop
- ManualTimers: virtual clock advanced explicitly (tests, headless stepping)
"""

import asyncio
import heapq
import itertools
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


@dataclass
class _Timer:
    name: str
    deadline_ms: int
    callback: TimerCallback
    token: int
    handle: Any = field(default=None, repr=False)


class TimerScheduler(ABC):
    """Cancelable single-shot timers keyed by name."""

    def __init__(self):
        self._timers: Dict[str, _Timer] = {}
        self._tokens = itertools.count(1)

    @abstractmethod
    def now_ms(self) -> int:
        """Current time on this scheduler's clock (ms)."""
        pass

    @abstractmethod
    def _schedule(self, timer: _Timer, delay_ms: int) -> None:
        pass

    @abstractmethod
    def _unschedule(self, timer: _Timer) -> None:
        pass

    def arm(self, name: str, delay_ms: int, callback: TimerCallback) -> None:
        """(Re)arm timer ``name``. Any pending instance of it is cancelled first."""
        self.cancel(name)
        delay_ms = max(0, int(delay_ms))
        timer = _Timer(
            name=name,
            deadline_ms=self.now_ms() + delay_ms,
            callback=callback,
            token=next(self._tokens),
        )
        self._timers[name] = timer
        self._schedule(timer, delay_ms)

    def cancel(self, name: str) -> bool:
        """Cancel timer ``name``. Returns True if one was pending."""
        timer = self._timers.pop(name, None)
        if timer is None:
            return False
        self._unschedule(timer)
        return True

    def cancel_all(self) -> None:
        for name in list(self._timers):
            self.cancel(name)

    def is_armed(self, name: str) -> bool:
        return name in self._timers

    def deadline_ms(self, name: str) -> Optional[int]:
        timer = self._timers.get(name)
        return timer.deadline_ms if timer else None

    def pending(self) -> List[str]:
        return sorted(self._timers)

    def _fire(self, name: str, token: int) -> None:
        timer = self._timers.get(name)
        # Stale token: re-armed or cancelled after this instance was queued
        if timer is None or timer.token != token:
            return
        del self._timers[name]
        logger.debug("timer fired: %s", name)
        timer.callback()


class AsyncioTimers(TimerScheduler):
    """Timers backed by ``loop.call_later`` on the running event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        super().__init__()
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now_ms(self) -> int:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                return int(time.monotonic() * 1000)
        return int(loop.time() * 1000)

    def _schedule(self, timer: _Timer, delay_ms: int) -> None:
        timer.handle = self.loop.call_later(delay_ms / 1000, self._fire, timer.name, timer.token)

    def _unschedule(self, timer: _Timer) -> None:
        if timer.handle is not None:
            timer.handle.cancel()


class ManualTimers(TimerScheduler):
    """
    Virtual-clock timers. Nothing fires until ``advance`` is called.

    Timers due at the same instant fire in the order they were armed.
    Callbacks may arm new timers; those fire in the same ``advance`` call if
    their deadline falls inside the window.
    """

    def __init__(self, start_ms: int = 0):
        super().__init__()
        self._now = int(start_ms)
        self._queue: List[Tuple[int, int, str]] = []

    def now_ms(self) -> int:
        return self._now

    def _schedule(self, timer: _Timer, delay_ms: int) -> None:
        heapq.heappush(self._queue, (timer.deadline_ms, timer.token, timer.name))
        if len(self._queue) > 2 * len(self._timers) + 16:
            self._compact()

    def _unschedule(self, timer: _Timer) -> None:
        # Lazy removal: stale heap entries are skipped by token check, and
        # dropped in bulk by _compact once they outnumber live timers
        pass

    def _compact(self) -> None:
        self._queue = [(t.deadline_ms, t.token, t.name) for t in self._timers.values()]
        heapq.heapify(self._queue)

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward, firing everything due. Returns fired count."""
        if delta_ms < 0:
            raise ValueError("cannot advance clock backwards")
        return self.advance_to(self._now + int(delta_ms))

    def advance_to(self, target_ms: int) -> int:
        fired = 0
        while self._queue and self._queue[0][0] <= target_ms:
            deadline, token, name = heapq.heappop(self._queue)
            timer = self._timers.get(name)
            if timer is None or timer.token != token:
                continue
            self._now = deadline
            self._fire(name, token)
            fired += 1
        self._now = max(self._now, int(target_ms))
        return fired
