"""
Capability interfaces - wake lock and fullscreen.

The light only knows "active" / "inactive". Everything platform-specific
lives behind these two interfaces; calls are coroutines because platforms
answer asynchronously.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class WakeLockHandle:
    """Opaque token for a held wake lock. Only the issuing service reads it."""
    lock_id: int
    acquired_at: datetime = field(default_factory=datetime.now, compare=False)


class WakeLockService(ABC):
    """Keeps the display awake while a handle is held."""

    @abstractmethod
    async def acquire(self) -> WakeLockHandle:
        """
        Request a screen wake lock.

        Raises:
            PlatformUnsupported: no wake lock on this platform
            RequestDenied: the platform refused
        """
        pass

    @abstractmethod
    async def release(self, handle: WakeLockHandle) -> None:
        """Release a previously acquired lock."""
        pass


class FullscreenService(ABC):
    """Enters and leaves fullscreen mode."""

    @abstractmethod
    async def enter(self) -> None:
        pass

    @abstractmethod
    async def exit(self) -> None:
        pass
