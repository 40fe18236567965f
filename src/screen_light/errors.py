"""
Error types and containment helpers.

Nothing in the light is fatal. Capability failures are caught at the
ScreenLight boundary and turned into state ("lock not active"), never raised
to the caller.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CapabilityError(Exception):
    """An external capability (wake lock, fullscreen) could not do what was asked."""
    pass


class PlatformUnsupported(CapabilityError):
    """The platform has no such capability."""
    pass


class RequestDenied(CapabilityError):
    """The platform refused the request (permissions, policy, battery saver...)."""
    pass


async def safe_call_async(
    func: Callable[[], Awaitable[T]],
    default: Optional[T] = None,
    log_error: bool = True,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Optional[T]:
    """
    Await ``func()``, returning ``default`` if it raises.

    Args:
        func: Async function to call (no arguments)
        default: Value to return on error
        log_error: If True, log the failure as a warning
        on_error: Optional hook receiving the exception

    Returns:
        Function result or default
    """
    try:
        return await func()
    except Exception as e:
        if log_error:
            logger.warning("%s: %s", type(e).__name__, e)
        if on_error is not None:
            on_error(e)
        return default
