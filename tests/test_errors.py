"""Tests for error types and safe_call_async."""

import pytest

from screen_light.errors import CapabilityError, PlatformUnsupported, RequestDenied, safe_call_async


class TestHierarchy:

    def test_capability_errors(self):
        assert issubclass(PlatformUnsupported, CapabilityError)
        assert issubclass(RequestDenied, CapabilityError)


class TestSafeCallAsync:

    @pytest.mark.asyncio
    async def test_returns_result(self):
        async def fn():
            return 42
        assert await safe_call_async(fn) == 42

    @pytest.mark.asyncio
    async def test_returns_default_on_error(self):
        async def fn():
            raise RequestDenied("nope")
        assert await safe_call_async(fn, default="fallback") == "fallback"

    @pytest.mark.asyncio
    async def test_on_error_receives_exception(self):
        seen = []

        async def fn():
            raise PlatformUnsupported("no wake lock")

        await safe_call_async(fn, on_error=seen.append)
        assert len(seen) == 1
        assert isinstance(seen[0], PlatformUnsupported)

    @pytest.mark.asyncio
    async def test_logs_warning(self, caplog):
        async def fn():
            raise RuntimeError("boom")

        with caplog.at_level("WARNING", logger="screen_light.errors"):
            await safe_call_async(fn)
        assert "boom" in caplog.text

    @pytest.mark.asyncio
    async def test_silent_when_asked(self, caplog):
        async def fn():
            raise RuntimeError("quiet")

        with caplog.at_level("WARNING", logger="screen_light.errors"):
            await safe_call_async(fn, log_error=False)
        assert "quiet" not in caplog.text
