"""Tests for the show-then-auto-hide indicator."""

from screen_light.indicator import BRIGHTNESS_INDICATOR_MS, TransientIndicator


def test_starts_hidden(timers):
    indicator = TransientIndicator(timers, "brightness", BRIGHTNESS_INDICATOR_MS)
    assert indicator.visible is False


def test_hides_after_duration(timers):
    indicator = TransientIndicator(timers, "brightness", 1500)
    indicator.show()
    timers.advance(1499)
    assert indicator.visible is True
    timers.advance(1)
    assert indicator.visible is False


def test_second_show_restarts_deadline(timers):
    indicator = TransientIndicator(timers, "brightness", 1500)
    indicator.show()
    timers.advance(1000)
    indicator.show()
    timers.advance(1000)   # 2000 after first show
    assert indicator.visible is True
    timers.advance(499)
    assert indicator.visible is True
    timers.advance(1)      # exactly 1500 after second show
    assert indicator.visible is False


def test_repeated_show_leaves_one_timer(timers):
    indicator = TransientIndicator(timers, "brightness", 1500)
    for _ in range(10):
        indicator.show()
    assert timers.pending() == ["indicator:brightness"]


def test_hide_cancels_timer(timers):
    indicator = TransientIndicator(timers, "brightness", 1500)
    indicator.show()
    indicator.hide()
    assert indicator.visible is False
    assert timers.pending() == []


def test_instances_do_not_interfere(timers):
    brightness = TransientIndicator(timers, "brightness", 1500)
    temperature = TransientIndicator(timers, "temperature", 500)
    brightness.show()
    temperature.show()
    timers.advance(500)
    assert temperature.visible is False
    assert brightness.visible is True
    temperature.show()
    temperature.hide()
    timers.advance(1000)
    assert brightness.visible is False
