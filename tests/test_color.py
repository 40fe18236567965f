"""Tests for the blackbody color model and brightness scaling."""

import math
import pytest

from screen_light.color import (
    LightSetting,
    RGBColor,
    clamp_brightness,
    clamp_temperature,
    compute_color,
    kelvin_to_rgb,
    snap_temperature,
)


class TestKelvinToRgb:
    """Golden values of the piecewise fit."""

    def test_1000k(self):
        assert kelvin_to_rgb(1000) == RGBColor(255, 68, 0)

    def test_1800k_candle(self):
        assert kelvin_to_rgb(1800) == RGBColor(255, 126, 0)

    def test_6500k_near_white(self):
        assert kelvin_to_rgb(6500) == RGBColor(255, 254, 250)

    def test_blue_zero_at_and_below_1900k(self):
        assert kelvin_to_rgb(1900).b == 0
        assert kelvin_to_rgb(1500).b == 0

    def test_blue_starts_above_1900k(self):
        # t=20: 138.5177*ln(10) - 305.04 ~ 13.9
        assert kelvin_to_rgb(2000).b == 14

    def test_6600k_still_warm_branch(self):
        # t=66 belongs to the t <= 66 branch: red pinned at 255
        assert kelvin_to_rgb(6600).r == 255

    def test_cool_branch_above_6600k(self):
        color = kelvin_to_rgb(10000)
        assert color == RGBColor(202, 218, 255)

    def test_channels_are_ints(self):
        color = kelvin_to_rgb(3200)
        assert all(isinstance(c, int) for c in (color.r, color.g, color.b))


class TestChannelRange:
    """Every in-domain temperature yields finite channels in 0-255."""

    @pytest.mark.parametrize("kelvin", list(range(1000, 6501, 100)))
    def test_in_range(self, kelvin):
        color = compute_color(LightSetting(kelvin, 100))
        for channel in (color.r, color.g, color.b):
            assert not math.isnan(channel)
            assert 0 <= channel <= 255

    def test_warm_ordering(self):
        """Inside the domain red never drops below green, green never below blue."""
        for kelvin in range(1000, 6501, 250):
            color = kelvin_to_rgb(kelvin)
            assert color.r >= color.g >= color.b, f"{kelvin}K -> {color}"


class TestBrightness:

    @pytest.mark.parametrize("kelvin", [1000, 1800, 4000, 6500])
    def test_zero_brightness_is_black(self, kelvin):
        color = compute_color(LightSetting(kelvin, 0))
        assert color.as_tuple() == (0, 0, 0)

    def test_full_brightness_is_base(self):
        assert compute_color(LightSetting(1800, 100)).as_tuple() == (255, 126, 0)

    def test_half_brightness_keeps_exact_product(self):
        color = compute_color(LightSetting(6500, 50))
        assert color.r == pytest.approx(127.5)
        assert color.g == pytest.approx(127.0)
        assert color.b == pytest.approx(125.0)

    def test_pure(self):
        setting = LightSetting(2700, 37)
        assert compute_color(setting) == compute_color(setting)
        assert compute_color(setting) == compute_color(LightSetting(2700, 37))


class TestClamping:

    def test_temperature_clamped(self):
        assert clamp_temperature(500) == 1000
        assert clamp_temperature(99999) == 6500
        assert clamp_temperature(2750.4) == 2750

    def test_brightness_clamped(self):
        assert clamp_brightness(-20) == 0
        assert clamp_brightness(150) == 100

    def test_nan_does_not_propagate(self):
        assert clamp_brightness(float("nan")) == 0

    def test_setting_never_stores_out_of_range(self):
        setting = LightSetting(200, 300)
        assert setting.temperature_kelvin == 1000
        assert setting.brightness_percent == 100

    def test_with_helpers_clamp(self):
        setting = LightSetting().with_temperature(10000).with_brightness(-1)
        assert setting == LightSetting(6500, 0)


class TestCss:

    def test_integer_channels(self):
        assert RGBColor(255, 126, 0).css() == "rgb(255, 126, 0)"

    def test_scaled_channels(self):
        assert compute_color(LightSetting(6500, 50)).css() == "rgb(127.5, 127, 125)"

    def test_as_tuple_rounds(self):
        assert RGBColor(127.6, 0.4, 254.5).as_tuple() == (128, 0, 254)


class TestSnapTemperature:

    def test_rounds_to_nearest_stop(self):
        assert snap_temperature(2740, 100) == 2700
        assert snap_temperature(2760, 100) == 2800

    def test_stops_counted_from_minimum(self):
        assert snap_temperature(1240, 500) == 1000
        assert snap_temperature(1260, 500) == 1500

    def test_clamped_before_and_after(self):
        assert snap_temperature(99999, 500) == 6500
        assert snap_temperature(-3, 100) == 1000
        # Nearest stop 6600 lies past the top of the range
        assert snap_temperature(6450, 700) == 6500

    def test_unit_step_only_clamps(self):
        assert snap_temperature(2743, 1) == 2743
