"""Color temperature -> RGB, with brightness scaling.

Tanner Helland's piecewise fit of blackbody radiation. Constants and branch
thresholds (t=66, t=19) are the published ones; golden tests depend on them.
"""

import math
from dataclasses import dataclass
from typing import Tuple, Union

Number = Union[int, float]

# Slider domains (closed ranges)
MIN_TEMPERATURE_K = 1000
MAX_TEMPERATURE_K = 6500
MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100


def _clamp(value: Number, low: int, high: int) -> int:
    """Clamp then round to int. Clamping first keeps inf/nan out of round()."""
    clamped = min(max(value, low), high)
    if isinstance(clamped, float) and math.isnan(clamped):
        return low
    return int(round(clamped))


def clamp_temperature(kelvin: Number) -> int:
    return _clamp(kelvin, MIN_TEMPERATURE_K, MAX_TEMPERATURE_K)


def clamp_brightness(percent: Number) -> int:
    return _clamp(percent, MIN_BRIGHTNESS, MAX_BRIGHTNESS)


def snap_temperature(kelvin: Number, step: int) -> int:
    """Clamp, then snap to the nearest slider stop counted from MIN_TEMPERATURE_K."""
    kelvin = clamp_temperature(kelvin)
    if step <= 1:
        return kelvin
    stops = round((kelvin - MIN_TEMPERATURE_K) / step)
    return clamp_temperature(MIN_TEMPERATURE_K + stops * step)


@dataclass(frozen=True)
class LightSetting:
    """What the user controls: hue (as Kelvin) and intensity (as percent)."""
    temperature_kelvin: int = 1800
    brightness_percent: int = 100

    def __post_init__(self):
        # frozen dataclass: route through object.__setattr__
        object.__setattr__(self, "temperature_kelvin", clamp_temperature(self.temperature_kelvin))
        object.__setattr__(self, "brightness_percent", clamp_brightness(self.brightness_percent))

    def with_temperature(self, kelvin: Number) -> "LightSetting":
        return LightSetting(kelvin, self.brightness_percent)

    def with_brightness(self, percent: Number) -> "LightSetting":
        return LightSetting(self.temperature_kelvin, percent)


@dataclass(frozen=True)
class RGBColor:
    """RGB triple, channels in 0-255.

    Base colors have integer channels. Brightness-scaled colors keep the
    exact product, so channels may be fractional (e.g. 127.5).
    """
    r: Number
    g: Number
    b: Number

    def as_tuple(self) -> Tuple[int, int, int]:
        """Integer channels for pixel output."""
        return (int(round(self.r)), int(round(self.g)), int(round(self.b)))

    def css(self) -> str:
        """CSS color string, e.g. ``rgb(255, 126, 0)``."""
        return "rgb({}, {}, {})".format(_fmt(self.r), _fmt(self.g), _fmt(self.b))

    def scaled(self, factor: float) -> "RGBColor":
        return RGBColor(self.r * factor, self.g * factor, self.b * factor)


def _fmt(channel: Number) -> str:
    if float(channel).is_integer():
        return str(int(channel))
    return repr(float(channel))


def _channel(value: float) -> int:
    return int(round(min(max(value, 0), 255)))


def kelvin_to_rgb(kelvin: Number) -> RGBColor:
    """
    Approximate the color of a blackbody at ``kelvin``.

    Not clamped to the slider domain: any positive temperature works, which
    is what lets the t > 66 branch be exercised at all.

    Args:
        kelvin: Color temperature in Kelvin (> 0)

    Returns:
        RGBColor with integer channels
    """
    temp = kelvin / 100

    if temp <= 66:
        red = 255.0
        green = 99.4708025861 * math.log(temp) - 161.1195681661
        if temp <= 19:
            blue = 0.0
        else:
            blue = 138.5177312231 * math.log(temp - 10) - 305.0447927307
    else:
        red = 329.698727446 * math.pow(temp - 60, -0.1332047592)
        green = 288.1221695283 * math.pow(temp - 60, -0.0755148492)
        blue = 255.0

    return RGBColor(_channel(red), _channel(green), _channel(blue))


def compute_color(setting: LightSetting) -> RGBColor:
    """Displayable color for a setting: blackbody base scaled by brightness."""
    base = kelvin_to_rgb(setting.temperature_kelvin)
    return base.scaled(setting.brightness_percent / 100)
