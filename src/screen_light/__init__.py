"""
Screen Light - turn a display into an adjustable ambient light.

Color temperature and brightness pick the color; an auto-hiding control
panel, swipe/double-tap gestures and a brightness readout sit on top.
"""

__version__ = "0.1.0"

from .color import LightSetting, RGBColor, compute_color, kelvin_to_rgb
from .config import (
    LightConfig,
    TimingConfig,
    DisplayConfig,
    ScreenLightConfig,
    ConfigManager,
    get_config,
    get_config_manager,
)
from .errors import CapabilityError, PlatformUnsupported, RequestDenied
from .gestures import Gesture, GestureRecognizer, TouchEvent, TouchKind
from .indicator import TransientIndicator
from .light import LightSnapshot, ScreenLight
from .timers import AsyncioTimers, ManualTimers, TimerScheduler
from .visibility import VisibilityController, VisibilityState

__all__ = [
    "LightSetting",
    "RGBColor",
    "compute_color",
    "kelvin_to_rgb",
    "LightConfig",
    "TimingConfig",
    "DisplayConfig",
    "ScreenLightConfig",
    "ConfigManager",
    "get_config",
    "get_config_manager",
    "CapabilityError",
    "PlatformUnsupported",
    "RequestDenied",
    "Gesture",
    "GestureRecognizer",
    "TouchEvent",
    "TouchKind",
    "TransientIndicator",
    "LightSnapshot",
    "ScreenLight",
    "AsyncioTimers",
    "ManualTimers",
    "TimerScheduler",
    "VisibilityController",
    "VisibilityState",
]
