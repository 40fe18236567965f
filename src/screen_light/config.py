"""
Configuration - how the light starts up.

Launch values only: the starting color and brightness, idle timings, frame
size, capability backends. Nothing the user changes at runtime is written
back; every session starts from this file (or the defaults).
"""

import json
import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Tuple, Optional, Dict, Any

import yaml

from .color import MIN_TEMPERATURE_K, MAX_TEMPERATURE_K, MIN_BRIGHTNESS, MAX_BRIGHTNESS
from .indicator import BRIGHTNESS_INDICATOR_MS
from .visibility import MENU_IDLE_MS, POINTER_IDLE_MS


@dataclass
class LightConfig:
    """Starting light setting."""
    default_temperature: int = 1800  # K, warm candle-like
    default_brightness: int = 100    # %
    temperature_step: int = 100      # K per slider notch

    def validate(self) -> Tuple[bool, Optional[str]]:
        if not (MIN_TEMPERATURE_K <= self.default_temperature <= MAX_TEMPERATURE_K):
            return False, f"default_temperature must be {MIN_TEMPERATURE_K}-{MAX_TEMPERATURE_K}"
        if not (MIN_BRIGHTNESS <= self.default_brightness <= MAX_BRIGHTNESS):
            return False, f"default_brightness must be {MIN_BRIGHTNESS}-{MAX_BRIGHTNESS}"
        if self.temperature_step <= 0:
            return False, "temperature_step must be positive"
        return True, None


@dataclass
class TimingConfig:
    """Idle and indicator timings (milliseconds)."""
    menu_idle_ms: int = MENU_IDLE_MS
    pointer_idle_ms: int = POINTER_IDLE_MS
    indicator_ms: int = BRIGHTNESS_INDICATOR_MS

    def validate(self) -> Tuple[bool, Optional[str]]:
        for name in ("menu_idle_ms", "pointer_idle_ms", "indicator_ms"):
            if getattr(self, name) <= 0:
                return False, f"{name} must be positive"
        return True, None


@dataclass
class DisplayConfig:
    """Rendered frame configuration."""
    width: int = 480
    height: int = 800
    show_labels: bool = True

    def validate(self) -> Tuple[bool, Optional[str]]:
        if self.width <= 0 or self.height <= 0:
            return False, "width and height must be positive"
        return True, None


@dataclass
class ScreenLightConfig:
    """Complete configuration for screen-light."""
    light: LightConfig = field(default_factory=LightConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    wake_lock_backend: str = "auto"
    fullscreen_backend: str = "auto"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ScreenLightConfig":
        """Create from dictionary. Missing sections fall back to defaults."""
        data = data or {}
        return cls(
            light=LightConfig(**data.get("light", {})),
            timing=TimingConfig(**data.get("timing", {})),
            display=DisplayConfig(**data.get("display", {})),
            wake_lock_backend=data.get("wake_lock_backend", "auto"),
            fullscreen_backend=data.get("fullscreen_backend", "auto"),
        )

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Validate entire configuration."""
        for section_name in ("light", "timing", "display"):
            valid, error = getattr(self, section_name).validate()
            if not valid:
                return False, f"{section_name}: {error}"

        backends = ("auto", "mock", "unsupported")
        if self.wake_lock_backend not in backends:
            return False, f"wake_lock_backend must be one of {backends}"
        if self.fullscreen_backend not in backends:
            return False, f"fullscreen_backend must be one of {backends}"

        return True, None


class ConfigManager:
    """Loads configuration. Read-only: settings are not persisted."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            config_path: Path to config file (default: screen_light.yaml in current dir)
        """
        if config_path is None:
            config_path = Path("screen_light.yaml")
        self.config_path = Path(config_path)
        self._config: Optional[ScreenLightConfig] = None

    def load(self, force_reload: bool = False) -> ScreenLightConfig:
        """Load configuration from file or return defaults."""
        if self._config is not None and not force_reload:
            return self._config

        if self.config_path.exists():
            try:
                if self.config_path.suffix == ".yaml" or self.config_path.suffix == ".yml":
                    with open(self.config_path, "r") as f:
                        data = yaml.safe_load(f)
                else:
                    with open(self.config_path, "r") as f:
                        data = json.load(f)

                self._config = ScreenLightConfig.from_dict(data)

                valid, error = self._config.validate()
                if not valid:
                    print(f"[Config] Warning: Invalid config, using defaults: {error}", file=sys.stderr, flush=True)
                    self._config = ScreenLightConfig()
            except Exception as e:
                print(f"[Config] Error loading config, using defaults: {e}", file=sys.stderr, flush=True)
                self._config = ScreenLightConfig()
        else:
            # No config file - use defaults
            self._config = ScreenLightConfig()

        return self._config

    def reload(self) -> ScreenLightConfig:
        """Force reload configuration from file."""
        self._config = None
        return self.load()

    def get_light_config(self) -> LightConfig:
        return self.load().light

    def get_timing_config(self) -> TimingConfig:
        return self.load().timing

    def get_display_config(self) -> DisplayConfig:
        return self.load().display


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_path: Optional[Path] = None) -> ConfigManager:
    """Get global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_path)
    return _config_manager


def get_config() -> ScreenLightConfig:
    """Get current configuration."""
    return get_config_manager().load()
