"""
Frame Renderer - paints a LightSnapshot with Pillow.

The whole frame is the light color. Overlays, when their flags are set:
- brightness pill (top center): "Brightness: N%"
- wake lock badge (top right): "Screen Lock Active"
- control panel (bottom): slider readouts and button labels
- toggle affordance (bottom center): round button with a chevron
"""

from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .config import DisplayConfig
from .light import LightSnapshot

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
OVERLAY = (0, 0, 0, 178)        # black at 70%
TOGGLE_FILL = (0, 0, 0, 102)    # black at 40%
BUTTON_FILL = (255, 255, 255, 255)

MARGIN = 20
PANEL_MAX_WIDTH = 384
PANEL_HEIGHT = 200
TOGGLE_SIZE = 40


def _load_font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


class FrameRenderer:
    """Turns snapshots into RGB images."""

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()
        self._font = _load_font(14)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.config.width, self.config.height)

    def panel_box(self) -> Tuple[int, int, int, int]:
        width, height = self.size
        panel_w = min(int(width * 0.9), PANEL_MAX_WIDTH)
        left = (width - panel_w) // 2
        return (left, height - PANEL_HEIGHT, left + panel_w, height)

    def toggle_box(self) -> Tuple[int, int, int, int]:
        width, height = self.size
        left = (width - TOGGLE_SIZE) // 2
        bottom = height - MARGIN
        return (left, bottom - TOGGLE_SIZE, left + TOGGLE_SIZE, bottom)

    def render(self, snapshot: LightSnapshot) -> Image.Image:
        base = Image.new("RGBA", self.size, snapshot.color.as_tuple() + (255,))
        overlay = Image.new("RGBA", self.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)

        if snapshot.brightness_indicator_visible:
            self._draw_pill(draw, f"Brightness: {snapshot.setting.brightness_percent}%", anchor="center")
        if snapshot.wake_lock_active:
            self._draw_pill(draw, "Screen Lock Active", anchor="right")
        if snapshot.panel_visible:
            self._draw_panel(draw, snapshot)
        elif snapshot.toggle_visible:
            self._draw_toggle(draw)

        return Image.alpha_composite(base, overlay).convert("RGB")

    def save(self, snapshot: LightSnapshot, path: Path) -> Path:
        path = Path(path)
        self.render(snapshot).save(path, format="PNG")
        return path

    def _text_size(self, draw: ImageDraw.ImageDraw, text: str) -> Tuple[int, int]:
        left, top, right, bottom = draw.textbbox((0, 0), text, font=self._font)
        return (right - left, bottom - top)

    def _draw_pill(self, draw: ImageDraw.ImageDraw, text: str, anchor: str) -> None:
        width, _ = self.size
        text_w, text_h = self._text_size(draw, text)
        pill_w, pill_h = text_w + 32, text_h + 16
        if anchor == "right":
            left = width - MARGIN - pill_w
        else:
            left = (width - pill_w) // 2
        box = (left, MARGIN, left + pill_w, MARGIN + pill_h)
        draw.rounded_rectangle(box, radius=pill_h // 2, fill=OVERLAY)
        if self.config.show_labels:
            draw.text((left + 16, MARGIN + 8), text, font=self._font, fill=WHITE)

    def _draw_panel(self, draw: ImageDraw.ImageDraw, snapshot: LightSnapshot) -> None:
        left, top, right, bottom = self.panel_box()
        draw.rounded_rectangle((left, top, right, bottom + 12), radius=12, fill=OVERLAY)
        if not self.config.show_labels:
            return

        setting = snapshot.setting
        rows = [
            ("Color Temperature", f"{setting.temperature_kelvin}K"),
            ("Brightness", f"{setting.brightness_percent}%"),
        ]
        y = top + MARGIN
        for label, value in rows:
            draw.text((left + MARGIN, y), label, font=self._font, fill=WHITE)
            value_w, _ = self._text_size(draw, value)
            draw.text((right - MARGIN - value_w, y), value, font=self._font, fill=WHITE)
            y += 44

        buttons = [
            "Disable Lock" if snapshot.wake_lock_active else "Keep Screen On",
            "Exit Fullscreen" if snapshot.fullscreen_active else "Fullscreen",
        ]
        x = left + MARGIN
        for label in buttons:
            text_w, text_h = self._text_size(draw, label)
            box = (x, y, x + text_w + 32, y + text_h + 16)
            draw.rounded_rectangle(box, radius=8, fill=BUTTON_FILL)
            draw.text((x + 16, y + 8), label, font=self._font, fill=BLACK)
            x = box[2] + 8

    def _draw_toggle(self, draw: ImageDraw.ImageDraw) -> None:
        left, top, right, bottom = self.toggle_box()
        draw.ellipse((left, top, right, bottom), fill=TOGGLE_FILL)
        cx, cy = (left + right) // 2, (top + bottom) // 2
        draw.line([(cx - 7, cy + 3), (cx, cy - 4), (cx + 7, cy + 3)], fill=WHITE, width=2)
