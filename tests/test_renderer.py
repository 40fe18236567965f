"""Tests for the Pillow frame renderer - pixels, not pictures."""

import pytest
from PIL import Image

from conftest import make_light
from screen_light.config import DisplayConfig
from screen_light.renderer import FrameRenderer


@pytest.fixture
def renderer():
    return FrameRenderer(DisplayConfig(width=300, height=500, show_labels=False))


def test_frame_size(renderer, light):
    image = renderer.render(light.snapshot())
    assert isinstance(image, Image.Image)
    assert image.size == (300, 500)
    assert image.mode == "RGB"


def test_background_is_light_color(renderer, light):
    light.set_temperature(6500)
    image = renderer.render(light.snapshot())
    assert image.getpixel((150, 150)) == (255, 254, 250)


def test_scaled_color_rounded(renderer, light):
    light.slider_change(temperature=6500, brightness=50)
    light.brightness_indicator.hide()
    image = renderer.render(light.snapshot())
    assert image.getpixel((5, 5)) == (128, 127, 125)


def test_panel_darkens_bottom(renderer, light):
    light.set_temperature(6500)
    snap = light.snapshot()
    assert snap.panel_visible
    image = renderer.render(snap)
    left, top, right, bottom = renderer.panel_box()
    inside = image.getpixel(((left + right) // 2, bottom - 5))
    assert sum(inside) < sum((255, 254, 250)) / 2


def test_closed_panel_leaves_bottom_clear(renderer, light):
    light.set_temperature(6500)
    light.visibility.close_panel()
    light.visibility._on_pointer_idle()
    image = renderer.render(light.snapshot())
    left, top, right, bottom = renderer.panel_box()
    assert image.getpixel((left + 2, bottom - 2)) == (255, 254, 250)


def test_toggle_affordance_drawn(renderer, light):
    light.set_temperature(6500)
    light.visibility.close_panel()
    image = renderer.render(light.snapshot())
    left, top, right, bottom = renderer.toggle_box()
    center = image.getpixel(((left + right) // 2, bottom - 8))
    assert center != (255, 254, 250)


def test_brightness_pill_drawn(renderer, light):
    light.slider_change(temperature=6500, brightness=100)
    light.set_brightness(99)
    image = renderer.render(light.snapshot())
    assert image.getpixel((150, 30)) != image.getpixel((5, 300))


def test_save_png(tmp_path, light):
    path = FrameRenderer(DisplayConfig(width=64, height=64)).save(light.snapshot(), tmp_path / "frame.png")
    assert path.exists()
    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == (64, 64)
