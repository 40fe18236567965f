#!/usr/bin/env python3
"""
screen-light - compute (and optionally render) one light frame.

Usage:
    screen-light --temperature 2700 --brightness 80
    screen-light --temperature 6500 --output light.png --hide-panel
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigManager
from .light import ScreenLight
from .timers import ManualTimers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Screen light: color temperature + brightness")
    parser.add_argument("--temperature", "-t", type=float, help="Color temperature in Kelvin (1000-6500)")
    parser.add_argument("--brightness", "-b", type=float, help="Brightness percent (0-100)")
    parser.add_argument("--config", "-c", type=Path, help="Config file (.yaml/.yml/.json)")
    parser.add_argument("--output", "-o", type=Path, help="Write the rendered frame as PNG")
    parser.add_argument("--hide-panel", action="store_true", help="Render with the control panel closed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = ConfigManager(args.config).load()
    light = ScreenLight(timers=ManualTimers(), config=config)
    light.slider_change(temperature=args.temperature, brightness=args.brightness)
    if args.hide_panel:
        light.visibility.close_panel()

    snapshot = light.snapshot()
    print(snapshot.background)

    if args.output:
        # Pillow only needed for rendering
        from .renderer import FrameRenderer
        path = FrameRenderer(config.display).save(snapshot, args.output)
        print(f"[ScreenLight] Frame written to {path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
