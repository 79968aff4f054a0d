"""Per-picture colors, a pure function of the picture index."""

from __future__ import annotations

import colorsys
from typing import Tuple

from matplotlib.colors import to_rgba

HUE_START = 200
HUE_STEP = 45
SATURATION = 70
LIGHTNESS = 60


def picture_hue(index: int) -> int:
    return (index * HUE_STEP + HUE_START) % 360


def picture_color(index: int) -> str:
    return f"hsl({picture_hue(index)}, {SATURATION}%, {LIGHTNESS}%)"


def picture_rgb(index: int) -> Tuple[float, float, float]:
    # colorsys orders the arguments hue, lightness, saturation.
    return colorsys.hls_to_rgb(picture_hue(index) / 360.0, LIGHTNESS / 100.0, SATURATION / 100.0)


def to_hex(rgb: Tuple[float, float, float]) -> str:
    return "#" + "".join(f"{round(max(0.0, min(1.0, c)) * 255):02x}" for c in rgb)


def parse_color(text: str) -> Tuple[float, float, float, float]:
    """Parse hex (``#rgb`` through ``#rrggbbaa``), ``hsl(...)`` or ``rgba(...)`` into RGBA floats."""

    value = text.strip().lower()
    if value.startswith("#"):
        try:
            return tuple(to_rgba(value))  # type: ignore[return-value]
        except ValueError as exc:
            raise ValueError(f"unsupported hex color {text!r}") from exc
    if value.startswith(("hsl(", "rgb(", "rgba(")) and value.endswith(")"):
        func, _, body = value[:-1].partition("(")
        parts = [part.strip() for part in body.split(",")]
        if func == "hsl" and len(parts) == 3:
            hue = float(parts[0]) % 360.0
            sat = float(parts[1].rstrip("%")) / 100.0
            light = float(parts[2].rstrip("%")) / 100.0
            r, g, b = colorsys.hls_to_rgb(hue / 360.0, light, sat)
            return r, g, b, 1.0
        if func in ("rgb", "rgba") and len(parts) in (3, 4):
            r, g, b = (float(part) / 255.0 for part in parts[:3])
            alpha = float(parts[3]) if len(parts) == 4 else 1.0
            return r, g, b, alpha
    raise ValueError(f"unsupported color {text!r}")
