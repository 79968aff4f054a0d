"""Configuration helpers for the renderer."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Pixel constants for the wall diagram.

    Offsets in the footer are measured downward from the bottom edge of the
    wall outline.
    """

    padding: float = 20.0
    footer_px: float = 120.0
    grid_spacing: float = 10.0

    wall_stroke: str = "#374151"
    wall_line_width: float = 4.0
    grid_stroke: str = "rgba(255, 255, 255, 0.1)"
    grid_line_width: float = 1.0
    hanging_stroke: str = "#06B6D4"
    hanging_line_width: float = 2.0
    gap_stroke: str = "#A1A1AA"
    gap_line_width: float = 1.0
    label_fill: str = "#111"

    hanging_font_size: float = 16.0
    label_font_size: float = 14.0
    label_lift: float = 10.0
    hanging_label_inset: float = 10.0
    picture_label_baseline: float = 5.0

    center_tick_top: float = 10.0
    center_tick_bottom: float = 20.0
    center_tick_width: float = 2.0
    center_label_offset: float = 35.0
    gap_line_offset: float = 60.0
    gap_tick_half: float = 5.0


_RENDER_CONFIG = RenderConfig()


def get_render_config() -> RenderConfig:
    return copy.deepcopy(_RENDER_CONFIG)


def set_render_config(config: RenderConfig) -> None:
    global _RENDER_CONFIG
    _RENDER_CONFIG = copy.deepcopy(config)
