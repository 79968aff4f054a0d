"""Build the ordered draw list for a solved layout."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..logging_utils import debug_log_call
from ..model import LayoutResult, OffsetError, coerce_finite
from .colors import picture_color
from .config import RenderConfig, get_render_config
from .mapper import CoordinateMapper
from .primitives import Line, Primitive, Rect, RenderModel, Text

logger = logging.getLogger(__name__)

_GRID_EPS = 1e-9


def inches_label(value: float) -> str:
    return f'{value:.2f}"'


def _grid_positions(limit: float, spacing: float) -> List[float]:
    if spacing <= 0:
        return []
    positions: List[float] = []
    k = 0
    while k * spacing <= limit + _GRID_EPS:
        positions.append(k * spacing)
        k += 1
    return positions


def _gap_segments(result: LayoutResult) -> List[Tuple[float, float]]:
    """Wall-space x extents of every gap, left to right."""

    lefts = result.picture_left_edges
    rights = result.picture_right_edges
    wall_width = result.request.wall_width
    segments = [(0.0, result.gap)]
    for i in range(result.quantity - 1):
        segments.append((rights[i], lefts[i + 1]))
    segments.append((wall_width - result.gap, wall_width))
    return segments


@debug_log_call(logger)
def render(
    result: LayoutResult,
    hanging_height: float,
    surface_width_px: float,
    *,
    offsets: Optional[Sequence[float]] = None,
    config: Optional[RenderConfig] = None,
) -> RenderModel:
    """Map ``result`` onto a surface ``surface_width_px`` wide.

    ``offsets`` replaces ``result.vertical_offsets`` for this draw only,
    which is how uncommitted edits are previewed.
    """

    cfg = config or get_render_config()
    req = result.request
    mapper = CoordinateMapper(
        wall_width=req.wall_width,
        wall_height=req.wall_height,
        surface_width_px=surface_width_px,
        padding=cfg.padding,
        footer_px=cfg.footer_px,
    )
    source = list(result.vertical_offsets if offsets is None else offsets)
    if len(source) != result.quantity:
        raise OffsetError(f"expected {result.quantity} offsets, got {len(source)}")
    active_offsets = [coerce_finite(v, what=f"offset {i}") for i, v in enumerate(source)]

    prims: List[Primitive] = []
    wall_bottom = mapper.wall_bottom_px
    wall_right = mapper.wall_right_px
    pad = cfg.padding

    wall_rect = Rect(
        x=pad,
        y=pad,
        width=mapper.length_to_px(req.wall_width),
        height=mapper.length_to_px(req.wall_height),
        role="wall",
        stroke=cfg.wall_stroke,
        line_width=cfg.wall_line_width,
    )
    prims.append(wall_rect)

    for x in _grid_positions(req.wall_width, cfg.grid_spacing):
        px = mapper.x_to_px(x)
        prims.append(Line(px, pad, px, wall_bottom, "grid", cfg.grid_stroke, cfg.grid_line_width))
    for y in _grid_positions(req.wall_height, cfg.grid_spacing):
        py = mapper.y_to_px(y)
        prims.append(Line(pad, py, wall_right, py, "grid", cfg.grid_stroke, cfg.grid_line_width))

    hanging_y = mapper.y_to_px(hanging_height)
    prims.append(
        Line(pad, hanging_y, wall_right, hanging_y, "hanging-line", cfg.hanging_stroke, cfg.hanging_line_width)
    )
    prims.append(
        Text(
            x=pad + cfg.hanging_label_inset,
            y=hanging_y - cfg.label_lift,
            text=f"Hanging Height: {inches_label(hanging_height)}",
            role="hanging-label",
            fill=cfg.hanging_stroke,
            font_size=cfg.hanging_font_size,
            align="left",
        )
    )

    pic_w = mapper.length_to_px(req.picture_width)
    pic_h = mapper.length_to_px(req.picture_height)
    for i, center in enumerate(result.picture_centers):
        color = picture_color(i)
        x = mapper.x_to_px(center - req.picture_width / 2.0)
        y = mapper.y_to_px(hanging_height + active_offsets[i])
        prims.append(Rect(x, y, pic_w, pic_h, "picture", fill=color, index=i))
        prims.append(
            Text(
                x + pic_w / 2.0,
                y + pic_h / 2.0 + cfg.picture_label_baseline,
                f"P{i + 1}",
                "picture-label",
                cfg.label_fill,
                cfg.label_font_size,
                index=i,
            )
        )
        center_x = mapper.x_to_px(center)
        prims.append(
            Line(
                center_x,
                wall_bottom + cfg.center_tick_top,
                center_x,
                wall_bottom + cfg.center_tick_bottom,
                "center-tick",
                color,
                cfg.center_tick_width,
                index=i,
            )
        )
        prims.append(
            Text(
                center_x,
                wall_bottom + cfg.center_label_offset,
                inches_label(center),
                "center-label",
                color,
                cfg.label_font_size,
                index=i,
            )
        )

    gap_y = wall_bottom + cfg.gap_line_offset
    gap_text = f"Gap: {inches_label(result.gap)}"
    boundaries: List[float] = []
    for k, (start, end) in enumerate(_gap_segments(result)):
        x1, x2 = mapper.x_to_px(start), mapper.x_to_px(end)
        prims.append(Line(x1, gap_y, x2, gap_y, "gap-line", cfg.gap_stroke, cfg.gap_line_width, index=k))
        prims.append(
            Text((x1 + x2) / 2.0, gap_y - cfg.label_lift, gap_text, "gap-label", cfg.gap_stroke, cfg.label_font_size, index=k)
        )
        boundaries.extend((x1, x2))
    for bx in boundaries:
        prims.append(
            Line(bx, gap_y - cfg.gap_tick_half, bx, gap_y + cfg.gap_tick_half, "gap-tick", cfg.gap_stroke, cfg.gap_line_width)
        )

    model = RenderModel(
        scale=mapper.scale,
        padding=pad,
        width=float(surface_width_px),
        height=mapper.surface_height_px,
        wall_rect=wall_rect,
        primitives=tuple(prims),
    )
    logger.info(
        "Rendered %d picture(s) as %d primitive(s) at scale %.4f px/in",
        result.quantity,
        len(model.primitives),
        model.scale,
    )
    return model
