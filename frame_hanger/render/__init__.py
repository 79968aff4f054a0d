"""Wall-space to display-space rendering."""

from .colors import parse_color, picture_color, picture_rgb, to_hex
from .config import RenderConfig, get_render_config, set_render_config
from .mapper import CoordinateMapper, DegenerateGeometryError
from .primitives import Line, Primitive, Rect, RenderModel, Text
from .renderer import inches_label, render

__all__ = [
    "CoordinateMapper",
    "DegenerateGeometryError",
    "Line",
    "Primitive",
    "Rect",
    "RenderConfig",
    "RenderModel",
    "Text",
    "get_render_config",
    "inches_label",
    "parse_color",
    "picture_color",
    "picture_rgb",
    "render",
    "set_render_config",
    "to_hex",
]
