from .model import (
    LayoutRejected,
    LayoutRequest,
    LayoutResult,
    OffsetError,
    Rejection,
    RejectionReason,
)
from .validate import validate, ValidationError
from .solver import solve, solve_or_raise, check_layout, compute_gap, compute_centers
from .offsets import OffsetEditor, coerce_offset
from .render import (
    CoordinateMapper,
    DegenerateGeometryError,
    RenderConfig,
    RenderModel,
    get_render_config,
    picture_color,
    render,
    set_render_config,
)
from .printer import format_inches, format_layout, format_rejection
from .session import LayoutSession
from .tikz_codegen import generate_tikz_code, generate_tikz_document, latex_escape
from .plot import render_png

__all__ = [
    'LayoutRequest',
    'LayoutResult',
    'LayoutRejected',
    'OffsetError',
    'Rejection',
    'RejectionReason',
    'validate',
    'ValidationError',
    'solve',
    'solve_or_raise',
    'check_layout',
    'compute_gap',
    'compute_centers',
    'OffsetEditor',
    'coerce_offset',
    'CoordinateMapper',
    'DegenerateGeometryError',
    'RenderConfig',
    'RenderModel',
    'get_render_config',
    'set_render_config',
    'picture_color',
    'render',
    'format_inches',
    'format_layout',
    'format_rejection',
    'LayoutSession',
    'generate_tikz_code',
    'generate_tikz_document',
    'latex_escape',
    'render_png',
]
