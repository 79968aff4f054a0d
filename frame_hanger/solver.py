"""Even-spacing solver for a single row of pictures."""

from __future__ import annotations

import logging
import math
from typing import Union

import numpy as np

from .logging_utils import debug_log_call
from .model import (
    WIDTH_TOLERANCE,
    LayoutRejected,
    LayoutRequest,
    LayoutResult,
    Rejection,
)
from .validate import ValidationError, validate

logger = logging.getLogger(__name__)


def compute_gap(wall_width: float, picture_width: float, quantity: int) -> float:
    """Uniform gap, counting one gap at each wall edge and one between neighbours."""

    total_pictures_width = picture_width * quantity
    total_gaps = quantity + 1
    return (wall_width - total_pictures_width) / total_gaps


def compute_centers(gap: float, picture_width: float, quantity: int) -> np.ndarray:
    """Center x of picture ``i``: ``i + 1`` gaps and ``i`` widths, plus half a width."""

    idx = np.arange(quantity, dtype=float)
    return gap * (idx + 1.0) + picture_width * (idx + 0.5)


@debug_log_call(logger)
def solve(request: LayoutRequest) -> Union[LayoutResult, Rejection]:
    """Solve ``request``; return a :class:`Rejection` when no layout exists."""

    try:
        validate(request)
    except ValidationError as exc:
        logger.warning("Rejected layout request: %s", exc)
        return Rejection.invalid_input(str(exc))

    gap = compute_gap(request.wall_width, request.picture_width, request.quantity)
    # Zero gap means pictures tile the wall edge to edge, which is allowed.
    if gap < 0:
        logger.warning(
            "Rejected layout request: %d picture(s) of width %.6g exceed wall width %.6g",
            request.quantity,
            request.picture_width,
            request.wall_width,
        )
        return Rejection.overflow(
            f"{request.quantity} x {request.picture_width:g} in exceeds {request.wall_width:g} in"
        )

    centers = compute_centers(gap, request.picture_width, request.quantity)
    result = LayoutResult(
        request=request,
        gap=float(gap),
        picture_centers=tuple(centers.tolist()),
        vertical_offsets=[0.0] * request.quantity,
    )
    logger.info("Solved layout: %d picture(s), gap=%.4f", result.quantity, result.gap)
    return result


def solve_or_raise(request: LayoutRequest) -> LayoutResult:
    """Like :func:`solve` but raise :class:`LayoutRejected` on rejection."""

    outcome = solve(request)
    if isinstance(outcome, Rejection):
        raise LayoutRejected(outcome)
    return outcome


def check_layout(result: LayoutResult, *, tol: float = WIDTH_TOLERANCE) -> None:
    """Raise ``AssertionError`` if ``result`` breaks the spacing invariants."""

    req = result.request
    if result.gap < 0:
        raise AssertionError(f"negative gap {result.gap!r}")
    if len(result.picture_centers) != req.quantity:
        raise AssertionError(
            f"expected {req.quantity} centers, got {len(result.picture_centers)}"
        )
    used = req.picture_width * req.quantity + result.gap * (req.quantity + 1)
    if not math.isclose(used, req.wall_width, rel_tol=tol, abs_tol=tol):
        raise AssertionError(f"layout spans {used!r} in, wall is {req.wall_width!r} in")
    centers = np.asarray(result.picture_centers)
    if np.any(np.diff(centers) <= 0):
        raise AssertionError("picture centers are not strictly increasing")
