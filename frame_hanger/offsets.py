"""Working-copy editor for per-picture vertical offsets."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Callable, List, Optional, Tuple

from .model import LayoutResult

logger = logging.getLogger(__name__)

OffsetListener = Callable[[Tuple[float, ...]], None]


def coerce_offset(value: object) -> float:
    """Return ``value`` as a finite float, or ``0.0`` for anything else."""

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return 0.0
    result = float(value)
    if not math.isfinite(result):
        return 0.0
    return result


class OffsetEditor:
    """Edit offsets for ``result`` without touching it until :meth:`commit`.

    Every edit calls ``on_change`` with the full working copy so a renderer
    can preview the uncommitted state.
    """

    def __init__(self, result: LayoutResult, on_change: Optional[OffsetListener] = None) -> None:
        self._result = result
        self._on_change = on_change
        self._working: List[float] = list(result.vertical_offsets)

    @property
    def result(self) -> LayoutResult:
        return self._result

    @property
    def working(self) -> List[float]:
        return list(self._working)

    def preview(self) -> Tuple[float, ...]:
        return tuple(self._working)

    def is_dirty(self) -> bool:
        return self._working != list(self._result.vertical_offsets)

    def set_offset(self, index: int, value: object) -> float:
        if not 0 <= index < len(self._working):
            raise IndexError(f"picture index {index} out of range 0..{len(self._working) - 1}")
        coerced = coerce_offset(value)
        self._working[index] = coerced
        logger.debug("Offset for picture %d set to %.4f (uncommitted)", index, coerced)
        self._notify()
        return coerced

    def reset(self) -> None:
        self._working = [0.0] * len(self._working)
        self._notify()

    def commit(self) -> List[float]:
        self._result.commit_offsets(self._working)
        logger.info("Committed %d vertical offset(s)", len(self._working))
        return list(self._result.vertical_offsets)

    def discard(self) -> None:
        self._working = list(self._result.vertical_offsets)
        logger.debug("Discarded uncommitted offsets")
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.preview())
