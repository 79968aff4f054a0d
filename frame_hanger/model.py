"""Core data structures for the layout pipeline."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

WIDTH_TOLERANCE = 1e-9


class OffsetError(ValueError):
    """Raised when vertical offsets do not fit the layout they are applied to."""


class RejectionReason(Enum):
    INVALID_INPUT = "invalid-input"
    OVERFLOW = "overflow"


INVALID_INPUT_MESSAGE = (
    "Please enter valid positive numbers. "
    "Hanging height must be less than or equal to wall height."
)
OVERFLOW_MESSAGE = (
    "The pictures are too wide to fit on the wall with spacing. "
    "Please adjust the sizes or quantity."
)


@dataclass(frozen=True)
class Rejection:
    """Why a request produced no layout."""

    reason: RejectionReason
    message: str
    detail: str = ""

    @classmethod
    def invalid_input(cls, detail: str = "") -> "Rejection":
        return cls(RejectionReason.INVALID_INPUT, INVALID_INPUT_MESSAGE, detail)

    @classmethod
    def overflow(cls, detail: str = "") -> "Rejection":
        return cls(RejectionReason.OVERFLOW, OVERFLOW_MESSAGE, detail)

    def __str__(self) -> str:
        return self.message


class LayoutRejected(Exception):
    """Raised by :func:`frame_hanger.solver.solve_or_raise`."""

    def __init__(self, rejection: Rejection) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection

    @property
    def reason(self) -> RejectionReason:
        return self.rejection.reason


@dataclass(frozen=True)
class LayoutRequest:
    """Immutable wall and picture dimensions, all lengths in inches."""

    wall_width: float
    wall_height: float
    picture_width: float
    picture_height: float
    quantity: int
    hanging_height: float

    @classmethod
    def from_values(
        cls,
        wall_width: object,
        wall_height: object,
        picture_width: object,
        picture_height: object,
        quantity: object,
        hanging_height: object,
    ) -> "LayoutRequest":
        """Build a request from already-parsed numbers.

        Real fields are converted to ``float`` when they are real numbers and
        passed through untouched otherwise, so :func:`validate` can report
        them. An integral ``quantity`` (``3`` or ``3.0``) becomes ``int``.
        """

        def _real(value: object) -> object:
            if isinstance(value, numbers.Real) and not isinstance(value, bool):
                return float(value)
            return value

        qty = quantity
        if isinstance(qty, numbers.Real) and not isinstance(qty, bool):
            as_float = float(qty)
            if math.isfinite(as_float) and as_float.is_integer():
                qty = int(as_float)

        return cls(
            wall_width=_real(wall_width),  # type: ignore[arg-type]
            wall_height=_real(wall_height),  # type: ignore[arg-type]
            picture_width=_real(picture_width),  # type: ignore[arg-type]
            picture_height=_real(picture_height),  # type: ignore[arg-type]
            quantity=qty,  # type: ignore[arg-type]
            hanging_height=_real(hanging_height),  # type: ignore[arg-type]
        )


def coerce_finite(value: object, *, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise OffsetError(f"{what} must be a real number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise OffsetError(f"{what} must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class LayoutResult:
    """Solved arrangement for one :class:`LayoutRequest`.

    Fields are frozen. The ``vertical_offsets`` list is edited in place through
    :meth:`set_offset` and :meth:`commit_offsets`; positive values move a
    picture up.
    """

    request: LayoutRequest
    gap: float
    picture_centers: Tuple[float, ...]
    vertical_offsets: List[float] = field(default_factory=list, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "picture_centers", tuple(float(c) for c in self.picture_centers))
        if not self.vertical_offsets:
            object.__setattr__(self, "vertical_offsets", [0.0] * len(self.picture_centers))
        if len(self.vertical_offsets) != len(self.picture_centers):
            raise OffsetError(
                f"expected {len(self.picture_centers)} offsets, got {len(self.vertical_offsets)}"
            )

    @property
    def quantity(self) -> int:
        return len(self.picture_centers)

    @property
    def picture_left_edges(self) -> Tuple[float, ...]:
        half = self.request.picture_width / 2.0
        return tuple(center - half for center in self.picture_centers)

    @property
    def picture_right_edges(self) -> Tuple[float, ...]:
        half = self.request.picture_width / 2.0
        return tuple(center + half for center in self.picture_centers)

    def top_edge(self, index: int) -> float:
        """Floor-to-top distance of picture ``index`` with its offset applied."""

        return self.request.hanging_height + self.vertical_offsets[index]

    def set_offset(self, index: int, value: float) -> None:
        if not 0 <= index < self.quantity:
            raise IndexError(f"picture index {index} out of range 0..{self.quantity - 1}")
        self.vertical_offsets[index] = coerce_finite(value, what=f"offset {index}")

    def commit_offsets(self, values: Sequence[float]) -> None:
        """Replace all offsets at once; nothing changes if any value is bad."""

        if len(values) != self.quantity:
            raise OffsetError(f"expected {self.quantity} offsets, got {len(values)}")
        coerced = [coerce_finite(v, what=f"offset {i}") for i, v in enumerate(values)]
        self.vertical_offsets[:] = coerced


__all__ = [
    "WIDTH_TOLERANCE",
    "OffsetError",
    "RejectionReason",
    "Rejection",
    "LayoutRejected",
    "LayoutRequest",
    "LayoutResult",
    "INVALID_INPUT_MESSAGE",
    "OVERFLOW_MESSAGE",
    "coerce_finite",
]
