"""Wall-space (inches, floor-up) to display-space (pixels, top-down) mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple


class DegenerateGeometryError(ValueError):
    """Raised when the surface or wall leaves no room for a positive finite scale."""


@dataclass(frozen=True)
class CoordinateMapper:
    wall_width: float
    wall_height: float
    surface_width_px: float
    padding: float = 20.0
    footer_px: float = 120.0
    scale: float = field(init=False)

    def __post_init__(self) -> None:
        values = (self.wall_width, self.wall_height, self.surface_width_px, self.padding)
        if not all(math.isfinite(v) for v in values):
            raise DegenerateGeometryError(f"non-finite geometry {values!r}")
        if self.wall_width <= 0 or self.wall_height <= 0:
            raise DegenerateGeometryError(
                f"wall must have positive size, got {self.wall_width!r} x {self.wall_height!r}"
            )
        if self.surface_width_px <= 2 * self.padding:
            raise DegenerateGeometryError(
                f"surface width {self.surface_width_px!r}px leaves no room inside "
                f"{self.padding!r}px padding"
            )
        object.__setattr__(
            self, "scale", (self.surface_width_px - 2 * self.padding) / self.wall_width
        )

    @property
    def surface_height_px(self) -> float:
        return self.wall_height * self.scale + self.footer_px

    @property
    def wall_bottom_px(self) -> float:
        return self.padding + self.wall_height * self.scale

    @property
    def wall_right_px(self) -> float:
        return self.padding + self.wall_width * self.scale

    def x_to_px(self, x: float) -> float:
        return self.padding + x * self.scale

    def y_to_px(self, y: float) -> float:
        return self.padding + (self.wall_height - y) * self.scale

    def length_to_px(self, length: float) -> float:
        return length * self.scale

    def to_display(self, x: float, y: float) -> Tuple[float, float]:
        return self.x_to_px(x), self.y_to_px(y)
