"""Draw primitives in display-pixel coordinates (origin top-left, y down)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Type, TypeVar, Union

Role = str


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    role: Role
    fill: Optional[str] = None
    stroke: Optional[str] = None
    line_width: float = 0.0
    index: Optional[int] = None


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    role: Role
    stroke: str
    line_width: float = 1.0
    index: Optional[int] = None


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    role: Role
    fill: str
    font_size: float = 14.0
    align: str = "center"  # "left" | "center" | "right"
    index: Optional[int] = None


Primitive = Union[Rect, Line, Text]
P = TypeVar("P", Rect, Line, Text)


@dataclass(frozen=True)
class RenderModel:
    """Everything needed to draw one frame of the wall diagram."""

    scale: float
    padding: float
    width: float
    height: float
    wall_rect: Rect
    primitives: Tuple[Primitive, ...]

    def by_role(self, role: Role) -> Tuple[Primitive, ...]:
        return tuple(p for p in self.primitives if p.role == role)

    def of_type(self, kind: Type[P]) -> Iterator[P]:
        for p in self.primitives:
            if isinstance(p, kind):
                yield p

    @property
    def roles(self) -> Tuple[Role, ...]:
        return tuple(p.role for p in self.primitives)
