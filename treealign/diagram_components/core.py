from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Axis(Enum):

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Point(NamedTuple):
    x: float
    y: float


class Size(NamedTuple):
    width: float
    height: float

    def extent(self, axis: Axis) -> float:
        return self.width if axis is Axis.HORIZONTAL else self.height


class UnitPoint(NamedTuple):
    x: float
    y: float


UnitPoint.TOP_LEADING = UnitPoint(0.0, 0.0)
UnitPoint.TOP = UnitPoint(0.5, 0.0)
UnitPoint.CENTER = UnitPoint(0.5, 0.5)
UnitPoint.BOTTOM = UnitPoint(0.5, 1.0)
UnitPoint.BOTTOM_TRAILING = UnitPoint(1.0, 1.0)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box; y grows downwards."""

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def point(self, unit: UnitPoint) -> Point:
        return Point(self.x + unit.x * self.width, self.y + unit.y * self.height)

    @property
    def top(self) -> Point:
        return self.point(UnitPoint.TOP)

    @property
    def bottom(self) -> Point:
        return self.point(UnitPoint.BOTTOM)

    @property
    def center(self) -> Point:
        return self.point(UnitPoint.CENTER)

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def offset(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


@dataclass
class BoxChars:

    top_left: str = "╭"
    top_right: str = "╮"
    bottom_left: str = "╰"
    bottom_right: str = "╯"

    horizontal: str = "─"
    vertical: str = "│"

    diagonal_right: str = "╲"
    diagonal_left: str = "╱"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        key = style.lower().strip()
        if key in {"rounded", "round", "modern"}:
            return cls()
        if key in {"square", "line", "box"}:
            return cls(
                top_left="┌",
                top_right="┐",
                bottom_left="└",
                bottom_right="┘",
            )
        if key in {"ascii", "plain"}:
            return cls(
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                horizontal="-",
                vertical="|",
                diagonal_right="\\",
                diagonal_left="/",
            )
        raise ValueError(f"Unknown box style: {style}")
