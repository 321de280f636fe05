"""Plane geometry shared by the canvas and workflow editors."""
from typing import NamedTuple, Optional

class Point(NamedTuple):
    x: float
    y: float

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: "Point") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def contains(self, point: Point) -> bool:
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

def clamp(value: float, lower: Optional[float] = None, upper: Optional[float] = None) -> float:
    if lower is not None:
        value = max(lower, value)
    if upper is not None:
        value = min(upper, value)
    return value

def midpoint(start: Point, end: Point) -> Point:
    return Point((start.x + end.x) / 2, (start.y + end.y) / 2)

def _fmt(value: float) -> str:
    # 150.0 -> "150", 150.5 -> "150.5"
    value = round(float(value), 2)
    return str(int(value)) if value.is_integer() else str(value)

def bezier_path(start: Point, end: Point, offset: float) -> str:
    """
    Horizontal S-curve from start to end. Control points sit `offset` to the
    right of the start and `offset` to the left of the end.
    """
    c1 = Point(start.x + offset, start.y)
    c2 = Point(end.x - offset, end.y)
    return (
        f"M {_fmt(start.x)} {_fmt(start.y)} "
        f"C {_fmt(c1.x)} {_fmt(c1.y)}, {_fmt(c2.x)} {_fmt(c2.y)}, {_fmt(end.x)} {_fmt(end.y)}"
    )
