"""Geometry value objects used by shape and path nodes."""

from __future__ import annotations

from typing import Iterator

from pydantic.dataclasses import dataclass

from svgbuild.utils.formatting import format_number


@dataclass(frozen=True)
class Point:
    """A Cartesian point."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def coord_string(self) -> str:
        return f"{format_number(self.x)},{format_number(self.y)}"


@dataclass(frozen=True)
class CubicCurve:
    """A cubic Bezier segment: two control points and an end point."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x1, self.y1, self.x2, self.y2, self.x, self.y))


@dataclass(frozen=True)
class SmoothCubicCurve:
    """A shorthand cubic Bezier segment; the first control point is reflected."""

    x2: float
    y2: float
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x2, self.y2, self.x, self.y))


@dataclass(frozen=True)
class QuadraticCurve:
    """A quadratic Bezier segment."""

    x1: float
    y1: float
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x1, self.y1, self.x, self.y))


def as_point(value: Point | tuple[float, float]) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))
