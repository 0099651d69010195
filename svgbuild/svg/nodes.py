"""Document tree nodes: containers with ordered children, and leaf shapes.

Every node owns its attribute bundle explicitly (``node.attrs``) and builds its
attribute list as the bundle's fragments followed by its own attributes in a
fixed order. Containers render their children in insertion order, writing
straight to the sink as they go.
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from svgbuild.config import settings
from svgbuild.models.geometry import Point, as_point
from svgbuild.svg.attributes import ShapeAttrs, float_attr, join_attrs, string_attr
from svgbuild.svg.path_data import PathData
from svgbuild.utils.formatting import coerce_points

if TYPE_CHECKING:
    from svgbuild.svg.document import SVG

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, text: str, /) -> Any: ...


class Node(ABC):
    """Base for every element in the tree."""

    element: ClassVar[str] = ""

    @abstractmethod
    def attr_strings(self) -> list[str]:
        """Attribute fragments in output order; empty entries are skipped."""

    def _render(self, sink: Sink) -> None:
        sink.write(f"<{self.element} {join_attrs(self.attr_strings())}/>")

    def render(self, sink: Sink) -> None:
        """Write this node's markup to ``sink``. Sink errors propagate unchanged."""
        try:
            self._render(sink)
        except Exception as exc:
            logger.warning("Render of <%s> aborted: %s", self.element, exc)
            raise

    def to_string(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()


class Container(Node):
    """A node that holds an ordered list of child nodes and renders them in order."""

    children: list[Node]

    def _append(self, node: Node) -> Any:
        self.children.append(node)
        logger.debug("Added <%s> to <%s> (%d children)", node.element, self.element, len(self.children))
        return node

    def group(self) -> Group:
        return self._append(Group())

    def svg(self, x: float, y: float, width: float, height: float) -> SVG:
        """Embed a nested <svg> viewport."""
        from svgbuild.svg.document import SVG

        return self._append(SVG(width=width, height=height, x=x, y=y))

    def circle(self, cx: float, cy: float, r: float) -> Circle:
        return self._append(Circle(cx=cx, cy=cy, r=r))

    def ellipse(self, cx: float, cy: float, rx: float, ry: float) -> Ellipse:
        return self._append(Ellipse(cx=cx, cy=cy, rx=rx, ry=ry))

    def rect(self, x: float, y: float, width: float, height: float) -> Rect:
        return self._append(Rect(x=x, y=y, width=width, height=height))

    def polygon(self, *points: Point | tuple[float, float]) -> Polygon:
        return self._append(Polygon(points=list(points)))

    def polyline(self, *points: Point | tuple[float, float]) -> Polyline:
        return self._append(Polyline(points=list(points)))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> Line:
        return self._append(Line(x1=x1, y1=y1, x2=x2, y2=y2))

    def path(self) -> Path:
        return self._append(Path())

    def _render(self, sink: Sink) -> None:
        sink.write(f"<{self.element} {join_attrs(self.attr_strings())}>")
        for child in self.children:
            child._render(sink)
        sink.write(f"</{self.element}>")


@dataclass(eq=False)
class Group(Container):
    """An SVG group (the g element)."""

    element: ClassVar[str] = "g"

    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)
    children: list[Node] = field(default_factory=list)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings()


@dataclass(eq=False)
class Circle(Node):
    element: ClassVar[str] = "circle"

    cx: float
    cy: float
    r: float
    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings() + [
            float_attr("cx", self.cx),
            float_attr("cy", self.cy),
            float_attr("r", self.r),
        ]


@dataclass(eq=False)
class Ellipse(Node):
    element: ClassVar[str] = "ellipse"

    cx: float
    cy: float
    rx: float
    ry: float
    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings() + [
            float_attr("cx", self.cx),
            float_attr("cy", self.cy),
            float_attr("rx", self.rx),
            float_attr("ry", self.ry),
        ]


@dataclass(eq=False)
class Rect(Node):
    element: ClassVar[str] = "rect"

    x: float
    y: float
    width: float
    height: float
    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings() + [
            float_attr("width", self.width),
            float_attr("height", self.height),
            float_attr("x", self.x),
            float_attr("y", self.y),
        ]


def _as_points(points: Any) -> list[Point]:
    """Accept Points, (x, y) tuples or an Nx2 array. Bad shapes raise ValueError."""
    if isinstance(points, list) and all(isinstance(p, Point) for p in points):
        return points
    return [as_point(tuple(row)) for row in coerce_points(points)]


def _points_string(points: list[Point]) -> str:
    return " ".join(p.coord_string() for p in points)


@dataclass(eq=False)
class Polygon(Node):
    """A closed, filled polygon."""

    element: ClassVar[str] = "polygon"

    points: Any = field(default_factory=list)
    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)

    def __post_init__(self) -> None:
        self.points = _as_points(self.points)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings() + [string_attr("points", _points_string(self.points))]


@dataclass(eq=False)
class Polyline(Node):
    """An open polygon drawn as connected line segments."""

    element: ClassVar[str] = "polyline"

    points: Any = field(default_factory=list)
    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)

    def __post_init__(self) -> None:
        self.points = _as_points(self.points)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings() + [string_attr("points", _points_string(self.points))]


@dataclass(eq=False)
class Line(Node):
    element: ClassVar[str] = "line"

    x1: float
    y1: float
    x2: float
    y2: float
    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings() + [
            float_attr("x1", self.x1),
            float_attr("y1", self.y1),
            float_attr("x2", self.x2),
            float_attr("y2", self.y2),
        ]


@dataclass(eq=False)
class Path(Node):
    """A path through the user coordinate system (the path element).

    The command methods mirror ``PathData`` and return the node so a path can
    be drawn in one chained expression.
    """

    element: ClassVar[str] = "path"

    data: PathData = field(default_factory=PathData)
    path_length: float | None = None
    attrs: ShapeAttrs = field(default_factory=ShapeAttrs)

    def move_to(self, *points: Point | tuple[float, float], relative: bool = False) -> Path:
        self.data.move_to(*points, relative=relative)
        return self

    def close(self) -> Path:
        self.data.close()
        return self

    def line_to(self, *points: Point | tuple[float, float], relative: bool = False) -> Path:
        self.data.line_to(*points, relative=relative)
        return self

    def horizontal_to(self, *xs: float, relative: bool = False) -> Path:
        self.data.horizontal_to(*xs, relative=relative)
        return self

    def vertical_to(self, *ys: float, relative: bool = False) -> Path:
        self.data.vertical_to(*ys, relative=relative)
        return self

    def cubic_to(self, *curves: Any, relative: bool = False) -> Path:
        self.data.cubic_to(*curves, relative=relative)
        return self

    def smooth_cubic_to(self, *curves: Any, relative: bool = False) -> Path:
        self.data.smooth_cubic_to(*curves, relative=relative)
        return self

    def quadratic_to(self, *curves: Any, relative: bool = False) -> Path:
        self.data.quadratic_to(*curves, relative=relative)
        return self

    def smooth_quadratic_to(self, *points: Point | tuple[float, float], relative: bool = False) -> Path:
        self.data.smooth_quadratic_to(*points, relative=relative)
        return self

    def attr_strings(self) -> list[str]:
        attrs = self.attrs.attr_strings() + [
            string_attr("d", self.data.encode(settings.path_line_limit)),
        ]
        if self.path_length is not None:
            attrs.append(float_attr("pathLength", self.path_length))
        return attrs
