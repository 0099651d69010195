"""svgbuild: assemble SVG documents as node trees and serialize them."""

from svgbuild.models.geometry import CubicCurve, Point, QuadraticCurve, SmoothCubicCurve
from svgbuild.svg.attributes import BaseAttrs, ShapeAttrs, Style, Transform, ViewBox
from svgbuild.svg.document import SVG, XML_PROLOG, new_svg
from svgbuild.svg.nodes import Circle, Ellipse, Group, Line, Path, Polygon, Polyline, Rect
from svgbuild.svg.path_data import CommandKind, PathCommand, PathData, encode_path

__all__ = [
    "SVG",
    "XML_PROLOG",
    "new_svg",
    "Group",
    "Circle",
    "Ellipse",
    "Rect",
    "Polygon",
    "Polyline",
    "Line",
    "Path",
    "PathData",
    "PathCommand",
    "CommandKind",
    "encode_path",
    "Style",
    "Transform",
    "ViewBox",
    "BaseAttrs",
    "ShapeAttrs",
    "Point",
    "CubicCurve",
    "SmoothCubicCurve",
    "QuadraticCurve",
]
