"""Tests for leaf and group nodes."""

from __future__ import annotations

import re

import numpy as np
import pytest

from svgbuild.config import settings
from svgbuild.models.geometry import Point
from svgbuild.svg.document import new_svg
from svgbuild.svg.nodes import Circle, Ellipse, Group, Line, Node, Path, Polygon, Polyline, Rect
from tests.conftest import FailingSink, RecordingSink


def _styled(node):
    node.attrs.style.set("fill", "red")
    node.attrs.external_resources_required = True
    node.attrs.class_name = "c"
    node.attrs.transform.translate(1, 2)
    return node


SHAPE_PREFIX = 'style="fill:red" externalResourcesRequired="true" class="c" transform="translate(1,2)"'


# ---------------------------------------------------------------------------
# 1. Attribute order per kind
# ---------------------------------------------------------------------------

class TestAttributeOrder:
    def test_circle(self):
        node = _styled(Circle(1, 2, 3))
        assert node.to_string() == f'<circle {SHAPE_PREFIX} cx="1" cy="2" r="3"/>'

    def test_ellipse(self):
        node = _styled(Ellipse(1, 2, 3, 4))
        assert node.to_string() == f'<ellipse {SHAPE_PREFIX} cx="1" cy="2" rx="3" ry="4"/>'

    def test_rect_writes_size_before_position(self):
        node = _styled(Rect(x=1, y=2, width=30, height=40))
        assert node.to_string() == f'<rect {SHAPE_PREFIX} width="30" height="40" x="1" y="2"/>'

    def test_line(self):
        node = _styled(Line(1, 2, 3, 4))
        assert node.to_string() == f'<line {SHAPE_PREFIX} x1="1" y1="2" x2="3" y2="4"/>'

    def test_polygon(self):
        node = _styled(Polygon(points=[(0, 0), (1, 1)]))
        assert node.to_string() == f'<polygon {SHAPE_PREFIX} points="0,0 1,1"/>'

    def test_polyline(self):
        node = _styled(Polyline(points=[(0, 0), (1, 1)]))
        assert node.to_string() == f'<polyline {SHAPE_PREFIX} points="0,0 1,1"/>'

    def test_path(self):
        node = _styled(Path()).move_to((0, 0)).line_to((5, 5))
        assert node.to_string() == f'<path {SHAPE_PREFIX} d="M 0 0 L 5 5"/>'

    def test_path_length_follows_d(self):
        node = Path(path_length=100).move_to((0, 0))
        assert node.to_string() == '<path d="M 0 0" pathLength="100"/>'

    def test_group(self):
        group = _styled(Group())
        assert group.to_string() == f"<g {SHAPE_PREFIX}></g>"

    def test_repeated_renders_identical(self):
        node = _styled(Ellipse(1.5, 2.5, 3, 4))
        assert node.to_string() == node.to_string()


def test_node_base_is_abstract():
    with pytest.raises(TypeError):
        Node()  # type: ignore[abstract]


# ---------------------------------------------------------------------------
# 3. Empty bundles
# ---------------------------------------------------------------------------

class TestEmptyBundles:
    def test_unset_bundles_produce_no_fragments(self):
        node = Circle(1, 2, 3)
        assert node.to_string() == '<circle cx="1" cy="2" r="3"/>'

    def test_cleared_bundle_matches_untouched(self):
        touched = Circle(1, 2, 3)
        touched.attrs.style.set("fill", "red")
        touched.attrs.style.unset("fill")
        touched.attrs.external_resources_required = False
        touched.attrs.class_name = ""
        assert touched.attr_strings() == Circle(1, 2, 3).attr_strings()
        assert touched.to_string() == Circle(1, 2, 3).to_string()

    def test_empty_group_keeps_single_space(self):
        assert Group().to_string() == "<g ></g>"

    def test_empty_point_list_omits_points(self):
        assert Polygon().to_string() == "<polygon />"

    def test_empty_path_omits_d(self):
        assert Path().to_string() == "<path />"


# ---------------------------------------------------------------------------
# 5. Point lists
# ---------------------------------------------------------------------------

class TestPoints:
    POINTS = [(0, 0), (10, 0), (10, 10)]

    def test_polygon_points(self):
        svg = new_svg(10, 10)
        svg.polygon(*self.POINTS)
        assert 'points="0,0 10,0 10,10"' in svg.to_string()

    def test_polyline_points(self):
        svg = new_svg(10, 10)
        svg.polyline(*[Point(x, y) for x, y in self.POINTS])
        assert 'points="0,0 10,0 10,10"' in svg.to_string()

    def test_numpy_points(self):
        node = Polygon(points=np.array(self.POINTS, dtype=float))
        assert node.to_string() == '<polygon points="0,0 10,0 10,10"/>'

    def test_fractional_points(self):
        node = Polyline(points=[(0.5, -1.25)])
        assert node.to_string() == '<polyline points="0.5,-1.25"/>'

    def test_bad_point_shape_raises_when_built(self):
        with pytest.raises(ValueError):
            Polygon(points=[(1, 2, 3), (4, 5, 6)])
        with pytest.raises(ValueError):
            new_svg(1, 1).polyline((1, 2, 3))

    def test_points_stored_as_points(self):
        node = Polygon(points=np.array([[1, 2], [3, 4]]))
        assert node.points == [Point(1, 2), Point(3, 4)]


# ---------------------------------------------------------------------------
# Construction API
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_each_call_returns_registered_child(self):
        group = Group()
        made = [
            group.circle(1, 1, 1),
            group.ellipse(1, 1, 2, 3),
            group.rect(0, 0, 5, 5),
            group.polygon((0, 0)),
            group.polyline((0, 0)),
            group.line(0, 0, 1, 1),
            group.path(),
            group.group(),
        ]
        assert group.children == made
        assert [type(c) for c in group.children] == [
            Circle, Ellipse, Rect, Polygon, Polyline, Line, Path, Group,
        ]

    def test_fluent_configuration_through_handle(self):
        group = Group()
        circle = group.circle(5, 5, 2)
        circle.attrs.class_name = "dot"
        assert group.to_string() == '<g ><circle class="dot" cx="5" cy="5" r="2"/></g>'

    def test_duplicate_children_are_kept(self):
        group = Group()
        group.circle(1, 1, 1)
        group.circle(1, 1, 1)
        assert group.to_string().count("<circle") == 2


# ---------------------------------------------------------------------------
# 2 / 7. Child order and nesting
# ---------------------------------------------------------------------------

def test_child_order_preserved_across_kinds():
    svg = new_svg(100, 100)
    svg.rect(0, 0, 1, 1)
    svg.circle(0, 0, 1)
    svg.path().move_to((0, 0))
    svg.group()
    svg.line(0, 0, 1, 1)
    svg.circle(2, 2, 2)
    out = svg.to_string()
    tags = re.findall(r"<(\w+)[ >/]", out)
    assert tags == ["svg", "rect", "circle", "path", "g", "line", "circle"]


def test_nested_groups():
    svg = new_svg(10, 10)
    outer = svg.group()
    inner = outer.group()
    inner.circle(1, 1, 1)
    inner.rect(0, 0, 2, 2)
    outer.line(0, 0, 1, 1)
    out = svg.to_string()
    body = out[out.index("<g") : out.rindex("</g>") + 4]
    assert body == (
        "<g ><g >"
        '<circle cx="1" cy="1" r="1"/>'
        '<rect width="2" height="2" x="0" y="0"/>'
        "</g>"
        '<line x1="0" y1="0" x2="1" y2="1"/>'
        "</g>"
    )


def test_container_streams_writes_in_order():
    group = Group()
    group.circle(1, 1, 1)
    group.rect(0, 0, 1, 1)
    sink = RecordingSink()
    group.render(sink)
    assert sink.writes == [
        "<g >",
        '<circle cx="1" cy="1" r="1"/>',
        '<rect width="1" height="1" x="0" y="0"/>',
        "</g>",
    ]


# ---------------------------------------------------------------------------
# Sink failures
# ---------------------------------------------------------------------------

class TestSinkFailure:
    def test_leaf_failure_propagates(self):
        with pytest.raises(OSError, match="disk full"):
            Circle(1, 1, 1).render(FailingSink(fail_at=0))

    def test_container_failure_stops_further_writes(self):
        group = Group()
        group.circle(1, 1, 1)
        group.circle(2, 2, 2)
        group.circle(3, 3, 3)
        sink = FailingSink(fail_at=2)
        with pytest.raises(OSError):
            group.render(sink)
        assert sink.writes == ["<g >", '<circle cx="1" cy="1" r="1"/>']
        assert sink.calls == 3

    def test_failure_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="svgbuild.svg.nodes"):
            with pytest.raises(OSError):
                Group().render(FailingSink(fail_at=1))
        assert "aborted" in caplog.text


def test_path_wrap_limit_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "path_line_limit", 3)
    node = Path().move_to((10, 20))
    assert node.to_string() == '<path d="M 10\n20"/>'
