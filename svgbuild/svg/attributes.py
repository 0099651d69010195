"""Attribute bundles: value objects that render themselves as attribute text.

Every bundle exposes ``attr_strings()``, an ordered list of ``name="value"``
fragments. Entries may be empty strings; ``join_attrs`` drops them before the
final join, so an unset bundle contributes nothing to the tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from svgbuild.utils.formatting import format_number


def float_attr(name: str, value: float) -> str:
    return f'{name}="{format_number(value)}"'


def bool_attr(name: str, value: bool) -> str:
    return f'{name}="{"true" if value else "false"}"'


def string_attr(name: str, value: str) -> str:
    """Plain string attribute. Values are written as-is, without escaping."""
    if not value:
        return ""
    return f'{name}="{value}"'


def join_attrs(fragments: Iterable[str]) -> str:
    return " ".join(f for f in fragments if f)


class Style:
    """The style attribute of any stylable element."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str:
        return self._values.get(key, "")

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._values.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Style({self._values!r})"

    def attr_string(self) -> str:
        if not self._values:
            return ""
        return string_attr("style", ";".join(f"{k}:{v}" for k, v in self._values.items()))


def _call(name: str, *args: float) -> str:
    return f"{name}({','.join(format_number(a) for a in args)})"


class Transform:
    """An append-only series of transforms applied to an element."""

    def __init__(self) -> None:
        self._transforms: list[str] = []

    def matrix(self, a: float, b: float, c: float, d: float, e: float, f: float) -> Transform:
        self._transforms.append(_call("matrix", a, b, c, d, e, f))
        return self

    def translate(self, tx: float, ty: float) -> Transform:
        self._transforms.append(_call("translate", tx, ty))
        return self

    def scale(self, sx: float, sy: float) -> Transform:
        self._transforms.append(_call("scale", sx, sy))
        return self

    def rotate(self, angle: float, cx: float = 0.0, cy: float = 0.0) -> Transform:
        """Rotate by ``angle`` degrees around (cx, cy)."""
        self._transforms.append(_call("rotate", angle, cx, cy))
        return self

    def skew_x(self, angle: float) -> Transform:
        self._transforms.append(_call("skewX", angle))
        return self

    def skew_y(self, angle: float) -> Transform:
        self._transforms.append(_call("skewY", angle))
        return self

    @property
    def operations(self) -> tuple[str, ...]:
        return tuple(self._transforms)

    def __len__(self) -> int:
        return len(self._transforms)

    def attr_string(self) -> str:
        return string_attr("transform", " ".join(self._transforms))


@dataclass
class ViewBox:
    """The viewBox attribute of an <svg> element."""

    min_x: float = 0.0
    min_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    is_set: bool = False

    def set(self, min_x: float, min_y: float, width: float, height: float) -> None:
        self.min_x = min_x
        self.min_y = min_y
        self.width = width
        self.height = height
        self.is_set = True

    def attr_string(self) -> str:
        if not self.is_set:
            return ""
        values = " ".join(format_number(v) for v in (self.min_x, self.min_y, self.width, self.height))
        return string_attr("viewBox", values)


@dataclass
class BaseAttrs:
    """Attributes shared by every element, containers included."""

    style: Style = field(default_factory=Style)
    external_resources_required: bool = False
    class_name: str = ""

    def attr_strings(self) -> list[str]:
        ext = ""
        if self.external_resources_required:
            ext = bool_attr("externalResourcesRequired", True)
        return [
            self.style.attr_string(),
            ext,
            string_attr("class", self.class_name),
        ]


@dataclass
class ShapeAttrs:
    """Base attributes plus a transform, for everything that draws."""

    base: BaseAttrs = field(default_factory=BaseAttrs)
    transform: Transform = field(default_factory=Transform)

    @property
    def style(self) -> Style:
        return self.base.style

    @property
    def class_name(self) -> str:
        return self.base.class_name

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.base.class_name = value

    @property
    def external_resources_required(self) -> bool:
        return self.base.external_resources_required

    @external_resources_required.setter
    def external_resources_required(self, value: bool) -> None:
        self.base.external_resources_required = value

    def attr_strings(self) -> list[str]:
        return self.base.attr_strings() + [self.transform.attr_string()]
