"""The <svg> document root, with full-document and fragment rendering."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import ClassVar

from svgbuild.svg.attributes import BaseAttrs, ViewBox, float_attr, string_attr
from svgbuild.svg.nodes import Container, Node, Sink

logger = logging.getLogger(__name__)

XML_PROLOG = '<?xml version="1.0"?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass(eq=False)
class SVG(Container):
    """An <svg> element: the document root, or a viewport nested inside one.

    ``fragment`` selects what ``write`` and ``to_string`` produce: the bare
    element (True) or the element preceded by the XML prolog (False).
    """

    element: ClassVar[str] = "svg"

    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    attrs: BaseAttrs = field(default_factory=BaseAttrs)
    view_box: ViewBox = field(default_factory=ViewBox)
    fragment: bool = False
    children: list[Node] = field(default_factory=list)

    def attr_strings(self) -> list[str]:
        return self.attrs.attr_strings() + [
            self.view_box.attr_string(),
            float_attr("width", self.width),
            float_attr("height", self.height),
            float_attr("x", self.x),
            float_attr("y", self.y),
            string_attr("xmlns", SVG_NAMESPACE),
        ]

    def render(self, sink: Sink) -> None:
        """Render a complete document: the XML prolog, then the <svg> element."""
        logger.debug("Rendering svg document (%d top-level children)", len(self.children))
        try:
            sink.write(XML_PROLOG)
            self._render(sink)
        except Exception as exc:
            logger.warning("Render of svg document aborted: %s", exc)
            raise

    def render_fragment(self, sink: Sink) -> None:
        """Render only the <svg> element, for embedding in other markup."""
        logger.debug("Rendering svg fragment (%d top-level children)", len(self.children))
        super().render(sink)

    def write(self, sink: Sink) -> None:
        if self.fragment:
            self.render_fragment(sink)
        else:
            self.render(sink)

    def to_string(self) -> str:
        buf = io.StringIO()
        self.write(buf)
        return buf.getvalue()

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return self.to_string().encode(encoding)


def new_svg(width: float, height: float) -> SVG:
    """Create an empty document root of the given size."""
    return SVG(width=width, height=height)
