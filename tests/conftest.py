"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgbuild.svg.document import SVG, new_svg


class RecordingSink:
    """Collects every write so tests can inspect the write sequence."""

    def __init__(self) -> None:
        self.writes: list[str] = []

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.writes)


class FailingSink(RecordingSink):
    """Raises OSError on the write numbered ``fail_at`` (0-based)."""

    def __init__(self, fail_at: int) -> None:
        super().__init__()
        self.fail_at = fail_at
        self.calls = 0

    def write(self, text: str) -> int:
        if self.calls == self.fail_at:
            self.calls += 1
            raise OSError("disk full")
        self.calls += 1
        return super().write(text)


# Expected fragments from the smiley document built below

SMILEY_FRAGMENT = (
    '<svg viewBox="0 0 24 24" width="24" height="24" x="0" y="0" xmlns="http://www.w3.org/2000/svg">'
    '<g style="fill:none" class="face">'
    '<circle cx="12" cy="12" r="10"/>'
    '<circle cx="8" cy="9" r="1"/>'
    '<circle cx="16" cy="9" r="1"/>'
    "</g>"
    '<path d="M 8 14 Q 12 18 16 14"/>'
    "</svg>"
)


def build_smiley() -> SVG:
    doc = new_svg(24, 24)
    doc.view_box.set(0, 0, 24, 24)
    face = doc.group()
    face.attrs.style.set("fill", "none")
    face.attrs.class_name = "face"
    face.circle(12, 12, 10)
    face.circle(8, 9, 1)
    face.circle(16, 9, 1)
    doc.path().move_to((8, 14)).quadratic_to((12, 18, 16, 14))
    return doc


@pytest.fixture
def smiley() -> SVG:
    return build_smiley()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
