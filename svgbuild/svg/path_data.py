"""Path command list and the encoder for the ``d`` attribute.

Usage:
    data = PathData()
    data.move_to((0, 0)).line_to((10, 0), (10, 10)).close()
    encode_path(data.commands)   # "M 0 0 L 10 0 10 10 z"

Tokens are separated by single spaces. Once a line's token text would pass
``line_limit`` characters, the next token starts a new line instead.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Iterable

from svgbuild.models.geometry import CubicCurve, Point, QuadraticCurve, SmoothCubicCurve, as_point
from svgbuild.utils.formatting import format_number

logger = logging.getLogger(__name__)

PATH_LINE_LIMIT = 255


class CommandKind(enum.Enum):
    MOVE = "M"
    CLOSE = "Z"
    LINE = "L"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CUBIC = "C"
    SMOOTH_CUBIC = "S"
    QUADRATIC = "Q"
    SMOOTH_QUADRATIC = "T"


@dataclass(frozen=True)
class PathCommand:
    """One command of the path mini-language and its argument groups.

    ``args`` holds floats for H/V, ``Point`` for M/L/T and the matching curve
    type for C/S/Q. ``PathData`` normalizes them on append.
    """

    kind: CommandKind
    relative: bool = False
    args: tuple[Any, ...] = ()

    @property
    def code(self) -> str:
        # Close has no absolute form; it is always written lower-case.
        if self.kind is CommandKind.CLOSE or self.relative:
            return self.kind.value.lower()
        return self.kind.value

    def numbers(self) -> list[float]:
        """Flatten the argument groups in their natural parameter order."""
        if self.kind in (CommandKind.HORIZONTAL, CommandKind.VERTICAL):
            return list(self.args)
        return [v for group in self.args for v in group]

    def tokens(self) -> list[str]:
        return [self.code] + [format_number(v) for v in self.numbers()]


def _curve(cls: type, value: Any) -> Any:
    if isinstance(value, cls):
        return value
    return cls(*value)


def _normalize(kind: CommandKind, groups: tuple[Any, ...]) -> tuple[Any, ...]:
    """Coerce raw argument groups to their typed form. Bad input raises here."""
    if kind is CommandKind.CLOSE:
        return ()
    if kind in (CommandKind.HORIZONTAL, CommandKind.VERTICAL):
        return tuple(float(v) for v in groups)
    if kind in (CommandKind.MOVE, CommandKind.LINE, CommandKind.SMOOTH_QUADRATIC):
        return tuple(as_point(pt) for pt in groups)
    if kind is CommandKind.CUBIC:
        return tuple(_curve(CubicCurve, cv) for cv in groups)
    if kind is CommandKind.SMOOTH_CUBIC:
        return tuple(_curve(SmoothCubicCurve, cv) for cv in groups)
    if kind is CommandKind.QUADRATIC:
        return tuple(_curve(QuadraticCurve, cv) for cv in groups)
    raise AssertionError(f"Unhandled path command kind: {kind}")


class PathData:
    """Ordered list of path commands. Every append adds exactly one command."""

    def __init__(self) -> None:
        self.commands: list[PathCommand] = []

    def _add(self, kind: CommandKind, relative: bool, args: tuple[Any, ...]) -> PathData:
        self.commands.append(PathCommand(kind=kind, relative=relative, args=_normalize(kind, args)))
        return self

    def move_to(self, *points: Point | tuple[float, float], relative: bool = False) -> PathData:
        return self._add(CommandKind.MOVE, relative, points)

    def close(self) -> PathData:
        return self._add(CommandKind.CLOSE, False, ())

    def line_to(self, *points: Point | tuple[float, float], relative: bool = False) -> PathData:
        return self._add(CommandKind.LINE, relative, points)

    def horizontal_to(self, *xs: float, relative: bool = False) -> PathData:
        return self._add(CommandKind.HORIZONTAL, relative, xs)

    def vertical_to(self, *ys: float, relative: bool = False) -> PathData:
        return self._add(CommandKind.VERTICAL, relative, ys)

    def cubic_to(self, *curves: CubicCurve | tuple[float, ...], relative: bool = False) -> PathData:
        return self._add(CommandKind.CUBIC, relative, curves)

    def smooth_cubic_to(
        self, *curves: SmoothCubicCurve | tuple[float, ...], relative: bool = False
    ) -> PathData:
        return self._add(CommandKind.SMOOTH_CUBIC, relative, curves)

    def quadratic_to(
        self, *curves: QuadraticCurve | tuple[float, ...], relative: bool = False
    ) -> PathData:
        return self._add(CommandKind.QUADRATIC, relative, curves)

    def smooth_quadratic_to(
        self, *points: Point | tuple[float, float], relative: bool = False
    ) -> PathData:
        return self._add(CommandKind.SMOOTH_QUADRATIC, relative, points)

    def __len__(self) -> int:
        return len(self.commands)

    def encode(self, line_limit: int = PATH_LINE_LIMIT) -> str:
        return encode_path(self.commands, line_limit)


def encode_path(commands: Iterable[PathCommand], line_limit: int = PATH_LINE_LIMIT) -> str:
    """Serialize commands into the text of a ``d`` attribute."""
    parts: list[str] = []
    line_len = 0
    lines = 1

    for cmd in commands:
        for token in cmd.tokens():
            if not parts:
                parts.append(token)
                line_len = len(token)
            elif line_len + len(token) > line_limit:
                parts.append("\n")
                parts.append(token)
                line_len = len(token)
                lines += 1
            else:
                parts.append(" ")
                parts.append(token)
                line_len += len(token)

    if lines > 1:
        logger.debug("Wrapped path data onto %d lines (limit %d)", lines, line_limit)
    return "".join(parts)
