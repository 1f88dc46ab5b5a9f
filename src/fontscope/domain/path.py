"""Path drawing commands in output space.

This module defines the closed set of path commands produced when a glyph
outline is walked:
- MoveTo, LineTo, QuadTo, CubicTo, ClosePath: one dataclass per segment kind
- PathCommand: union of the five command types

Coordinates carried by commands are already scaled, flipped and offset
into output space. They are never raw font units.
"""

from collections.abc import Iterable
from dataclasses import dataclass


def format_number(value: float, precision: int = 2) -> str:
    """Format a coordinate compactly.

    Rounds to ``precision`` digits and strips trailing zeros, so ``10.50``
    becomes ``10.5`` and ``3.00`` becomes ``3``. Negative zero is written
    as ``0``.

    Args:
        value: Number to format
        precision: Decimal digits to keep

    Returns:
        Compact decimal string
    """
    text = f"{round(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    x: float
    y: float

    def to_svg(self, precision: int = 2) -> str:
        return f"M{format_number(self.x, precision)} {format_number(self.y, precision)}"


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment to (x, y)."""

    x: float
    y: float

    def to_svg(self, precision: int = 2) -> str:
        return f"L{format_number(self.x, precision)} {format_number(self.y, precision)}"


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier segment with control point (x1, y1) ending at (x, y)."""

    x1: float
    y1: float
    x: float
    y: float

    def to_svg(self, precision: int = 2) -> str:
        coords = (self.x1, self.y1, self.x, self.y)
        return "Q" + " ".join(format_number(c, precision) for c in coords)


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier segment with control points (x1, y1), (x2, y2) ending at (x, y)."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    def to_svg(self, precision: int = 2) -> str:
        coords = (self.x1, self.y1, self.x2, self.y2, self.x, self.y)
        return "C" + " ".join(format_number(c, precision) for c in coords)


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath."""

    def to_svg(self, precision: int = 2) -> str:  # noqa: ARG002
        return "Z"


PathCommand = MoveTo | LineTo | QuadTo | CubicTo | ClosePath


def path_data(commands: Iterable[PathCommand], precision: int = 2) -> str:
    """Serialize commands to SVG path data.

    Commands are concatenated without separators; subpath boundaries are
    marked only by ``M`` and ``Z``.

    Args:
        commands: Commands in drawing order
        precision: Decimal digits to keep

    Returns:
        Path data string, empty when there are no commands
    """
    return "".join(command.to_svg(precision) for command in commands)
