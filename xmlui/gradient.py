"""Gradient values and parsing of CSS radial gradients."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .colors import Color, parse_color


class GradientType(enum.Enum):
    """Kind of gradient."""

    LINEAR = "linear"
    RADIAL = "radial"


@dataclass
class ColorStop:
    """A colour at a position (0..1) along a gradient."""

    color: Color
    position: float


@dataclass
class Gradient:
    """A gradient made of ordered colour stops."""

    type: GradientType
    color_stops: list[ColorStop] = field(default_factory=list)


def _is_shape_keyword(first: str) -> bool:
    return (
        first in ("circle", "ellipse")
        or first.startswith("circle ")
        or first.startswith("ellipse ")
        or "at " in first
    )


def parse_radial_gradient(s: str) -> Gradient | None:
    """Parse ``radial-gradient(...)``; None unless at least two valid stops remain."""
    s = s.strip()
    prefix = "radial-gradient("
    if s.startswith(prefix):
        s = s[len(prefix) :]
    if s.endswith(")"):
        s = s[:-1]

    parts = s.split(",")
    if len(parts) < 2:
        return None

    if _is_shape_keyword(parts[0].strip().lower()):
        parts = parts[1:]

    count = len(parts)
    if count < 2:
        return None

    gradient = Gradient(GradientType.RADIAL)
    for i, part in enumerate(parts):
        text = part.strip()
        fields = text.split()
        position = i / (count - 1)
        if len(fields) >= 2 and fields[-1].endswith("%"):
            try:
                position = float(fields[-1][:-1]) / 100
            except ValueError:
                pass
            color = parse_color(" ".join(fields[:-1]))
        else:
            color = parse_color(text)
        if color is not None:
            gradient.color_stops.append(ColorStop(color, position))

    if len(gradient.color_stops) < 2:
        return None
    return gradient