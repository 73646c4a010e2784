"""Easing functions for transitions, including CSS cubic-bezier curves."""

from __future__ import annotations

import re
from typing import Callable

EasingFunc = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_EPSILON = 1e-7

_CUBIC_BEZIER_RE = re.compile(r"cubic-bezier\(\s*([^)]*)\)")


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def _bezier(t: float, p1: float, p2: float) -> float:
    """One-dimensional cubic bezier with control points (0, p1, p2, 1)."""
    u = 1 - t
    return 3 * u * u * t * p1 + 3 * u * t * t * p2 + t * t * t


def _bezier_derivative(t: float, p1: float, p2: float) -> float:
    u = 1 - t
    return 3 * u * u * p1 + 6 * u * t * (p2 - p1) + 3 * t * t * (1 - p2)


def _solve_for_x(x: float, x1: float, x2: float) -> float:
    """Find the curve parameter whose x-coordinate is ``x`` (Newton-Raphson)."""
    t = x
    for _ in range(_NEWTON_ITERATIONS):
        dx = _bezier(t, x1, x2) - x
        if abs(dx) < _EPSILON:
            break
        slope = _bezier_derivative(t, x1, x2)
        if abs(slope) < _EPSILON:
            break
        t = _clamp(t - dx / slope, 0.0, 1.0)
    return t


def cubic_bezier_easing(x1: float, y1: float, x2: float, y2: float) -> EasingFunc:
    """Return the easing function of CSS ``cubic-bezier(x1, y1, x2, y2)``."""

    def easing(x: float) -> float:
        if x <= 0:
            return 0.0
        if x >= 1:
            return 1.0
        return _bezier(_solve_for_x(x, x1, x2), y1, y2)

    return easing


def ease_linear(t: float) -> float:
    """Identity easing: progress maps to itself."""
    return t


EASE = cubic_bezier_easing(0.25, 0.1, 0.25, 1.0)
EASE_IN = cubic_bezier_easing(0.42, 0.0, 1.0, 1.0)
EASE_OUT = cubic_bezier_easing(0.0, 0.0, 0.58, 1.0)
EASE_IN_OUT = cubic_bezier_easing(0.42, 0.0, 0.58, 1.0)

_NAMED_EASINGS: dict[str, EasingFunc] = {
    "linear": ease_linear,
    "ease": EASE,
    "ease-in": EASE_IN,
    "ease-out": EASE_OUT,
    "ease-in-out": EASE_IN_OUT,
}


def parse_easing(name: str) -> EasingFunc:
    """Return the easing named by a CSS timing-function string.

    Accepts the keywords ``linear``, ``ease``, ``ease-in``, ``ease-out``,
    ``ease-in-out`` and ``cubic-bezier(x1, y1, x2, y2)``. Anything else,
    including a malformed cubic-bezier, yields linear easing.
    """
    text = name.strip().lower()
    named = _NAMED_EASINGS.get(text)
    if named is not None:
        return named
    match = _CUBIC_BEZIER_RE.fullmatch(text)
    if match:
        args = [a.strip() for a in match.group(1).split(",")]
        if len(args) == 4:
            try:
                x1, y1, x2, y2 = (float(a) for a in args)
            except ValueError:
                return ease_linear
            return cubic_bezier_easing(x1, y1, x2, y2)
    return ease_linear