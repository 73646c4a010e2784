"""Parsing of CSS property values: shadows, transitions, filters and units."""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import Color, parse_color
from .easing import EasingFunc, ease_linear, parse_easing

DEFAULT_SHADOW_COLOR = Color(0, 0, 0, 128)


def _to_float(s: str) -> float:
    """Parse a float strictly, returning 0.0 when the text is not a number."""
    if not s or s != s.strip() or "_" in s:
        return 0.0
    try:
        return float(s)
    except ValueError:
        return 0.0


@dataclass
class BoxShadow:
    """A parsed ``box-shadow`` or ``drop-shadow`` value."""

    offset_x: float = 0.0
    offset_y: float = 0.0
    blur: float = 0.0
    spread: float = 0.0
    color: Color = DEFAULT_SHADOW_COLOR
    inset: bool = False


@dataclass
class Filter:
    """A parsed CSS ``filter`` value; the defaults leave an image unchanged."""

    blur: float = 0.0
    brightness: float = 1.0
    contrast: float = 1.0
    grayscale: float = 0.0
    sepia: float = 0.0
    saturate: float = 1.0
    hue_rotate: float = 0.0
    invert: float = 0.0


@dataclass
class BackdropFilter:
    """A parsed CSS ``backdrop-filter`` value."""

    blur: float = 0.0
    brightness: float = 1.0
    saturate: float = 1.0


@dataclass
class Transition:
    """One declaration of a CSS ``transition`` list (times in seconds)."""

    property: str = ""
    duration: float = 0.0
    easing: EasingFunc = field(default=ease_linear)
    delay: float = 0.0


def parse_pixel_value(s: str) -> float:
    """Parse a length such as ``10px`` or ``10``; 0 when not a number."""
    if s.endswith("px"):
        s = s[:-2]
    return _to_float(s)


def parse_duration(s: str) -> float:
    """Parse a CSS time (``0.3s``, ``300ms`` or a bare number) into seconds."""
    s = s.strip().lower()
    if s.endswith("ms"):
        return _to_float(s[:-2]) / 1000
    if s.endswith("s"):
        return _to_float(s[:-1])
    return _to_float(s)


def is_numeric(s: str) -> bool:
    """Tell whether the text starts like a number (digit, '-' or '.')."""
    return bool(s) and (s[0].isdigit() and s[0].isascii() or s[0] in "-.")


def parse_box_shadow(s: str) -> BoxShadow | None:
    """Parse ``[inset] offsetX offsetY blur [spread] [color]``."""
    s = s.strip()
    if s in ("", "none"):
        return None
    parts = s.split()
    if len(parts) < 3:
        return None

    shadow = BoxShadow()
    if parts[0] == "inset":
        shadow.inset = True
        parts = parts[1:]

    values = iter(parts)
    remaining = list(parts)
    for name in ("offset_x", "offset_y", "blur"):
        if not remaining:
            break
        setattr(shadow, name, parse_pixel_value(remaining.pop(0)))
    if remaining and is_numeric(remaining[0]):
        shadow.spread = parse_pixel_value(remaining.pop(0))
    del values

    if remaining:
        color = parse_color(" ".join(remaining))
        if color is not None:
            shadow.color = color
    return shadow


def parse_transition(s: str) -> Transition:
    """Parse ``property [duration [easing [delay]]]``."""
    fields = s.split()
    transition = Transition()
    if len(fields) >= 1:
        transition.property = fields[0]
    if len(fields) >= 2:
        transition.duration = parse_duration(fields[1])
    if len(fields) >= 3:
        transition.easing = parse_easing(fields[2])
    if len(fields) >= 4:
        transition.delay = parse_duration(fields[3])
    return transition


def parse_transitions(s: str) -> list[Transition]:
    """Parse a comma separated ``transition`` list, dropping empty entries."""
    if s in ("", "none"):
        return []
    parsed = (parse_transition(part.strip()) for part in s.split(","))
    return [t for t in parsed if t.property]


def parse_filter_amount(s: str) -> float:
    """Parse a filter amount such as ``50%``, ``0.5`` or ``1.2``."""
    s = s.strip()
    if s.endswith("%"):
        return _to_float(s[:-1]) / 100
    return _to_float(s)


def parse_filter_angle(s: str) -> float:
    """Parse a filter angle: ``rad`` values as given, otherwise degrees as given."""
    s = s.strip()
    if s.endswith("rad"):
        return _to_float(s[:-3])
    if s.endswith("deg"):
        s = s[:-3]
    return _to_float(s)


def _filter_functions(s: str):
    """Yield ``(name, argument)`` pairs of a ``func(arg) func(arg)`` list."""
    remaining = s
    while True:
        remaining = remaining.strip()
        if not remaining:
            return
        open_idx = remaining.find("(")
        if open_idx < 0:
            return
        close_idx = remaining.find(")")
        if close_idx < 0:
            return
        name = remaining[:open_idx].strip().lower()
        arg = remaining[open_idx + 1 : close_idx].strip()
        remaining = remaining[close_idx + 1 :]
        yield name, arg


def parse_filter(s: str) -> Filter | None:
    """Parse a CSS ``filter`` string; None for empty or ``none``."""
    s = s.strip()
    if s in ("", "none"):
        return None
    result = Filter()
    for name, arg in _filter_functions(s):
        if name == "blur":
            result.blur = parse_pixel_value(arg)
        elif name == "hue-rotate":
            result.hue_rotate = parse_filter_angle(arg)
        elif name in ("brightness", "contrast", "grayscale", "sepia", "saturate", "invert"):
            setattr(result, name, parse_filter_amount(arg))
    return result


def parse_backdrop_filter(s: str) -> BackdropFilter | None:
    """Parse a CSS ``backdrop-filter`` string (blur, brightness, saturate)."""
    s = s.strip()
    if s in ("", "none"):
        return None
    result = BackdropFilter()
    for name, arg in _filter_functions(s):
        if name == "blur":
            result.blur = parse_pixel_value(arg)
        elif name in ("brightness", "saturate"):
            setattr(result, name, parse_filter_amount(arg))
    return result