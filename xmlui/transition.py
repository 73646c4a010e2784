"""Time-based interpolation of style properties between widget states."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable

from .colors import Color
from .css import Transition
from .easing import EASE, EasingFunc
from .style import Style

Clock = Callable[[], float]

_PROPERTY_NAMES: dict[str, str] = {
    "opacity": "opacity",
    "border-radius": "borderRadius",
    "borderRadius": "borderRadius",
    "border-width": "borderWidth",
    "borderWidth": "borderWidth",
    "font-size": "fontSize",
    "fontSize": "fontSize",
    "width": "width",
    "height": "height",
    "gap": "gap",
    "top": "top",
    "right": "right",
    "bottom": "bottom",
    "left": "left",
    "border-top-width": "borderTopWidth",
    "borderTopWidth": "borderTopWidth",
    "border-right-width": "borderRightWidth",
    "borderRightWidth": "borderRightWidth",
    "border-bottom-width": "borderBottomWidth",
    "borderBottomWidth": "borderBottomWidth",
    "border-left-width": "borderLeftWidth",
    "borderLeftWidth": "borderLeftWidth",
    "border-top-left-radius": "borderTopLeftRadius",
    "borderTopLeftRadius": "borderTopLeftRadius",
    "border-top-right-radius": "borderTopRightRadius",
    "borderTopRightRadius": "borderTopRightRadius",
    "border-bottom-left-radius": "borderBottomLeftRadius",
    "borderBottomLeftRadius": "borderBottomLeftRadius",
    "border-bottom-right-radius": "borderBottomRightRadius",
    "borderBottomRightRadius": "borderBottomRightRadius",
    "letter-spacing": "letterSpacing",
    "letterSpacing": "letterSpacing",
    "line-height": "lineHeight",
    "lineHeight": "lineHeight",
    "padding-top": "paddingTop",
    "paddingTop": "paddingTop",
    "padding-right": "paddingRight",
    "paddingRight": "paddingRight",
    "padding-bottom": "paddingBottom",
    "paddingBottom": "paddingBottom",
    "padding-left": "paddingLeft",
    "paddingLeft": "paddingLeft",
    "margin-top": "marginTop",
    "marginTop": "marginTop",
    "margin-right": "marginRight",
    "marginRight": "marginRight",
    "margin-bottom": "marginBottom",
    "marginBottom": "marginBottom",
    "margin-left": "marginLeft",
    "marginLeft": "marginLeft",
    "outline-offset": "outlineOffset",
    "outlineOffset": "outlineOffset",
    "background": "backgroundColor",
    "background-color": "backgroundColor",
    "backgroundColor": "backgroundColor",
    "border-color": "borderColor",
    "borderColor": "borderColor",
    "color": "textColor",
    "text-color": "textColor",
    "textColor": "textColor",
}

# Normalized float property -> (attribute path on Style).
_FLOAT_ATTRS: dict[str, tuple[str, ...]] = {
    "opacity": ("opacity",),
    "borderRadius": ("border_radius",),
    "borderWidth": ("border_width",),
    "fontSize": ("font_size",),
    "width": ("width",),
    "height": ("height",),
    "gap": ("gap",),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
    "borderTopWidth": ("border_top_width",),
    "borderRightWidth": ("border_right_width",),
    "borderBottomWidth": ("border_bottom_width",),
    "borderLeftWidth": ("border_left_width",),
    "borderTopLeftRadius": ("border_top_left_radius",),
    "borderTopRightRadius": ("border_top_right_radius",),
    "borderBottomLeftRadius": ("border_bottom_left_radius",),
    "borderBottomRightRadius": ("border_bottom_right_radius",),
    "letterSpacing": ("letter_spacing",),
    "lineHeight": ("line_height",),
    "outlineOffset": ("outline_offset",),
    "paddingTop": ("padding", "top"),
    "paddingRight": ("padding", "right"),
    "paddingBottom": ("padding", "bottom"),
    "paddingLeft": ("padding", "left"),
    "marginTop": ("margin", "top"),
    "marginRight": ("margin", "right"),
    "marginBottom": ("margin", "bottom"),
    "marginLeft": ("margin", "left"),
}

_COLOR_ATTRS: dict[str, str] = {
    "backgroundColor": "background_color",
    "borderColor": "border_color",
    "textColor": "text_color",
}

_SHORTHANDS: dict[str, tuple[str, ...]] = {
    "padding": ("paddingTop", "paddingRight", "paddingBottom", "paddingLeft"),
    "margin": ("marginTop", "marginRight", "marginBottom", "marginLeft"),
    "border-radius": (
        "borderTopLeftRadius",
        "borderTopRightRadius",
        "borderBottomLeftRadius",
        "borderBottomRightRadius",
    ),
    "border-width": ("borderTopWidth", "borderRightWidth", "borderBottomWidth", "borderLeftWidth"),
}
_SHORTHANDS["borderRadius"] = _SHORTHANDS["border-radius"]
_SHORTHANDS["borderWidth"] = _SHORTHANDS["border-width"]

RGBA = tuple[float, float, float, float]


def normalize_property(name: str) -> str:
    """Map a CSS property name (kebab- or camelCase) to its internal key."""
    return _PROPERTY_NAMES.get(name, name)


def _get_float(style: Style, prop: str) -> float:
    path = _FLOAT_ATTRS.get(prop)
    if path is None:
        return 0.0
    target: object = style
    for attr in path:
        target = getattr(target, attr)
    return float(target)  # type: ignore[arg-type]


def _set_float(style: Style, prop: str, value: float) -> None:
    path = _FLOAT_ATTRS.get(prop)
    if path is None:
        return
    target: object = style
    for attr in path[:-1]:
        target = getattr(target, attr)
    setattr(target, path[-1], value)


def _get_color(style: Style, prop: str) -> Color | None:
    attr = _COLOR_ATTRS.get(prop)
    return getattr(style, attr) if attr else None


def _set_color(style: Style, prop: str, color: Color) -> None:
    attr = _COLOR_ATTRS.get(prop)
    if attr:
        setattr(style, attr, color)


def _to_unit_rgba(color: Color | None) -> RGBA:
    if color is None:
        return (0.0, 0.0, 0.0, 0.0)
    return (color.r / 255, color.g / 255, color.b / 255, color.a / 255)


def _from_unit_rgba(rgba: RGBA) -> Color:
    return Color(*(int(min(max(c * 255, 0.0), 255.0)) for c in rgba))


def _premultiplied16(color: Color) -> tuple[int, int, int, int]:
    a16 = color.a * 0x101
    return (
        color.r * 0x101 * a16 // 0xFFFF,
        color.g * 0x101 * a16 // 0xFFFF,
        color.b * 0x101 * a16 // 0xFFFF,
        a16,
    )


def _colors_equal(a: Color | None, b: Color | None) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return _premultiplied16(a) == _premultiplied16(b)


@dataclass
class _Timing:
    start_time: float
    duration: float
    delay: float
    easing: EasingFunc

    def progress(self, now: float) -> float | None:
        """Eased progress at ``now``: 0 during the delay, None once finished."""
        elapsed = now - self.start_time - self.delay
        if elapsed < 0:
            return 0.0
        fraction = elapsed / self.duration
        if fraction >= 1:
            return None
        return self.easing(fraction)


@dataclass
class _FloatTransition:
    start: float
    end: float
    timing: _Timing

    def value_at(self, now: float) -> float | None:
        elapsed = now - self.timing.start_time - self.timing.delay
        if elapsed < 0:
            return self.start
        progress = self.timing.progress(now)
        if progress is None:
            return None
        return self.start + (self.end - self.start) * progress


@dataclass
class _ColorTransition:
    start: RGBA
    end: RGBA
    timing: _Timing

    def value_at(self, now: float) -> RGBA | None:
        elapsed = now - self.timing.start_time - self.timing.delay
        if elapsed < 0:
            return self.start
        progress = self.timing.progress(now)
        if progress is None:
            return None
        return tuple(s + (e - s) * progress for s, e in zip(self.start, self.end))  # type: ignore[return-value]


class TransitionEngine:
    """Interpolates style properties over time after a state change.

    When a property changes again mid-transition, the value shown at that
    moment becomes the start of the new transition, so reversals are smooth.
    Times are in seconds, measured by ``clock``.
    """

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._floats: dict[str, _FloatTransition] = {}
        self._colors: dict[str, _ColorTransition] = {}

    def is_active(self) -> bool:
        """Tell whether any transition is in progress."""
        return bool(self._floats or self._colors)

    def start_transitions(
        self,
        old_style: Style,
        new_style: Style,
        declarations: Iterable[Transition],
    ) -> None:
        """Start transitions for declared properties whose value changed."""
        now = self._clock()
        for decl in declarations:
            if decl.duration <= 0:
                continue
            timing = _Timing(now, decl.duration, decl.delay, decl.easing or EASE)

            if decl.property == "all":
                for prop in _FLOAT_ATTRS:
                    self._start_float(prop, old_style, new_style, timing)
                for prop in _COLOR_ATTRS:
                    self._start_color(prop, old_style, new_style, timing)
                continue

            prop = normalize_property(decl.property)
            if prop in _COLOR_ATTRS:
                self._start_color(prop, old_style, new_style, timing)
            else:
                self._start_float(prop, old_style, new_style, timing)

            for sub in _SHORTHANDS.get(decl.property, ()):
                self._start_float(sub, old_style, new_style, timing)

    def _start_float(self, prop: str, old: Style, new: Style, timing: _Timing) -> None:
        start = _get_float(old, prop)
        end = _get_float(new, prop)
        existing = self._floats.get(prop)
        if existing is not None:
            current = existing.value_at(timing.start_time)
            if current is not None:
                start = current
        if start == end:
            self._floats.pop(prop, None)
            return
        self._floats[prop] = _FloatTransition(start, end, timing)

    def _start_color(self, prop: str, old: Style, new: Style, timing: _Timing) -> None:
        old_color = _get_color(old, prop)
        new_color = _get_color(new, prop)
        if _colors_equal(old_color, new_color):
            self._colors.pop(prop, None)
            return
        start = _to_unit_rgba(old_color)
        existing = self._colors.get(prop)
        if existing is not None:
            current = existing.value_at(timing.start_time)
            if current is not None:
                start = current
        self._colors[prop] = _ColorTransition(start, _to_unit_rgba(new_color), timing)

    def apply(self, style: Style, now: float | None = None) -> Style:
        """Return a copy of ``style`` with current transition values applied.

        Finished transitions take their end value and are dropped. If nothing
        is in progress the given style itself is returned.
        """
        if not self.is_active():
            return style
        if now is None:
            now = self._clock()
        result = style.clone()

        for prop, transition in list(self._floats.items()):
            value = transition.value_at(now)
            if value is None:
                _set_float(result, prop, transition.end)
                del self._floats[prop]
            else:
                _set_float(result, prop, value)

        for prop, transition in list(self._colors.items()):
            rgba = transition.value_at(now)
            if rgba is None:
                _set_color(result, prop, _from_unit_rgba(transition.end))
                del self._colors[prop]
            else:
                _set_color(result, prop, _from_unit_rgba(rgba))

        return result