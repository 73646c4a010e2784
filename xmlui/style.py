"""Style records and a selector-keyed style sheet loaded from JSON."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Union

from .colors import Color, parse_color
from .css import (
    BackdropFilter,
    BoxShadow,
    Filter,
    Transition,
    parse_backdrop_filter,
    parse_box_shadow,
    parse_filter,
    parse_transitions,
)
from .gradient import Gradient, parse_radial_gradient


@dataclass
class Edges:
    """Four edge values, as used for padding and margin."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> Edges:
        """Edges with the same value on every side."""
        return cls(value, value, value, value)


@dataclass
class Style:
    """The visual properties of a widget, with values parsed from their CSS text."""

    background: str = ""
    color: str = ""
    border: str = ""
    border_top: str = ""
    border_right: str = ""
    border_bottom: str = ""
    border_left: str = ""
    box_shadow: str = ""
    transition: str = ""
    filter: str = ""
    backdrop_filter: str = ""

    opacity: float = 1.0
    border_radius: float = 0.0
    border_width: float = 0.0
    font_size: float = 0.0
    width: float = 0.0
    height: float = 0.0
    gap: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    border_top_width: float = 0.0
    border_right_width: float = 0.0
    border_bottom_width: float = 0.0
    border_left_width: float = 0.0
    border_top_left_radius: float = 0.0
    border_top_right_radius: float = 0.0
    border_bottom_left_radius: float = 0.0
    border_bottom_right_radius: float = 0.0
    letter_spacing: float = 0.0
    line_height: float = 0.0
    outline_offset: float = 0.0

    padding: Edges = field(default_factory=Edges)
    margin: Edges = field(default_factory=Edges)
    padding_set: bool = False
    margin_set: bool = False
    border_width_set: bool = False

    hover_style: Style | None = None
    active_style: Style | None = None
    disabled_style: Style | None = None
    focus_style: Style | None = None

    background_color: Color | None = None
    border_color: Color | None = None
    border_top_color: Color | None = None
    border_right_color: Color | None = None
    border_bottom_color: Color | None = None
    border_left_color: Color | None = None
    text_color: Color | None = None
    parsed_gradient: Gradient | None = None
    parsed_box_shadow: BoxShadow | None = None
    parsed_transitions: list[Transition] = field(default_factory=list)
    parsed_filter: Filter | None = None
    parsed_backdrop_filter: BackdropFilter | None = None

    def clone(self) -> Style:
        """Return an independent deep copy of the style."""
        return copy.deepcopy(self)

    def state_styles(self) -> list[Style]:
        """The hover, active, disabled and focus styles that are present."""
        states = (self.hover_style, self.active_style, self.disabled_style, self.focus_style)
        return [s for s in states if s is not None]


_STRING_FIELDS = {
    "background": "background",
    "color": "color",
    "border": "border",
    "borderTop": "border_top",
    "borderRight": "border_right",
    "borderBottom": "border_bottom",
    "borderLeft": "border_left",
    "boxShadow": "box_shadow",
    "transition": "transition",
    "filter": "filter",
    "backdropFilter": "backdrop_filter",
}

_FLOAT_FIELDS = {
    "opacity": "opacity",
    "borderRadius": "border_radius",
    "borderWidth": "border_width",
    "fontSize": "font_size",
    "width": "width",
    "height": "height",
    "gap": "gap",
    "top": "top",
    "right": "right",
    "bottom": "bottom",
    "left": "left",
    "borderTopWidth": "border_top_width",
    "borderRightWidth": "border_right_width",
    "borderBottomWidth": "border_bottom_width",
    "borderLeftWidth": "border_left_width",
    "borderTopLeftRadius": "border_top_left_radius",
    "borderTopRightRadius": "border_top_right_radius",
    "borderBottomLeftRadius": "border_bottom_left_radius",
    "borderBottomRightRadius": "border_bottom_right_radius",
    "letterSpacing": "letter_spacing",
    "lineHeight": "line_height",
    "outlineOffset": "outline_offset",
}

_EDGE_FIELDS = {"padding": "padding", "margin": "margin"}

_STATE_FIELDS = {
    "hover": "hover_style",
    "active": "active_style",
    "disabled": "disabled_style",
    "focus": "focus_style",
}


def _number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"style property {key!r} must be a number")
    return float(value)


def _edges(key: str, value: Any) -> Edges:
    if not isinstance(value, dict):
        raise ValueError(f"style property {key!r} must be an object")
    edges = Edges()
    for side in ("top", "right", "bottom", "left"):
        if value.get(side) is not None:
            setattr(edges, side, _number(f"{key}.{side}", value[side]))
    whole = value.get("all")
    if isinstance(whole, (int, float)) and not isinstance(whole, bool):
        edges = Edges.uniform(float(whole))
    return edges


def style_from_dict(data: dict[str, Any]) -> Style:
    """Build a style from a decoded JSON object; raise ValueError on bad types.

    Unknown keys are ignored and null values leave the default in place.
    """
    if not isinstance(data, dict):
        raise ValueError("a style must be a JSON object")
    style = Style()
    for key, value in data.items():
        if value is None:
            continue
        if key in _STRING_FIELDS:
            if not isinstance(value, str):
                raise ValueError(f"style property {key!r} must be a string")
            setattr(style, _STRING_FIELDS[key], value)
        elif key in _FLOAT_FIELDS:
            setattr(style, _FLOAT_FIELDS[key], _number(key, value))
        elif key in _EDGE_FIELDS:
            setattr(style, _EDGE_FIELDS[key], _edges(key, value))
        elif key in _STATE_FIELDS:
            setattr(style, _STATE_FIELDS[key], style_from_dict(value))
    style.padding_set = "padding" in data
    style.margin_set = "margin" in data
    style.border_width_set = "borderWidth" in data
    return style


def _resolve_values(style: Style) -> None:
    """Parse the CSS text fields of a style and its state styles in place."""
    if style.background:
        if style.background.startswith("radial-gradient"):
            style.parsed_gradient = parse_radial_gradient(style.background)
        elif not style.background.startswith("linear-gradient"):
            style.background_color = parse_color(style.background)
    for text_attr, color_attr in (
        ("border", "border_color"),
        ("border_top", "border_top_color"),
        ("border_right", "border_right_color"),
        ("border_bottom", "border_bottom_color"),
        ("border_left", "border_left_color"),
        ("color", "text_color"),
    ):
        text = getattr(style, text_attr)
        if text:
            setattr(style, color_attr, parse_color(text))
    if style.box_shadow:
        style.parsed_box_shadow = parse_box_shadow(style.box_shadow)
    if style.transition:
        style.parsed_transitions = parse_transitions(style.transition)
    if style.filter:
        style.parsed_filter = parse_filter(style.filter)
    if style.backdrop_filter:
        style.parsed_backdrop_filter = parse_backdrop_filter(style.backdrop_filter)
    for state in style.state_styles():
        _resolve_values(state)


class StyleEngine:
    """Styles keyed by selector string."""

    def __init__(self) -> None:
        self._styles: dict[str, Style] = {}

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, selector: object) -> bool:
        return selector in self._styles

    def load_from_file(self, filename: Union[str, PathLike]) -> None:
        """Load styles from a JSON file; OSError if it cannot be read."""
        self.load_from_json(Path(filename).read_bytes())

    def load_from_json(self, data: Union[bytes, str]) -> None:
        """Load styles from JSON, flat or nested under a ``styles`` key.

        Raises ValueError if the document is not a JSON object; entries whose
        style cannot be decoded are skipped.
        """
        try:
            raw = json.loads(data)
        except (ValueError, UnicodeDecodeError) as exc:
            raise ValueError(f"failed to parse styles: {exc}") from exc
        if raw is None:
            return
        if not isinstance(raw, dict):
            raise ValueError("failed to parse styles: expected a JSON object")

        nested = raw.get("styles")
        entries = nested if isinstance(nested, dict) and nested else raw

        for selector, value in entries.items():
            if value is None:
                style = Style()
            else:
                try:
                    style = style_from_dict(value)
                except ValueError:
                    continue
            _resolve_values(style)
            self._styles[selector] = style

    def load_from_string(self, s: str) -> None:
        """Load styles from a JSON string."""
        self.load_from_json(s)

    def add_style(self, selector: str, style: Style) -> None:
        """Parse the style's values and register it under ``selector``."""
        _resolve_values(style)
        self._styles[selector] = style

    def get_style(self, selector: str) -> Style | None:
        """Return the style registered for ``selector``, or None."""
        return self._styles.get(selector)