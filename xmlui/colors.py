"""CSS colour values and parsing of colour strings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"[+-]?\d+")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def _parse_float(s: str) -> float:
    """Parse a float strictly, returning 0.0 when the text is not a number."""
    if not _FLOAT_RE.fullmatch(s):
        return 0.0
    return float(s)


def _to_byte(value: float) -> int:
    """Truncate a float into the 0..255 range."""
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Color:
    """An 8-bit, non-premultiplied RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} outside 0..255")

    def premultiplied(self) -> tuple[int, int, int, int]:
        """Return the colour as premultiplied 8-bit RGBA components."""
        a16 = self.a * 0x101

        def scale(c: int) -> int:
            return ((c * 0x101 * a16) // 0xFFFF) >> 8

        return scale(self.r), scale(self.g), scale(self.b), a16 >> 8

    def with_opacity(self, opacity: float) -> Color:
        """Return the colour with its alpha scaled by ``opacity`` (0..1)."""
        return Color(self.r, self.g, self.b, _to_byte(self.a * opacity))


_NAMED_COLORS: dict[str, tuple[int, int, int, int]] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 128, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "cyan": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "transparent": (0, 0, 0, 0),
    "aliceblue": (240, 248, 255, 255),
    "antiquewhite": (250, 235, 215, 255),
    "aqua": (0, 255, 255, 255),
    "aquamarine": (127, 255, 212, 255),
    "azure": (240, 255, 255, 255),
    "beige": (245, 245, 220, 255),
    "bisque": (255, 228, 196, 255),
    "blanchedalmond": (255, 235, 205, 255),
    "blueviolet": (138, 43, 226, 255),
    "brown": (165, 42, 42, 255),
    "burlywood": (222, 184, 135, 255),
    "cadetblue": (95, 158, 160, 255),
    "chartreuse": (127, 255, 0, 255),
    "chocolate": (210, 105, 30, 255),
    "coral": (255, 127, 80, 255),
    "cornflowerblue": (100, 149, 237, 255),
    "cornsilk": (255, 248, 220, 255),
    "crimson": (220, 20, 60, 255),
    "darkblue": (0, 0, 139, 255),
    "darkcyan": (0, 139, 139, 255),
    "darkgoldenrod": (184, 134, 11, 255),
    "darkgray": (169, 169, 169, 255),
    "darkgreen": (0, 100, 0, 255),
    "darkkhaki": (189, 183, 107, 255),
    "darkmagenta": (139, 0, 139, 255),
    "darkolivegreen": (85, 107, 47, 255),
    "darkorange": (255, 140, 0, 255),
    "darkorchid": (153, 50, 204, 255),
    "darkred": (139, 0, 0, 255),
    "darksalmon": (233, 150, 122, 255),
    "darkseagreen": (143, 188, 143, 255),
    "darkslateblue": (72, 61, 139, 255),
    "darkslategray": (47, 79, 79, 255),
    "darkturquoise": (0, 206, 209, 255),
    "darkviolet": (148, 0, 211, 255),
    "deeppink": (255, 20, 147, 255),
    "deepskyblue": (0, 191, 255, 255),
    "dimgray": (105, 105, 105, 255),
    "dodgerblue": (30, 144, 255, 255),
    "firebrick": (178, 34, 34, 255),
    "floralwhite": (255, 250, 240, 255),
    "forestgreen": (34, 139, 34, 255),
    "fuchsia": (255, 0, 255, 255),
    "gainsboro": (220, 220, 220, 255),
    "ghostwhite": (248, 248, 255, 255),
    "gold": (255, 215, 0, 255),
    "goldenrod": (218, 165, 32, 255),
    "greenyellow": (173, 255, 47, 255),
    "honeydew": (240, 255, 240, 255),
    "hotpink": (255, 105, 180, 255),
    "indianred": (205, 92, 92, 255),
    "indigo": (75, 0, 130, 255),
    "ivory": (255, 255, 240, 255),
    "khaki": (240, 230, 140, 255),
    "lavender": (230, 230, 250, 255),
    "lavenderblush": (255, 240, 245, 255),
    "lawngreen": (124, 252, 0, 255),
    "lemonchiffon": (255, 250, 205, 255),
    "lightblue": (173, 216, 230, 255),
    "lightcoral": (240, 128, 128, 255),
    "lightcyan": (224, 255, 255, 255),
    "lightgoldenrodyellow": (250, 250, 210, 255),
    "lightgray": (211, 211, 211, 255),
    "lightgreen": (144, 238, 144, 255),
    "lightpink": (255, 182, 193, 255),
    "lightsalmon": (255, 160, 122, 255),
    "lightseagreen": (32, 178, 170, 255),
    "lightskyblue": (135, 206, 250, 255),
    "lightslategray": (119, 136, 153, 255),
    "lightsteelblue": (176, 196, 222, 255),
    "lightyellow": (255, 255, 224, 255),
    "lime": (0, 255, 0, 255),
    "limegreen": (50, 205, 50, 255),
    "linen": (250, 240, 230, 255),
    "maroon": (128, 0, 0, 255),
    "mediumaquamarine": (102, 205, 170, 255),
    "mediumblue": (0, 0, 205, 255),
    "mediumorchid": (186, 85, 211, 255),
    "mediumpurple": (147, 112, 219, 255),
    "mediumseagreen": (60, 179, 113, 255),
    "mediumslateblue": (123, 104, 238, 255),
    "mediumspringgreen": (0, 250, 154, 255),
    "mediumturquoise": (72, 209, 204, 255),
    "mediumvioletred": (199, 21, 133, 255),
    "midnightblue": (25, 25, 112, 255),
    "mintcream": (245, 255, 250, 255),
    "mistyrose": (255, 228, 225, 255),
    "moccasin": (255, 228, 181, 255),
    "navajowhite": (255, 222, 173, 255),
    "navy": (0, 0, 128, 255),
    "oldlace": (253, 245, 230, 255),
    "olive": (128, 128, 0, 255),
    "olivedrab": (107, 142, 35, 255),
    "orange": (255, 165, 0, 255),
    "orangered": (255, 69, 0, 255),
    "orchid": (218, 112, 214, 255),
    "palegoldenrod": (238, 232, 170, 255),
    "palegreen": (152, 251, 152, 255),
    "paleturquoise": (175, 238, 238, 255),
    "palevioletred": (219, 112, 147, 255),
    "papayawhip": (255, 239, 213, 255),
    "peachpuff": (255, 218, 185, 255),
    "peru": (205, 133, 63, 255),
    "pink": (255, 192, 203, 255),
    "plum": (221, 160, 221, 255),
    "powderblue": (176, 224, 230, 255),
    "purple": (128, 0, 128, 255),
    "rebeccapurple": (102, 51, 153, 255),
    "rosybrown": (188, 143, 143, 255),
    "royalblue": (65, 105, 225, 255),
    "saddlebrown": (139, 69, 19, 255),
    "salmon": (250, 128, 114, 255),
    "sandybrown": (244, 164, 96, 255),
    "seagreen": (46, 139, 87, 255),
    "seashell": (255, 245, 238, 255),
    "sienna": (160, 82, 45, 255),
    "silver": (192, 192, 192, 255),
    "skyblue": (135, 206, 235, 255),
    "slateblue": (106, 90, 205, 255),
    "slategray": (112, 128, 144, 255),
    "snow": (255, 250, 250, 255),
    "springgreen": (0, 255, 127, 255),
    "steelblue": (70, 130, 180, 255),
    "tan": (210, 180, 140, 255),
    "teal": (0, 128, 128, 255),
    "thistle": (216, 191, 216, 255),
    "tomato": (255, 99, 71, 255),
    "turquoise": (64, 224, 208, 255),
    "violet": (238, 130, 238, 255),
    "wheat": (245, 222, 179, 255),
    "whitesmoke": (245, 245, 245, 255),
    "yellowgreen": (154, 205, 50, 255),
}


def named_color(name: str) -> Color | None:
    """Return the CSS colour with the given (lower-case) name, or None."""
    rgba = _NAMED_COLORS.get(name)
    return Color(*rgba) if rgba is not None else None


def parse_color(s: str) -> Color | None:
    """Parse a hex, rgb(a), hsl(a) or named CSS colour; None if unrecognised."""
    s = s.strip().lower()
    named = named_color(s)
    if named is not None:
        return named
    if s.startswith("#"):
        return parse_hex_color(s[1:])
    if s.startswith("rgb"):
        return parse_rgb_color(s)
    if s.startswith("hsl"):
        return parse_hsl_color(s)
    return None


def _hex_byte(s: str) -> int:
    if not _HEX_RE.fullmatch(s):
        return 0
    return min(int(s, 16), 255)


def parse_hex_color(s: str) -> Color:
    """Parse the hex digits of a colour (without '#'): RGB, RGBA, RRGGBB or RRGGBBAA."""
    r = g = b = 0
    a = 255
    if len(s) in (3, 4):
        r, g, b = (_hex_byte(ch) * 17 for ch in s[:3])
        if len(s) == 4:
            a = _hex_byte(s[3]) * 17
    elif len(s) in (6, 8):
        r, g, b = (_hex_byte(s[i : i + 2]) for i in (0, 2, 4))
        if len(s) == 8:
            a = _hex_byte(s[6:8])
    return Color(min(r, 255), min(g, 255), min(b, 255), min(a, 255))


def _color_value(s: str) -> int:
    if s.endswith("%"):
        return _to_byte(_parse_float(s[:-1]) / 100 * 255)
    if not _INT_RE.fullmatch(s):
        return 0
    return max(0, min(int(s), 255))


def _strip_function(s: str, *prefixes: str) -> str:
    for prefix in prefixes:
        if s.startswith(prefix):
            s = s[len(prefix) :]
    if s.endswith(")"):
        s = s[:-1]
    return s


def parse_rgb_color(s: str) -> Color | None:
    """Parse an ``rgb(...)`` or ``rgba(...)`` string; None if it has too few parts."""
    parts = _strip_function(s, "rgba(", "rgb(").split(",")
    if len(parts) < 3:
        return None
    r, g, b = (_color_value(p.strip()) for p in parts[:3])
    a = 255
    if len(parts) >= 4:
        alpha = parts[3].strip()
        if "." in alpha:
            a = _to_byte(_parse_float(alpha) * 255)
        else:
            a = _color_value(alpha)
    return Color(r, g, b, a)


def _percent(s: str) -> float:
    if s.endswith("%"):
        s = s[:-1]
    return _parse_float(s) / 100.0


def parse_hsl_color(s: str) -> Color | None:
    """Parse an ``hsl(...)`` or ``hsla(...)`` string; None if it has too few parts."""
    parts = _strip_function(s, "hsla(", "hsl(").split(",")
    if len(parts) < 3:
        return None
    hue_text = parts[0].strip()
    if hue_text.endswith("deg"):
        hue_text = hue_text[:-3]
    h = _parse_float(hue_text) / 360.0
    sat = _percent(parts[1].strip())
    light = _percent(parts[2].strip())
    alpha = 1.0
    if len(parts) >= 4:
        alpha_text = parts[3].strip()
        alpha = _percent(alpha_text) if "%" in alpha_text else _parse_float(alpha_text)
    r, g, b = hsl_to_rgb(h, sat, light)
    return Color(r, g, b, _to_byte(alpha * 255))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert hue, saturation and lightness (all 0..1) to 8-bit RGB."""
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)
    return tuple(_to_byte(_round_half_away(c * 255)) for c in (r, g, b))  # type: ignore[return-value]