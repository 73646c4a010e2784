"""SVG path data: tokenizing, parsing into drawing operations and arc conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

MOVE = "M"
LINE = "L"
QUAD = "Q"
CUBIC = "C"
CLOSE = "Z"

# Cubic bezier handle length for a quarter circle: (4/3)*tan(pi/8).
KAPPA = 0.5522847498


@dataclass
class PathCommand:
    """One command of path data with its numeric arguments.

    ``command`` is upper case; ``absolute`` tells whether it was written so.
    """

    command: str
    args: list[float] = field(default_factory=list)
    absolute: bool = True


@dataclass(frozen=True)
class PathOp:
    """A drawing operation: its kind (M, L, Q, C or Z) and flat coordinates."""

    kind: str
    points: tuple[float, ...] = ()

    @property
    def end(self) -> tuple[float, float] | None:
        """The point the operation ends at, or None for a close."""
        if len(self.points) < 2:
            return None
        return self.points[-2], self.points[-1]


class Path:
    """A sequence of drawing operations in target coordinates."""

    def __init__(self) -> None:
        self.ops: list[PathOp] = []

    def __iter__(self) -> Iterator[PathOp]:
        return iter(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.ops == other.ops

    def __repr__(self) -> str:
        return f"Path({self.ops!r})"

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at (x, y)."""
        self.ops.append(PathOp(MOVE, (x, y)))

    def line_to(self, x: float, y: float) -> None:
        """Add a straight line to (x, y)."""
        self.ops.append(PathOp(LINE, (x, y)))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        """Add a quadratic bezier with control (x1, y1) ending at (x, y)."""
        self.ops.append(PathOp(QUAD, (x1, y1, x, y)))

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        """Add a cubic bezier with controls (x1, y1), (x2, y2) ending at (x, y)."""
        self.ops.append(PathOp(CUBIC, (x1, y1, x2, y2, x, y)))

    def close(self) -> None:
        """Close the current sub-path."""
        self.ops.append(PathOp(CLOSE))

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Box ``(x, y, width, height)`` around every point, controls included.

        None when the path has no points.
        """
        xs = [v for op in self.ops for v in op.points[0::2]]
        ys = [v for op in self.ops for v in op.points[1::2]]
        if not xs:
            return None
        min_x, min_y = min(xs), min(ys)
        return min_x, min_y, max(xs) - min_x, max(ys) - min_y


def _parse_number(s: str) -> float | None:
    if not s.isascii():
        return None
    try:
        return float(s)
    except ValueError:
        return None


def tokenize_path_data(d: str) -> list[PathCommand]:
    """Split path data into commands and their numbers.

    Numbers before the first command are dropped. The two flag arguments of
    an arc may be written as single digits with no separator.
    """
    commands: list[PathCommand] = []
    current: str | None = None
    args: list[float] = []
    absolute = False
    buf: list[str] = []
    in_number = False
    has_decimal = False
    is_arc = False
    arc_count = 0

    def flush_number() -> None:
        nonlocal in_number, has_decimal, arc_count
        if not buf:
            return
        value = _parse_number("".join(buf))
        if value is not None:
            args.append(value)
            if is_arc:
                arc_count += 1
        buf.clear()
        in_number = False
        has_decimal = False

    def flush_command() -> None:
        nonlocal args
        if current is not None:
            upper = current.upper()
            commands.append(PathCommand(upper if len(upper) == 1 else current, args, absolute))
        args = []

    for ch in d:
        if ch.isalpha():
            flush_number()
            flush_command()
            current = ch
            absolute = ch.isupper()
            is_arc = ch in "aA"
            arc_count = 0
        elif ch.isdecimal():
            if is_arc and not in_number and arc_count % 7 in (3, 4):
                flush_number()
                buf.append(ch)
                flush_number()
            else:
                in_number = True
                buf.append(ch)
        elif ch == ".":
            if has_decimal:
                flush_number()
            in_number = True
            has_decimal = True
            buf.append(ch)
        elif ch in "+-":
            if in_number:
                flush_number()
            in_number = True
            buf.append(ch)
        elif ch == "," or ch.isspace():
            flush_number()

    flush_number()
    flush_command()
    return commands


def parse_path_data(d: str) -> Path | None:
    """Parse path data without transforming it; None if there is nothing to draw."""
    return parse_path_data_scaled(d, 0.0, 0.0, 1.0, 1.0)


def parse_path_data_scaled(
    d: str, offset_x: float, offset_y: float, scale_x: float, scale_y: float
) -> Path | None:
    """Parse path data, mapping each point to ``(offset + v*scale)``.

    Relative commands are resolved in source coordinates before mapping.
    Returns None for empty data or data with no commands.
    """
    if not d:
        return None
    commands = tokenize_path_data(d)
    if not commands:
        return None

    def tx(x: float) -> float:
        return offset_x + x * scale_x

    def ty(y: float) -> float:
        return offset_y + y * scale_y

    path = Path()
    cur_x = cur_y = 0.0
    start_x = start_y = 0.0
    ctrl_x = ctrl_y = 0.0
    last = ""

    for cmd in commands:
        args = cmd.args
        rel = not cmd.absolute
        kind = cmd.command

        if kind == "M":
            for i in range(0, len(args) - 1, 2):
                x, y = args[i], args[i + 1]
                if rel:
                    x += cur_x
                    y += cur_y
                if i == 0:
                    path.move_to(tx(x), ty(y))
                    start_x, start_y = x, y
                else:
                    path.line_to(tx(x), ty(y))
                cur_x, cur_y = x, y

        elif kind == "L":
            for i in range(0, len(args) - 1, 2):
                x, y = args[i], args[i + 1]
                if rel:
                    x += cur_x
                    y += cur_y
                path.line_to(tx(x), ty(y))
                cur_x, cur_y = x, y

        elif kind == "H":
            for x in args:
                if rel:
                    x += cur_x
                path.line_to(tx(x), ty(cur_y))
                cur_x = x

        elif kind == "V":
            for y in args:
                if rel:
                    y += cur_y
                path.line_to(tx(cur_x), ty(y))
                cur_y = y

        elif kind == "C":
            for i in range(0, len(args) - 5, 6):
                x1, y1, x2, y2, x, y = args[i : i + 6]
                if rel:
                    x1, y1 = x1 + cur_x, y1 + cur_y
                    x2, y2 = x2 + cur_x, y2 + cur_y
                    x, y = x + cur_x, y + cur_y
                path.cubic_to(tx(x1), ty(y1), tx(x2), ty(y2), tx(x), ty(y))
                ctrl_x, ctrl_y = x2, y2
                cur_x, cur_y = x, y

        elif kind == "S":
            for i in range(0, len(args) - 3, 4):
                x1, y1 = cur_x, cur_y
                if last in ("C", "S"):
                    x1 = 2 * cur_x - ctrl_x
                    y1 = 2 * cur_y - ctrl_y
                x2, y2, x, y = args[i : i + 4]
                if rel:
                    x2, y2 = x2 + cur_x, y2 + cur_y
                    x, y = x + cur_x, y + cur_y
                path.cubic_to(tx(x1), ty(y1), tx(x2), ty(y2), tx(x), ty(y))
                ctrl_x, ctrl_y = x2, y2
                cur_x, cur_y = x, y

        elif kind == "Q":
            for i in range(0, len(args) - 3, 4):
                x1, y1, x, y = args[i : i + 4]
                if rel:
                    x1, y1 = x1 + cur_x, y1 + cur_y
                    x, y = x + cur_x, y + cur_y
                path.quad_to(tx(x1), ty(y1), tx(x), ty(y))
                ctrl_x, ctrl_y = x1, y1
                cur_x, cur_y = x, y

        elif kind == "T":
            for i in range(0, len(args) - 1, 2):
                x1, y1 = cur_x, cur_y
                if last in ("Q", "T"):
                    x1 = 2 * cur_x - ctrl_x
                    y1 = 2 * cur_y - ctrl_y
                x, y = args[i], args[i + 1]
                if rel:
                    x, y = x + cur_x, y + cur_y
                path.quad_to(tx(x1), ty(y1), tx(x), ty(y))
                ctrl_x, ctrl_y = x1, y1
                cur_x, cur_y = x, y

        elif kind == "A":
            for i in range(0, len(args) - 6, 7):
                rx, ry, rotation, large, sweep, x, y = args[i : i + 7]
                if rel:
                    x, y = x + cur_x, y + cur_y
                arc_to_bezier(
                    path,
                    tx(cur_x),
                    ty(cur_y),
                    rx * scale_x,
                    ry * scale_y,
                    rotation,
                    large != 0,
                    sweep != 0,
                    tx(x),
                    ty(y),
                )
                cur_x, cur_y = x, y

        elif kind == "Z":
            path.close()
            cur_x, cur_y = start_x, start_y

        last = kind

    return path


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    n = math.sqrt(ux * ux + uy * uy) * math.sqrt(vx * vx + vy * vy)
    if n == 0:
        return 0.0
    c = (ux * vx + uy * vy) / n
    if math.isnan(c):
        return math.nan
    result = math.acos(min(1.0, max(-1.0, c)))
    if ux * vy - uy * vx < 0:
        result = -result
    return result


def arc_to_bezier(
    path: Path,
    x1: float,
    y1: float,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
    x2: float,
    y2: float,
) -> None:
    """Append an elliptical arc from (x1, y1) to (x2, y2) as cubic beziers.

    A zero radius gives a straight line; radii too small to reach the end
    point are scaled up. Each bezier spans at most a quarter turn.
    """
    if rx == 0 or ry == 0:
        path.line_to(x2, y2)
        return

    rx, ry = abs(rx), abs(ry)
    phi = math.radians(x_axis_rotation)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)

    dx = (x1 - x2) / 2
    dy = (y1 - y2) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        root = math.sqrt(lam)
        rx *= root
        ry *= root

    rx_sq, ry_sq = rx * rx, ry * ry
    x1p_sq, y1p_sq = x1p * x1p, y1p * y1p
    numerator = rx_sq * ry_sq - rx_sq * y1p_sq - ry_sq * x1p_sq
    denominator = rx_sq * y1p_sq + ry_sq * x1p_sq
    if denominator == 0:
        radical = math.inf if numerator > 0 else (math.nan if numerator == 0 else -math.inf)
    else:
        radical = numerator / denominator
    if radical < 0:
        radical = 0.0
    radical = math.sqrt(radical) if not math.isnan(radical) else math.nan
    if large_arc == sweep:
        radical = -radical

    cxp = radical * rx * y1p / ry
    cyp = -radical * ry * x1p / rx
    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    theta1 = _vector_angle(1, 0, (x1p - cxp) / rx, (y1p - cyp) / ry)
    d_theta = _vector_angle(
        (x1p - cxp) / rx, (y1p - cyp) / ry, (-x1p - cxp) / rx, (-y1p - cyp) / ry
    )
    if not sweep and d_theta > 0:
        d_theta -= 2 * math.pi
    elif sweep and d_theta < 0:
        d_theta += 2 * math.pi

    if math.isfinite(d_theta):
        segments = max(1, math.ceil(abs(d_theta) / (math.pi / 2)))
    else:
        segments = 1
    step = d_theta / segments

    for i in range(segments):
        start = theta1 + i * step
        _arc_segment(path, cx, cy, rx, ry, phi, start, start + step)


def _arc_segment(
    path: Path, cx: float, cy: float, rx: float, ry: float, phi: float, start: float, end: float
) -> None:
    sweep = end - start
    alpha = math.sin(sweep) * (math.sqrt(4 + 3 * math.tan(sweep / 2) ** 2) - 1) / 3

    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    cos_s, sin_s = math.cos(start), math.sin(start)
    cos_e, sin_e = math.cos(end), math.sin(end)

    sx = cx + rx * cos_phi * cos_s - ry * sin_phi * sin_s
    sy = cy + rx * sin_phi * cos_s + ry * cos_phi * sin_s
    dsx = -rx * cos_phi * sin_s - ry * sin_phi * cos_s
    dsy = -rx * sin_phi * sin_s + ry * cos_phi * cos_s

    ex = cx + rx * cos_phi * cos_e - ry * sin_phi * sin_e
    ey = cy + rx * sin_phi * cos_e + ry * cos_phi * sin_e
    dex = -rx * cos_phi * sin_e - ry * sin_phi * cos_e
    dey = -rx * sin_phi * sin_e + ry * cos_phi * cos_e

    path.cubic_to(
        sx + alpha * dsx,
        sy + alpha * dsy,
        ex - alpha * dex,
        ey - alpha * dey,
        ex,
        ey,
    )


COMMON_ICONS: dict[str, str] = {
    "arrow-left": "M15 18l-6-6 6-6",
    "arrow-right": "M9 18l6-6-6-6",
    "arrow-up": "M18 15l-6-6-6 6",
    "arrow-down": "M6 9l6 6 6-6",
    "chevron-left": "M15 18l-6-6 6-6",
    "chevron-right": "M9 18l6-6-6-6",
    "check": "M20 6L9 17l-5-5",
    "x": "M18 6L6 18M6 6l12 12",
    "plus": "M12 5v14M5 12h14",
    "minus": "M5 12h14",
    "menu": "M3 12h18M3 6h18M3 18h18",
    "search": "M21 21l-6-6m2-5a7 7 0 11-14 0 7 7 0 0114 0z",
    "settings": "M12 15a3 3 0 100-6 3 3 0 000 6z",
    "play": "M5 3l14 9-14 9V3z",
    "pause": "M6 4h4v16H6V4zm8 0h4v16h-4V4z",
    "stop": "M6 6h12v12H6V6z",
    "volume": "M11 5L6 9H2v6h4l5 4V5z",
    "home": "M3 12l2-2m0 0l7-7 7 7M5 10v10a1 1 0 001 1h3m10-11l2 2m-2-2v10a1 1 0 01-1 1h-3m-6 0a1 1 0 001-1v-4a1 1 0 011-1h2a1 1 0 011 1v4a1 1 0 001 1m-6 0h6",
    "user": "M20 21v-2a4 4 0 00-4-4H8a4 4 0 00-4 4v2M12 11a4 4 0 100-8 4 4 0 000 8z",
    "heart": "M20.84 4.61a5.5 5.5 0 00-7.78 0L12 5.67l-1.06-1.06a5.5 5.5 0 00-7.78 7.78l1.06 1.06L12 21.23l7.78-7.78 1.06-1.06a5.5 5.5 0 000-7.78z",
    "star": "M12 2l3.09 6.26L22 9.27l-5 4.87 1.18 6.88L12 17.77l-6.18 3.25L7 14.14 2 9.27l6.91-1.01L12 2z",
    "bookmark": "M5 5a2 2 0 012-2h10a2 2 0 012 2v16l-7-3.5L5 21V5z",
    "file": "M13 2H6a2 2 0 00-2 2v16a2 2 0 002 2h12a2 2 0 002-2V9l-7-7z",
    "folder": "M22 19a2 2 0 01-2 2H4a2 2 0 01-2-2V5a2 2 0 012-2h5l2 3h9a2 2 0 012 2v11z",
    "trash": "M3 6h18M19 6v14a2 2 0 01-2 2H7a2 2 0 01-2-2V6m3 0V4a2 2 0 012-2h4a2 2 0 012 2v2",
    "edit": "M11 4H4a2 2 0 00-2 2v14a2 2 0 002 2h14a2 2 0 002-2v-7M18.5 2.5a2.121 2.121 0 013 3L12 15l-4 1 1-4 9.5-9.5z",
    "info": "M12 16v-4m0-4h.01M22 12a10 10 0 11-20 0 10 10 0 0120 0z",
    "warning": "M12 9v2m0 4h.01M10.29 3.86L1.82 18a2 2 0 001.71 3h16.94a2 2 0 001.71-3L13.71 3.86a2 2 0 00-3.42 0z",
    "error": "M12 8v4m0 4h.01M22 12a10 10 0 11-20 0 10 10 0 0120 0z",
    "success": "M9 12l2 2 4-4m6 2a10 10 0 11-20 0 10 10 0 0120 0z",
    "sword": "M14.5 5.5L18 9l-8 8-4-4 8-8zM5 21l3-3",
    "shield": "M12 22s8-4 8-10V5l-8-3-8 3v7c0 6 8 10 8 10z",
    "coin": "M12 22a10 10 0 100-20 10 10 0 000 20zM12 6v12M8 12h8",
    "potion": "M9 3h6v2h-6V3zM7 12v6a2 2 0 002 2h6a2 2 0 002-2v-6l-2-5H9l-2 5z",
    "gem": "M12 2L2 7l10 15 10-15-10-5zM2 7h20",
}