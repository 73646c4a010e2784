"""CSS-style colors, style sheets, selectors, transitions, easing and SVG path data."""

__version__ = "0.1.0"

__all__ = ["colors", "gradient", "easing", "css", "style", "transition", "selector", "svg_path"]