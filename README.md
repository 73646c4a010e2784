# xmlui

A pure-Python library for the styling side of a declarative user interface.
It has no runtime dependencies. Its modules are:

- `xmlui.colors`: `Color` values and `parse_color`, which reads hex colors
  (`#rgb`, `#rgba`, `#rrggbb`, `#rrggbbaa`), `rgb()`/`rgba()`,
  `hsl()`/`hsla()` and the CSS named colors (`named_color`).
- `xmlui.gradient`: `Gradient`, `ColorStop`, `GradientType` and
  `parse_radial_gradient` for CSS `radial-gradient(...)` strings.
- `xmlui.easing`: `cubic_bezier_easing`, `ease_linear`, the CSS curves
  `EASE`, `EASE_IN`, `EASE_OUT`, `EASE_IN_OUT`, and `parse_easing` for
  timing-function keywords and `cubic-bezier(...)`.
- `xmlui.css`: parsers for CSS values: `parse_box_shadow` (`BoxShadow`),
  `parse_filter` (`Filter`), `parse_backdrop_filter` (`BackdropFilter`),
  `parse_transitions` / `parse_transition` (`Transition`), `parse_duration`,
  `parse_pixel_value` and friends.
- `xmlui.style`: the `Style` record, `Edges`, `style_from_dict` and
  `StyleEngine`, which loads styles from JSON (a file, bytes or a string,
  flat or nested under a `"styles"` key) and parses their colors, shadows,
  filters, transitions and radial gradients, including the `hover`, `active`,
  `disabled` and `focus` state styles.
- `xmlui.selector`: `parse_selector` for tag, class, id, `[attr=value]`,
  pseudo-class, descendant (`a b`) and child (`a > b`) selectors; `Selector`
  matching against a `Widget` tree and `specificity()`; `RuleSet` for
  collecting the styles that match a widget; `parse_nth_child` and
  `matches_nth_child`.
- `xmlui.transition`: `TransitionEngine`, which interpolates numeric and
  color properties between two styles over time.
- `xmlui.svg_path`: `parse_path_data` / `parse_path_data_scaled` turn an SVG
  path `d` attribute into a `Path` of move, line, quadratic, cubic and close
  operations (`PathOp`); arcs become cubic Béziers via `arc_to_bezier`.
  `COMMON_ICONS` holds path data for a set of stroke icons.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

### Colors

```python
from xmlui.colors import parse_color

parse_color("#ff8000")              # Color(r=255, g=128, b=0, a=255)
parse_color("rgba(0, 0, 0, 0.5)")   # Color(r=0, g=0, b=0, a=127)
parse_color("hsl(120, 100%, 50%)")  # Color(r=0, g=255, b=0, a=255)
parse_color("not a color")          # None
```

### Style sheets

```python
from xmlui.style import StyleEngine

engine = StyleEngine()
engine.load_from_string("""
{
  "button": {
    "background": "#336699",
    "color": "white",
    "padding": {"all": 8},
    "transition": "background 0.2s ease-in-out"
  }
}
""")
style = engine.get_style("button")
style.background_color    # Color(r=51, g=102, b=153, a=255)
style.padding             # Edges(top=8.0, right=8.0, bottom=8.0, left=8.0)
style.parsed_transitions  # [Transition(property='background', duration=0.2, ...)]
```

`load_from_json` raises `ValueError` when the document is not a JSON object;
entries whose properties have the wrong types are skipped.

### Selectors

```python
from xmlui.selector import RuleSet, Widget, parse_selector
from xmlui.style import Style

selector = parse_selector("panel > button.primary#ok")
selector.specificity()  # 112

ok = Widget("button", id="ok", classes=["primary"])
panel = Widget("panel", children=[ok])
selector.matches(panel)  # True

rules = RuleSet()
rules.add_rule("panel > button", Style(opacity=0.5))
rules.matching_styles(ok, [panel])  # [Style(... opacity=0.5 ...)]
```

### Transitions

```python
from xmlui.css import parse_transitions
from xmlui.style import Style
from xmlui.transition import TransitionEngine

old, new = Style(opacity=1.0), Style(opacity=0.0)
engine = TransitionEngine(clock=lambda: 0.0)
engine.start_transitions(old, new, parse_transitions("opacity 0.5s linear"))
engine.apply(new, now=0.25).opacity  # 0.5
```

The engine reads time in seconds from its `clock` (by default
`time.monotonic`). A transition interrupted mid-way restarts from the value
shown at that moment.

### SVG path data

```python
from xmlui.svg_path import parse_path_data

path = parse_path_data("M5 3l14 9-14 9V3z")
[op.kind for op in path]  # ['M', 'L', 'L', 'L', 'Z']
path.bounds()             # (5.0, 3.0, 14.0, 18.0)
```

## What it does not do

- Nothing is drawn: there is no rendering of styles, gradients, shadows,
  filters or paths, and no window or screen. `Path` only records operations.
- Whole SVG documents are not read; only path data is parsed.
- `linear-gradient(...)` backgrounds are recognised but not parsed into a
  `Gradient`; only radial gradients are.
- `parse_nth_child` understands `odd`, `even` and plain integers, not `An+B`
  expressions.
- Attribute selectors only test the `class` attribute.

## Running the tests

```
pytest
```