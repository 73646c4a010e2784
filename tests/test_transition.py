import pytest

from xmlui.colors import Color
from xmlui.css import Transition
from xmlui.easing import EASE, ease_linear
from xmlui.style import Edges, Style
from xmlui.transition import TransitionEngine, normalize_property


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    return TransitionEngine(clock=clock)


def linear(prop, duration=1.0, delay=0.0):
    return Transition(property=prop, duration=duration, easing=ease_linear, delay=delay)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("border-radius", "borderRadius"),
        ("borderRadius", "borderRadius"),
        ("background", "backgroundColor"),
        ("color", "textColor"),
        ("margin-left", "marginLeft"),
        ("unknown-prop", "unknown-prop"),
    ],
)
def test_normalize_property(name, expected):
    assert normalize_property(name) == expected


def test_inactive_engine_returns_same_style(engine):
    style = Style()
    assert engine.is_active() is False
    assert engine.apply(style, 0.0) is style


def test_opacity_linear_transition(engine, clock):
    old, new = Style(opacity=1.0), Style(opacity=0.0)
    engine.start_transitions(old, new, [linear("opacity")])
    assert engine.is_active()
    assert engine.apply(new, 0.0).opacity == 1.0
    assert engine.apply(new, 0.5).opacity == pytest.approx(0.5)
    assert engine.apply(new, 1.0).opacity == 0.0
    assert engine.is_active() is False


def test_apply_does_not_mutate_input(engine):
    old, new = Style(opacity=1.0), Style(opacity=0.0)
    engine.start_transitions(old, new, [linear("opacity")])
    result = engine.apply(new, 0.5)
    assert new.opacity == 0.0
    assert result is not new
    assert result.opacity > 0.0


def test_delay_holds_start_value(engine):
    old, new = Style(width=10.0), Style(width=20.0)
    engine.start_transitions(old, new, [linear("width", duration=1.0, delay=0.5)])
    assert engine.apply(new, 0.25).width == 10.0
    assert engine.apply(new, 1.0).width == pytest.approx(15.0)
    assert engine.apply(new, 1.5).width == 20.0


def test_equal_values_start_nothing(engine):
    style = Style(opacity=0.7)
    engine.start_transitions(style, Style(opacity=0.7), [linear("opacity")])
    assert engine.is_active() is False


def test_zero_duration_is_skipped(engine):
    engine.start_transitions(Style(opacity=1.0), Style(opacity=0.0), [linear("opacity", duration=0)])
    assert engine.is_active() is False


def test_default_easing_is_css_ease(engine):
    old, new = Style(opacity=1.0), Style(opacity=0.0)
    engine.start_transitions(old, new, [Transition(property="opacity", duration=1.0, easing=None)])
    assert engine.apply(new, 0.25).opacity == pytest.approx(1.0 - EASE(0.25))


def test_color_transition_endpoints(engine):
    red, blue = Color(255, 0, 0), Color(0, 0, 255)
    old, new = Style(background_color=red), Style(background_color=blue)
    engine.start_transitions(old, new, [linear("background")])
    assert engine.apply(new, 0.0).background_color == red
    mid = engine.apply(new, 0.5).background_color
    assert 0 < mid.r < 255 and 0 < mid.b < 255
    assert mid.a == 255
    assert engine.apply(new, 2.0).background_color == blue
    assert engine.is_active() is False


def test_color_from_none_starts_transparent(engine):
    white = Color(255, 255, 255)
    new = Style(text_color=white)
    engine.start_transitions(Style(), new, [linear("color")])
    assert engine.apply(new, 0.0).text_color == Color(0, 0, 0, 0)
    assert engine.apply(new, 1.0).text_color == white


def test_all_transitions_floats_and_colors(engine):
    old = Style(opacity=1.0, height=5.0, border_color=Color(0, 0, 0))
    new = Style(opacity=0.0, height=15.0, border_color=Color(255, 255, 255))
    engine.start_transitions(old, new, [linear("all")])
    start = engine.apply(new, 0.0)
    assert start.opacity == 1.0
    assert start.height == 5.0
    assert start.border_color == Color(0, 0, 0)
    end = engine.apply(new, 1.0)
    assert end.height == 15.0
    assert end.border_color == Color(255, 255, 255)


def test_padding_shorthand_expands(engine):
    old = Style(padding=Edges.uniform(0.0))
    new = Style(padding=Edges(4.0, 8.0, 12.0, 16.0))
    engine.start_transitions(old, new, [linear("padding")])
    start = engine.apply(new, 0.0)
    assert start.padding == Edges(0.0, 0.0, 0.0, 0.0)
    assert engine.apply(new, 1.0).padding == Edges(4.0, 8.0, 12.0, 16.0)


def test_unknown_property_is_ignored(engine):
    engine.start_transitions(Style(opacity=1.0), Style(opacity=0.0), [linear("no-such-thing")])
    assert engine.is_active() is False


def test_reversal_continues_from_current_value(engine, clock):
    full, empty = Style(opacity=1.0), Style(opacity=0.0)
    engine.start_transitions(full, empty, [linear("opacity")])
    clock.now = 0.5
    shown = engine.apply(empty, 0.5).opacity
    engine.start_transitions(empty, full, [linear("opacity")])
    assert engine.apply(full, 0.5).opacity == pytest.approx(shown)
    assert engine.apply(full, 1.5).opacity == 1.0


def test_apply_uses_clock_when_now_omitted(engine, clock):
    old, new = Style(gap=0.0), Style(gap=10.0)
    engine.start_transitions(old, new, [linear("gap")])
    clock.now = 1.0
    assert engine.apply(new).gap == 10.0
    assert engine.is_active() is False