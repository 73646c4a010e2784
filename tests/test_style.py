import json

import pytest

from xmlui.colors import Color, named_color, parse_color
from xmlui.easing import ease_linear
from xmlui.gradient import GradientType
from xmlui.style import Edges, Style, StyleEngine, style_from_dict


def _engine(document):
    engine = StyleEngine()
    engine.load_from_string(json.dumps(document))
    return engine


def test_nested_format_with_padding_all():
    engine = _engine({"styles": {"#root": {"background": "red", "padding": {"all": 4}}}})
    style = engine.get_style("#root")
    assert style.background_color == named_color("red")
    assert style.padding == Edges.uniform(4)
    assert style.padding_set is True
    assert style.margin_set is False


def test_flat_format():
    engine = _engine({"button": {"color": "#00ff00", "borderWidth": 2}})
    style = engine.get_style("button")
    assert style.text_color == parse_color("#00ff00")
    assert style.border_width == 2
    assert style.border_width_set is True


def test_invalid_entry_is_skipped():
    engine = _engine({"a": {"opacity": "x"}, "b": {"opacity": 0.5}})
    assert engine.get_style("a") is None
    assert engine.get_style("b").opacity == 0.5


@pytest.mark.parametrize("text", ["{not json", "[1, 2]", "42"])
def test_bad_documents_raise(text):
    with pytest.raises(ValueError):
        StyleEngine().load_from_string(text)


def test_state_styles_parsed_and_flagged():
    engine = _engine({"button": {"hover": {"color": "#ff0000", "borderWidth": 2}}})
    style = engine.get_style("button")
    assert style.hover_style.text_color == Color(255, 0, 0)
    assert style.hover_style.border_width_set is True
    assert style.border_width_set is False
    assert style.active_style is None


def test_radial_background_becomes_gradient():
    engine = _engine({"panel": {"background": "radial-gradient(circle, red, blue)"}})
    style = engine.get_style("panel")
    assert style.parsed_gradient.type is GradientType.RADIAL
    assert [s.color for s in style.parsed_gradient.color_stops] == [
        named_color("red"),
        named_color("blue"),
    ]
    assert style.background_color is None


def test_effects_are_parsed():
    engine = _engine(
        {
            "card": {
                "boxShadow": "1px 2px 3px black",
                "transition": "opacity 1s",
                "filter": "blur(5px)",
                "backdropFilter": "blur(8px)",
                "borderLeft": "white",
            }
        }
    )
    style = engine.get_style("card")
    assert style.parsed_box_shadow.color == named_color("black")
    assert style.parsed_transitions[0].property == "opacity"
    assert style.parsed_transitions[0].easing is ease_linear
    assert style.parsed_filter.blur == 5
    assert style.parsed_backdrop_filter.blur == 8
    assert style.border_left_color == named_color("white")


def test_margin_sides():
    style = style_from_dict({"margin": {"top": 1, "left": 3}})
    assert style.margin == Edges(top=1, left=3)
    assert style.margin_set is True


def test_style_from_dict_rejects_wrong_types():
    with pytest.raises(ValueError):
        style_from_dict({"padding": 5})
    with pytest.raises(ValueError):
        style_from_dict({"color": 3})
    with pytest.raises(ValueError):
        style_from_dict({"width": True})


def test_clone_is_independent():
    original = style_from_dict({"padding": {"all": 2}, "hover": {"opacity": 0.5}})
    copy = original.clone()
    copy.padding.top = 9
    copy.hover_style.opacity = 1
    assert original.padding.top == 2
    assert original.hover_style.opacity == 0.5
    assert copy.padding.bottom == 2


def test_add_style_parses_values():
    engine = StyleEngine()
    engine.add_style(".x", Style(background="navy"))
    assert engine.get_style(".x").background_color == named_color("navy")
    assert engine.get_style(".y") is None
    assert len(engine) == 1


def test_load_from_file(tmp_path):
    path = tmp_path / "styles.json"
    path.write_text(json.dumps({"#root": {"gap": 6}}), encoding="utf-8")
    engine = StyleEngine()
    engine.load_from_file(path)
    assert engine.get_style("#root").gap == 6


def test_load_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        StyleEngine().load_from_file(tmp_path / "absent.json")