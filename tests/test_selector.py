import pytest

from xmlui.selector import (
    RuleSet,
    Selector,
    SelectorType,
    Widget,
    matches_nth_child,
    parse_nth_child,
    parse_selector,
)
from xmlui.style import Style


@pytest.fixture
def tree():
    label = Widget("text", id="title", classes=["heading"])
    button = Widget("button", id="ok", classes=["primary", "large"])
    inner = Widget("panel", classes=["inner"], children=[button])
    root = Widget("panel", id="root", children=[label, inner])
    return root, inner, button, label


def test_empty_selector_is_none():
    assert parse_selector("   ") is None
    assert parse_selector("") is None


def test_tag_selector():
    sel = parse_selector("button")
    assert sel.type is SelectorType.TAG
    assert sel.tag == "button"
    assert sel.classes == []


def test_class_selector():
    sel = parse_selector(".primary.large")
    assert sel.type is SelectorType.CLASS
    assert sel.classes == ["primary", "large"]
    assert sel.tag == ""


def test_id_selector():
    sel = parse_selector("#ok")
    assert sel.type is SelectorType.ID
    assert sel.id == "ok"


def test_compound_selector():
    sel = parse_selector("button#ok.primary")
    assert sel.type is SelectorType.COMPOUND
    assert sel.tag == "button"
    assert sel.id == "ok"
    assert sel.classes == ["primary"]


def test_tag_with_class_is_compound():
    sel = parse_selector("button.primary")
    assert sel.type is SelectorType.COMPOUND


def test_universal_selector():
    assert parse_selector("*").type is SelectorType.UNIVERSAL


def test_pseudo_class_and_attribute():
    sel = parse_selector("button[class='primary']:hover")
    assert sel.pseudo_class == "hover"
    assert sel.attribute == "class"
    assert sel.attr_value == "primary"
    assert sel.tag == "button"


def test_attribute_without_value():
    sel = parse_selector("[class]")
    assert sel.attribute == "class"
    assert sel.attr_value == ""


def test_child_combinator_chain():
    sel = parse_selector("panel > button")
    assert sel.combinator == ">"
    assert sel.tag == "panel"
    assert sel.next.tag == "button"


def test_descendant_combinator_chain():
    sel = parse_selector("panel  .primary")
    assert sel.combinator == " "
    assert sel.next.classes == ["primary"]


def test_matches_single(tree):
    _, _, button, label = tree
    sel = parse_selector("button#ok.primary")
    assert sel.matches_single(button)
    assert not sel.matches_single(label)


def test_attribute_class_match(tree):
    _, _, button, label = tree
    sel = parse_selector("[class=primary]")
    assert sel.matches_single(button)
    assert not sel.matches_single(label)


def test_descendant_matching(tree):
    root, inner, button, _ = tree
    sel = parse_selector("#root .primary")
    assert sel.matches(root)
    assert not sel.matches(button)


def test_child_matching(tree):
    root, inner, _, _ = tree
    sel = parse_selector("panel > button")
    assert sel.matches(inner, root)
    assert not sel.matches(root)


def test_specificity_constants():
    assert parse_selector("#x").specificity() == 100
    assert parse_selector(".x").specificity() == 10
    assert parse_selector("button").specificity() == 1


def test_specificity_is_additive():
    combined = parse_selector("panel > #ok.primary:hover").specificity()
    parts = parse_selector("panel").specificity() + parse_selector("#ok.primary:hover").specificity()
    assert combined == parts


def test_ruleset_simple_rules(tree):
    _, _, button, label = tree
    rules = RuleSet()
    button_style = Style(opacity=0.5)
    heading_style = Style(opacity=0.25)
    rules.add_rule("button", button_style)
    rules.add_rule(".heading", heading_style)
    assert len(rules) == 2
    assert rules.matching_styles(button) == [button_style]
    assert rules.matching_styles(label) == [heading_style]
    assert rules.engine.get_style("button") is button_style


def test_ruleset_descendant_and_child(tree):
    root, inner, button, _ = tree
    rules = RuleSet()
    descendant = Style(gap=1.0)
    child = Style(gap=2.0)
    rules.add_rule("#root button", descendant)
    rules.add_rule(".inner > button", child)
    assert rules.matching_styles(button, [root, inner]) == [descendant, child]
    assert rules.matching_styles(button, [inner]) == [child]
    assert rules.matching_styles(button, []) == []


def test_ruleset_keeps_insertion_order(tree):
    _, _, button, _ = tree
    rules = RuleSet()
    first = Style(width=1.0)
    second = Style(width=2.0)
    rules.add_rule("#ok", first)
    rules.add_rule("button", second)
    assert rules.matching_styles(button) == [first, second]
    assert [r.specificity for r in rules.rules] == [100, 1]


def test_ruleset_empty_selector_not_a_rule():
    rules = RuleSet()
    rules.add_rule("", Style())
    assert len(rules) == 0


def test_parse_nth_child_keywords():
    assert parse_nth_child("odd") == (2, 1)
    assert parse_nth_child(" even ") == (2, 0)


def test_parse_nth_child_number():
    assert parse_nth_child("3") == (0, 3)
    assert parse_nth_child("") == (0, 0)


def test_matches_nth_child():
    assert matches_nth_child(3, 2, 1)
    assert not matches_nth_child(4, 2, 1)
    assert not matches_nth_child(-1, 2, 1)
    assert matches_nth_child(5, 0, 5)
    assert not matches_nth_child(4, 0, 5)


@pytest.mark.parametrize("index", range(1, 10))
def test_odd_even_partition(index):
    odd = matches_nth_child(index, *parse_nth_child("odd"))
    even = matches_nth_child(index, *parse_nth_child("even"))
    assert odd != even
    assert odd == (index % 2 == 1)


def test_selector_default_matches_everything(tree):
    root, _, button, _ = tree
    sel = Selector()
    assert sel.matches(root)
    assert sel.matches(button)