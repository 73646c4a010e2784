"""CSS selectors: parsing, matching against widget trees and rule sets."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Sequence

from .style import Style, StyleEngine

_ATTRIBUTE_RE = re.compile(r"""\[([^\]=]+)(?:=["']?([^"'\]]*)["']?)?\]""")

ID_SPECIFICITY = 100
CLASS_SPECIFICITY = 10
TAG_SPECIFICITY = 1
PSEUDO_CLASS_SPECIFICITY = 10


class SelectorType(enum.Enum):
    """The kind of a simple selector."""

    UNIVERSAL = "universal"
    TAG = "tag"
    CLASS = "class"
    ID = "id"
    DESCENDANT = "descendant"
    CHILD = "child"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    COMPOUND = "compound"


@dataclass(eq=False)
class Widget:
    """A node of a widget tree, as seen by selectors."""

    type: str
    id: str = ""
    classes: list[str] = field(default_factory=list)
    children: list[Widget] = field(default_factory=list)

    def has_class(self, name: str) -> bool:
        """Tell whether the widget carries the class ``name``."""
        return name in self.classes


@dataclass
class Selector:
    """A parsed selector; ``next`` and ``combinator`` chain it to the one it governs."""

    type: SelectorType = SelectorType.UNIVERSAL
    classes: list[str] = field(default_factory=list)
    id: str = ""
    tag: str = ""
    attribute: str = ""
    attr_value: str = ""
    pseudo_class: str = ""
    combinator: str = ""
    next: Selector | None = None

    def matches(self, widget: Widget, parent: Widget | None = None) -> bool:
        """Match ``widget``; with a combinator, also look below it for the next selector."""
        if not self.matches_single(widget):
            return False
        if self.next is not None:
            if self.combinator == " ":
                return _any_descendant_matches(widget, self.next)
            if self.combinator == ">":
                return any(self.next.matches(child, widget) for child in widget.children)
        return True

    def matches_single(self, widget: Widget) -> bool:
        """Match this selector alone (tag, id, classes, attribute) against ``widget``."""
        if self.tag and self.tag != widget.type:
            return False
        if self.id and self.id != widget.id:
            return False
        if not all(widget.has_class(name) for name in self.classes):
            return False
        if self.attribute == "class" and self.attr_value and not widget.has_class(self.attr_value):
            return False
        return True

    def specificity(self) -> int:
        """The CSS specificity of the whole selector chain."""
        total = len(self.classes) * CLASS_SPECIFICITY
        if self.id:
            total += ID_SPECIFICITY
        if self.tag:
            total += TAG_SPECIFICITY
        if self.pseudo_class:
            total += PSEUDO_CLASS_SPECIFICITY
        if self.next is not None:
            total += self.next.specificity()
        return total


def _any_descendant_matches(widget: Widget, selector: Selector) -> bool:
    return any(
        selector.matches(child, widget) or _any_descendant_matches(child, selector)
        for child in widget.children
    )


def parse_selector(s: str) -> Selector | None:
    """Parse a selector string; None if it is empty."""
    s = s.strip()
    if not s:
        return None
    for separator, combinator in ((" > ", ">"), (" ", " ")):
        if separator in s:
            head, tail = s.split(separator, 1)
            parent = parse_selector(head)
            child = parse_selector(tail)
            if parent is not None and child is not None:
                parent.combinator = combinator
                parent.next = child
            return parent
    return _parse_simple(s)


def _parse_simple(s: str) -> Selector:
    sel = Selector()

    if ":" in s:
        s, sel.pseudo_class = s.split(":", 1)

    match = _ATTRIBUTE_RE.search(s)
    if match:
        sel.attribute = match.group(1)
        sel.attr_value = match.group(2) or ""
        s = _ATTRIBUTE_RE.sub("", s)

    if "#" in s:
        s, id_part = s.split("#", 1)
        if "." in id_part:
            sel.id, rest = id_part.split(".", 1)
            sel.classes.extend(name for name in rest.split(".") if name)
        else:
            sel.id = id_part
        sel.type = SelectorType.ID

    if "." in s:
        head, *names = s.split(".")
        if head:
            sel.tag = head
        sel.classes.extend(name for name in names if name)
        if sel.classes:
            sel.type = SelectorType.CLASS
    elif s:
        sel.tag = s
        sel.type = SelectorType.TAG

    if s == "*":
        sel.type = SelectorType.UNIVERSAL

    if (sel.id and (sel.classes or sel.tag)) or (sel.tag and sel.classes):
        sel.type = SelectorType.COMPOUND

    return sel


@dataclass
class StyleRule:
    """A style together with the selector that applies it."""

    selector: Selector
    raw_selector: str
    style: Style
    specificity: int


class RuleSet:
    """Style rules with full selectors, kept in the order they were added.

    Every style is also registered, under its raw selector text, with
    ``engine`` for plain lookups.
    """

    def __init__(self) -> None:
        self.rules: list[StyleRule] = []
        self.engine = StyleEngine()

    def __len__(self) -> int:
        return len(self.rules)

    def add_rule(self, selector: str, style: Style) -> None:
        """Add ``style`` under ``selector``; an empty selector only reaches ``engine``."""
        parsed = parse_selector(selector)
        if parsed is not None:
            self.rules.append(StyleRule(parsed, selector, style, parsed.specificity()))
        self.engine.add_style(selector, style)

    def matching_styles(self, widget: Widget, ancestors: Sequence[Widget] = ()) -> list[Style]:
        """Styles of the rules matching ``widget``, in rule order.

        ``ancestors`` runs from the root down to the widget's parent.
        """
        return [rule.style for rule in self.rules if _rule_matches(rule.selector, widget, ancestors)]


def _rule_matches(selector: Selector, widget: Widget, ancestors: Sequence[Widget]) -> bool:
    following = selector.next
    if following is None:
        return selector.matches_single(widget)
    if selector.combinator == " ":
        return any(
            selector.matches_single(ancestor) and following.matches_single(widget)
            for ancestor in ancestors
        )
    if selector.combinator == ">" and ancestors:
        if selector.matches_single(ancestors[-1]):
            return following.matches_single(widget)
    return False


def _leading_int(s: str) -> int:
    """Read the digits at the start of ``s`` (minus signs before them are skipped)."""
    n = 0
    for ch in s:
        if "0" <= ch <= "9":
            n = n * 10 + (ord(ch) - ord("0"))
        elif ch == "-" and n == 0:
            continue
        else:
            break
    return -n if s.startswith("-") else n


def parse_nth_child(expr: str) -> tuple[int, int]:
    """Parse an ``:nth-child`` argument into ``(a, b)``.

    ``odd`` gives (2, 1) and ``even`` (2, 0); anything else is read as its
    leading integer ``b``, giving (0, b).
    """
    expr = expr.strip()
    if expr == "odd":
        return 2, 1
    if expr == "even":
        return 2, 0
    return 0, _leading_int(expr)


def matches_nth_child(index: int, a: int, b: int) -> bool:
    """Tell whether ``index`` equals ``a*n + b`` for some n >= 0."""
    if a == 0:
        return index == b
    offset = index - b
    return offset % a == 0 and offset // a >= 0