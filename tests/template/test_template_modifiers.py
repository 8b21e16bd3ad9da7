# phkit:header:start
#
#   project      : PHKit
#   file         : test_template_modifiers.py
#   file_relpath : tests/template/test_template_modifiers.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Template rendering with ``{{modifier:key}}`` tokens."""

from __future__ import annotations

from phkit.template import Template

ESC = "\u001b"


def test_modifier_wraps_resolved_value() -> None:
    """The modifier receives the formatted value of the second segment."""
    template = Template.create("{{red:age}}").set("red", lambda s: f"<{s}>").set("age", 30)

    assert template.render() == "<30>"


def test_modifiers_in_a_conversation() -> None:
    """Several modifiers, repeated tokens and unset value keys in one template."""
    tpl = (
        "{{name:person1}}: {{person2}}? John is {{red:age}} years old{{repeat:?}}\n"
        "{{name:person2}}: {{green:Yes}} {{person1}}, John is {{red:age}} years old."
    )

    def name(value: str) -> str:
        return f"{ESC}[4;10m{value.upper()}{ESC}[0m"

    template = (
        Template.create(tpl)
        .set("person1", "Jamie")
        .set("person2", "Dorian")
        .set("name", name)
        .set("red", lambda value: f"{ESC}[1;31m{value}{ESC}[0m")
        .set("green", lambda value: f"{ESC}[32m{value}{ESC}[0m")
        .set("age", 30)
        .set("repeat", lambda value: value * 2)
    )

    expected = (
        f"{ESC}[4;10mJAMIE{ESC}[0m: Dorian? John is {ESC}[1;31m30{ESC}[0m years old??\n"
        f"{ESC}[4;10mDORIAN{ESC}[0m: {ESC}[32mYes{ESC}[0m Jamie, "
        f"John is {ESC}[1;31m30{ESC}[0m years old."
    )
    assert template.render() == expected


def test_unset_modifier_is_skipped() -> None:
    """An unset modifier key leaves the resolved value unmodified."""
    template = Template.create("{{shout:word}}").set("word", "hi")

    assert template.render() == "hi"


def test_non_callable_modifier_is_skipped() -> None:
    """A modifier key holding a plain value is ignored, not an error."""
    template = Template.create("{{shout:word}}").set("shout", "LOUD").set("word", "hi")

    assert template.render() == "hi"


def test_modifier_applied_to_unset_value_key() -> None:
    """The literal value key is passed to the modifier when it is unset."""
    template = Template.create("{{upper:hello}}").set("upper", str.upper)

    assert template.render() == "HELLO"


def test_function_used_as_its_own_value() -> None:
    """A modifier stored as the value key has no text form and falls back to the key."""
    template = Template.create("{{fn:fn}} {{fn}}").set("fn", lambda value: f"[{value}]")

    assert template.render() == "[fn] fn"


def test_modifier_called_once_per_distinct_token() -> None:
    """Repeated identical tokens share a single substitution."""
    calls: list[str] = []

    def track(value: str) -> str:
        calls.append(value)
        return value.upper()

    template = Template.create("{{t:x}} {{t:x}} {{t:y}}").set("t", track)

    assert template.render() == "X X Y"
    assert calls == ["x", "y"]


def test_value_key_stops_at_second_colon() -> None:
    """Only the segment between the first and second colon is the value key."""
    template = (
        Template.create("{{wrap:a:b}} {{wrap:missing:b}}")
        .set("wrap", lambda value: f"({value})")
        .set("a", "A")
    )

    assert template.render() == "(A) (missing)"


def test_empty_value_key_falls_back_to_plain_lookup() -> None:
    """``{{wrap::b}}`` resolves like ``{{wrap}}``."""
    template = Template.create("{{label::x}}").set("label", "L")

    assert template.render() == "L"

