"""Tests for fact rendering and message formatting."""

import re

from vouch.config import render_config_scope, RenderConfig
from vouch.facts import Fact, fact, format_facts, render_value, simple_fact


class TestRenderValue:
    def test_none(self):
        assert render_value(None) == "None"

    def test_strings_are_not_quoted(self):
        assert render_value("abc") == "abc"

    def test_patterns_render_source(self):
        assert render_value(re.compile(r"\d+")) == r"\d+"

    def test_builtin_types_render_bare_name(self):
        assert render_value(int) == "int"

    def test_other_types_render_qualified_name(self):
        assert render_value(Fact) == "vouch.facts.Fact"

    def test_containers_use_pretty_repr(self):
        assert render_value([1, "a"]) == "[1, 'a']"

    def test_long_values_are_truncated(self):
        with render_config_scope(RenderConfig(max_value_length=10)):
            assert render_value("x" * 20) == "xxxxxxx..."


class TestFormatFacts:
    def test_aligns_keys(self):
        facts = [fact("expected to contain", "d"), fact("but was", "abc")]

        assert format_facts(facts) == "expected to contain: d\nbut was            : abc"

    def test_bare_facts_do_not_affect_alignment(self):
        facts = [simple_fact("a very long statement without value"), fact("expected", 1)]

        assert format_facts(facts) == "a very long statement without value\nexpected: 1"

    def test_multiline_values_are_indented(self):
        facts = [Fact(key="expected", value="one\ntwo"), fact("but was", 3)]

        assert format_facts(facts) == "expected:\n    one\n    two\nbut was: 3"

    def test_alignment_can_be_disabled(self):
        facts = [fact("expected", 1), fact("but was", 2)]

        with render_config_scope(RenderConfig(align_keys=False)):
            assert format_facts(facts) == "expected: 1\nbut was: 2"

    def test_empty(self):
        assert format_facts([]) == ""


def test_fact_str():
    assert str(fact("expected", 5)) == "expected: 5"
    assert str(simple_fact("expected to be empty")) == "expected to be empty"
