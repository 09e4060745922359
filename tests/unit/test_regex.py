import re

from vouch.regex import StandardMatcher


def test_full_match_requires_whole_text():
    matcher = StandardMatcher()

    assert matcher.full_match("abcaaadev", ".*aaa.*")
    assert not matcher.full_match("aba", "b")


def test_contains_match_searches():
    matcher = StandardMatcher()

    assert matcher.contains_match("aba", "b")
    assert not matcher.contains_match("aaa", "b")


def test_compiled_patterns():
    matcher = StandardMatcher()

    assert matcher.full_match("ABC", re.compile("abc", re.IGNORECASE))
    assert matcher.contains_match("xABCx", re.compile("abc", re.IGNORECASE))
