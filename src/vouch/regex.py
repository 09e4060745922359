"""Regex matching backends used by string subjects."""

from __future__ import annotations

import re
from typing import Protocol

Pattern = str | re.Pattern[str]


class RegexMatcher(Protocol):
    """Answers whether text fully matches, or contains a match for, a pattern.

    Backends that only understand a subset of regex syntax may implement this
    on a best-effort basis.
    """

    def full_match(self, text: str, pattern: Pattern) -> bool: ...

    def contains_match(self, text: str, pattern: Pattern) -> bool: ...


class StandardMatcher:
    """Matcher backed by the :mod:`re` module."""

    def full_match(self, text: str, pattern: Pattern) -> bool:
        return re.fullmatch(pattern, text) is not None

    def contains_match(self, text: str, pattern: Pattern) -> bool:
        return re.search(pattern, text) is not None


DEFAULT_MATCHER = StandardMatcher()
