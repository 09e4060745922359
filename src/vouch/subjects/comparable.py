"""Ordering predicates for subjects whose actual values support ``<``.

These are plain functions taking the subject as ``self`` so that concrete
subjects can bind the ones they need directly in their class body.
"""

from __future__ import annotations

import warnings
from typing import Any

from vouch.errors import UsageError
from vouch.facts import Fact, render_value
from vouch.subjects._validation import predicate


def _range(low: Any, high: Any, *, closed: bool) -> str:
    left, right = ("[", "]") if closed else ("(", ")")
    return f"{left}{render_value(low)}..{render_value(high)}{right}"


def _check_bounds(func_name: str, low: Any, high: Any) -> None:
    if high < low:
        raise UsageError(f"{func_name}(): low({low!r}) must not be greater than high({high!r})")


@predicate("other", null_fact="expected a value that is at least")
def is_at_least(self, other: Any) -> None:
    if self.actual < other:
        self.fail_with_fact("expected to be at least", other)


@predicate("other", null_fact="expected a value that is at most")
def is_at_most(self, other: Any) -> None:
    if self.actual > other:
        self.fail_with_fact("expected to be at most", other)


@predicate("other", null_fact="expected a value that is greater than")
def is_greater_than(self, other: Any) -> None:
    if not self.actual > other:
        self.fail_with_fact("expected to be greater than", other)


@predicate("other", null_fact="expected a value that is less than")
def is_less_than(self, other: Any) -> None:
    if not self.actual < other:
        self.fail_with_fact("expected to be less than", other)


@predicate("low", "high")
def is_in_range(self, low: Any, high: Any) -> None:
    """Fails unless ``low <= actual <= high``."""
    _check_bounds("is_in_range", low, high)
    bounds = _range(low, high, closed=True)
    if self.actual is None:
        self._fail([Fact(key="expected a value in range", value=bounds)])
    elif not low <= self.actual <= high:
        self._fail([Fact(key="expected to be in range", value=bounds)])


@predicate("low", "high")
def is_in_open_range(self, low: Any, high: Any) -> None:
    """Fails unless ``low < actual < high``."""
    _check_bounds("is_in_open_range", low, high)
    bounds = _range(low, high, closed=False)
    if self.actual is None:
        self._fail([Fact(key="expected a value in range", value=bounds)])
    elif not low < self.actual < high:
        self._fail([Fact(key="expected to be in range", value=bounds)])


@predicate("other", null_fact="expected value that sorts equal to")
def is_equivalent_according_to_compare_to(self, other: Any) -> None:
    """Fails unless neither value sorts before the other."""
    if isinstance(self.actual, str):
        warnings.warn(
            "is_equivalent_according_to_compare_to() is deprecated for strings; "
            "string ordering is consistent with equality, use is_equal_to()",
            DeprecationWarning,
            stacklevel=3,
        )
    if self.actual < other or other < self.actual:
        self.fail_with_fact("expected value that sorts equal to", other)
