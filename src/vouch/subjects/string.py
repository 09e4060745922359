"""Predicates for string values."""

from __future__ import annotations

from vouch.facts import fact, simple_fact
from vouch.failure import FailureMetadata
from vouch.regex import DEFAULT_MATCHER, Pattern, RegexMatcher
from vouch.strategies import FailureStrategy
from vouch.subjects import comparable
from vouch.subjects._validation import non_negative, predicate
from vouch.subjects.base import Subject

_CASE_IGNORED = "(case is ignored)"


class StringSubject(Subject):
    """Subject for ``str`` values (or None).

    Regex predicates accept either a compiled pattern or pattern source text.
    ``matches`` requires the whole string to match; ``contains_match`` only
    needs a match somewhere in it.
    """

    type_name = "string"

    def __init__(
        self,
        actual: str | None,
        *,
        metadata: FailureMetadata | None = None,
        strategy: FailureStrategy | None = None,
        matcher: RegexMatcher | None = None,
    ):
        super().__init__(actual, metadata=metadata, strategy=strategy)
        self._matcher = matcher or DEFAULT_MATCHER

    def _copy(self, metadata: FailureMetadata) -> StringSubject:
        return StringSubject(self._actual, metadata=metadata, strategy=self._strategy, matcher=self._matcher)

    is_at_least = comparable.is_at_least
    is_at_most = comparable.is_at_most
    is_greater_than = comparable.is_greater_than
    is_less_than = comparable.is_less_than
    is_in_range = comparable.is_in_range
    is_in_open_range = comparable.is_in_open_range
    is_equivalent_according_to_compare_to = comparable.is_equivalent_according_to_compare_to

    @predicate(
        "expected_length",
        null_fact="expected a string with length",
        checks={"expected_length": non_negative},
    )
    def has_length(self, expected_length: int) -> None:
        """Fails if the string does not have the given length."""
        self.check("length()").that(len(self._actual)).is_equal_to(expected_length)

    @predicate(null_fact="expected empty string")
    def is_empty(self) -> None:
        """Fails unless the string is ``""``."""
        if self._actual:
            self.fail_without_value("expected to be empty")

    @predicate(null_fact="expected nonempty string")
    def is_not_empty(self) -> None:
        if not self._actual:
            self.fail_without_actual(simple_fact("expected not to be empty"))

    @predicate("string", null_fact="expected a string that contains")
    def contains(self, string: str) -> None:
        """Fails if the string does not contain ``string``."""
        if string not in self._actual:
            self.fail_with_fact("expected to contain", string)

    @predicate("string", null_fact="expected a string that does not contain")
    def does_not_contain(self, string: str) -> None:
        if string in self._actual:
            self.fail_with_fact("expected not to contain", string)

    @predicate("prefix", null_fact="expected a string that starts with")
    def starts_with(self, prefix: str) -> None:
        if not self._actual.startswith(prefix):
            self.fail_with_fact("expected to start with", prefix)

    @predicate("suffix", null_fact="expected a string that ends with")
    def ends_with(self, suffix: str) -> None:
        if not self._actual.endswith(suffix):
            self.fail_with_fact("expected to end with", suffix)

    @predicate("regex", null_fact="expected a string that matches")
    def matches(self, regex: Pattern) -> None:
        """Fails unless the whole string matches ``regex``."""
        if not self._matcher.full_match(self._actual, regex):
            self.fail_with_fact("expected to match", regex)

    @predicate("regex", null_fact="expected a string that does not match")
    def does_not_match(self, regex: Pattern) -> None:
        if self._matcher.full_match(self._actual, regex):
            self.fail_with_fact("expected not to match", regex)

    @predicate("regex", null_fact="expected a string that contains a match for")
    def contains_match(self, regex: Pattern) -> None:
        """Fails unless some substring matches ``regex``."""
        if not self._matcher.contains_match(self._actual, regex):
            self.fail_with_fact("expected to contain a match for", regex)

    @predicate("regex", null_fact="expected a string that does not contain a match for")
    def does_not_contain_match(self, regex: Pattern) -> None:
        if self._matcher.contains_match(self._actual, regex):
            self.fail_with_fact("expected not to contain a match for", regex)

    # Case-insensitive variants

    @predicate("expected", null_fact="expected a string that is equal to", notes=(_CASE_IGNORED,))
    def is_equal_to_ignoring_case(self, expected: str) -> None:
        if self._actual.casefold() != expected.casefold():
            self.fail_without_actual(
                fact("expected", expected),
                fact("but was", self._actual),
                simple_fact(_CASE_IGNORED),
            )

    @predicate("string", null_fact="expected a string that contains", notes=(_CASE_IGNORED,))
    def contains_ignoring_case(self, string: str) -> None:
        if string.casefold() not in self._actual.casefold():
            self._fail([fact("expected to contain", string)], notes=[simple_fact(_CASE_IGNORED)])

    @predicate("string", null_fact="expected a string that does not contain", notes=(_CASE_IGNORED,))
    def does_not_contain_ignoring_case(self, string: str) -> None:
        if string.casefold() in self._actual.casefold():
            self._fail([fact("expected not to contain", string)], notes=[simple_fact(_CASE_IGNORED)])
