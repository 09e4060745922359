"""The generic subject: a value under test plus the predicates any value supports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from vouch.errors import AssertionFailure, ComparisonFailure, MissingArgumentError
from vouch.facts import Fact, fact, render_value, simple_fact
from vouch.failure import FailureMetadata
from vouch.strategies import RAISE, FailureStrategy
from vouch.subjects._validation import predicate

if TYPE_CHECKING:
    from vouch.subjects.builder import SubjectBuilder


def _type_label(cls: type | tuple[type, ...]) -> str:
    if isinstance(cls, tuple):
        return " or ".join(_type_label(c) for c in cls)
    return render_value(cls)


class Subject:
    """Wraps one actual value and reports failed predicates through a strategy.

    Subjects are immutable. :meth:`named` and :meth:`check` return new objects
    that share the strategy.

    Subclasses whose constructor takes extra arguments must override
    :meth:`_copy`.
    """

    type_name = "value"

    def __init__(
        self,
        actual: Any,
        *,
        metadata: FailureMetadata | None = None,
        strategy: FailureStrategy | None = None,
    ):
        self._actual = actual
        self._metadata = metadata or FailureMetadata()
        self._strategy = strategy or RAISE

    @property
    def actual(self) -> Any:
        return self._actual

    @property
    def metadata(self) -> FailureMetadata:
        return self._metadata

    @property
    def strategy(self) -> FailureStrategy:
        return self._strategy

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._actual!r})"

    # Chaining

    def named(self, name: str) -> Subject:
        """Return a copy whose failures start with ``value of: <name>``."""
        if name is None:
            raise MissingArgumentError("named() requires a non-None 'name'")
        return self._copy(self._metadata.named(name))

    def check(self, path: str) -> SubjectBuilder:
        """Start an assertion about a value computed from this subject's actual value.

        Failures of the derived subject report ``value of: <label>.<path>`` and
        end with the rendered actual value of the outermost subject.
        """
        from vouch.subjects.builder import SubjectBuilder

        return SubjectBuilder(
            strategy=self._strategy,
            metadata=self._metadata.derive(path, self._label(), self._actual),
            matcher=getattr(self, "_matcher", None),
        )

    def _label(self) -> str:
        return self._metadata.name or self._metadata.value_of or self.type_name

    def _copy(self, metadata: FailureMetadata) -> Subject:
        return type(self)(self._actual, metadata=metadata, strategy=self._strategy)

    # Reporting

    def _failure(
        self,
        facts: Sequence[Fact],
        *,
        include_actual: bool = True,
        notes: Sequence[Fact] = (),
    ) -> list[Fact]:
        head, tail = self._metadata.context_facts()
        body = list(facts)
        if include_actual:
            body.append(fact("but was", self._actual))
        return [*head, *body, *notes, *tail]

    def _fail(
        self,
        facts: Sequence[Fact],
        *,
        include_actual: bool = True,
        notes: Sequence[Fact] = (),
    ) -> None:
        all_facts = self._failure(facts, include_actual=include_actual, notes=notes)
        self._strategy.report(AssertionFailure(all_facts, subject=type(self).__name__))

    def fail_with_fact(self, key: str, value: Any) -> None:
        """Report ``key: value`` followed by ``but was: <actual>``."""
        self._fail([fact(key, value)])

    def fail_without_value(self, key: str) -> None:
        """Report the bare ``key`` followed by ``but was: <actual>``."""
        self._fail([simple_fact(key)])

    def fail_without_actual(self, *facts: Fact) -> None:
        """Report ``facts`` without appending the actual value."""
        self._fail(facts, include_actual=False)

    # Predicates

    def is_equal_to(self, expected: Any) -> None:
        """Fails unless the actual value equals ``expected``."""
        if self._actual == expected:
            return

        expected_text = render_value(expected)
        actual_text = render_value(self._actual)
        if expected_text == actual_text:
            expected_text += f" ({_type_label(type(expected))})"
            actual_text += f" ({_type_label(type(self._actual))})"
        facts = [Fact(key="expected", value=expected_text), Fact(key="but was", value=actual_text)]

        if isinstance(expected, str) and isinstance(self._actual, str):
            failure = ComparisonFailure(
                self._failure(facts, include_actual=False),
                expected=expected,
                actual=self._actual,
                subject=type(self).__name__,
            )
            self._strategy.report(failure)
        else:
            self.fail_without_actual(*facts)

    def is_not_equal_to(self, unexpected: Any) -> None:
        if self._actual == unexpected:
            self.fail_with_fact("expected not to be", unexpected)

    def is_none(self) -> None:
        if self._actual is not None:
            self.fail_without_actual(fact("expected", None), fact("but was", self._actual))

    def is_not_none(self) -> None:
        if self._actual is None:
            self.fail_without_actual(fact("expected not to be", None))

    def is_same_instance_as(self, expected: Any) -> None:
        if self._actual is not expected:
            self.fail_with_fact("expected specific instance", expected)

    def is_not_same_instance_as(self, unexpected: Any) -> None:
        if self._actual is unexpected:
            self.fail_without_value("expected not to be specific instance")

    @predicate("cls")
    def is_instance_of(self, cls: type | tuple[type, ...]) -> None:
        """Fails unless the actual value is an instance of ``cls``."""
        if self._actual is None:
            self.fail_with_fact("expected instance of", _type_label(cls))
        elif not isinstance(self._actual, cls):
            self.fail_without_actual(
                Fact(key="expected instance of", value=_type_label(cls)),
                Fact(key="but was instance of", value=_type_label(type(self._actual))),
                fact("with value", self._actual),
            )

    @predicate("cls")
    def is_not_instance_of(self, cls: type | tuple[type, ...]) -> None:
        if isinstance(self._actual, cls):
            self.fail_without_actual(
                Fact(key="expected not to be an instance of", value=_type_label(cls)),
                Fact(key="but was instance of", value=_type_label(type(self._actual))),
                fact("with value", self._actual),
            )

    @predicate("iterable")
    def is_in(self, iterable: Iterable[Any]) -> None:
        """Fails unless the actual value is one of the elements of ``iterable``."""
        values = list(iterable)
        if self._actual not in values:
            self.fail_with_fact("expected any of", values)

    def is_any_of(self, *values: Any) -> None:
        self.is_in(values)

    @predicate("iterable")
    def is_not_in(self, iterable: Iterable[Any]) -> None:
        values = list(iterable)
        if self._actual in values:
            self.fail_with_fact("expected not to be any of", values)

    def is_none_of(self, *values: Any) -> None:
        self.is_not_in(values)
