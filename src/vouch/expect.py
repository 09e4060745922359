"""Soft assertions and helpers for testing assertions themselves."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any, TypeVar

from vouch.errors import AssertionFailure, MultipleFailuresError
from vouch.facts import simple_fact
from vouch.regex import RegexMatcher
from vouch.strategies import CaptureStrategy, CollectStrategy
from vouch.subjects import CustomSubjectBuilder, Subject, SubjectBuilder

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Subject)


class Expect:
    """Collects failures across a block and raises them all at the end.

    Usage::

        with expect() as e:
            e.that(name).starts_with("ku")
            e.that(name).has_length(4)

    A clean exit with collected failures raises :class:`MultipleFailuresError`.
    If the block raises on its own, that exception propagates and the collected
    failures are logged.
    """

    def __init__(self, matcher: RegexMatcher | None = None):
        self._strategy = CollectStrategy()
        self._builder = SubjectBuilder(self._strategy, matcher=matcher)

    @property
    def failures(self) -> list[AssertionFailure]:
        return list(self._strategy.failures)

    def that(self, actual: Any) -> Subject:
        return self._builder.that(actual)

    def with_message(self, message: str, *args: Any) -> SubjectBuilder:
        return self._builder.with_message(message, *args)

    def about(self, subject_cls: type[S]) -> CustomSubjectBuilder[S]:
        return self._builder.about(subject_cls)

    def __enter__(self) -> Expect:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        failures = list(self._strategy.failures)
        self._strategy.failures.clear()
        if not failures:
            return False

        if exc_type is not None:
            logger.warning(
                "%d expectation(s) failed before %s escaped the block",
                len(failures),
                exc_type.__name__,
            )
            for failure in failures:
                logger.warning("%s", failure)
            return False

        raise MultipleFailuresError(failures)


def expect(matcher: RegexMatcher | None = None) -> Expect:
    return Expect(matcher=matcher)


class ExpectFailure:
    """Runs assertions with a capturing strategy and exposes the one failure.

    Usage::

        ef = ExpectFailure()
        ef.when_testing().that("kurt").has_length(5)
        assert ef.failure.value_of("value of") == "string.length()"
    """

    def __init__(self, matcher: RegexMatcher | None = None):
        self._strategy = CaptureStrategy()
        self._matcher = matcher

    def when_testing(self) -> SubjectBuilder:
        return SubjectBuilder(self._strategy, matcher=self._matcher)

    @property
    def failure(self) -> AssertionFailure:
        """The captured failure.

        Raises
        ------
        AssertionFailure
            If nothing failed.
        """
        if self._strategy.failure is None:
            raise AssertionFailure([simple_fact("expected a failure but none was reported")])
        return self._strategy.failure


def expect_failure(
    callback: Callable[[SubjectBuilder], Any], matcher: RegexMatcher | None = None
) -> AssertionFailure:
    """Call ``callback`` with a capturing builder and return the failure it produced."""
    ef = ExpectFailure(matcher)
    callback(ef.when_testing())
    return ef.failure


def expect_failure_about(
    subject_cls: type[S],
    callback: Callable[[CustomSubjectBuilder[S]], Any],
    matcher: RegexMatcher | None = None,
) -> AssertionFailure:
    """Like :func:`expect_failure` for a custom subject class."""
    ef = ExpectFailure(matcher)
    callback(ef.when_testing().about(subject_cls))
    return ef.failure
