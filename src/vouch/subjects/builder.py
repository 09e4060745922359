"""Builders that turn a value into the right subject."""

from __future__ import annotations

from typing import Any, Generic, TypeVar, overload

from vouch.failure import FailureMetadata
from vouch.regex import RegexMatcher
from vouch.strategies import RAISE, FailureStrategy
from vouch.subjects.base import Subject
from vouch.subjects.string import StringSubject

S = TypeVar("S", bound=Subject)


class SubjectBuilder:
    """Creates subjects that share one strategy and one set of failure metadata.

    Parameters
    ----------
    strategy:
        Where failures go. Defaults to raising immediately.
    metadata:
        Messages and derivation path carried into every subject built here.
    matcher:
        Regex backend handed to string subjects.
    """

    def __init__(
        self,
        strategy: FailureStrategy | None = None,
        metadata: FailureMetadata | None = None,
        matcher: RegexMatcher | None = None,
    ):
        self.strategy = strategy or RAISE
        self.metadata = metadata or FailureMetadata()
        self.matcher = matcher

    @overload
    def that(self, actual: str) -> StringSubject: ...

    @overload
    def that(self, actual: Any) -> Subject: ...

    def that(self, actual: Any) -> Subject:
        if isinstance(actual, str):
            return StringSubject(actual, metadata=self.metadata, strategy=self.strategy, matcher=self.matcher)
        return Subject(actual, metadata=self.metadata, strategy=self.strategy)

    def with_message(self, message: str, *args: Any) -> SubjectBuilder:
        """Return a builder whose failures start with ``message % args``."""
        text = message % args if args else message
        return SubjectBuilder(self.strategy, self.metadata.with_message(text), self.matcher)

    def about(self, subject_cls: type[S]) -> CustomSubjectBuilder[S]:
        """Build subjects of ``subject_cls`` regardless of the actual value's type."""
        return CustomSubjectBuilder(subject_cls, self.strategy, self.metadata, self.matcher)


class CustomSubjectBuilder(Generic[S]):
    """Builder bound to one subject class."""

    def __init__(
        self,
        subject_cls: type[S],
        strategy: FailureStrategy,
        metadata: FailureMetadata,
        matcher: RegexMatcher | None = None,
    ):
        self.subject_cls = subject_cls
        self.strategy = strategy
        self.metadata = metadata
        self.matcher = matcher

    def that(self, actual: Any) -> S:
        if issubclass(self.subject_cls, StringSubject):
            return self.subject_cls(actual, metadata=self.metadata, strategy=self.strategy, matcher=self.matcher)
        return self.subject_cls(actual, metadata=self.metadata, strategy=self.strategy)
