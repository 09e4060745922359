"""Entry points that raise on the first failed predicate."""

from __future__ import annotations

from typing import Any, TypeVar, overload

from vouch.strategies import RAISE
from vouch.subjects import CustomSubjectBuilder, StringSubject, Subject, SubjectBuilder

S = TypeVar("S", bound=Subject)

_ASSERT = SubjectBuilder(RAISE)


@overload
def assert_that(actual: str) -> StringSubject: ...


@overload
def assert_that(actual: Any) -> Subject: ...


def assert_that(actual: Any) -> Subject:
    """Begin an assertion about ``actual``."""
    return _ASSERT.that(actual)


def assert_with_message(message: str, *args: Any) -> SubjectBuilder:
    """Begin an assertion whose failure message starts with ``message % args``."""
    return _ASSERT.with_message(message, *args)


def assert_about(subject_cls: type[S]) -> CustomSubjectBuilder[S]:
    """Begin an assertion using ``subject_cls``, e.g. ``assert_about(StringSubject).that(None)``."""
    return _ASSERT.about(subject_cls)
