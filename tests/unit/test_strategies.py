"""Tests for vouch.strategies module."""

import logging

import pytest

from vouch import (
    AssertionFailure,
    CaptureStrategy,
    CollectStrategy,
    RaiseStrategy,
    SubjectBuilder,
    UsageError,
)
from vouch.facts import simple_fact


def _failure(key="boom"):
    return AssertionFailure([simple_fact(key)])


class TestRaiseStrategy:
    def test_raises_the_failure(self):
        failure = _failure()

        with pytest.raises(AssertionFailure) as excinfo:
            RaiseStrategy().report(failure)

        assert excinfo.value is failure

    def test_is_default_for_builders(self):
        with pytest.raises(AssertionError):
            SubjectBuilder().that("a").is_empty()


class TestCollectStrategy:
    def test_keeps_failures_in_order(self):
        strategy = CollectStrategy()
        builder = SubjectBuilder(strategy)

        builder.that("a").is_empty()
        builder.that(1).is_equal_to(2)

        assert [f.keys[0] for f in strategy.failures] == ["expected to be empty", "expected"]

    def test_logs_each_failure(self, caplog):
        caplog.set_level(logging.DEBUG, logger="vouch.strategies")
        strategy = CollectStrategy()

        SubjectBuilder(strategy).that("a").is_empty()

        assert "Collected failure #1 from is_empty" in caplog.text


class TestCaptureStrategy:
    def test_captures_one(self):
        strategy = CaptureStrategy()
        failure = _failure()

        strategy.report(failure)

        assert strategy.failure is failure

    def test_rejects_second(self):
        strategy = CaptureStrategy()
        strategy.report(_failure("first"))

        with pytest.raises(UsageError, match="first"):
            strategy.report(_failure("second"))


def test_custom_strategy_receives_failures():
    class CountingStrategy:
        def __init__(self):
            self.count = 0

        def report(self, failure):
            self.count += 1

    strategy = CountingStrategy()
    SubjectBuilder(strategy).that("abc").starts_with("b")

    assert strategy.count == 1
