"""Failure strategies: what happens once a subject has built a failure."""

from __future__ import annotations

import logging
from typing import Protocol

from vouch.errors import AssertionFailure, UsageError

logger = logging.getLogger(__name__)


class FailureStrategy(Protocol):
    """Receives every failure reported by the subjects it was given to."""

    def report(self, failure: AssertionFailure) -> None:
        """Handle one failure."""
        ...


class RaiseStrategy:
    """Raise the failure immediately, ending the current assertion chain."""

    def report(self, failure: AssertionFailure) -> None:
        logger.debug("Raising failure from %s", failure.record.assertion_name)
        raise failure


class CollectStrategy:
    """Record failures and keep going, for soft assertions."""

    def __init__(self) -> None:
        self.failures: list[AssertionFailure] = []

    def report(self, failure: AssertionFailure) -> None:
        logger.debug(
            "Collected failure #%d from %s", len(self.failures) + 1, failure.record.assertion_name
        )
        self.failures.append(failure)


class CaptureStrategy:
    """Capture exactly one failure so the caller can inspect it."""

    def __init__(self) -> None:
        self.failure: AssertionFailure | None = None

    def report(self, failure: AssertionFailure) -> None:
        if self.failure is not None:
            msg = (
                "expect_failure caught more than one failure; the first was:\n"
                f"{self.failure}\nthe second was:\n{failure}"
            )
            raise UsageError(msg)
        logger.debug("Captured failure from %s", failure.record.assertion_name)
        self.failure = failure


RAISE = RaiseStrategy()
