"""Error types raised by vouch."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from vouch.facts import Fact, format_facts
from vouch.failure import FailureRecord


class UsageError(ValueError):
    """Raised when an assertion is called incorrectly (a bug in the test, not a mismatch)."""


class MissingArgumentError(UsageError, TypeError):
    """Raised when a required assertion argument is None."""


class AssertionFailure(AssertionError):
    """AssertionError built from an ordered sequence of facts.

    Attributes
    ----------
    facts
        Every fact of the failure, in message order.
    record
        Serializable :class:`~vouch.failure.FailureRecord` for reporting.
    """

    def __init__(self, facts: Sequence[Fact], subject: str | None = None):
        self.facts = tuple(facts)
        self.record = FailureRecord(subject=subject, facts=list(self.facts))
        super().__init__(format_facts(self.facts))

    @property
    def message(self) -> str:
        return str(self)

    @property
    def keys(self) -> list[str]:
        return [f.key for f in self.facts]

    def value_of(self, key: str) -> str | None:
        """Return the value of the first fact with ``key``.

        Raises
        ------
        KeyError
            If no fact has that key.
        """
        for f in self.facts:
            if f.key == key:
                return f.value
        raise KeyError(f"No fact with key {key!r} in failure:\n{self}")


class ComparisonFailure(AssertionFailure):
    """Equality failure between two strings; keeps both sides for diffing tools."""

    def __init__(self, facts: Sequence[Fact], expected: str, actual: str, subject: str | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(facts, subject=subject)


class MultipleFailuresError(AssertionError):
    """Raised at the end of an ``expect()`` block that collected failures."""

    def __init__(self, failures: Sequence[AssertionFailure]):
        self.failures = list(failures)
        count = len(self.failures)
        noun = "expectation" if count == 1 else "expectations"
        parts = [f"{count} {noun} failed:"]
        for index, failure in enumerate(self.failures, start=1):
            body = str(failure).replace("\n", "\n    ")
            parts.append(f"  {index}. {body}")
        super().__init__("\n".join(parts))

    def __getitem__(self, index: int) -> Any:
        return self.failures[index]

    def __len__(self) -> int:
        return len(self.failures)
