"""Argument and null-actual validation shared by every predicate."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from vouch.errors import MissingArgumentError, UsageError
from vouch.facts import fact, simple_fact

F = TypeVar("F", bound=Callable[..., Any])


def non_negative(func_name: str, arg_name: str, value: Any) -> None:
    if value < 0:
        raise UsageError(f"{func_name}(): {arg_name}({value}) must be >= 0")


def predicate(
    *required: str,
    null_fact: str | None = None,
    checks: Mapping[str, Callable[[str, str, Any], None]] | None = None,
    notes: tuple[str, ...] = (),
) -> Callable[[F], F]:
    """Validate a predicate call before its body runs.

    Missing arguments and failed ``checks`` raise a usage error straight away,
    whatever the strategy. A None actual is then reported with ``null_fact``
    (paired with the first required argument, if any) and the body is skipped.

    Parameters
    ----------
    required
        Names of arguments that must not be None.
    null_fact
        Fact key reported when the actual value is None. When omitted the body
        also runs for a None actual.
    checks
        Per-argument validators called as ``check(func_name, arg_name, value)``.
    notes
        Bare facts appended after ``but was`` on the None-actual path.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            bound = signature.bind(self, *args, **kwargs)
            for name in required:
                if bound.arguments.get(name) is None:
                    raise MissingArgumentError(f"{func.__name__}() requires a non-None {name!r}")
            for name, check in (checks or {}).items():
                check(func.__name__, name, bound.arguments[name])

            if null_fact is not None and self.actual is None:
                if required:
                    first = fact(null_fact, bound.arguments[required[0]])
                else:
                    first = simple_fact(null_fact)
                self._fail([first], notes=[simple_fact(note) for note in notes])
                return None
            return func(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
