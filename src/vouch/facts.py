"""Facts and their rendering into failure messages."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict
from rich.pretty import pretty_repr

from vouch.config import get_render_config


class Fact(BaseModel):
    """A labeled piece of diagnostic information.

    Attributes
    ----------
    key
        Label such as ``"expected to contain"`` or ``"but was"``.
    value
        Rendered value, or None for a bare statement.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.key
        return f"{self.key}: {self.value}"


def fact(key: str, value: Any) -> Fact:
    """Build a fact whose value is rendered with :func:`render_value`."""
    return Fact(key=key, value=render_value(value))


def simple_fact(key: str) -> Fact:
    return Fact(key=key)


def _truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def render_value(value: Any) -> str:
    """Render a value the way it appears after ``key:`` in a message."""
    config = get_render_config()
    if value is None:
        text = "None"
    elif isinstance(value, str):
        text = value
    elif isinstance(value, re.Pattern):
        text = value.pattern
    elif isinstance(value, type):
        text = value.__qualname__ if value.__module__ == "builtins" else f"{value.__module__}.{value.__qualname__}"
    else:
        text = pretty_repr(value, max_string=config.max_value_length)
    return _truncate(text, config.max_value_length)


def format_facts(facts: Iterable[Fact]) -> str:
    """Format facts into one multi-line message.

    Single-line values are printed as ``key: value`` with the colons aligned.
    Multi-line values go on the following lines, indented by four spaces.
    """
    facts = list(facts)
    config = get_render_config()

    width = 0
    if config.align_keys:
        width = max(
            (len(f.key) for f in facts if f.value is not None and "\n" not in f.value),
            default=0,
        )

    lines: list[str] = []
    for f in facts:
        if f.value is None:
            lines.append(f.key)
        elif "\n" in f.value:
            lines.append(f"{f.key}:")
            lines.extend(f"    {line}" for line in f.value.splitlines())
        else:
            lines.append(f"{f.key.ljust(width)}: {f.value}")
    return "\n".join(lines)
