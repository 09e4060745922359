"""Failure metadata carried by subjects and the record attached to each failure."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, replace
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, SerializationInfo, field_serializer

from vouch.facts import Fact, fact, simple_fact

logger = logging.getLogger(__name__)

_INTERNAL_PREFIXES = ("vouch.", "pydantic")


@dataclass(frozen=True, slots=True)
class FailureMetadata:
    """Context a subject needs to describe its failures.

    Attributes
    ----------
    messages
        User-supplied lines printed before every other fact.
    name
        Display name given through ``named()``.
    value_of
        Derivation path of a nested subject, e.g. ``string.length()``.
    root_label
        Label of the outermost subject in a derivation chain.
    root_actual
        Actual value of the outermost subject in a derivation chain.
    """

    messages: tuple[str, ...] = ()
    name: str | None = None
    value_of: str | None = None
    root_label: str | None = None
    root_actual: Any = None

    def with_message(self, message: str) -> FailureMetadata:
        return replace(self, messages=(*self.messages, message))

    def named(self, name: str) -> FailureMetadata:
        return replace(self, name=name)

    def derive(self, path: str, label: str, actual: Any) -> FailureMetadata:
        """Metadata for a subject computed from the subject described by ``self``."""
        if self.root_label is None:
            root_label, root_actual = label, actual
        else:
            root_label, root_actual = self.root_label, self.root_actual
        return FailureMetadata(
            messages=self.messages,
            value_of=f"{label}.{path}",
            root_label=root_label,
            root_actual=root_actual,
        )

    def context_facts(self) -> tuple[list[Fact], list[Fact]]:
        """Facts placed before and after the predicate facts."""
        head = [simple_fact(message) for message in self.messages]
        if self.name is not None:
            head.append(Fact(key="value of", value=self.name))
        elif self.value_of is not None:
            head.append(Fact(key="value of", value=self.value_of))

        tail = []
        if self.root_label is not None:
            tail.append(fact(f"{self.root_label} was", self.root_actual))
        return head, tail


class FailureRecord(BaseModel):
    """Serializable description of one reported failure.

    ``assertion_name`` and ``test_name`` are filled from the call stack when
    not given: the first is the public predicate that failed, the second the
    nearest enclosing ``test*`` function.
    """

    record_id: UUID = Field(default_factory=uuid4)
    subject: str | None = None
    assertion_name: str | None = None
    test_name: str | None = None
    facts: list[Fact] = Field(default_factory=list)

    @field_serializer("facts")
    def truncate_fact_values(self, facts: list[Fact], info: SerializationInfo) -> list[dict[str, str | None]]:
        """Truncate fact values to 50 characters when the ``truncate`` context flag is set."""
        ctx = info.context or {}
        dumped = []
        for f in facts:
            value = f.value
            if ctx.get("truncate") and value is not None and len(value) > 50:
                value = value[:50] + "..."
            dumped.append({"key": f.key, "value": value})
        return dumped

    def model_post_init(self, __context) -> None:
        if self.assertion_name and self.test_name:
            return

        frame = inspect.currentframe()
        if frame is None:
            logger.warning("No frame found for assertion_name and test_name")
            return

        frame = frame.f_back
        predicate = None
        while frame:
            module_name = frame.f_globals.get("__name__", "")
            if not module_name.startswith(_INTERNAL_PREFIXES):
                break
            func_name = frame.f_code.co_name
            if module_name.startswith("vouch.subjects") and not func_name.startswith(("_", "wrapper")):
                predicate = func_name
            frame = frame.f_back

        if self.assertion_name is None:
            self.assertion_name = predicate

        while frame and self.test_name is None:
            func_name = frame.f_code.co_name
            if func_name.startswith("test"):
                self.test_name = func_name
            frame = frame.f_back

    def __repr__(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True, context={"truncate": True})
