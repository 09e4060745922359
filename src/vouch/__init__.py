"""Vouch - fluent assertions with fact-based failure messages."""

from .assertions import assert_about, assert_that, assert_with_message
from .config import RenderConfig, configure, get_render_config, render_config_scope
from .errors import (
    AssertionFailure,
    ComparisonFailure,
    MissingArgumentError,
    MultipleFailuresError,
    UsageError,
)
from .expect import Expect, ExpectFailure, expect, expect_failure, expect_failure_about
from .facts import Fact, format_facts, render_value
from .failure import FailureMetadata, FailureRecord
from .regex import RegexMatcher, StandardMatcher
from .strategies import CaptureStrategy, CollectStrategy, FailureStrategy, RaiseStrategy
from .subjects import StringSubject, Subject, SubjectBuilder
from .version import __version__


__all__ = [
    # Entry points
    "assert_that",
    "assert_with_message",
    "assert_about",
    "expect",
    "expect_failure",
    "expect_failure_about",
    "Expect",
    "ExpectFailure",
    # Subjects
    "Subject",
    "StringSubject",
    "SubjectBuilder",
    # Failures
    "Fact",
    "FailureMetadata",
    "FailureRecord",
    "AssertionFailure",
    "ComparisonFailure",
    "MultipleFailuresError",
    "UsageError",
    "MissingArgumentError",
    "format_facts",
    "render_value",
    # Strategies
    "FailureStrategy",
    "RaiseStrategy",
    "CollectStrategy",
    "CaptureStrategy",
    # Regex
    "RegexMatcher",
    "StandardMatcher",
    # Config
    "RenderConfig",
    "configure",
    "get_render_config",
    "render_config_scope",
    "__version__",
]
