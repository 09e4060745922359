"""Shared fixtures for unit tests."""

import pytest

from vouch.config import reset_config
from vouch.subjects import StringSubject


@pytest.fixture(autouse=True)
def clean_config():
    """Restore the default render config before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def null_string():
    """Build a string subject around None through the given builder."""

    def build(builder):
        return builder.about(StringSubject).that(None)

    return build
