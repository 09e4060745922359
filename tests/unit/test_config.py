"""Tests for vouch.config module."""

import pytest
from pydantic import ValidationError

from vouch import RenderConfig, configure, expect_failure, get_render_config, render_config_scope


def test_defaults():
    config = get_render_config()

    assert config.max_value_length == 500
    assert config.align_keys is True


def test_configure_changes_default():
    configure(max_value_length=20)

    assert get_render_config().max_value_length == 20
    assert get_render_config().align_keys is True


def test_configure_validates():
    with pytest.raises(ValidationError):
        configure(max_value_length=3)

    with pytest.raises(ValidationError):
        configure(colour=True)


def test_scope_overrides_and_restores():
    configure(max_value_length=100)

    with render_config_scope(RenderConfig(max_value_length=12)) as scoped:
        assert get_render_config() is scoped

    assert get_render_config().max_value_length == 100


def test_scope_applies_to_failure_messages():
    with render_config_scope(RenderConfig(max_value_length=12)):
        failure = expect_failure(lambda w: w.that("x" * 40).is_empty())

    assert failure.value_of("but was") == "xxxxxxxxx..."
