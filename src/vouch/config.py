"""Rendering configuration for failure messages."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from pydantic import BaseModel, ConfigDict, Field


class RenderConfig(BaseModel):
    """Controls how facts are rendered into a failure message.

    Attributes
    ----------
    max_value_length
        Rendered values longer than this are cut and suffixed with ``...``.
    align_keys
        Pad fact keys so that the ``:`` separators line up.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_value_length: int = Field(default=500, ge=10)
    align_keys: bool = True


_default_config = RenderConfig()

RENDER_CONFIG: ContextVar[RenderConfig | None] = ContextVar("render_config", default=None)


def get_render_config() -> RenderConfig:
    """Return the config in effect for the current context."""
    return RENDER_CONFIG.get() or _default_config


def configure(**changes) -> RenderConfig:
    """Replace the process-wide default config with validated changes."""
    global _default_config
    _default_config = RenderConfig.model_validate({**_default_config.model_dump(), **changes})
    return _default_config


def reset_config() -> None:
    global _default_config
    _default_config = RenderConfig()


@contextmanager
def render_config_scope(config: RenderConfig) -> Iterator[RenderConfig]:
    token = RENDER_CONFIG.set(config)
    try:
        yield config
    finally:
        RENDER_CONFIG.reset(token)
