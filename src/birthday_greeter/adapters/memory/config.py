"""In-memory configuration adapters for tests: no filesystem, no lookups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.greeting import GreetingConfig


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Display nothing."""


def load_greeting_config_in_memory(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Return the built-in greeting defaults regardless of ``config_dict``."""
    return GreetingConfig()


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_greeting_config_in_memory",
]
