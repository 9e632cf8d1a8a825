"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.greeting import load_greeting_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadGreetingConfig,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_greeting_config: LoadGreetingConfig = load_greeting_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_greeting_config: LoadGreetingConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire the real adapters."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_greeting_config=load_greeting_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire the in-memory adapters: empty config, built-in greeting defaults, no logging runtime."""
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_greeting_config_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_greeting_config=load_greeting_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "init_logging",
    "load_greeting_config",
]
