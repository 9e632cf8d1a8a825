"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadGreetingConfig,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadGreetingConfig",
]
