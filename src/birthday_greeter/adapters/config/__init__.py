"""Configuration adapter - loading, display, overrides, and typed sections.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered configuration loading
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.greeting` - Pydantic model for the ``[greeting]`` section
"""

from __future__ import annotations

from .display import display_config
from .greeting import GreetingConfig, load_greeting_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "GreetingConfig",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeting_config",
]
