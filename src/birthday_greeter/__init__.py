"""Public package surface: the greeting function, scenario stages, and config.

- Domain exports: :func:`wish_happy_birthday` and its error type
- Scenario harness: :mod:`birthday_greeter.scenarios`
- Composition exports: :func:`get_config`
- Metadata: :func:`print_info`
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain.behaviors import SUPPORTED_LANGUAGES, wish_happy_birthday
from .domain.errors import UnsupportedLanguageError

__all__ = [
    "SUPPORTED_LANGUAGES",
    "UnsupportedLanguageError",
    "get_config",
    "print_info",
    "wish_happy_birthday",
]
