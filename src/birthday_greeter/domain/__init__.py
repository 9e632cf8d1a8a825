"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The birthday greeting function
    * :mod:`.enums` - Domain enumerations (Language, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    GREETING_TEMPLATES,
    SUPPORTED_LANGUAGES,
    wish_happy_birthday,
)
from .enums import Language, OutputFormat
from .errors import UNSUPPORTED_LANGUAGE_MESSAGE, UnsupportedLanguageError

__all__ = [
    # Behaviors
    "GREETING_TEMPLATES",
    "SUPPORTED_LANGUAGES",
    "wish_happy_birthday",
    # Enums
    "Language",
    "OutputFormat",
    # Errors
    "UNSUPPORTED_LANGUAGE_MESSAGE",
    "UnsupportedLanguageError",
]
