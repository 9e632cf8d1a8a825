"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

UNSUPPORTED_LANGUAGE_MESSAGE = "Unsupported language"


class UnsupportedLanguageError(ValueError):
    """Greeting requested in a language outside the supported set.

    The message is always ``"Unsupported language"`` so callers and scenario
    assertions can rely on it; the rejected value is kept on
    :attr:`language` for diagnostics.

    Example:
        >>> from birthday_greeter.domain.errors import UnsupportedLanguageError
        >>> err = UnsupportedLanguageError("French")
        >>> str(err)
        'Unsupported language'
        >>> err.language
        'French'
    """

    def __init__(self, language: str) -> None:
        super().__init__(UNSUPPORTED_LANGUAGE_MESSAGE)
        self.language = language


__all__ = [
    "UNSUPPORTED_LANGUAGE_MESSAGE",
    "UnsupportedLanguageError",
]
