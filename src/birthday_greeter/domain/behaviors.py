"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

from .enums import Language
from .errors import UnsupportedLanguageError

#: Greeting template per supported language.
GREETING_TEMPLATES: Final[dict[Language, str]] = {
    Language.ENGLISH: "Happy birthday, {name}!",
    Language.DEUTSCH: "Herzlichen Glückwunsch zum Geburtstag, {name}!",
}

#: Supported language names in declaration order.
SUPPORTED_LANGUAGES: Final[tuple[str, ...]] = tuple(language.value for language in Language)


def wish_happy_birthday(name: str, language: str) -> str:
    r"""Return the birthday greeting for ``name`` in ``language``.

    Neither argument is normalised: language matching is exact and
    case-sensitive, and ``name`` is inserted as given.

    Args:
        name: Person to greet.
        language: One of :data:`SUPPORTED_LANGUAGES`.

    Returns:
        The formatted greeting.

    Raises:
        UnsupportedLanguageError: If ``language`` is not supported.

    Example:
        >>> wish_happy_birthday("Lisky", "English")
        'Happy birthday, Lisky!'
        >>> wish_happy_birthday("Lisky", "english")
        Traceback (most recent call last):
        ...
        birthday_greeter.domain.errors.UnsupportedLanguageError: Unsupported language
    """
    if language not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(language)
    template = GREETING_TEMPLATES[Language(language)]
    return template.format(name=name)


__all__ = [
    "GREETING_TEMPLATES",
    "SUPPORTED_LANGUAGES",
    "wish_happy_birthday",
]
