"""Action stage: call the greeting function and record what happened."""

from __future__ import annotations

import logging

from birthday_greeter.domain.behaviors import wish_happy_birthday
from birthday_greeter.domain.errors import UnsupportedLanguageError

from .context import ScenarioContext, ScenarioTitles

logger = logging.getLogger(__name__)


def wish_happy_birthday_is_called_with_the_name_and_the_language(
    context: ScenarioContext, titles: ScenarioTitles
) -> None:
    """Invoke the greeting with the context's name and language.

    The returned greeting lands in ``context.return_value``; an
    :class:`UnsupportedLanguageError` lands in ``context.error`` instead of
    propagating, so the outcome stage can assert on it.

    Raises:
        ValueError: If a precondition stage did not populate name or language.
    """
    if context.name is None or context.language is None:
        raise ValueError("Scenario is missing a name or language precondition")
    try:
        context.return_value = wish_happy_birthday(context.name, context.language)
    except UnsupportedLanguageError as exc:
        logger.debug("Captured greeting failure", extra={"language": exc.language, "error": str(exc)})
        context.error = exc


__all__ = ["wish_happy_birthday_is_called_with_the_name_and_the_language"]
