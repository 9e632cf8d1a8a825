"""Extract the quoted literal a scenario title carries."""

from __future__ import annotations

import re
from typing import Final

from .errors import MalformedScenarioTitleError

_QUOTED_LITERAL: Final[re.Pattern[str]] = re.compile(r'"(.+?)"')


def first_quoted_literal(title: str) -> str:
    """Return the text between the first pair of double quotes in ``title``.

    The match is left-most and non-greedy and needs at least one character
    between the quotes.

    Raises:
        MalformedScenarioTitleError: If ``title`` has no quoted segment.

    Examples:
        >>> first_quoted_literal('Given a name "Lisky" and extra "noise"')
        'Lisky'
        >>> first_quoted_literal('Then it should return "Happy birthday, Lisky!"')
        'Happy birthday, Lisky!'
    """
    match = _QUOTED_LITERAL.search(title)
    if match is None:
        raise MalformedScenarioTitleError(title)
    return match.group(1)


__all__ = ["first_quoted_literal"]
