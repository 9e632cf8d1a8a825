"""Type-safe domain enums for greeting languages and output formats."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Languages the greeting function knows how to speak.

    Values are the exact, case-sensitive names callers pass in.

    Attributes:
        ENGLISH: English greeting.
        DEUTSCH: German greeting.

    Example:
        >>> Language.DEUTSCH.value
        'Deutsch'
        >>> Language.ENGLISH == "English"
        True
    """

    ENGLISH = "English"
    DEUTSCH = "Deutsch"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Language",
    "OutputFormat",
]
