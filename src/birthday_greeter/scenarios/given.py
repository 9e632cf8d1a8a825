"""Precondition stages: seed the context from the declaring group's title."""

from __future__ import annotations

from .context import ScenarioContext, ScenarioTitles
from .titles import first_quoted_literal


def a_name(context: ScenarioContext, titles: ScenarioTitles) -> None:
    """Store the group's quoted literal as the name, e.g. ``Given a name "Lisky"``."""
    context.name = first_quoted_literal(titles.current_group_title)


def a_language(context: ScenarioContext, titles: ScenarioTitles) -> None:
    """Store the group's quoted literal as the language, e.g. ``Given a language "Deutsch"``."""
    context.language = first_quoted_literal(titles.current_group_title)


__all__ = ["a_language", "a_name"]
