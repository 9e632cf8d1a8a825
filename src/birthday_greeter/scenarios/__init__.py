"""Given/When/Then stages driven by quoted literals in scenario titles.

Contents:
    * :mod:`.context` - Per-case :class:`ScenarioContext` and :class:`ScenarioTitles`
    * :mod:`.titles` - Quoted-literal extraction from titles
    * :mod:`.given` - Precondition stages
    * :mod:`.when` - Action stage
    * :mod:`.then` - Outcome stages
    * :mod:`.errors` - Harness exception types

System Role:
    Runner-agnostic. A runner (see :mod:`birthday_greeter.adapters.runner`)
    creates the context and supplies the titles for each stage it calls.
"""

from __future__ import annotations

from . import given, then, when
from .context import ScenarioContext, ScenarioTitles, Stage
from .errors import AssertionMismatchError, MalformedScenarioTitleError
from .titles import first_quoted_literal

__all__ = [
    "AssertionMismatchError",
    "MalformedScenarioTitleError",
    "ScenarioContext",
    "ScenarioTitles",
    "Stage",
    "first_quoted_literal",
    "given",
    "then",
    "when",
]
