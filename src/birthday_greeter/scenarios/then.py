"""Outcome stages: compare the recorded result with the test title's literal."""

from __future__ import annotations

from .context import ScenarioContext, ScenarioTitles
from .errors import AssertionMismatchError
from .titles import first_quoted_literal


def it_should_return(context: ScenarioContext, titles: ScenarioTitles) -> None:
    """Assert the greeting equals the literal in ``Then it should return "..."``.

    Raises:
        AssertionMismatchError: If the return value differs or none was recorded.
    """
    expected = first_quoted_literal(titles.current_test_title)
    if context.return_value != expected:
        raise AssertionMismatchError(expected=expected, actual=context.return_value)


def it_should_throw_an_error(context: ScenarioContext, titles: ScenarioTitles) -> None:
    """Assert the captured error's message equals the literal in the test title.

    Raises:
        AssertionMismatchError: If the message differs or no error was captured.
    """
    expected = first_quoted_literal(titles.current_test_title)
    actual = str(context.error) if context.error is not None else None
    if actual != expected:
        raise AssertionMismatchError(expected=expected, actual=actual)


__all__ = ["it_should_return", "it_should_throw_an_error"]
