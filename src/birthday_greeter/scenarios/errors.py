"""Harness exceptions raised while wiring or checking a scenario."""

from __future__ import annotations


class MalformedScenarioTitleError(ValueError):
    """A scenario title carries no double-quoted literal.

    Signals a mistake in how the scenario was written, not a domain failure,
    so it is never captured by the action stage.

    Example:
        >>> err = MalformedScenarioTitleError("Given a name Lisky")
        >>> err.title
        'Given a name Lisky'
        >>> str(err)
        "No quoted literal in scenario title: 'Given a name Lisky'"
    """

    def __init__(self, title: str) -> None:
        super().__init__(f"No quoted literal in scenario title: {title!r}")
        self.title = title


class AssertionMismatchError(AssertionError):
    """An outcome stage observed a value different from the expected literal.

    Subclasses :class:`AssertionError` so pytest reports it as a plain test
    failure with both values in the message.

    Example:
        >>> err = AssertionMismatchError(expected="Happy birthday, Lisky!", actual=None)
        >>> str(err)
        "None != 'Happy birthday, Lisky!'"
    """

    def __init__(self, *, expected: str, actual: str | None) -> None:
        super().__init__(f"{actual!r} != {expected!r}")
        self.expected = expected
        self.actual = actual


__all__ = [
    "AssertionMismatchError",
    "MalformedScenarioTitleError",
]
