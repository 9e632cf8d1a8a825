"""Per-case scenario state and the titles a runner supplies to each stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class ScenarioContext:
    """Mutable state shared by the stages of exactly one scenario.

    The runner creates a fresh instance per test case and discards it
    afterwards. After the action stage at most one of :attr:`return_value`
    and :attr:`error` is set.

    Attributes:
        name: Name captured by a precondition stage.
        language: Language captured by a precondition stage.
        return_value: Greeting returned by the action stage.
        error: Domain failure captured by the action stage.
    """

    name: str | None = None
    language: str | None = None
    return_value: str | None = None
    error: Exception | None = None


@dataclass(frozen=True, slots=True)
class ScenarioTitles:
    """Descriptions visible to a stage while it runs.

    Attributes:
        current_group_title: Title of the group that declared the stage.
        current_test_title: Title of the leaf test case being run.
    """

    current_group_title: str
    current_test_title: str


class Stage(Protocol):
    """A precondition, action, or outcome step run against one scenario."""

    def __call__(self, context: ScenarioContext, titles: ScenarioTitles) -> None: ...


__all__ = [
    "ScenarioContext",
    "ScenarioTitles",
    "Stage",
]
