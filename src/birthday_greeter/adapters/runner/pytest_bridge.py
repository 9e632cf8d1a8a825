"""pytest plugin that drives scenario stages declared on nested test classes.

A scenario group is a test class: its docstring is the group title and its
``stages`` attribute lists the precondition or action stages it declares. A
leaf test's docstring is its own title. Before each leaf test the
:func:`scenario` fixture walks the enclosing classes from the outermost
inwards, running every declared stage with that class's title as the
current group title.

Example::

    class DescribeGreeting:
        class GivenAName:
            '''Given a name "Lisky"'''

            stages = (given.a_name,)

            ...

                def test_returns_the_english_greeting(self, scenario: ScenarioCase) -> None:
                    '''Then it should return "Happy birthday, Lisky!"'''
                    scenario.then(then.it_should_return)

Registered through the ``pytest11`` entry point, so the fixture is available
to any test suite once the package is installed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import pytest

from birthday_greeter.scenarios.context import ScenarioContext, ScenarioTitles, Stage

logger = logging.getLogger(__name__)

#: Class attribute naming the stages a scenario group declares.
STAGES_ATTRIBUTE = "stages"


@dataclass(slots=True)
class ScenarioCase:
    """One leaf test's scenario after its preconditions and action ran.

    Attributes:
        context: The case's own context, already populated by the group stages.
        group_title: Title of the innermost enclosing group.
        test_title: Title of the leaf test.
    """

    context: ScenarioContext
    group_title: str
    test_title: str

    @property
    def titles(self) -> ScenarioTitles:
        """Titles as seen from the leaf test."""
        return ScenarioTitles(current_group_title=self.group_title, current_test_title=self.test_title)

    def then(self, outcome: Stage) -> None:
        """Run an outcome stage against this case's context and titles."""
        outcome(self.context, self.titles)


def title_of(obj: object) -> str:
    """Return the stripped docstring of a test class or function."""
    return (getattr(obj, "__doc__", None) or "").strip()


def declared_stages(group: type) -> Sequence[Stage]:
    """Return the stages declared directly on ``group``, ignoring inherited ones."""
    return tuple(vars(group).get(STAGES_ATTRIBUTE, ()))


def run_group_stages(groups: Sequence[type], test_title: str) -> ScenarioCase:
    """Run the stages of ``groups`` (outermost first) against a fresh context.

    Exceptions raised by a stage propagate and abort the case.

    Example:
        >>> from birthday_greeter.scenarios import given
        >>> class GivenAName:
        ...     '''Given a name "Lisky"'''
        ...     stages = (given.a_name,)
        >>> run_group_stages([GivenAName], 'Then it should return "x"').context.name
        'Lisky'
    """
    context = ScenarioContext()
    group_title = ""
    for group in groups:
        group_title = title_of(group)
        titles = ScenarioTitles(current_group_title=group_title, current_test_title=test_title)
        for stage in declared_stages(group):
            logger.debug("Running scenario stage", extra={"stage": getattr(stage, "__name__", repr(stage))})
            stage(context, titles)
    return ScenarioCase(context=context, group_title=group_title, test_title=test_title)


@pytest.fixture
def scenario(request: pytest.FixtureRequest) -> ScenarioCase:
    """Provide a fresh :class:`ScenarioCase` with the group stages already run."""
    groups = [node.obj for node in request.node.listchain() if isinstance(node, pytest.Class)]
    return run_group_stages(groups, title_of(request.function))


__all__ = [
    "STAGES_ATTRIBUTE",
    "ScenarioCase",
    "declared_stages",
    "run_group_stages",
    "scenario",
    "title_of",
]
