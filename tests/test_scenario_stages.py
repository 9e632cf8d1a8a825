"""Given/When/Then stages exercised directly against a ScenarioContext."""

from __future__ import annotations

import pytest

from birthday_greeter.scenarios import (
    AssertionMismatchError,
    MalformedScenarioTitleError,
    ScenarioContext,
    ScenarioTitles,
    given,
    then,
    when,
)
from birthday_greeter.scenarios.errors import AssertionMismatchError as MismatchFromModule


def _titles(group: str = "", test: str = "") -> ScenarioTitles:
    return ScenarioTitles(current_group_title=group, current_test_title=test)


# ======================== Precondition stages ========================


@pytest.mark.os_agnostic
def test_a_name_reads_the_group_title() -> None:
    """a_name stores the group's literal, not the test's."""
    context = ScenarioContext()

    given.a_name(context, _titles(group='Given a name "Lisky"', test='Then it should return "other"'))

    assert context.name == "Lisky"
    assert context.language is None


@pytest.mark.os_agnostic
def test_a_language_reads_the_group_title() -> None:
    """a_language stores the group's literal as the language."""
    context = ScenarioContext()

    given.a_language(context, _titles(group='Given a language "Deutsch"'))

    assert context.language == "Deutsch"
    assert context.name is None


@pytest.mark.os_agnostic
def test_precondition_without_literal_raises_malformed_title() -> None:
    """A precondition group titled without quotes is a harness error."""
    with pytest.raises(MalformedScenarioTitleError):
        given.a_name(ScenarioContext(), _titles(group="Given a name Lisky"))


# ======================== Action stage ========================


@pytest.mark.os_agnostic
def test_action_records_the_greeting() -> None:
    """A supported language leaves the greeting in return_value and no error."""
    context = ScenarioContext(name="Lisky", language="English")

    when.wish_happy_birthday_is_called_with_the_name_and_the_language(context, _titles())

    assert context.return_value == "Happy birthday, Lisky!"
    assert context.error is None


@pytest.mark.os_agnostic
def test_action_captures_unsupported_language_instead_of_raising() -> None:
    """The domain failure is stored, never propagated."""
    context = ScenarioContext(name="Satoshi", language="French")

    when.wish_happy_birthday_is_called_with_the_name_and_the_language(context, _titles())

    assert context.return_value is None
    assert str(context.error) == "Unsupported language"


@pytest.mark.os_agnostic
def test_action_without_preconditions_raises() -> None:
    """Calling the action before the preconditions is a harness error, not a captured failure."""
    context = ScenarioContext(name="Lisky")

    with pytest.raises(ValueError, match="missing a name or language"):
        when.wish_happy_birthday_is_called_with_the_name_and_the_language(context, _titles())

    assert context.error is None


# ======================== Outcome stages ========================


@pytest.mark.os_agnostic
def test_it_should_return_passes_on_equal_value() -> None:
    """Equal strings pass silently."""
    context = ScenarioContext(return_value="Happy birthday, Lisky!")

    then.it_should_return(context, _titles(test='Then it should return "Happy birthday, Lisky!"'))


@pytest.mark.os_agnostic
def test_it_should_return_reports_mismatch() -> None:
    """A different value fails with both values attached."""
    context = ScenarioContext(return_value="Happy birthday, Satoshi!")

    with pytest.raises(AssertionMismatchError) as exc_info:
        then.it_should_return(context, _titles(test='Then it should return "Happy birthday, Lisky!"'))

    assert exc_info.value.expected == "Happy birthday, Lisky!"
    assert exc_info.value.actual == "Happy birthday, Satoshi!"


@pytest.mark.os_agnostic
def test_it_should_return_fails_when_an_error_was_captured() -> None:
    """A captured failure means nothing was returned."""
    context = ScenarioContext(name="Satoshi", language="French")
    when.wish_happy_birthday_is_called_with_the_name_and_the_language(context, _titles())

    with pytest.raises(AssertionMismatchError) as exc_info:
        then.it_should_return(context, _titles(test='Then it should return "Happy birthday, Satoshi!"'))

    assert exc_info.value.actual is None


@pytest.mark.os_agnostic
def test_it_should_throw_an_error_passes_on_matching_message() -> None:
    """The captured error's message is compared with the literal."""
    context = ScenarioContext(name="Satoshi", language="French")
    when.wish_happy_birthday_is_called_with_the_name_and_the_language(context, _titles())

    then.it_should_throw_an_error(context, _titles(test='Then it should throw an error "Unsupported language"'))


@pytest.mark.os_agnostic
def test_it_should_throw_an_error_reports_different_message() -> None:
    """A differing message fails with both messages attached."""
    context = ScenarioContext(error=ValueError("Something else"))

    with pytest.raises(MismatchFromModule) as exc_info:
        then.it_should_throw_an_error(context, _titles(test='Then it should throw an error "Unsupported language"'))

    assert exc_info.value.actual == "Something else"
    assert exc_info.value.expected == "Unsupported language"


@pytest.mark.os_agnostic
def test_it_should_throw_an_error_fails_when_nothing_was_raised() -> None:
    """No captured error is a mismatch, reported as None."""
    context = ScenarioContext(return_value="Happy birthday, Lisky!")

    with pytest.raises(AssertionMismatchError) as exc_info:
        then.it_should_throw_an_error(context, _titles(test='Then it should throw an error "Unsupported language"'))

    assert exc_info.value.actual is None


@pytest.mark.os_agnostic
def test_outcome_without_literal_raises_malformed_title() -> None:
    """An outcome test titled without quotes is a harness error, not a mismatch."""
    with pytest.raises(MalformedScenarioTitleError):
        then.it_should_return(ScenarioContext(return_value="x"), _titles(test="Then it should return x"))
