"""Given/When/Then stories for wish_happy_birthday.

Each nested class is a scenario group: its docstring is the title the
precondition reads its literal from, and ``stages`` lists what runs before
every test inside it. A test's docstring carries the expected literal.
"""

from __future__ import annotations

import pytest

from birthday_greeter.adapters.runner.pytest_bridge import ScenarioCase
from birthday_greeter.scenarios import given, then, when

pytestmark = pytest.mark.os_agnostic

WHEN_CALLED = when.wish_happy_birthday_is_called_with_the_name_and_the_language


class DescribeWishHappyBirthday:
    """wishHappyBirthday"""

    class GivenANameLisky:
        """Given a name "Lisky" """

        stages = (given.a_name,)

        class GivenALanguageEnglish:
            """Given a language "English" """

            stages = (given.a_language,)

            class WhenCalled:
                """When wishHappyBirthday is called with the name and the language"""

                stages = (WHEN_CALLED,)

                def test_it_returns_the_english_greeting(self, scenario: ScenarioCase) -> None:
                    """Then it should return "Happy birthday, Lisky!" """
                    scenario.then(then.it_should_return)

        class GivenALanguageDeutsch:
            """Given a language "Deutsch" """

            stages = (given.a_language,)

            class WhenCalled:
                """When wishHappyBirthday is called with the name and the language"""

                stages = (WHEN_CALLED,)

                def test_it_returns_the_german_greeting(self, scenario: ScenarioCase) -> None:
                    """Then it should return "Herzlichen Glückwunsch zum Geburtstag, Lisky!" """
                    scenario.then(then.it_should_return)

    class GivenANameSatoshi:
        """Given a name "Satoshi" """

        stages = (given.a_name,)

        class GivenALanguageEnglish:
            """Given a language "English" """

            stages = (given.a_language,)

            class WhenCalled:
                """When wishHappyBirthday is called with the name and the language"""

                stages = (WHEN_CALLED,)

                def test_it_returns_the_english_greeting(self, scenario: ScenarioCase) -> None:
                    """Then it should return "Happy birthday, Satoshi!" """
                    scenario.then(then.it_should_return)

        class GivenALanguageDeutsch:
            """Given a language "Deutsch" """

            stages = (given.a_language,)

            class WhenCalled:
                """When wishHappyBirthday is called with the name and the language"""

                stages = (WHEN_CALLED,)

                def test_it_returns_the_german_greeting(self, scenario: ScenarioCase) -> None:
                    """Then it should return "Herzlichen Glückwunsch zum Geburtstag, Satoshi!" """
                    scenario.then(then.it_should_return)

        class GivenALanguageFrench:
            """Given a language "French" """

            stages = (given.a_language,)

            class WhenCalled:
                """When wishHappyBirthday is called with the name and the language"""

                stages = (WHEN_CALLED,)

                def test_it_throws_an_unsupported_language_error(self, scenario: ScenarioCase) -> None:
                    """Then it should throw an error "Unsupported language" """
                    scenario.then(then.it_should_throw_an_error)

                def test_it_records_no_return_value(self, scenario: ScenarioCase) -> None:
                    """Then nothing is returned"""
                    assert scenario.context.return_value is None
                    assert scenario.context.error is not None


class DescribeScenarioIsolation:
    """Each case gets its own context"""

    class GivenANameAda:
        """Given a name "Ada" """

        stages = (given.a_name,)

        def test_context_starts_without_language_or_result(self, scenario: ScenarioCase) -> None:
            """Then only the name is set"""
            assert scenario.context.name == "Ada"
            assert scenario.context.language is None
            assert scenario.context.return_value is None
            assert scenario.context.error is None

        def test_mutating_one_case_does_not_leak_into_the_next(self, scenario: ScenarioCase) -> None:
            """Then a fresh context is seen again"""
            assert scenario.context.language is None
            scenario.context.language = "English"
