"""Shared pytest fixtures for CLI, configuration, and module-entry tests.

The ``scenario`` fixture used by the Given/When/Then suites is provided by
the package's own pytest plugin (``birthday_greeter.adapters.runner.pytest_bridge``).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from birthday_greeter.composition import AppServices


def _load_dotenv() -> None:
    """Load a project-level .env when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when the output must not contain log lines, which
    lib_log_rich writes to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for CLI invocations that need no injection."""
    from birthday_greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset the lib_cli_exit_tools traceback flags and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test so it reads fresh layers."""
    from birthday_greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo entries for provenance-aware display tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory for ``cli_runner.invoke(obj=...)``.

    Only the configuration loader is replaced; every other service is the
    production one.

    Example:
        def test_greet_default(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"greeting": {"default_language": "Deutsch"}})
            result = cli_runner.invoke(cli, ["greet", "Lisky"], obj=factory)
    """
    from birthday_greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_greeting_config=prod.load_greeting_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def profile_capturing_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any], list[str | None]], Callable[[], AppServices]]:
    """Like ``config_cli_context`` but records every profile passed to get_config."""
    from birthday_greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any], captured: list[str | None]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured.append(profile)
            return config

        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            load_greeting_config=prod.load_greeting_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def logging_runtime() -> None:
    """Start the lib_log_rich runtime with built-in defaults.

    The in-memory wiring never initialises logging, but commands still bind
    job context on the runtime.
    """
    from birthday_greeter.adapters.logging.setup import init_logging

    init_logging(Config({}, {}))


@pytest.fixture
def inject_test_services(logging_runtime: None) -> Callable[[], AppServices]:
    """Return ``build_testing`` for CLI runs on in-memory adapters only.

    Example:
        def test_greet_in_memory(cli_runner, inject_test_services) -> None:
            result = cli_runner.invoke(cli, ["greet", "Lisky"], obj=inject_test_services)
    """
    from birthday_greeter.composition import build_testing

    return build_testing
