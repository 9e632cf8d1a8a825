"""Greeting commands: wish someone a happy birthday, list supported languages.

Contents:
    * :func:`cli_greet` - Print the birthday greeting for a name.
    * :func:`cli_languages` - Print the supported languages.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from birthday_greeter.domain.behaviors import SUPPORTED_LANGUAGES, wish_happy_birthday
from birthday_greeter.domain.errors import UnsupportedLanguageError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _default_language(cli_ctx: CLIContext) -> str:
    """Read ``greeting.default_language``, exiting with CONFIG_ERROR when it is invalid."""
    try:
        greeting = cli_ctx.services.load_greeting_config(cli_ctx.config.as_dict())
    except ValidationError as exc:
        logger.error("Invalid [greeting] configuration", extra={"error": str(exc)})
        click.echo(f"Error: invalid [greeting] configuration: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return greeting.default_language


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.option(
    "--language",
    "-l",
    type=str,
    default=None,
    help=f"Greeting language ({', '.join(SUPPORTED_LANGUAGES)}). Defaults to greeting.default_language.",
)
@click.pass_context
def cli_greet(ctx: click.Context, name: str, language: str | None) -> None:
    """Wish NAME a happy birthday.

    Language names are case-sensitive. An unsupported language exits with
    code 22.
    """
    cli_ctx = get_cli_context(ctx)
    effective_language = language if language is not None else _default_language(cli_ctx)

    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet", "language": effective_language}):
        logger.info("Greeting", extra={"language": effective_language})
        try:
            greeting = wish_happy_birthday(name, effective_language)
        except UnsupportedLanguageError as exc:
            logger.warning("Rejected greeting language", extra={"language": exc.language})
            click.echo(f"Error: {exc}: {exc.language}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(greeting)


@click.command("languages", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_languages() -> None:
    """List the languages ``greet`` accepts, one per line."""
    with lib_log_rich.runtime.bind(job_id="cli-languages", extra={"command": "languages"}):
        logger.info("Listing supported languages")
        for language in SUPPORTED_LANGUAGES:
            click.echo(language)


__all__ = ["cli_greet", "cli_languages"]
