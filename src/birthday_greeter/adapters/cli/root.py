"""Root ``birthday-greeter`` command group and its global options.

Contents:
    * :func:`cli` - Root command group handling --traceback, --profile and --set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from birthday_greeter import __init__conf__
from birthday_greeter.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from birthday_greeter.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` values, turning malformed ones into a usage error."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once, start logging, and share state with subcommands.

    ``ctx.obj`` arrives as the services factory and leaves as a
    :class:`~birthday_greeter.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from birthday_greeter.composition import build_production
        >>> result = CliRunner().invoke(cli, ["greet", "Lisky"], obj=build_production)
        >>> result.output
        'Happy birthday, Lisky!\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _apply_cli_overrides(services.get_config(profile=profile), set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred: command modules import from package ancestors that import this module.
def _register_commands() -> None:
    from .commands import cli_config, cli_greet, cli_info, cli_languages

    for cmd in (cli_info, cli_greet, cli_languages, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
