"""Layered configuration loading for the greeter CLI.

Wraps :func:`lib_layered_config.read_config` with the package identity from
``__init__conf__`` and the bundled ``defaultconfig.toml``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from birthday_greeter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Config loader that also exposes ``cache_clear`` for tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject profile names that are empty, too long, or escape the config tree.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` that seeds every lookup.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _read_cached(*, profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration (defaults → app → host → user → dotenv → env).

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory where ``.env`` discovery starts. Defaults to the
            current working directory.

    Returns:
        Immutable configuration with provenance tracking. Results are cached
        per ``(profile, start_dir)`` for the life of the process.

    Example:
        >>> get_config().get("greeting.default_language")
        'English'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_cached(profile=profile, start_dir=start_dir)


_get_config.cache_clear = _read_cached.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
