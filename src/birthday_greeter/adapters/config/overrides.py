"""``--set SECTION.KEY=VALUE`` overrides layered on top of a loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` argument."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` splits path from value, so values may contain ``=``.

    Raises:
        ValueError: On a missing ``=``, a path without a dot, or empty path parts.

    Examples:
        >>> parse_override("greeting.default_language=Deutsch")
        ConfigOverride(section='greeting', key_path=('default_language',), value='Deutsch')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, keeping the plain string when it is not JSON.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("42")
        42
        >>> coerce_value('["English", "Deutsch"]')
        ['English', 'Deutsch']
        >>> coerce_value("Deutsch")
        'Deutsch'
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _merge_into(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged in.

    The original Config is returned unchanged when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Example:
        >>> cfg = Config({"greeting": {"default_language": "English"}}, {})
        >>> apply_overrides(cfg, ("greeting.default_language=Deutsch",))["greeting"]["default_language"]
        'Deutsch'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
