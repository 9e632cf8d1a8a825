"""Typed view of the ``[greeting]`` configuration section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from birthday_greeter.domain.enums import Language


class GreetingConfig(BaseModel):
    """Validated ``[greeting]`` settings.

    The default language is only checked for being a non-empty string; an
    unsupported value surfaces as the same error a user would get from
    ``greet --language``.

    Example:
        >>> GreetingConfig().default_language
        'English'
        >>> GreetingConfig.model_validate({"default_language": "Deutsch"}).default_language
        'Deutsch'
    """

    default_language: str = Field(default=Language.ENGLISH.value, min_length=1)

    model_config = ConfigDict(extra="ignore", frozen=True)


def load_greeting_config(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Build a :class:`GreetingConfig` from a full configuration mapping.

    Args:
        config_dict: Merged configuration, e.g. ``Config.as_dict()``.

    Raises:
        pydantic.ValidationError: If the section holds invalid values.

    Example:
        >>> load_greeting_config({}).default_language
        'English'
    """
    section = config_dict.get("greeting") or {}
    return GreetingConfig.model_validate(section)


__all__ = ["GreetingConfig", "load_greeting_config"]
