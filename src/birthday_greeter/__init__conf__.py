"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` so the CLI can report
metadata without importing ``importlib.metadata`` at startup.

Contents:
    * Identity constants (:data:`name`, :data:`title`, :data:`version`, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "birthday_greeter"
title = "Birthday greetings with Given/When/Then scenario fixtures"
version = "1.0.0"
homepage = "https://github.com/birthday-greeter/birthday_greeter"
author = "birthday-greeter maintainers"
author_email = "maintainers@birthday-greeter.invalid"
shell_command = "birthday-greeter"

#: Vendor, application, and slug identifiers for configuration file discovery.
LAYEREDCONF_VENDOR: str = "birthday-greeter"
LAYEREDCONF_APP: str = "Birthday Greeter"
LAYEREDCONF_SLUG: str = "birthday-greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for birthday_greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
