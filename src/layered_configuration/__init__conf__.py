"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by hand; the metadata tests
fail when they drift apart.

Contents:
    * Module-level constants describing the distribution.
    * :func:`print_info` rendering the constants for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "layered_configuration"
#: Human-readable summary shown in CLI help output.
title = "Prioritized configuration layers with path-addressed reads and writes"
#: Current release version.
version = "0.1.0"
#: Repository homepage.
homepage = "https://github.com/bitranox/layered_configuration"
#: Author attribution.
author = "bitranox"
#: Contact email surfaced in CLI help.
author_email = "bitranox@gmail.com"
#: Console-script name published by the package.
shell_command = "layconf"

#: Vendor, application, and slug identifiers for the tool's own
#: lib_layered_config directories (e.g. ``~/.config/layered-configuration``).
LAYEREDCONF_VENDOR: str = "bitranox"
LAYEREDCONF_APP: str = "Layered Configuration"
LAYEREDCONF_SLUG: str = "layered-configuration"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for layered_configuration:
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
