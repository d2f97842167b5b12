"""Static package metadata and configuration identifiers.

Values here must stay in sync with ``pyproject.toml``; ``tests/test_metadata.py``
guards against drift.

Contents:
    * Package metadata constants (``name``, ``title``, ``version`` ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - human-readable metadata dump used by ``sortkit info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "sortkit"
title: Final[str] = "Composable sort descriptors: build ordering predicates and combine them lexicographically"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://pypi.org/project/sortkit/"
author: Final[str] = "sortkit contributors"
author_email: Final[str] = ""
shell_command: Final[str] = "sortkit"

#: Vendor directory on macOS/Windows (``Library/Application Support/<vendor>/<app>``).
LAYEREDCONF_VENDOR: Final[str] = "sortkit"
#: Application directory on macOS/Windows.
LAYEREDCONF_APP: Final[str] = "sortkit"
#: Linux XDG slug (``~/.config/<slug>/``).
LAYEREDCONF_SLUG: Final[str] = "sortkit"


def print_info() -> None:
    """Print the package metadata as aligned ``key = value`` lines.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for sortkit:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
