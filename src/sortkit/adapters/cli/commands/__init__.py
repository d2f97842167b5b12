"""CLI command implementations.

Contents:
    * Info commands from :mod:`.info`
    * Config commands from :mod:`.config`
    * Sorting commands from :mod:`.sort_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_fail, cli_info
from .sort_cmd import cli_demo, cli_sort

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_fail",
    "cli_info",
    "cli_sort",
]
