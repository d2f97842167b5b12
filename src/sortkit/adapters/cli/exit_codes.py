"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    * 0-1: generic success / failure
    * 2, 13, 22: errno-derived (ENOENT, EACCES, EINVAL)
    * 78: EX_CONFIG (sysexits.h)
    * 128+N: signal N

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
