"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by ``layconf``.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    * 0: success
    * 1: the queried path is undefined (``get``/``has``)
    * 2: ENOENT, a directory or file is missing
    * 13: EACCES
    * 22: EINVAL, malformed command line input
    * 78: EX_CONFIG, a layer file or the tool configuration is invalid

    Example:
        >>> int(ExitCode.NOT_DEFINED)
        1
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    NOT_DEFINED = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
