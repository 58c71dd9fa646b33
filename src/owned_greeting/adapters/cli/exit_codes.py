"""POSIX-conventional exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by a
CLI command carries a meaningful, grep-friendly integer instead of a bare ``1``,
plus the mapping from contract errors onto those codes.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
    * :func:`exit_code_for` - exit code for a :class:`ContractError`.
"""

from __future__ import annotations

from enum import IntEnum

from owned_greeting.domain.errors import (
    AlreadyInitialized,
    ContractError,
    NotFound,
    StorageError,
    Unauthorized,
    UnknownMessage,
)


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow errno and sysexits.h conventions where applicable:

    * 0-1: generic success / failure
    * 2: ENOENT (no record yet)
    * 13: EACCES (caller is not the owner)
    * 17: EEXIST (instance already instantiated)
    * 22: EINVAL (unknown or malformed message)
    * 74: EX_IOERR (storage failure)
    * 78: EX_CONFIG
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.PERMISSION_DENIED)
        13
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 2
    PERMISSION_DENIED = 13
    ALREADY_EXISTS = 17
    INVALID_ARGUMENT = 22
    IO_ERROR = 74
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


_CONTRACT_ERROR_CODES: dict[type[ContractError], ExitCode] = {
    NotFound: ExitCode.NOT_FOUND,
    Unauthorized: ExitCode.PERMISSION_DENIED,
    AlreadyInitialized: ExitCode.ALREADY_EXISTS,
    UnknownMessage: ExitCode.INVALID_ARGUMENT,
    StorageError: ExitCode.IO_ERROR,
}


def exit_code_for(exc: ContractError) -> ExitCode:
    """Return the exit code reported for ``exc``.

    Example:
        >>> exit_code_for(Unauthorized())
        <ExitCode.PERMISSION_DENIED: 13>
        >>> exit_code_for(ContractError())
        <ExitCode.GENERAL_ERROR: 1>
    """
    for error_type, code in _CONTRACT_ERROR_CODES.items():
        if isinstance(exc, error_type):
            return code
    return ExitCode.GENERAL_ERROR


__all__ = ["ExitCode", "exit_code_for"]
