"""Contract error kinds raised by the entry points and their collaborators.

Every error aborts the current invocation. The host discards buffered
writes and surfaces the error to the caller; nothing is retried.
"""

from __future__ import annotations


class ContractError(Exception):
    """Base class for every failure an entry point can surface.

    Example:
        >>> from owned_greeting.domain.errors import ContractError, Unauthorized
        >>> isinstance(Unauthorized(), ContractError)
        True
    """

    default_message = "contract error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class Unauthorized(ContractError):
    """Caller is not the recorded owner of the greeting.

    Example:
        >>> str(Unauthorized())
        'Unauthorized'
    """

    default_message = "Unauthorized"


class NotFound(ContractError):
    """No record exists yet; the instance was never instantiated.

    Example:
        >>> str(NotFound())
        'state not found'
    """

    default_message = "state not found"


class AlreadyInitialized(ContractError):
    """Instantiate was called on an instance that already holds a record."""

    default_message = "contract already initialized"


class UnknownMessage(ContractError):
    """Execute or query received a message variant outside the supported set.

    Example:
        >>> str(UnknownMessage("unknown execute message: burn"))
        'unknown execute message: burn'
    """

    default_message = "unknown message"


class StorageError(ContractError):
    """The persistence layer failed to read, decode, or write a value."""

    default_message = "storage failure"


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised outside any entry point, while resolving settings for the host.
    Typically caught at CLI boundaries to provide user-friendly messages.

    Example:
        >>> str(ConfigurationError("invalid [storage] configuration"))
        'invalid [storage] configuration'
    """


__all__ = [
    "AlreadyInitialized",
    "ConfigurationError",
    "ContractError",
    "NotFound",
    "StorageError",
    "Unauthorized",
    "UnknownMessage",
]
