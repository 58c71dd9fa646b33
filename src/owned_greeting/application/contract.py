"""Contract entry points: instantiate, execute, and query.

Each function is one complete state transition against the storage handles
in :class:`ContractDeps`. They do not roll anything back themselves; the
host runs every call inside a transaction and discards its writes when an
exception escapes.

Contents:
    * :func:`instantiate` - create the record, owned by the caller.
    * :func:`execute` - dispatch execute messages (``SetGreeting``).
    * :func:`try_set_greeting` - owner-only greeting update.
    * :func:`query` - dispatch query messages (``Greet``).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Final

from owned_greeting import __init__conf__

from ..domain.access import authorize
from ..domain.errors import AlreadyInitialized, UnknownMessage
from ..domain.messages import (
    ExecuteMsg,
    Greet,
    GreetResponse,
    InstantiateMsg,
    MessageInfo,
    QueryMsg,
    SetGreeting,
)
from ..domain.records import Record
from ..domain.response import Response
from .queries import query_greeting
from .state import ContractDeps

logger = logging.getLogger(__name__)

CONTRACT_NAME: Final[str] = f"pypi:{__init__conf__.name}"
CONTRACT_VERSION: Final[str] = __init__conf__.version


def instantiate(deps: ContractDeps, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Create the record with the caller as owner.

    Args:
        deps: Storage handles of the instance.
        info: Caller facts; ``info.sender`` becomes the immutable owner.
        msg: Initial greeting.

    Returns:
        Response with attributes ``method``, ``owner`` and ``greeting``.

    Raises:
        AlreadyInitialized: A record already exists; nothing is written.
        StorageError: The storage failed.

    Example:
        >>> from owned_greeting.adapters.memory import MemoryStorage
        >>> from owned_greeting.domain.records import Principal
        >>> deps = ContractDeps.from_storage(MemoryStorage())
        >>> info = MessageInfo(sender=Principal("creator"))
        >>> instantiate(deps, info, InstantiateMsg(greeting="Ciao Mondo!")).attribute("owner")
        'creator'
    """
    if deps.state.may_load() is not None:
        raise AlreadyInitialized()

    deps.version.set(CONTRACT_NAME, CONTRACT_VERSION)
    record = Record(greeting=msg.greeting, owner=info.sender)
    deps.state.save(record)
    logger.info("Instantiated greeting record", extra={"owner": record.owner, "contract_version": CONTRACT_VERSION})

    return (
        Response()
        .add_attribute("method", "instantiate")
        .add_attribute("owner", info.sender)
        .add_attribute("greeting", record.greeting)
    )


def execute(deps: ContractDeps, info: MessageInfo, msg: ExecuteMsg) -> Response:
    """Dispatch an execute message to its handler.

    Raises:
        UnknownMessage: ``msg`` is not a supported execute variant.
    """
    match msg:
        case SetGreeting(greeting=greeting):
            return try_set_greeting(deps, info, greeting)
        case _:
            raise UnknownMessage(f"unknown execute message: {type(msg).__name__}")


def try_set_greeting(deps: ContractDeps, info: MessageInfo, greeting: str) -> Response:
    """Replace the greeting if the caller owns the record.

    Raises:
        NotFound: The instance was never instantiated.
        Unauthorized: The caller is not the owner; nothing is written.
    """
    record = deps.state.load()
    authorize(info.sender, record)
    deps.state.save(replace(record, greeting=greeting))
    logger.info("Greeting reset by owner", extra={"owner": record.owner})
    return Response().add_attribute("method", "reset")


def query(deps: ContractDeps, msg: QueryMsg) -> GreetResponse:
    """Dispatch a query message; never writes.

    Raises:
        UnknownMessage: ``msg`` is not a supported query variant.
        NotFound: The instance was never instantiated.
    """
    match msg:
        case Greet():
            return query_greeting(deps.state)
        case _:
            raise UnknownMessage(f"unknown query message: {type(msg).__name__}")


__all__ = [
    "CONTRACT_NAME",
    "CONTRACT_VERSION",
    "execute",
    "instantiate",
    "query",
    "try_set_greeting",
]
