"""One deployed instance of the contract, driven the way a host drives it.

Every invocation runs against a fresh :class:`StorageTransaction`. Writes
reach the instance storage only when the entry point returns; any
exception discards them, so no caller ever observes a partial mutation.
Queries are always rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ...application import contract
from ...application.ports import Storage
from ...application.state import ContractDeps, VersionStore
from ...domain.messages import (
    ExecuteMsg,
    GreetResponse,
    InstantiateMsg,
    MessageInfo,
    QueryMsg,
)
from ...domain.records import ContractVersion, Principal
from ...domain.response import Response
from ..storage.transaction import StorageTransaction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContractInstance:
    """Serialized, all-or-nothing entry point runner over one storage.

    Example:
        >>> from owned_greeting.adapters.memory import MemoryStorage
        >>> from owned_greeting.domain.messages import Greet, InstantiateMsg
        >>> instance = ContractInstance(MemoryStorage())
        >>> _ = instance.instantiate("creator", InstantiateMsg(greeting="Ciao Mondo!"))
        >>> instance.query(Greet()).greeting
        'Ciao Mondo!'
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def instantiate(self, sender: str, msg: InstantiateMsg) -> Response:
        info = MessageInfo(sender=Principal(sender))
        return self._invoke("instantiate", lambda deps: contract.instantiate(deps, info, msg), commit=True)

    def execute(self, sender: str, msg: ExecuteMsg) -> Response:
        info = MessageInfo(sender=Principal(sender))
        return self._invoke("execute", lambda deps: contract.execute(deps, info, msg), commit=True)

    def query(self, msg: QueryMsg) -> GreetResponse:
        return self._invoke("query", lambda deps: contract.query(deps, msg), commit=False)

    def contract_version(self) -> ContractVersion | None:
        """Read the version slot written at instantiation, if any."""
        return VersionStore(self._storage).get()

    def _invoke(self, entry_point: str, call: Callable[[ContractDeps], T], *, commit: bool) -> T:
        txn = StorageTransaction(self._storage)
        try:
            result = call(ContractDeps.from_storage(txn))
            if commit:
                txn.commit()
        except Exception as exc:
            if not txn.finished:
                txn.rollback()
            logger.warning(
                "Entry point failed; writes discarded",
                extra={"entry_point": entry_point, "error": str(exc), "error_type": type(exc).__name__},
            )
            raise
        if not commit:
            txn.rollback()
        logger.debug("Entry point completed", extra={"entry_point": entry_point, "committed": commit})
        return result


__all__ = ["ContractInstance"]
