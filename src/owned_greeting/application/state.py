"""Fixed-key slots over an instance's storage.

Contents:
    * :class:`StateStore` - the single greeting :class:`Record`.
    * :class:`VersionStore` - the :class:`ContractVersion` metadata slot.
    * :class:`ContractDeps` - both slots, passed explicitly to entry points.

Values are stored as JSON; anything that fails to decode back into the
expected type raises :class:`StorageError`. Errors raised by the storage
itself propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from pydantic import TypeAdapter, ValidationError

from ..domain.errors import NotFound, StorageError
from ..domain.records import ContractVersion, Record
from .ports import Storage

STATE_KEY: Final[bytes] = b"state"
CONTRACT_INFO_KEY: Final[bytes] = b"contract_info"

_RECORD: Final = TypeAdapter(Record)
_CONTRACT_VERSION: Final = TypeAdapter(ContractVersion)


class StateStore:
    """Load and save the greeting record under :data:`STATE_KEY`.

    Example:
        >>> from owned_greeting.adapters.memory import MemoryStorage
        >>> from owned_greeting.domain.records import Principal
        >>> store = StateStore(MemoryStorage())
        >>> store.may_load() is None
        True
        >>> store.save(Record(greeting="hi", owner=Principal("creator")))
        >>> store.load().greeting
        'hi'
    """

    def __init__(self, storage: Storage, key: bytes = STATE_KEY) -> None:
        self._storage = storage
        self._key = key

    def may_load(self) -> Record | None:
        """Return the stored record, or None when the slot is empty."""
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        try:
            return _RECORD.validate_json(raw)
        except ValidationError as exc:
            raise StorageError(f"stored record under {self._key!r} is corrupt: {exc.error_count()} error(s)") from exc

    def load(self) -> Record:
        """Return the stored record.

        Raises:
            NotFound: The slot has never been written.
            StorageError: The stored bytes do not decode into a Record.
        """
        record = self.may_load()
        if record is None:
            raise NotFound()
        return record

    def save(self, record: Record) -> None:
        """Replace the stored record in full."""
        self._storage.set(self._key, _RECORD.dump_json(record))


class VersionStore:
    """Contract name/version slot under :data:`CONTRACT_INFO_KEY`."""

    def __init__(self, storage: Storage, key: bytes = CONTRACT_INFO_KEY) -> None:
        self._storage = storage
        self._key = key

    def set(self, contract: str, version: str) -> None:
        self._storage.set(self._key, _CONTRACT_VERSION.dump_json(ContractVersion(contract=contract, version=version)))

    def get(self) -> ContractVersion | None:
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        try:
            return _CONTRACT_VERSION.validate_json(raw)
        except ValidationError as exc:
            raise StorageError(f"stored contract version under {self._key!r} is corrupt") from exc


@dataclass(frozen=True, slots=True)
class ContractDeps:
    """Storage handles injected into every entry point call."""

    state: StateStore
    version: VersionStore

    @classmethod
    def from_storage(cls, storage: Storage) -> ContractDeps:
        """Bind both slots to the same instance storage."""
        return cls(state=StateStore(storage), version=VersionStore(storage))


__all__ = [
    "CONTRACT_INFO_KEY",
    "STATE_KEY",
    "ContractDeps",
    "StateStore",
    "VersionStore",
]
