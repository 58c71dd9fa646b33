"""In-memory instance storage for tests and the testing composition.

Contents:
    * :class:`MemoryStorage` - dict-backed :class:`Storage` with failure injection.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import StorageError


def _empty_store() -> dict[bytes, bytes]:
    """Create an empty typed key/value map."""
    return {}


@dataclass
class MemoryStorage:
    """Dict-backed storage satisfying the Storage and OpenStorage ports.

    Each test should create its own instance. ``open`` ignores the path and
    yields this same storage, so successive CLI invocations in one test see
    one deployed instance.

    Attributes:
        data: Raw key/value pairs written so far.
        fail_writes: When True, ``set`` and ``delete`` raise :class:`StorageError`.
        writes: Number of successful ``set`` calls.

    Example:
        >>> storage = MemoryStorage()
        >>> storage.set(b"k", b"v")
        >>> storage.get(b"k")
        b'v'
        >>> storage.get(b"missing") is None
        True
    """

    data: dict[bytes, bytes] = field(default_factory=_empty_store)
    fail_writes: bool = False
    writes: int = 0

    def get(self, key: bytes) -> bytes | None:
        return self.data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        if self.fail_writes:
            raise StorageError(f"write of {key!r} rejected by in-memory storage")
        self.data[key] = value
        self.writes += 1

    def delete(self, key: bytes) -> None:
        if self.fail_writes:
            raise StorageError(f"delete of {key!r} rejected by in-memory storage")
        self.data.pop(key, None)

    @contextmanager
    def open(self, path: Path) -> Iterator[MemoryStorage]:
        """Yield this storage regardless of ``path``."""
        yield self


__all__ = ["MemoryStorage"]
