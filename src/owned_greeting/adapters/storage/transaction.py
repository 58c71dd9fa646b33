"""Write buffer giving each invocation all-or-nothing semantics."""

from __future__ import annotations

from ...application.ports import Storage


class StorageTransaction:
    """Overlay that buffers writes until :meth:`commit`.

    Reads see buffered writes first, then the base storage. A transaction
    is finished by exactly one of :meth:`commit` or :meth:`rollback`.

    Example:
        >>> from owned_greeting.adapters.memory import MemoryStorage
        >>> base = MemoryStorage()
        >>> txn = StorageTransaction(base)
        >>> txn.set(b"k", b"v")
        >>> (txn.get(b"k"), base.get(b"k"))
        (b'v', None)
        >>> txn.commit()
        >>> base.get(b"k")
        b'v'
    """

    def __init__(self, base: Storage) -> None:
        self._base = base
        # None marks a pending delete.
        self._pending: dict[bytes, bytes | None] = {}
        self._finished = False

    @property
    def pending_keys(self) -> tuple[bytes, ...]:
        return tuple(self._pending)

    @property
    def finished(self) -> bool:
        return self._finished

    def get(self, key: bytes) -> bytes | None:
        if key in self._pending:
            return self._pending[key]
        return self._base.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self._ensure_open()
        self._pending[key] = value

    def delete(self, key: bytes) -> None:
        self._ensure_open()
        self._pending[key] = None

    def commit(self) -> None:
        """Apply buffered writes to the base storage in write order.

        If the base storage fails part way, the keys already applied are
        put back to their prior values before the error propagates, so the
        base storage ends up as it was before the commit.
        """
        self._ensure_open()
        self._finished = True
        applied: list[tuple[bytes, bytes | None]] = []
        try:
            for key, value in self._pending.items():
                prior = self._base.get(key)
                _write(self._base, key, value)
                applied.append((key, prior))
        except Exception:
            for key, prior in reversed(applied):
                _write(self._base, key, prior)
            raise
        finally:
            self._pending.clear()

    def rollback(self) -> None:
        """Discard buffered writes."""
        self._ensure_open()
        self._finished = True
        self._pending.clear()

    def _ensure_open(self) -> None:
        if self._finished:
            raise RuntimeError("transaction already finished")


def _write(storage: Storage, key: bytes, value: bytes | None) -> None:
    if value is None:
        storage.delete(key)
    else:
        storage.set(key, value)


__all__ = ["StorageTransaction"]
