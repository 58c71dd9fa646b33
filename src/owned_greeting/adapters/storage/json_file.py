"""JSON file backing a deployed instance's storage.

The whole key/value map lives in one document, keys hex-encoded and values
base64-encoded::

    {"7374617465": "eyJncmVldGluZyI6..."}

The file is read once on open and written back atomically (temporary file
in the same directory, then ``os.replace``) when the context exits with
pending changes. An exclusive ``flock`` on a ``.lock`` sidecar is held from
the read to the write, so concurrent processes run one at a time.
"""

from __future__ import annotations

import base64
import binascii
import fcntl
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import orjson

from ...domain.errors import StorageError

logger = logging.getLogger(__name__)

_LOCK_SUFFIX = ".lock"


class JsonFileStorage:
    """Storage held in memory and persisted to ``path`` on :meth:`flush`."""

    def __init__(self, path: Path, data: dict[bytes, bytes] | None = None) -> None:
        self._path = path
        self._data: dict[bytes, bytes] = dict(data) if data else {}
        self._dirty = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def dirty(self) -> bool:
        return self._dirty

    @classmethod
    def load(cls, path: Path) -> JsonFileStorage:
        """Read ``path``; a missing file yields empty storage.

        Raises:
            StorageError: The file cannot be read or is not a valid state document.
        """
        if not path.exists():
            return cls(path)
        try:
            document = orjson.loads(path.read_bytes())
        except OSError as exc:
            raise StorageError(f"cannot read state file {path}: {exc}") from exc
        except orjson.JSONDecodeError as exc:
            raise StorageError(f"state file {path} is not valid JSON: {exc}") from exc
        return cls(path, _decode_document(path, document))

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self._data[key] = value
        self._dirty = True

    def delete(self, key: bytes) -> None:
        if self._data.pop(key, None) is not None:
            self._dirty = True

    def flush(self) -> None:
        """Write the map to disk if anything changed since the last flush."""
        if not self._dirty:
            return
        document = {key.hex(): base64.b64encode(value).decode("ascii") for key, value in self._data.items()}
        try:
            _atomic_write_bytes(self._path, orjson.dumps(document, option=orjson.OPT_SORT_KEYS))
        except OSError as exc:
            raise StorageError(f"cannot write state file {self._path}: {exc}") from exc
        self._dirty = False
        logger.debug("State file written", extra={"path": str(self._path), "keys": len(self._data)})


def _decode_document(path: Path, document: object) -> dict[bytes, bytes]:
    if not isinstance(document, dict):
        raise StorageError(f"state file {path} must contain a JSON object")
    data: dict[bytes, bytes] = {}
    for raw_key, raw_value in document.items():  # pyright: ignore[reportUnknownVariableType]
        if not isinstance(raw_value, str):
            raise StorageError(f"state file {path} holds a non-string value under {raw_key!r}")
        try:
            data[bytes.fromhex(str(raw_key))] = base64.b64decode(raw_value, validate=True)
        except (ValueError, binascii.Error) as exc:
            raise StorageError(f"state file {path} holds an undecodable entry {raw_key!r}") from exc
    return data


def _atomic_write_bytes(path: Path, content: bytes) -> None:
    """Write ``content`` to ``path`` so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


@contextmanager
def _locked_file(path: Path) -> Iterator[None]:
    """Hold an exclusive lock on the sidecar of ``path`` for the block.

    The sidecar stays put while ``os.replace`` swaps the data file.
    """
    lock_path = path.with_name(path.name + _LOCK_SUFFIX)
    try:
        lock_path.parent.mkdir(parents=True, exist_ok=True)
        lock_handle = lock_path.open("a+b")
    except OSError as exc:
        raise StorageError(f"cannot lock state file {path}: {exc}") from exc
    with lock_handle:
        fcntl.flock(lock_handle.fileno(), fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_handle.fileno(), fcntl.LOCK_UN)


@contextmanager
def open_json_file_storage(path: Path) -> Iterator[JsonFileStorage]:
    """Open the instance stored at ``path``; changes persist on clean exit.

    The instance is locked against other openers until the block ends.
    When the block raises, nothing is written.

    Example:
        >>> with open_json_file_storage(tmp / "state.json") as storage:  # doctest: +SKIP
        ...     storage.set(b"state", b"{}")
    """
    with _locked_file(path):
        storage = JsonFileStorage.load(path)
        yield storage
        storage.flush()


__all__ = ["JsonFileStorage", "open_json_file_storage"]
