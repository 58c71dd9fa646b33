"""Storage adapters - file persistence, transactions, and settings.

Contents:
    * :mod:`.json_file` - JSON file storage with atomic writes
    * :mod:`.transaction` - per-invocation write buffer
    * :mod:`.settings` - ``[storage]`` section and state path resolution
"""

from __future__ import annotations

from .json_file import JsonFileStorage, open_json_file_storage
from .settings import DEFAULT_STATE_FILE, StorageConfigModel, resolve_state_path
from .transaction import StorageTransaction

__all__ = [
    "DEFAULT_STATE_FILE",
    "JsonFileStorage",
    "StorageConfigModel",
    "StorageTransaction",
    "open_json_file_storage",
    "resolve_state_path",
]
