"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no state file, no config discovery, no logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.storage` - :class:`MemoryStorage`
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .storage import MemoryStorage

# Static conformance assertions
if TYPE_CHECKING:
    from owned_greeting.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        OpenStorage,
        Storage,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_storage: Storage = MemoryStorage()
    _assert_open_storage: OpenStorage = MemoryStorage().open

__all__ = [
    "MemoryStorage",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
