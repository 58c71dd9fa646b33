"""Application layer - entry points, storage slots, and port definitions.

Contents:
    * :mod:`.contract` - instantiate / execute / query entry points
    * :mod:`.queries` - read-only projections
    * :mod:`.state` - fixed-key StateStore and VersionStore slots
    * :mod:`.ports` - Protocol definitions for adapter implementations
"""

from __future__ import annotations

from .contract import execute, instantiate, query, try_set_greeting
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    OpenStorage,
    Storage,
)
from .queries import query_greeting
from .state import ContractDeps, StateStore, VersionStore

__all__ = [
    # Entry points
    "execute",
    "instantiate",
    "query",
    "query_greeting",
    "try_set_greeting",
    # State
    "ContractDeps",
    "StateStore",
    "VersionStore",
    # Ports
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "OpenStorage",
    "Storage",
]
