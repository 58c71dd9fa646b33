"""Public package surface: the contract entry points and an instance runner.

- Application exports: instantiate, execute, query over explicit dependencies
- Host exports: :class:`ContractInstance` running calls all-or-nothing
- Domain exports: messages, records and error kinds
- Composition exports: layered configuration
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Host adapter
from .adapters.host import ContractInstance
from .adapters.memory import MemoryStorage

# Application exports
from .application import ContractDeps, execute, instantiate, query

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    AlreadyInitialized,
    ContractError,
    Greet,
    GreetResponse,
    InstantiateMsg,
    MessageInfo,
    NotFound,
    Response,
    SetGreeting,
    StorageError,
    Unauthorized,
    UnknownMessage,
)

__all__ = [
    "AlreadyInitialized",
    "ContractDeps",
    "ContractError",
    "ContractInstance",
    "Greet",
    "GreetResponse",
    "InstantiateMsg",
    "MemoryStorage",
    "MessageInfo",
    "NotFound",
    "Response",
    "SetGreeting",
    "StorageError",
    "Unauthorized",
    "UnknownMessage",
    "execute",
    "get_config",
    "instantiate",
    "print_info",
    "query",
]
