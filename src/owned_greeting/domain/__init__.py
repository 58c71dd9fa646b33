"""Domain layer - pure contract types and rules with no I/O.

Contents:
    * :mod:`.records` - Record, ContractVersion, Principal
    * :mod:`.messages` - Entry point messages and query results
    * :mod:`.response` - Response and audit attributes
    * :mod:`.access` - Owner authorization check
    * :mod:`.errors` - Contract error kinds
    * :mod:`.enums` - Output format choices
"""

from __future__ import annotations

from .access import authorize
from .enums import OutputFormat
from .errors import (
    AlreadyInitialized,
    ConfigurationError,
    ContractError,
    NotFound,
    StorageError,
    Unauthorized,
    UnknownMessage,
)
from .messages import (
    ExecuteMsg,
    Greet,
    GreetResponse,
    InstantiateMsg,
    MessageInfo,
    QueryMsg,
    SetGreeting,
)
from .records import ContractVersion, Principal, Record
from .response import Attribute, Response

__all__ = [
    # Records
    "ContractVersion",
    "Principal",
    "Record",
    # Messages
    "ExecuteMsg",
    "Greet",
    "GreetResponse",
    "InstantiateMsg",
    "MessageInfo",
    "QueryMsg",
    "SetGreeting",
    # Response
    "Attribute",
    "Response",
    # Access
    "authorize",
    # Enums
    "OutputFormat",
    # Errors
    "AlreadyInitialized",
    "ConfigurationError",
    "ContractError",
    "NotFound",
    "StorageError",
    "Unauthorized",
    "UnknownMessage",
]
