"""Entry point messages, caller info, and query results.

Execute and query inputs are closed unions with one frozen type per
variant. Adding a variant means widening the alias and adding a ``case``
to the router; anything else falls through to ``UnknownMessage``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .records import Principal


@dataclass(frozen=True, slots=True)
class MessageInfo:
    """Host-supplied facts about the current call."""

    sender: Principal


@dataclass(frozen=True, slots=True)
class InstantiateMsg:
    """Payload of the one-time instantiate call."""

    greeting: str


@dataclass(frozen=True, slots=True)
class SetGreeting:
    """Replace the stored greeting; owner only."""

    greeting: str


@dataclass(frozen=True, slots=True)
class Greet:
    """Read the stored greeting."""


@dataclass(frozen=True, slots=True)
class GreetResponse:
    """Result of :class:`Greet`; deliberately omits the owner."""

    greeting: str


ExecuteMsg: TypeAlias = SetGreeting
QueryMsg: TypeAlias = Greet

__all__ = [
    "ExecuteMsg",
    "Greet",
    "GreetResponse",
    "InstantiateMsg",
    "MessageInfo",
    "QueryMsg",
    "SetGreeting",
]
