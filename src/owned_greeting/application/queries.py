"""Read-only projections of the greeting record."""

from __future__ import annotations

from ..domain.messages import GreetResponse
from .state import StateStore


def query_greeting(store: StateStore) -> GreetResponse:
    """Return the current greeting; raises ``NotFound`` before instantiate."""
    record = store.load()
    return GreetResponse(greeting=record.greeting)


__all__ = ["query_greeting"]
