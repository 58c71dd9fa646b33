"""Persisted value types: the greeting record and the contract version slot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

Principal = NewType("Principal", str)
"""Opaque caller identity, authenticated by the host and compared verbatim."""


@dataclass(frozen=True, slots=True)
class Record:
    """The single greeting record held by a deployed instance.

    Attributes:
        greeting: Arbitrary text, the empty string included.
        owner: Principal that instantiated the record; never changes.

    Example:
        >>> record = Record(greeting="Ciao Mondo!", owner=Principal("creator"))
        >>> record.owner
        'creator'
    """

    greeting: str
    owner: Principal


@dataclass(frozen=True, slots=True)
class ContractVersion:
    """Name and version of the code that instantiated the instance."""

    contract: str
    version: str


__all__ = [
    "ContractVersion",
    "Principal",
    "Record",
]
