"""Application ports - Protocol definitions for adapter implementations.

``Storage`` is the raw key/value handle the host hands to every entry
point. The remaining protocols define a ``__call__`` whose signature
matches the corresponding adapter function, so module-level functions
satisfy them via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``)
    are imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class Storage(Protocol):
    """Byte-keyed storage scoped to a single deployed instance."""

    def get(self, key: bytes) -> bytes | None: ...

    def set(self, key: bytes, value: bytes) -> None: ...

    def delete(self, key: bytes) -> None: ...


class OpenStorage(Protocol):
    """Open the storage of the instance persisted at ``path``.

    Changes made through the yielded storage are persisted when the
    context exits.
    """

    def __call__(self, path: Path) -> AbstractContextManager[Storage]: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "OpenStorage",
    "Storage",
]
