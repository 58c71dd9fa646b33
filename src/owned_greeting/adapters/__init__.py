"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.host` - Transactional instance runner and JSON message codec
    * :mod:`.storage` - State file persistence and write buffering
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.config` - Configuration loading, overrides, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
