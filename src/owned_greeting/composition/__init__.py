"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Storage services
from ..adapters.storage.json_file import open_json_file_storage

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.storage import MemoryStorage
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        OpenStorage,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_open_storage: OpenStorage = open_json_file_storage


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    open_storage: OpenStorage


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        open_storage=open_json_file_storage,
    )


def build_testing(*, storage: MemoryStorage | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        storage: Optional MemoryStorage standing in for the state file. When
            None, a fresh one is created. Pass your own to assert on the
            instance state across several CLI invocations.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        MemoryStorage,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    instance_storage = storage if storage is not None else MemoryStorage()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        open_storage=instance_storage.open,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    # Logging
    "init_logging",
    # Storage
    "open_json_file_storage",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
