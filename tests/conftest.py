"""Shared pytest fixtures for contract, storage, CLI and module-entry tests.

- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from owned_greeting.adapters.memory import MemoryStorage
from owned_greeting.application.state import ContractDeps
from owned_greeting.domain.messages import MessageInfo
from owned_greeting.domain.records import Principal

if TYPE_CHECKING:
    from owned_greeting.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

CREATOR = "creator"
STRANGER = "anyone"


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def storage() -> MemoryStorage:
    """Provide a fresh, empty instance storage."""
    return MemoryStorage()


@pytest.fixture
def deps(storage: MemoryStorage) -> ContractDeps:
    """Provide contract dependencies bound to the ``storage`` fixture."""
    return ContractDeps.from_storage(storage)


@pytest.fixture
def sender() -> Callable[[str], MessageInfo]:
    """Return a helper building MessageInfo for a caller address.

    Example:
        def test_owner(sender: Callable[[str], MessageInfo]) -> None:
            info = sender("creator")
    """

    def _sender(address: str) -> MessageInfo:
        return MessageInfo(sender=Principal(address))

    return _sender


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for JSON parsing; log records and error messages go
    to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from owned_greeting.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before each test.

    Only clears before, not after, so a monkeypatched get_config does not
    break teardown.
    """
    from owned_greeting.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Example:
        def test_storage_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"storage": {"path": "/tmp/state.json"}})
            assert config.get("storage.path") == "/tmp/state.json"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary of config loading is replaced; storage stays the
    real JSON file adapter.
    """
    from owned_greeting.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            open_storage=prod.open_storage,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it receives."""
    from owned_greeting.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            open_storage=prod.open_storage,
        )
        return lambda: test_services

    return _inject


@dataclass
class ContractCliContext:
    """Services factory plus the storage standing in for the state file.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        storage: MemoryStorage shared by every invocation using ``factory``.
        opened: Paths passed to ``open_storage``, in call order.
    """

    factory: Callable[[], Any]
    storage: MemoryStorage
    opened: list[Path]


@pytest.fixture
def contract_cli_context(
    clear_config_cache: None,
) -> Callable[..., ContractCliContext]:
    """Create a CLI context whose instance lives in a MemoryStorage.

    Logging and config display stay production; config comes from the given
    dict (empty by default); every ``open_storage`` call yields the same
    MemoryStorage and records the requested path.

    Example:
        def test_query(cli_runner: CliRunner, contract_cli_context: Callable[..., ContractCliContext]) -> None:
            ctx = contract_cli_context()
            cli_runner.invoke(cli, ["instantiate", "--sender", "creator", "--greeting", "hi"], obj=ctx.factory)
            assert ctx.storage.data
    """
    from owned_greeting.composition import AppServices, build_production

    def _create(config_data: dict[str, Any] | None = None, *, storage: MemoryStorage | None = None) -> ContractCliContext:
        instance_storage = storage if storage is not None else MemoryStorage()
        config = Config(config_data or {}, {})
        opened: list[Path] = []
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        def _recording_open(path: Path) -> Any:
            opened.append(path)
            return instance_storage.open(path)

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            open_storage=_recording_open,
        )
        return ContractCliContext(factory=lambda: test_services, storage=instance_storage, opened=opened)

    return _create
