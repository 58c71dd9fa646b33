"""CLI core stories: traceback handling, main entry, help, info, unknown command."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from owned_greeting import __init__conf__
from owned_greeting.adapters import cli as cli_mod
from owned_greeting.adapters.memory import MemoryStorage
from owned_greeting.composition import AppServices, build_production


def _exploding_factory() -> AppServices:
    """Production services whose storage backend fails unexpectedly."""

    @contextmanager
    def _open(path: Path) -> Iterator[MemoryStorage]:
        raise RuntimeError("storage backend exploded")
        yield MemoryStorage()  # pragma: no cover

    prod = build_production()
    return AppServices(
        get_config=prod.get_config,
        display_config=prod.display_config,
        init_logging=prod.init_logging,
        open_storage=_open,
    )


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_traceback_preferences_enables_both_flags(managed_traceback_state: None) -> None:
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback enables both flags while the subcommand runs."""
    notes: list[tuple[bool, bool]] = []
    monkeypatch.setattr(__init__conf__, "print_info", lambda: notes.append(cli_mod.snapshot_traceback_state()))

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert cli_mod.snapshot_traceback_state() == (True, True)


@pytest.mark.os_agnostic
def test_main_requires_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_main_runs_info_with_production_services(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main(["info"], services_factory=build_production) == 0
    assert __init__conf__.name in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_without_arguments_shows_help(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main([], services_factory=build_production) == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_returns_contract_exit_code(
    managed_traceback_state: None,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A query on a fresh instance ends with NOT_FOUND, reported on stderr."""
    exit_code = cli_mod.main(["query", "--state", str(tmp_path / "fresh.json")], services_factory=build_production)

    assert exit_code == cli_mod.ExitCode.NOT_FOUND
    assert "state not found" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_unexpected_error_is_reported_on_stderr(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["query"], services_factory=_exploding_factory)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "RuntimeError" in plain_err or "storage backend exploded" in plain_err


@pytest.mark.os_agnostic
def test_traceback_flag_displays_full_exception_traceback(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["--traceback", "query"], services_factory=_exploding_factory)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: storage backend exploded" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_cli_without_arguments_prints_help(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_help_lists_contract_commands(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)

    for command in ("instantiate", "execute", "set-greeting", "query", "contract-version", "config", "info"):
        assert command in result.output


@pytest.mark.os_agnostic
def test_version_option_prints_version(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_malformed_set_override_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", "storage.path", "info"], obj=production_factory)

    assert result.exit_code == 2
    assert "must contain '='" in result.output
