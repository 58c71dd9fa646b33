"""Contract commands driving the deployed instance behind the state file.

Every command opens the instance storage, runs exactly one entry point
through :class:`ContractInstance`, and prints the JSON result on stdout.
Contract errors are reported on stderr and mapped to an exit code; the
state file is left untouched in that case.

Contents:
    * :func:`cli_instantiate` - Run the instantiate entry point.
    * :func:`cli_execute` - Run the execute entry point with a raw JSON message.
    * :func:`cli_set_greeting` - Shorthand for ``execute`` with ``set_greeting``.
    * :func:`cli_query` - Run the query entry point.
    * :func:`cli_contract_version` - Show the contract name/version slot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click

from owned_greeting.adapters.host import (
    ContractInstance,
    MessageDecodeError,
    decode_execute_msg,
    decode_query_msg,
    encode_query_result,
    encode_response,
)
from owned_greeting.adapters.storage.settings import resolve_state_path
from owned_greeting.domain.errors import ConfigurationError, ContractError, NotFound
from owned_greeting.domain.messages import InstantiateMsg, SetGreeting

from ..constants import CLICK_CONTEXT_SETTINGS, DEFAULT_QUERY_MSG
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode, exit_code_for

logger = logging.getLogger(__name__)

_state_option = click.option(
    "--state",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file of the instance (overrides storage.path)",
)


def _resolve_path(cli_ctx: CLIContext, state: Path | None) -> Path:
    try:
        return resolve_state_path(cli_ctx.config, state)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@contextmanager
def _contract_call(cli_ctx: CLIContext, state: Path | None) -> Iterator[ContractInstance]:
    """Yield an instance over the opened state file and report failures.

    Raises:
        SystemExit: A contract error or an undecodable message aborted the call.
    """
    path = _resolve_path(cli_ctx, state)
    try:
        with cli_ctx.services.open_storage(path) as storage:
            yield ContractInstance(storage)
    except ContractError as exc:
        logger.error("Contract call failed", extra={"error": str(exc), "error_type": type(exc).__name__})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(exit_code_for(exc)) from exc
    except MessageDecodeError as exc:
        logger.error("Message rejected", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _echo_json(payload: bytes) -> None:
    click.echo(payload.decode("utf-8"))


@click.command("instantiate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--sender", required=True, help="Address instantiating the contract; becomes the owner")
@click.option("--greeting", required=True, help="Initial greeting")
@_state_option
@click.pass_context
def cli_instantiate(ctx: click.Context, sender: str, greeting: str, state: Path | None) -> None:
    """Instantiate the contract, recording SENDER as the permanent owner."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-instantiate", extra={"command": "instantiate", "sender": sender}):
        logger.info("Instantiating contract")
        with _contract_call(cli_ctx, state) as instance:
            response = instance.instantiate(sender, InstantiateMsg(greeting=greeting))
        _echo_json(encode_response(response))


@click.command("execute", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--sender", required=True, help="Address sending the message")
@click.option(
    "--msg",
    "raw_msg",
    required=True,
    metavar="JSON",
    help='Tagged execute message, e.g. \'{"set_greeting": {"greeting": "hi"}}\'',
)
@_state_option
@click.pass_context
def cli_execute(ctx: click.Context, sender: str, raw_msg: str, state: Path | None) -> None:
    """Execute a JSON-encoded message against the contract."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-execute", extra={"command": "execute", "sender": sender}):
        logger.info("Executing contract message")
        with _contract_call(cli_ctx, state) as instance:
            response = instance.execute(sender, decode_execute_msg(raw_msg))
        _echo_json(encode_response(response))


@click.command("set-greeting", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--sender", required=True, help="Address sending the message; must be the owner")
@click.option("--greeting", required=True, help="Replacement greeting")
@_state_option
@click.pass_context
def cli_set_greeting(ctx: click.Context, sender: str, greeting: str, state: Path | None) -> None:
    """Replace the greeting. Only the owner may do this."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-set-greeting", extra={"command": "set-greeting", "sender": sender}):
        logger.info("Setting greeting")
        with _contract_call(cli_ctx, state) as instance:
            response = instance.execute(sender, SetGreeting(greeting=greeting))
        _echo_json(encode_response(response))


@click.command("query", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--msg",
    "raw_msg",
    default=DEFAULT_QUERY_MSG,
    show_default=True,
    metavar="JSON",
    help="Tagged query message",
)
@_state_option
@click.pass_context
def cli_query(ctx: click.Context, raw_msg: str, state: Path | None) -> None:
    """Query the contract. Read-only; the state file is never rewritten."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-query", extra={"command": "query"}):
        logger.info("Querying contract")
        with _contract_call(cli_ctx, state) as instance:
            result = instance.query(decode_query_msg(raw_msg))
        _echo_json(encode_query_result(result))


@click.command("contract-version", context_settings=CLICK_CONTEXT_SETTINGS)
@_state_option
@click.pass_context
def cli_contract_version(ctx: click.Context, state: Path | None) -> None:
    """Show the contract name and version recorded at instantiation."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-contract-version", extra={"command": "contract-version"}):
        with _contract_call(cli_ctx, state) as instance:
            version = instance.contract_version()
            if version is None:
                raise NotFound("contract version not set")
        payload: dict[str, Any] = {"contract": version.contract, "version": version.version}
        _echo_json(orjson.dumps(payload))


__all__ = [
    "cli_contract_version",
    "cli_execute",
    "cli_instantiate",
    "cli_query",
    "cli_set_greeting",
]
