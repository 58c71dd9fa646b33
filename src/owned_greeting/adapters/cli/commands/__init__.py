"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Contract commands from :mod:`.contract`
"""

from __future__ import annotations

from .config import cli_config
from .contract import (
    cli_contract_version,
    cli_execute,
    cli_instantiate,
    cli_query,
    cli_set_greeting,
)
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_contract_version",
    "cli_execute",
    "cli_info",
    "cli_instantiate",
    "cli_query",
    "cli_set_greeting",
]
