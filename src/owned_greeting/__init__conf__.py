"""Static package metadata surfaced to the CLI and configuration layers.

Values here must stay in sync with ``pyproject.toml``; ``tests/test_metadata_sync.py``
guards against drift.

Contents:
    * Identity constants (``name``, ``title``, ``version``, ``shell_command``).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - human-readable metadata dump for ``info``.
"""

from __future__ import annotations

name = "owned_greeting"
title = "Single-owner greeting record driven through deterministic entry points"
version = "1.0.0"
homepage = "https://github.com/owned-greeting/owned_greeting"
author = "owned-greeting maintainers"
author_email = "maintainers@owned-greeting.dev"
shell_command = "owned-greeting"

#: Vendor segment for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "owned-greeting"
#: Application segment for macOS/Windows configuration paths.
LAYEREDCONF_APP = "owned-greeting"
#: Slug used for XDG paths on Linux (``~/.config/<slug>/``).
LAYEREDCONF_SLUG = "owned-greeting"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for owned_greeting:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
