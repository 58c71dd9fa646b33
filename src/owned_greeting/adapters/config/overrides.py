"""``--set SECTION.KEY=VALUE`` overrides merged on top of loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: Missing ``=``, no dot in the path, or an empty component.

    Examples:
        >>> parse_override("storage.path=/srv/greeting.json")
        ConfigOverride(section='storage', key_path=('path',), value='/srv/greeting.json')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").value
        8192
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as a JSON literal, falling back to the string itself.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("DEBUG")
        (True, 42, 'DEBUG')
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge parsed overrides into ``config``; returns it unchanged when empty.

    Raises:
        ValueError: An override is malformed or descends through a non-table value.
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        node: dict[str, object] = merged.setdefault(override.section, {})
        for part in override.key_path[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise ValueError(f"Invalid override {raw!r}: {part!r} is already set to a non-table value")
            node = cast("dict[str, object]", child)
        node[override.key_path[-1]] = override.value
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
