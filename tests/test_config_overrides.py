"""``--set`` override parsing, coercion and merging into Config."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from owned_greeting.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

ConfigFactory = Callable[[dict[str, Any]], Config]


# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_storage_path() -> None:
    assert parse_override("storage.path=/srv/greeting.json") == ConfigOverride(
        section="storage", key_path=("path",), value="/srv/greeting.json"
    )


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    result = parse_override("lib_log_rich.payload_limits.max_chars=8192")

    assert result.section == "lib_log_rich"
    assert result.key_path == ("payload_limits", "max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_splits_on_first_equals_only() -> None:
    assert parse_override("storage.path=a=b.json").value == "a=b.json"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("storage.path", "must contain '='"),
        ("storage=x", "at least one dot"),
        ("=x", "at least one dot"),
        (".path=x", "section name is empty"),
        ("storage.=x", "empty component"),
        ("storage..path=x", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("null", None),
        ("42", 42),
        ("-1.5", -1.5),
        ('["a", 1]', ["a", 1]),
        ('{"k": "v"}', {"k": "v"}),
        ("DEBUG", "DEBUG"),
        ("/tmp/state.json", "/tmp/state.json"),
        ("", ""),
    ],
)
def test_coerce_value_reads_json_literals_or_keeps_string(raw: str, expected: object) -> None:
    assert coerce_value(raw) == expected


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_instance(config_factory: ConfigFactory) -> None:
    config = config_factory({"storage": {"path": "a.json"}})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_replaces_storage_path(config_factory: ConfigFactory) -> None:
    config = config_factory({"storage": {"path": "a.json"}, "lib_log_rich": {"environment": "prod"}})

    result = apply_overrides(config, ("storage.path=b.json",))

    assert result.get("storage.path") == "b.json"
    assert result.get("lib_log_rich.environment") == "prod"


@pytest.mark.os_agnostic
def test_apply_overrides_does_not_mutate_original(config_factory: ConfigFactory) -> None:
    config = config_factory({"storage": {"path": "a.json"}})

    apply_overrides(config, ("storage.path=b.json",))

    assert config.get("storage.path") == "a.json"


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_section(config_factory: ConfigFactory) -> None:
    result = apply_overrides(config_factory({}), ("lib_log_rich.console_level=DEBUG",))

    assert result.get("lib_log_rich.console_level") == "DEBUG"


@pytest.mark.os_agnostic
def test_apply_overrides_merges_several_keys_of_one_section(config_factory: ConfigFactory) -> None:
    result = apply_overrides(
        config_factory({}),
        ("lib_log_rich.environment=dev", "lib_log_rich.console_level=WARNING"),
    )

    assert result.get("lib_log_rich.environment") == "dev"
    assert result.get("lib_log_rich.console_level") == "WARNING"


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_descending_through_a_scalar(config_factory: ConfigFactory) -> None:
    with pytest.raises(ValueError, match="non-table"):
        apply_overrides(config_factory({}), ("s.k=1", "s.k.deeper=2"))


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_malformed_input(config_factory: ConfigFactory) -> None:
    with pytest.raises(ValueError, match="must contain '='"):
        apply_overrides(config_factory({}), ("storage.path",))
