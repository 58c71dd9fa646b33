"""Logging configuration model and runtime initialization.

init_logging itself runs on every CLI test through the root command.
"""

from __future__ import annotations

import lib_log_rich.runtime
import pytest
from lib_layered_config import Config

from owned_greeting import __init__conf__
from owned_greeting.adapters.logging.setup import LoggingConfigModel, _build_runtime_config, init_logging


@pytest.mark.os_agnostic
def test_logging_config_model_passes_extra_fields_through() -> None:
    parsed = LoggingConfigModel.model_validate({"service": "greeter", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "greeter"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_service_defaults_to_package_name() -> None:
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_section() -> None:
    runtime_config = _build_runtime_config(Config({"lib_log_rich": {"service": "greeter", "environment": "test"}}, {}))

    assert runtime_config.service == "greeter"
    assert runtime_config.environment == "test"


@pytest.mark.os_agnostic
def test_init_logging_is_idempotent() -> None:
    config = Config({"lib_log_rich": {"environment": "test"}}, {})

    init_logging(config)
    init_logging(config)

    assert lib_log_rich.runtime.is_initialised()
