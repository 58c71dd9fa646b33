"""``[storage]`` configuration section and state file resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ...domain.errors import ConfigurationError

DEFAULT_STATE_FILE: Final[str] = "owned-greeting-state.json"


class StorageConfigModel(BaseModel):
    """Pydantic model for the [storage] config section.

    Example:
        >>> StorageConfigModel().path.name
        'owned-greeting-state.json'
        >>> StorageConfigModel(path="").path.name
        'owned-greeting-state.json'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    path: Path = Path(DEFAULT_STATE_FILE)

    @field_validator("path", mode="before")
    @classmethod
    def _blank_means_default(cls, v: Any) -> Any:
        """Treat an empty string from config files or env as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return DEFAULT_STATE_FILE
        return v


def resolve_state_path(config: Config, override: Path | None = None) -> Path:
    """Return the state file of the deployed instance.

    An explicit ``override`` (the ``--state`` option) wins over ``storage.path``.

    Raises:
        ConfigurationError: The [storage] section does not validate.
    """
    if override is not None:
        return override.expanduser()
    raw: object = config.get("storage", default={})
    try:
        parsed = StorageConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [storage] configuration: {exc}") from exc
    return parsed.path.expanduser()


__all__ = [
    "DEFAULT_STATE_FILE",
    "StorageConfigModel",
    "resolve_state_path",
]
