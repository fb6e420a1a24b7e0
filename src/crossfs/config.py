"""Settings for crossfs, loaded from YAML and the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

# Environment variables that override file settings
ENV_PREFIX = "CROSSFS_"
ENV_FIELDS = {
    "platform": f"{ENV_PREFIX}PLATFORM",
    "encoding": f"{ENV_PREFIX}ENCODING",
    "log_level": f"{ENV_PREFIX}LOG_LEVEL",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime settings.

    Attributes:
        platform: Path rules to apply ("auto" picks the host's).
        encoding: Default text encoding for file handles.
        log_level: Level for the CLI's log handler.
    """

    model_config = ConfigDict(extra="forbid")

    platform: Literal["auto", "posix", "windows"] = "auto"
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}. Supported: {list(LOG_LEVELS)}")
        return level

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed Settings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the YAML or its values are invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        return cls.model_validate(cls._read_yaml(path))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Load settings from ``CROSSFS_*`` environment variables."""
        return cls.model_validate(_env_overrides(environ))

    @classmethod
    def load(
        cls, path: Path | None = None, environ: Mapping[str, str] | None = None
    ) -> Settings:
        """Merge defaults, an optional YAML file and the environment.

        Environment values win over file values.

        Raises:
            FileNotFoundError: If ``path`` is given but doesn't exist.
            ValueError: If any source holds invalid values.
        """
        data: dict[str, Any] = {}
        if path is not None:
            data.update(cls.from_file(path).model_dump(exclude_unset=True))
        data.update(_env_overrides(environ))
        return cls.model_validate(data)

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")
        return data


def _env_overrides(environ: Mapping[str, str] | None) -> dict[str, str]:
    env = os.environ if environ is None else environ
    return {field: env[var] for field, var in ENV_FIELDS.items() if env.get(var)}
