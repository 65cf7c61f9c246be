# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration file for the memoml command line."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".memoml.yaml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class ProjectConfig(BaseModel):
    """Settings read from ``.memoml.yaml``.

    Attributes:
        extensions: File suffixes picked up when checking a directory.
        exclude: Directory names skipped when searching a directory.
        json_indent: Indentation used when dumping trees as JSON.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    extensions: list[str] = Field(default_factory=lambda: [".memoml"])
    exclude: list[str] = Field(default_factory=list)
    json_indent: int = Field(alias="json-indent", default=2, ge=0)

    @field_validator("extensions")
    @classmethod
    def _extensions_start_with_dot(cls, value: list[str]) -> list[str]:
        for suffix in value:
            if not suffix.startswith("."):
                raise ValueError(f"extension {suffix!r} must start with '.'")
        return value


def load_config(path: Path) -> ProjectConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.memoml.yaml`` file.

    Returns:
        A validated ProjectConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> Path | None:
    """Return the config file in *directory* or its nearest ancestor, if any."""
    for candidate in (directory, *directory.parents):
        config_file = candidate / CONFIG_FILE_NAME
        if config_file.is_file():
            return config_file
    return None
