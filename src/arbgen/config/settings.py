"""Configuration loader wrapping the generator schema."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError, UnknownConfigurationError
from .schema import GeneratorConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise ConfigurationError(f"Configuration file {path} is not valid YAML: {error}") from error
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _raise_for_unknown_fields(error: ValidationError) -> None:
    for issue in error.errors():
        if issue["type"] == "extra_forbidden":
            raise UnknownConfigurationError(str(issue["loc"][0])) from error


def build_config(values: Mapping[str, Any]) -> GeneratorConfig:
    """Validate raw configuration values into a :class:`GeneratorConfig`."""

    try:
        return GeneratorConfig.model_validate(dict(values))
    except ValidationError as error:
        _raise_for_unknown_fields(error)
        raise ConfigurationError(f"Configuration validation failed: {error}") from error


def load_config(
    path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GeneratorConfig:
    """Merge an optional YAML file with explicit overrides.

    Overrides whose value is ``None`` are treated as "not supplied" so that
    command-line flags only replace file values when actually given.
    """

    values: dict[str, Any] = _load_yaml(path) if path is not None else {}
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value
    return build_config(values)


__all__ = ["build_config", "load_config"]
