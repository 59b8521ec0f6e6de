# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the ``umlextract.yaml`` project configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = "umlextract.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ExtractorConfig:
    """Settings for an extraction run.

    Attributes:
        database_type: Name of the built-in type registry to use.
        type_registry: Path to a custom registry file; takes precedence over
            ``database_type`` when set.
        log_level: Verbosity of the ``umlextract`` logger.
    """

    database_type: str = "sql"
    type_registry: Path | None = None
    log_level: str = "WARNING"


def load_config(path: Path) -> ExtractorConfig:
    """Load and parse a configuration file.

    A relative ``type-registry`` path is resolved against the directory of
    the configuration file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, base_dir=path.parent, source_label=str(path))


# ################
# Implementation
# ################


def _parse_config(text: str, base_dir: Path, source_label: str = "<string>") -> ExtractorConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ExtractorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - {"database-type", "type-registry", "log-level"})
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = ExtractorConfig()
    if "database-type" in data:
        config.database_type = _require_string(data, "database-type", source_label)
    if "type-registry" in data:
        config.type_registry = base_dir / _require_string(data, "type-registry", source_label)
    if "log-level" in data:
        level = _require_string(data, "log-level", source_label).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"{source_label}: 'log-level' must be one of {', '.join(LOG_LEVELS)}")
        config.log_level = level
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value
