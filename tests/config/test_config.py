# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the project configuration file."""

from pathlib import Path

import pytest

from umlextract.config import ConfigError, ExtractorConfig, load_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a configuration file and return its path."""
    config_file = tmp_path / "umlextract.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    assert load_config(_write_config(tmp_path, "")) == ExtractorConfig()


def test_full_config(tmp_path: Path) -> None:
    content = """\
database-type: mongodb
type-registry: registries/types.yaml
log-level: debug
"""
    config = load_config(_write_config(tmp_path, content))

    assert config.database_type == "mongodb"
    assert config.type_registry == tmp_path / "registries" / "types.yaml"
    assert config.log_level == "DEBUG"


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "umlextract.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "database-type: [sql\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_config(_write_config(tmp_path, "- sql\n"))


def test_unknown_field(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="unknown field"):
        load_config(_write_config(tmp_path, "output-dir: build\n"))


def test_non_string_value(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="'database-type' must be a string"):
        load_config(_write_config(tmp_path, "database-type: 3\n"))


def test_invalid_log_level(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="'log-level' must be one of"):
        load_config(_write_config(tmp_path, "log-level: chatty\n"))
