# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the import configuration module."""

from pathlib import Path

import pytest

from joinport.library import DEFAULT_LIBRARY_NAME, ComponentSize
from joinport.workspace import ImportConfig, ImportConfigError, load_import_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write an import config file and return its path."""
    config_file = tmp_path / ".joinport.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    config = load_import_config(_write_config(tmp_path, ""))

    assert config == ImportConfig()
    assert config.library_name == DEFAULT_LIBRARY_NAME
    assert config.size == ComponentSize(width=200, height=100)


def test_full_config(tmp_path: Path) -> None:
    content = """\
library-name: Lobby Controls
component-width: 320
component-height: 90
extra-excluded-dirs:
  - legacy
  - vendor
extra-excluded-files:
  - Playground.tsx
"""
    config = load_import_config(_write_config(tmp_path, content))

    assert config.library_name == "Lobby Controls"
    assert config.size == ComponentSize(width=320, height=90)
    assert config.extra_excluded_dirs == ["legacy", "vendor"]
    assert config.extra_excluded_files == ["Playground.tsx"]


def test_classifier_rules_extend_defaults(tmp_path: Path) -> None:
    """Extra deny-list entries are added to the built-in ones."""
    config = load_import_config(_write_config(tmp_path, "extra-excluded-dirs: [legacy]\n"))
    rules = config.classifier_rules

    assert "legacy" in rules.excluded_dirs
    assert "node_modules" in rules.excluded_dirs


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ImportConfigError, match="not found"):
        load_import_config(tmp_path / ".joinport.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ImportConfigError, match="Invalid YAML"):
        load_import_config(_write_config(tmp_path, "library-name: [unclosed\n"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ImportConfigError, match="mapping"):
        load_import_config(_write_config(tmp_path, "- a\n- b\n"))


@pytest.mark.parametrize(
    ("content", "key"),
    [
        ("library-name: ''\n", "library-name"),
        ("library-name: 5\n", "library-name"),
        ("component-width: 0\n", "component-width"),
        ("component-height: tall\n", "component-height"),
        ("component-width: true\n", "component-width"),
        ("extra-excluded-dirs: legacy\n", "extra-excluded-dirs"),
        ("extra-excluded-files: [1]\n", "extra-excluded-files"),
    ],
)
def test_invalid_values_name_the_key(tmp_path: Path, content: str, key: str) -> None:
    """Errors name the file and the offending key."""
    config_file = _write_config(tmp_path, content)
    with pytest.raises(ImportConfigError) as exc_info:
        load_import_config(config_file)
    assert key in str(exc_info.value)
    assert str(config_file) in str(exc_info.value)
