# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the joinport import configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from joinport.archive.classifier import DEFAULT_RULES, ClassifierRules
from joinport.library.merge import DEFAULT_LIBRARY_NAME, ComponentSize

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".joinport.yaml"


class ImportConfigError(Exception):
    """Raised when an import configuration file is invalid or cannot be loaded."""


@dataclass
class ImportConfig:
    """The parsed import configuration.

    Attributes:
        library_name: Name given to libraries created by an import.
        component_width: Width copied onto newly imported components.
        component_height: Height copied onto newly imported components.
        extra_excluded_dirs: Directory names auto-excluded in addition to the built-in list.
        extra_excluded_files: File names auto-excluded in addition to the built-in list.
    """

    library_name: str = DEFAULT_LIBRARY_NAME
    component_width: int = 200
    component_height: int = 100
    extra_excluded_dirs: list[str] = field(default_factory=list)
    extra_excluded_files: list[str] = field(default_factory=list)

    @property
    def size(self) -> ComponentSize:
        """The configured component size estimate."""
        return ComponentSize(width=self.component_width, height=self.component_height)

    @property
    def classifier_rules(self) -> ClassifierRules:
        """The built-in classifier rules extended with the configured deny lists."""
        return DEFAULT_RULES.extended(dirs=self.extra_excluded_dirs, files=self.extra_excluded_files)


def load_import_config(path: Path) -> ImportConfig:
    """Load and parse a joinport import configuration file.

    Args:
        path: Path to the ``.joinport.yaml`` file.

    Returns:
        An ImportConfig populated from the file; absent keys keep their defaults.

    Raises:
        ImportConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ImportConfigError(f"Import config file not found: {path}") from None
    except OSError as exc:
        raise ImportConfigError(f"Cannot read import config file: {exc}") from exc

    return _parse_import_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_import_config(text: str, source_label: str = "<string>") -> ImportConfig:
    """Parse import config YAML text into an ImportConfig.

    An empty document yields the default configuration.

    Raises:
        ImportConfigError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ImportConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ImportConfig()
    if not isinstance(data, dict):
        raise ImportConfigError(f"{source_label}: import config must be a YAML mapping")

    config = ImportConfig()
    if "library-name" in data:
        config.library_name = _require_string(data, "library-name", source_label)
    if "component-width" in data:
        config.component_width = _require_positive_int(data, "component-width", source_label)
    if "component-height" in data:
        config.component_height = _require_positive_int(data, "component-height", source_label)
    if "extra-excluded-dirs" in data:
        config.extra_excluded_dirs = _require_string_list(data, "extra-excluded-dirs", source_label)
    if "extra-excluded-files" in data:
        config.extra_excluded_files = _require_string_list(data, "extra-excluded-files", source_label)
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a non-empty string field, raising ImportConfigError otherwise."""
    value = mapping[key]
    if not isinstance(value, str) or not value.strip():
        raise ImportConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value


def _require_positive_int(mapping: dict[str, object], key: str, source_label: str) -> int:
    """Extract a positive integer field, raising ImportConfigError otherwise."""
    value = mapping[key]
    # bool is an int subclass; 'true' is not a size.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ImportConfigError(f"{source_label}: '{key}' must be a positive integer")
    return value


def _require_string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    """Extract a list of strings, raising ImportConfigError otherwise."""
    value = mapping[key]
    if not isinstance(value, list):
        raise ImportConfigError(f"{source_label}: '{key}' must be a list")
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise ImportConfigError(f"{source_label}: {key}[{index}] must be a string")
    return list(value)
