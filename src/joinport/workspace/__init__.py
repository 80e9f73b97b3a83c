# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Persisted project file and import configuration."""

from joinport.workspace.config import (
    CONFIG_FILE_NAME,
    ImportConfig,
    ImportConfigError,
    load_import_config,
)
from joinport.workspace.project import (
    DEFAULT_PROJECT_FILE,
    ProjectFileError,
    load_project,
    save_project,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_PROJECT_FILE",
    "ImportConfig",
    "ImportConfigError",
    "ProjectFileError",
    "load_import_config",
    "load_project",
    "save_project",
]
