# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading and saving the persisted project file."""

import json
from pathlib import Path

from pydantic import ValidationError

from joinport.model.entities import Project

# ###############
# Public Interface
# ###############

DEFAULT_PROJECT_FILE = "project.joinport.json"


class ProjectFileError(Exception):
    """Raised when the project file cannot be read, written, or is invalid."""


def load_project(path: Path) -> Project:
    """Load and validate a project file.

    An empty file is treated as an empty project.

    Args:
        path: Path to the project JSON file.

    Returns:
        A validated Project instance.

    Raises:
        ProjectFileError: If the file cannot be read, contains invalid JSON,
            or does not conform to the project schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProjectFileError(f"Cannot read project file '{path}': {exc}") from exc

    if not raw.strip():
        return Project()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ProjectFileError(f"Invalid JSON in project file '{path}': {exc}") from exc

    try:
        return Project.model_validate(data)
    except ValidationError as exc:
        raise ProjectFileError(f"Invalid project file '{path}': {exc}") from exc


def save_project(project: Project, path: Path) -> None:
    """Save the project to disk as indented JSON.

    Args:
        project: The project to serialize.
        path: Destination path for the project file.

    Raises:
        ProjectFileError: If the file cannot be written.
    """
    data = project.model_dump(mode="json", exclude_none=True)
    try:
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ProjectFileError(f"Cannot write project file '{path}': {exc}") from exc
