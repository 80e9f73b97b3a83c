# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for import records, joins, and the persisted project."""

from joinport.model.entities import (
    ArchiveEntry,
    DetectedElement,
    ImportResult,
    Library,
    LibraryComponent,
    ParsedComponent,
    Project,
    Template,
)
from joinport.model.types import (
    MAX_JOIN_NUMBER,
    MIN_JOIN_NUMBER,
    Category,
    Direction,
    Join,
    JoinTriple,
    JoinType,
    ResultKind,
)

__all__ = [
    # Vocabulary
    "MIN_JOIN_NUMBER",
    "MAX_JOIN_NUMBER",
    "JoinType",
    "Direction",
    "Category",
    "ResultKind",
    "Join",
    "JoinTriple",
    # Records
    "DetectedElement",
    "ParsedComponent",
    "ArchiveEntry",
    "LibraryComponent",
    "Library",
    "Template",
    "Project",
    "ImportResult",
]
