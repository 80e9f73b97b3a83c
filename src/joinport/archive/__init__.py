# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Archive access, entry classification, and the selection tree."""

from joinport.archive.classifier import (
    DEFAULT_RULES,
    PRESELECTED_CATEGORIES,
    ClassifierRules,
    RawEntry,
    categorize,
    classify,
    classify_archive,
    is_auto_excluded,
    split_name,
)
from joinport.archive.reader import (
    Archive,
    ArchiveError,
    FileReader,
    ProjectCandidate,
    detect_project_files,
    format_size,
    open_archive,
    page_element_count,
    read_file_text,
)
from joinport.archive.tree import (
    ArchiveTree,
    DirectoryGroup,
    SelectionState,
    TreeFilter,
    TreeStats,
    TreeView,
    selection_state,
)

__all__ = [
    # Classification
    "ClassifierRules",
    "DEFAULT_RULES",
    "PRESELECTED_CATEGORIES",
    "RawEntry",
    "categorize",
    "classify",
    "classify_archive",
    "is_auto_excluded",
    "split_name",
    # Archive access
    "Archive",
    "ArchiveError",
    "FileReader",
    "ProjectCandidate",
    "detect_project_files",
    "format_size",
    "open_archive",
    "page_element_count",
    "read_file_text",
    # Selection tree
    "ArchiveTree",
    "DirectoryGroup",
    "SelectionState",
    "TreeFilter",
    "TreeStats",
    "TreeView",
    "selection_state",
]
