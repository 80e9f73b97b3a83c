# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Directory-grouped, filterable selection model over classified archive entries.

:class:`ArchiveTree` is an immutable snapshot. Every selection or expansion
change returns a new tree; the entries themselves are frozen and replaced
rather than mutated. Filtering only affects what :meth:`ArchiveTree.view`
returns and never touches selection state.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from functools import cached_property

from joinport.model.entities import ArchiveEntry
from joinport.model.types import Category

# ###############
# Public Interface
# ###############


class SelectionState(Enum):
    """Tri-state selection indicator of a directory header."""

    ALL = "all"
    NONE = "none"
    PARTIAL = "partial"


@dataclass(frozen=True)
class TreeFilter:
    """What the tree currently shows.

    Attributes:
        search: Case-insensitive substring matched against entry paths.
        category: Only show entries of this category; None shows all.
        show_excluded: Whether auto-excluded entries are shown.
    """

    search: str = ""
    category: Category | None = None
    show_excluded: bool = False

    def matches(self, entry: ArchiveEntry) -> bool:
        """Return True if *entry* passes the filter."""
        if not self.show_excluded and entry.auto_excluded:
            return False
        if self.category is not None and entry.category != self.category:
            return False
        return not self.search or self.search.lower() in entry.path.lower()


@dataclass(frozen=True)
class DirectoryGroup:
    """The files directly inside one directory, as rendered under its header.

    Attributes:
        path: Directory path including the trailing ``/``.
        files: Filtered entries whose parent directory is *path*.
        top_level: True for first-level directories.
        expanded: Whether the group's files are shown.
        selection: Tri-state indicator computed from *files*.
    """

    path: str
    files: tuple[ArchiveEntry, ...]
    top_level: bool
    expanded: bool
    selection: SelectionState

    @property
    def depth(self) -> int:
        """Nesting depth, 0 for top-level directories."""
        return self.path.count("/") - 1


@dataclass(frozen=True)
class TreeView:
    """Renderable tree: files at the archive root plus visible directory groups."""

    root_files: tuple[ArchiveEntry, ...] = ()
    directories: tuple[DirectoryGroup, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when nothing matches the filter."""
        return not self.root_files and not self.directories


@dataclass(frozen=True)
class TreeStats:
    """Summary counters shown above the tree."""

    selected_count: int
    usable_count: int
    excluded_count: int
    selected_size: int
    category_counts: dict[Category, int] = field(default_factory=dict)


def selection_state(entries: Iterable[ArchiveEntry]) -> SelectionState:
    """Compute the tri-state indicator for a group of entries."""
    entries = list(entries)
    selected = sum(1 for entry in entries if entry.selected)
    if entries and selected == len(entries):
        return SelectionState.ALL
    if selected == 0:
        return SelectionState.NONE
    return SelectionState.PARTIAL


@dataclass(frozen=True)
class ArchiveTree:
    """Selection and expansion state over a fixed set of archive entries."""

    entries: tuple[ArchiveEntry, ...]
    expanded: frozenset[str] = frozenset()

    @classmethod
    def from_entries(cls, entries: Iterable[ArchiveEntry]) -> ArchiveTree:
        """Build a tree with every top-level directory expanded."""
        entries = tuple(entries)
        top_dirs = frozenset(_top_dir(entry.path) for entry in entries if "/" in entry.path)
        return cls(entries=entries, expanded=top_dirs)

    @cached_property
    def by_path(self) -> dict[str, ArchiveEntry]:
        """Index of entries by archive path."""
        return {entry.path: entry for entry in self.entries}

    def entry(self, path: str) -> ArchiveEntry:
        """Return the entry at *path*.

        Raises:
            KeyError: If no entry has that path.
        """
        return self.by_path[path]

    def selected(self) -> list[ArchiveEntry]:
        """Return the selected entries in archive order."""
        return [entry for entry in self.entries if entry.selected]

    def toggle_entry(self, path: str) -> ArchiveTree:
        """Flip the selection of one entry. Auto-excluded entries are left unchanged.

        Raises:
            KeyError: If no entry has that path.
        """
        target = self.entry(path)
        if target.auto_excluded:
            return self
        return self._with_selection(lambda entry: entry.path == path, not target.selected)

    def toggle_directory_selection(self, prefix: str, select: bool) -> ArchiveTree:
        """Set the selection of every non-excluded entry whose path starts with *prefix*."""
        return self._with_selection(lambda entry: entry.path.startswith(prefix), select)

    def select_all(self, select: bool) -> ArchiveTree:
        """Set the selection of every non-excluded entry."""
        return self.toggle_directory_selection("", select)

    def toggle_expanded(self, directory: str) -> ArchiveTree:
        """Expand a collapsed directory or collapse an expanded one."""
        return replace(self, expanded=self.expanded ^ {directory})

    def view(self, tree_filter: TreeFilter | None = None) -> TreeView:
        """Group the filtered entries by directory.

        Top-level directories are always listed; nested directories only when
        their top-level directory is expanded. A directory's files are shown
        when it or its top-level directory is expanded.
        """
        tree_filter = tree_filter or TreeFilter()
        root_files: list[ArchiveEntry] = []
        buckets: dict[str, list[ArchiveEntry]] = {}
        for entry in self.entries:
            if not tree_filter.matches(entry):
                continue
            slash = entry.path.rfind("/")
            if slash == -1:
                root_files.append(entry)
            else:
                buckets.setdefault(entry.path[: slash + 1], []).append(entry)

        groups: list[DirectoryGroup] = []
        for directory in sorted(buckets):
            top_dir = _top_dir(directory)
            top_level = directory == top_dir
            if not top_level and top_dir not in self.expanded:
                continue
            files = tuple(buckets[directory])
            groups.append(
                DirectoryGroup(
                    path=directory,
                    files=files,
                    top_level=top_level,
                    expanded=directory in self.expanded or top_dir in self.expanded,
                    selection=selection_state(files),
                )
            )
        return TreeView(root_files=tuple(root_files), directories=tuple(groups))

    def stats(self) -> TreeStats:
        """Count selected, usable and excluded entries over the whole archive."""
        usable = [entry for entry in self.entries if not entry.auto_excluded]
        selected = self.selected()
        return TreeStats(
            selected_count=len(selected),
            usable_count=len(usable),
            excluded_count=len(self.entries) - len(usable),
            selected_size=sum(entry.size_bytes for entry in selected),
            category_counts=dict(Counter(entry.category for entry in usable)),
        )

    def _with_selection(self, predicate: Callable[[ArchiveEntry], bool], select: bool) -> ArchiveTree:
        """Return a tree where non-excluded entries matching *predicate* have ``selected = select``."""
        entries = tuple(
            entry.model_copy(update={"selected": select})
            if predicate(entry) and not entry.auto_excluded and entry.selected != select
            else entry
            for entry in self.entries
        )
        return replace(self, entries=entries)


# ################
# Implementation
# ################


def _top_dir(path: str) -> str:
    """Return the first path segment with a trailing slash."""
    return path.split("/", 1)[0] + "/"
