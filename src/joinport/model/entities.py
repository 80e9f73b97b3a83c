# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Records produced and consumed by the import pipeline, and the persisted project shape."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from joinport.model.types import Category, Direction, Join, JoinType, ResultKind

# ###############
# Public Interface
# ###############


class DetectedElement(BaseModel):
    """A tag-like construct found in source text, with a suggested join."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    tag: str
    interactive: bool
    suggested_join_type: JoinType
    suggested_direction: Direction
    suggested_join_number: int

    def suggested_join(self) -> Join:
        """Return the suggestion as a join record."""
        return Join(
            type=self.suggested_join_type,
            number=self.suggested_join_number,
            direction=self.suggested_direction,
            description=self.display_name,
        )


class ParsedComponent(BaseModel):
    """One exported component-like definition extracted from a source file."""

    model_config = ConfigDict(frozen=True)

    name: str
    declared_props: list[str] = _Field(default_factory=list)
    source_span: str = ""
    detected_elements: list[DetectedElement] = _Field(default_factory=list)


class ArchiveEntry(BaseModel):
    """A classified file entry from an opened archive.

    Entries are immutable; selection changes produce a copy with a new
    ``selected`` value.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    name: str
    extension: str
    is_directory: bool = False
    size_bytes: int = 0
    category: Category
    auto_excluded: bool
    selected: bool


class LibraryComponent(BaseModel):
    """A reusable component definition stored in a project library."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: str
    name: str | None = None
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    joins: dict[str, Join] = _Field(default_factory=dict)
    style: dict[str, Any] = _Field(default_factory=dict)
    config: dict[str, Any] = _Field(default_factory=dict)


class Library(BaseModel):
    """A named, persisted collection of reusable component definitions."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    components: list[LibraryComponent] = _Field(default_factory=list)


class Template(BaseModel):
    """A named, persisted collection of full page layouts."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    pages: list[dict[str, Any]] = _Field(default_factory=list)


class Project(BaseModel):
    """The project-level state touched by imports.

    Pages are owned by the editor and carried through untouched.
    """

    model_config = ConfigDict(extra="allow")

    name: str = "Untitled Project"
    pages: list[dict[str, Any]] = _Field(default_factory=list)
    templates: list[Template] = _Field(default_factory=list)
    libraries: list[Library] = _Field(default_factory=list)

    def find_library(self, library_id: str) -> Library | None:
        """Return the library with the given id, or None."""
        for library in self.libraries:
            if library.id == library_id:
                return library
        return None


class ImportResult(BaseModel):
    """A single line of the import log shown to the user."""

    model_config = ConfigDict(frozen=True)

    kind: ResultKind
    message: str
    details: str | None = None
    count: int | None = None
