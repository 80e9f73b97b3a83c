# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Merging extracted components and data files into a project.

This is the only part of joinport that changes project state. Updates follow
a read-modify-replace pattern: the current ``libraries`` or ``templates``
list is read, a new list with the appended items is built, and the
attribute is replaced. Existing entries are never modified or removed.

Failures are recovered per file and reported as :class:`ImportResult`
records; a failing file never aborts the rest of the batch.
"""

from __future__ import annotations

import json
import re
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from joinport.archive.reader import FileReader
from joinport.extractor.components import parse_source
from joinport.extractor.joins import allocate_joins
from joinport.logging import get_logger
from joinport.model.entities import (
    ArchiveEntry,
    ImportResult,
    Library,
    LibraryComponent,
    ParsedComponent,
    Project,
    Template,
)
from joinport.model.types import Category, ResultKind

# ###############
# Public Interface
# ###############

DEFAULT_LIBRARY_NAME = "Imported Components"


@dataclass(frozen=True)
class ComponentSize:
    """Size estimate copied onto newly created library components."""

    width: int = 200
    height: int = 100


DEFAULT_SIZE = ComponentSize()


def new_id(prefix: str) -> str:
    """Return a fresh identifier such as ``library_3f2a9c1b7d4e``; ids are never reused."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def component_type(name: str) -> str:
    """Return the library component type for a component name (``custom-<slug>``)."""
    return "custom-" + _WHITESPACE.sub("-", name.strip().lower())


def build_library_component(
    component: ParsedComponent,
    index: int,
    size: ComponentSize = DEFAULT_SIZE,
    source_path: str | None = None,
) -> LibraryComponent:
    """Turn an extracted component into a library entry.

    Args:
        component: The extracted component.
        index: Position of the component in the current import batch; selects
            the join block via :func:`~joinport.extractor.joins.allocate_joins`.
        size: Width and height for the new component.
        source_path: Archive or file path the component came from.
    """
    config: dict[str, Any] = {
        "componentCode": component.source_span,
        "props": list(component.declared_props),
        "elements": [
            element.suggested_join().model_dump(mode="json", exclude_none=True)
            for element in component.detected_elements
        ],
    }
    if source_path is not None:
        config["sourcePath"] = source_path

    return LibraryComponent(
        id=new_id("el"),
        type=component_type(component.name),
        name=component.name,
        width=size.width,
        height=size.height,
        joins=allocate_joins(index).as_joins(),
        config=config,
    )


def create_library(project: Project, name: str) -> Library:
    """Append an empty library named *name* to the project.

    Raises:
        ValueError: If *name* is blank.
    """
    if not name.strip():
        raise ValueError("Library name must not be empty")
    library = Library(id=new_id("library"), name=name.strip())
    project.libraries = [*project.libraries, library]
    return library


def append_to_library(
    project: Project,
    components: Iterable[LibraryComponent],
    *,
    target_library_id: str | None = None,
    new_library_name: str | None = None,
) -> tuple[Library, bool]:
    """Append components to an existing library, or create the library.

    When *target_library_id* names an existing library its components are
    extended. Otherwise a new library is created, keeping *target_library_id*
    as its id when one was given.

    Returns:
        The updated or created library and whether it was created.
    """
    components = list(components)
    existing = project.find_library(target_library_id) if target_library_id else None
    if existing is not None:
        updated = existing.model_copy(update={"components": [*existing.components, *components]})
        project.libraries = [updated if library.id == existing.id else library for library in project.libraries]
        return updated, False

    library = Library(
        id=target_library_id or new_id("library"),
        name=(new_library_name or "").strip() or DEFAULT_LIBRARY_NAME,
        components=components,
    )
    project.libraries = [*project.libraries, library]
    return library, True


def import_components(
    project: Project,
    components: list[ParsedComponent],
    target_library_id: str | None = None,
    *,
    new_library_name: str | None = None,
    size: ComponentSize = DEFAULT_SIZE,
    source_path: str | None = None,
) -> Library:
    """Import components picked from a single file into a library.

    Joins are allocated by position in *components*.
    """
    library_components = [
        build_library_component(component, index, size, source_path) for index, component in enumerate(components)
    ]
    library, _ = append_to_library(
        project,
        library_components,
        target_library_id=target_library_id,
        new_library_name=new_library_name,
    )
    return library


async def merge_import(
    project: Project,
    selected: list[ArchiveEntry],
    file_reader: FileReader,
    *,
    target_library_id: str | None = None,
    new_library_name: str | None = None,
    size: ComponentSize = DEFAULT_SIZE,
) -> list[ImportResult]:
    """Import the selected archive entries into *project*.

    Entries are processed sequentially in the given order:

    * ``component`` entries are read and run through
      :func:`~joinport.extractor.components.parse_source`; every extracted
      component becomes a library entry with joins allocated by its position
      in the whole batch. All of them go into one library, created or
      appended to once the batch is done.
    * ``data`` entries with a ``.json`` extension are imported as a template
      (JSON holds a ``pages`` list) or a library (JSON holds a
      ``components`` list). Anything else yields one warning or error and no
      change.
    * ``style`` and ``asset`` entries are acknowledged with a summary warning.

    Args:
        project: Project whose ``libraries`` and ``templates`` are extended.
        selected: Entries to import, usually ``ArchiveTree.selected()``.
        file_reader: Coroutine returning the text of an entry by path.
        target_library_id: Library receiving the components; created when absent.
        new_library_name: Name of the library when one is created.
        size: Size estimate copied onto each new component.

    Returns:
        The import log, one record per file or logical unit, never empty.
    """
    if not selected:
        return [
            ImportResult(
                kind=ResultKind.WARNING,
                message="No files selected",
                details="Select at least one file to import.",
            )
        ]

    results: list[ImportResult] = []
    library_components: list[LibraryComponent] = []
    component_files = 0
    imported_data = 0
    noted: dict[Category, list[str]] = {Category.STYLE: [], Category.ASSET: []}

    for entry in selected:
        if entry.category == Category.COMPONENT:
            component_files += 1
            results.append(await _import_component_entry(entry, file_reader, library_components, size))
        elif entry.category == Category.DATA and entry.extension == "json":
            result = await _import_data_entry(project, entry, file_reader)
            if result.kind == ResultKind.SUCCESS:
                imported_data += 1
            results.append(result)
        elif entry.category in noted:
            noted[entry.category].append(entry.name)
        else:
            _logger.debug("Nothing to import from %s (%s)", entry.path, entry.category.value)

    if library_components:
        library, created = append_to_library(
            project,
            library_components,
            target_library_id=target_library_id,
            new_library_name=new_library_name,
        )
        verb = "created" if created else "updated"
        results.insert(
            0,
            ImportResult(
                kind=ResultKind.SUCCESS,
                message=f'Library "{library.name}" {verb}',
                details=f"{len(library_components)} components from {component_files} files",
                count=len(library_components),
            ),
        )

    if noted[Category.STYLE]:
        results.append(
            ImportResult(
                kind=ResultKind.WARNING,
                message=f"{len(noted[Category.STYLE])} style file(s) noted",
                details=f"{', '.join(noted[Category.STYLE])}. Style extraction is manual.",
                count=len(noted[Category.STYLE]),
            )
        )
    if noted[Category.ASSET]:
        results.append(
            ImportResult(
                kind=ResultKind.WARNING,
                message=f"{len(noted[Category.ASSET])} asset(s) noted",
                details=f"{', '.join(noted[Category.ASSET])}. Assets can be referenced in components.",
                count=len(noted[Category.ASSET]),
            )
        )

    if not library_components and not imported_data and not results:
        results.append(
            ImportResult(
                kind=ResultKind.WARNING,
                message="No importable content found",
                details="Select component files (.tsx, .jsx, .ts, .js) or JSON files with pages or components.",
            )
        )
    return results


def import_json_document(project: Project, parsed: object, file_name: str) -> ImportResult:
    """Import an already-parsed JSON document as a template or a library.

    The project is changed only when the whole document validates.
    """
    if not isinstance(parsed, dict):
        return ImportResult(
            kind=ResultKind.WARNING,
            message=f"{file_name}: Not a template or library",
            details="Expected a JSON object with a 'pages' or 'components' list.",
        )
    stem = _strip_extension(file_name)
    document = dict(parsed)

    if isinstance(document.get("pages"), list):
        document.setdefault("id", new_id("template"))
        document.setdefault("name", stem)
        template = Template.model_validate(document)
        project.templates = [*project.templates, template]
        return ImportResult(
            kind=ResultKind.SUCCESS,
            message=f'Template "{template.name}" imported',
            details=f"{len(template.pages)} pages from {file_name}",
            count=len(template.pages),
        )

    if isinstance(document.get("components"), list):
        document.setdefault("id", new_id("library"))
        document.setdefault("name", stem)
        document["components"] = [_with_component_id(component) for component in document["components"]]
        library = Library.model_validate(document)
        project.libraries = [*project.libraries, library]
        return ImportResult(
            kind=ResultKind.SUCCESS,
            message=f'Library "{library.name}" imported',
            details=f"{len(library.components)} components",
            count=len(library.components),
        )

    return ImportResult(
        kind=ResultKind.WARNING,
        message=f"{file_name}: Not a template or library",
        details="Expected a JSON object with a 'pages' or 'components' list.",
    )


# ################
# Implementation
# ################

_logger = get_logger("library.merge")

_WHITESPACE = re.compile(r"\s+")

# Decoding and validation failures of a file that was read.
_PARSE_ERRORS = (ValueError, TypeError)


async def _import_component_entry(
    entry: ArchiveEntry,
    file_reader: FileReader,
    library_components: list[LibraryComponent],
    size: ComponentSize,
) -> ImportResult:
    """Extract the components of one code file and append them to *library_components*."""
    _logger.debug("Extracting components from %s", entry.path)
    try:
        text = await file_reader(entry.path)
    except Exception as exc:
        _logger.warning("Cannot read %s: %s", entry.path, exc)
        return ImportResult(kind=ResultKind.ERROR, message=f"{entry.name}: Read error", details=str(exc))

    components = parse_source(text).components
    first_index = len(library_components)
    try:
        built = [
            build_library_component(component, first_index + offset, size, entry.path)
            for offset, component in enumerate(components)
        ]
    except ValueError as exc:
        # Join numbers past the 1..65535 range fail validation.
        _logger.warning("Cannot allocate joins for %s: %s", entry.path, exc)
        return ImportResult(kind=ResultKind.ERROR, message=f"{entry.name}: Join allocation error", details=str(exc))
    library_components.extend(built)

    names = ", ".join(component.name for component in components)
    if not any(component.detected_elements for component in components):
        return ImportResult(
            kind=ResultKind.WARNING,
            message=f"{entry.name}: {len(components)} component(s) without detected elements",
            details=f"{names}. Joins were allocated but no controls were recognised.",
            count=len(components),
        )
    return ImportResult(
        kind=ResultKind.SUCCESS,
        message=f"{entry.name}: {len(components)} component(s)",
        details=names,
        count=len(components),
    )


async def _import_data_entry(project: Project, entry: ArchiveEntry, file_reader: FileReader) -> ImportResult:
    """Import one JSON data file as a template or a library."""
    _logger.debug("Importing data file %s", entry.path)
    try:
        text = await file_reader(entry.path)
    except Exception as exc:
        _logger.warning("Cannot read %s: %s", entry.path, exc)
        return ImportResult(kind=ResultKind.ERROR, message=f"{entry.name}: Read error", details=str(exc))
    try:
        parsed = json.loads(text)
        return import_json_document(project, parsed, entry.name)
    except _PARSE_ERRORS as exc:
        _logger.warning("Cannot import %s: %s", entry.path, exc)
        return ImportResult(kind=ResultKind.ERROR, message=f"{entry.name}: Parse error", details=str(exc))


def _with_component_id(component: object) -> object:
    """Give a library component record an id when it has none."""
    if isinstance(component, dict) and not component.get("id"):
        return {**component, "id": new_id("el")}
    return component


def _strip_extension(file_name: str) -> str:
    """Return *file_name* without its last extension."""
    return file_name.rsplit(".", 1)[0] if "." in file_name else file_name
