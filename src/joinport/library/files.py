# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Import of loose files (projects, templates, libraries, component sources)."""

from __future__ import annotations

import json

from joinport.archive.classifier import split_name
from joinport.archive.reader import FileReader, page_element_count, read_file_text
from joinport.extractor.components import parse_source
from joinport.library.merge import (
    DEFAULT_SIZE,
    ComponentSize,
    import_components,
    import_json_document,
)
from joinport.logging import get_logger
from joinport.model.entities import ImportResult, Project
from joinport.model.types import ResultKind

# ###############
# Public Interface
# ###############

COMPONENT_SOURCE_EXTENSIONS: frozenset[str] = frozenset({"tsx", "jsx", "ts", "js"})

SUPPORTED_FORMATS = ".crestron, .crestron-template, .crestron-library, .json, .tsx, .jsx, .ts, .js"


async def import_files(
    project: Project,
    paths: list[str],
    file_reader: FileReader = read_file_text,
    *,
    size: ComponentSize = DEFAULT_SIZE,
) -> list[ImportResult]:
    """Import loose files one by one, dispatching on the file extension.

    * ``.crestron``: a full project replacing the current one.
    * ``.crestron-template``, ``.crestron-library`` and ``.json``: a template
      (``pages`` list) or a library (``components`` list).
    * ``.tsx``, ``.jsx``, ``.ts``, ``.js``: components, one new library per
      file named after the file.

    Anything else is skipped with a warning. Read and parse failures are
    reported per file and do not stop the remaining files.
    """
    results: list[ImportResult] = []
    for path in paths:
        name, extension = split_name(path)
        if extension not in _IMPORTABLE_EXTENSIONS:
            results.append(
                ImportResult(
                    kind=ResultKind.WARNING,
                    message=f"{name}: Skipped",
                    details=f"Supported: {SUPPORTED_FORMATS}",
                )
            )
            continue
        _logger.debug("Importing %s", path)
        try:
            text = await file_reader(path)
        except Exception as exc:
            _logger.warning("Cannot read %s: %s", path, exc)
            results.append(ImportResult(kind=ResultKind.ERROR, message=f"{name}: Read error", details=str(exc)))
            continue
        try:
            if extension == "crestron":
                results.append(_load_project(project, json.loads(text), name))
            elif extension in COMPONENT_SOURCE_EXTENSIONS:
                results.append(_import_source(project, text, path, name, size))
            else:
                results.append(import_json_document(project, json.loads(text), name))
        except (ValueError, TypeError) as exc:
            _logger.warning("Cannot import %s: %s", path, exc)
            results.append(ImportResult(kind=ResultKind.ERROR, message=f"{name}: Parse error", details=str(exc)))
    return results


# ################
# Implementation
# ################

_logger = get_logger("library.files")

_IMPORTABLE_EXTENSIONS = COMPONENT_SOURCE_EXTENSIONS | {"crestron", "crestron-template", "crestron-library", "json"}


def _load_project(project: Project, parsed: object, file_name: str) -> ImportResult:
    """Replace the project state with a loaded ``.crestron`` project."""
    if not isinstance(parsed, dict) or not isinstance(parsed.get("pages"), list):
        return ImportResult(kind=ResultKind.ERROR, message=f"{file_name}: Invalid .crestron file structure")
    loaded = Project.model_validate(parsed)
    project.name = loaded.name
    project.pages = loaded.pages
    # Libraries and templates absent from the file are kept.
    if "templates" in parsed:
        project.templates = loaded.templates
    if "libraries" in parsed:
        project.libraries = loaded.libraries
    element_count = sum(page_element_count(page) for page in loaded.pages)
    return ImportResult(
        kind=ResultKind.SUCCESS,
        message=f'Project "{loaded.name}" loaded',
        details=f"{len(loaded.pages)} pages, {element_count} elements",
        count=len(loaded.pages),
    )


def _import_source(project: Project, text: str, path: str, file_name: str, size: ComponentSize) -> ImportResult:
    """Extract the components of one source file into a new library named after it."""
    components = parse_source(text).components
    library = import_components(
        project,
        components,
        new_library_name=file_name.rsplit(".", 1)[0],
        size=size,
        source_path=path,
    )
    return ImportResult(
        kind=ResultKind.SUCCESS,
        message=f'Parsed "{file_name}"',
        details=f'{len(components)} components -> library "{library.name}"',
        count=len(components),
    )
