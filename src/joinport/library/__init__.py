# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Merging imported components, templates, and libraries into a project."""

from joinport.library.files import SUPPORTED_FORMATS, import_files
from joinport.library.merge import (
    DEFAULT_LIBRARY_NAME,
    DEFAULT_SIZE,
    ComponentSize,
    append_to_library,
    build_library_component,
    component_type,
    create_library,
    import_components,
    import_json_document,
    merge_import,
    new_id,
)

__all__ = [
    "merge_import",
    "import_files",
    "import_components",
    "import_json_document",
    "create_library",
    "append_to_library",
    "build_library_component",
    "component_type",
    "new_id",
    "ComponentSize",
    "DEFAULT_SIZE",
    "DEFAULT_LIBRARY_NAME",
    "SUPPORTED_FORMATS",
]
