# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tag-level scanning of UI source text."""

from joinport.scanner.elements import ELEMENT_JOIN_BASE, INTERACTIVE_TAGS, scan_elements

__all__ = [
    "ELEMENT_JOIN_BASE",
    "INTERACTIVE_TAGS",
    "scan_elements",
]
