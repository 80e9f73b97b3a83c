# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Heuristic scanner for tag-like constructs in UI source text.

The scanner does not parse markup. It looks for opening-tag shapes such as
``<button onClick={go}>``, names each one, decides whether it is an
interactive control, and suggests a join for it. Malformed or unmatched text
is skipped, so scanning never fails.
"""

from __future__ import annotations

import re

from joinport.model.entities import DetectedElement
from joinport.model.types import Direction, JoinType

# ###############
# Public Interface
# ###############

ELEMENT_JOIN_BASE = 1100

INTERACTIVE_TAGS: frozenset[str] = frozenset({"button", "input", "select", "textarea"})


def scan_elements(text: str) -> list[DetectedElement]:
    """Scan a block of source text for opening tags.

    Args:
        text: A whole file or the source span of a single component.

    Returns:
        The detected elements in source order. Join numbers are
        ``ELEMENT_JOIN_BASE + ordinal`` with a 1-based ordinal, so they are
        unique within one call.
    """
    elements: list[DetectedElement] = []
    for match in _OPENING_TAG.finditer(text):
        ordinal = len(elements) + 1
        elements.append(_classify_tag(match.group(1), match.group(2) or "", ordinal))
    return elements


# ################
# Implementation
# ################

# Closing tags never match: the identifier must follow '<' directly.
_OPENING_TAG = re.compile(r"<([A-Za-z][A-Za-z0-9-]*)\b([^>]*)>")

_NAME_ATTRIBUTE = re.compile(r"""(id|name|aria-label)=["']([^"']+)["']""", re.IGNORECASE)

_INTERACTIVE_HINT = re.compile(
    r"""onClick|onChange|onInput|type=["']range["']|button|input|select|textarea""",
    re.IGNORECASE,
)

_ANALOG_HINT = re.compile(r"range|slider|value|level", re.IGNORECASE)

_SERIAL_HINT = re.compile(r"text|label|title", re.IGNORECASE)

_BOUND_VALUE_HINT = re.compile(r"value=|checked=|readOnly|disabled", re.IGNORECASE)


def _classify_tag(identifier: str, attributes: str, ordinal: int) -> DetectedElement:
    """Build a DetectedElement from one opening-tag match."""
    tag = (identifier or "div").lower()
    element_id = f"{tag}-{ordinal}"

    name_match = _NAME_ATTRIBUTE.search(attributes)
    display_name = name_match.group(2) if name_match else element_id

    interactive = bool(_INTERACTIVE_HINT.search(attributes)) or tag in INTERACTIVE_TAGS

    if interactive:
        join_type = _suggest_join_type(attributes)
        direction = Direction.OUTPUT if _BOUND_VALUE_HINT.search(attributes) else Direction.INPUT
    else:
        # Static content: labels and text fed from the control system.
        join_type = JoinType.SERIAL
        direction = Direction.OUTPUT

    return DetectedElement(
        id=element_id,
        display_name=display_name,
        tag=tag,
        interactive=interactive,
        suggested_join_type=join_type,
        suggested_direction=direction,
        suggested_join_number=ELEMENT_JOIN_BASE + ordinal,
    )


def _suggest_join_type(attributes: str) -> JoinType:
    """Pick a join type for an interactive element from its attribute text."""
    if _ANALOG_HINT.search(attributes):
        return JoinType.ANALOG
    if _SERIAL_HINT.search(attributes):
        return JoinType.SERIAL
    return JoinType.DIGITAL
