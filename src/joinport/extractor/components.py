# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Component extraction from UI source files.

A component starts at an export declaration of a capitalized function or
const and runs until the next such declaration at the start of a line, or
the end of the file. The boundary is textual: an ``export function`` inside
a string or comment that begins a line also starts a new span.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from joinport.model.entities import ParsedComponent
from joinport.scanner.elements import scan_elements

# ###############
# Public Interface
# ###############

FALLBACK_COMPONENT_NAME = "ImportedComponent"


@dataclass(frozen=True)
class ExtractionResult:
    """Components found in one file.

    Attributes:
        components: Extracted components in source order. Never empty.
        errors: Extraction problems. Extraction degrades instead of failing,
            so this is currently always empty.
    """

    components: list[ParsedComponent]
    errors: list[str] = field(default_factory=list)


def parse_source(text: str) -> ExtractionResult:
    """Extract component definitions and their elements from source text.

    When no exported component declaration is found, the whole text becomes a
    single component named ``FALLBACK_COMPONENT_NAME`` so any file yields one
    importable unit.
    """
    components = [
        ParsedComponent(
            name=match.group("name"),
            declared_props=extract_declared_props(match.group(0)),
            source_span=match.group(0),
            detected_elements=scan_elements(match.group(0)),
        )
        for match in _COMPONENT_SPAN.finditer(text)
    ]

    if not components:
        components.append(
            ParsedComponent(
                name=FALLBACK_COMPONENT_NAME,
                declared_props=[],
                source_span=text,
                detected_elements=scan_elements(text),
            )
        )

    return ExtractionResult(components=components)


def extract_declared_props(span: str) -> list[str]:
    """Return the parameter names declared in the first parenthesized group of *span*.

    Two shapes are recognised: names of a destructured options object
    (``({ title, onPress = noop })``) and typed names (``title?: string``).
    Names are returned once each, in order of appearance.
    """
    group = _FIRST_PAREN_GROUP.search(span)
    if group is None:
        return []
    params = group.group(1)

    names: list[str] = []
    destructured = _DESTRUCTURED_OBJECT.match(params)
    if destructured is not None:
        for item in destructured.group(1).split(","):
            name = _LEADING_IDENTIFIER.match(item)
            if name is not None:
                names.append(name.group(1))
    names.extend(_TYPED_NAME.findall(params))

    return list(dict.fromkeys(names))


# ################
# Implementation
# ################

_COMPONENT_SPAN = re.compile(
    r"export\s+(?:default\s+)?(?:function|const)\s+(?P<name>[A-Z][A-Za-z0-9_]*)"
    r".*?"
    r"(?=\nexport\s+(?:default\s+)?(?:function|const)\s+[A-Z]|\Z)",
    re.DOTALL,
)

_FIRST_PAREN_GROUP = re.compile(r"\(([^)]*)\)")

_DESTRUCTURED_OBJECT = re.compile(r"\s*\{([^{}]*)\}")

_LEADING_IDENTIFIER = re.compile(r"\s*([A-Za-z_$][A-Za-z0-9_$]*)")

_TYPED_NAME = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\??\s*:")
