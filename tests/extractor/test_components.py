# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for component extraction from UI source."""

from joinport.extractor import FALLBACK_COMPONENT_NAME, extract_declared_props, parse_source

# ###############
# Helpers
# ###############

_TWO_COMPONENTS = """\
import React from "react";

export function Header({ title }: { title: string }) {
  return <h1 id="heading">{title}</h1>;
}

export default function Footer() {
  return <button onClick={close}>Close</button>;
}
"""


# ###############
# Spans
# ###############


def test_single_exported_component() -> None:
    """An exported arrow-function component with a button is extracted with its props."""
    source = "export const Foo = ({onPress}) => <button onClick={onPress}>Hi</button>"
    result = parse_source(source)

    assert result.errors == []
    [component] = result.components
    assert component.name == "Foo"
    assert component.declared_props == ["onPress"]
    assert component.source_span == source
    [element] = component.detected_elements
    assert element.tag == "button"
    assert element.interactive is True


def test_multiple_components_in_source_order() -> None:
    result = parse_source(_TWO_COMPONENTS)
    assert [component.name for component in result.components] == ["Header", "Footer"]


def test_span_ends_before_next_export() -> None:
    """Each span stops at the next export declaration."""
    header, footer = parse_source(_TWO_COMPONENTS).components

    assert header.source_span.startswith("export function Header")
    assert "Footer" not in header.source_span
    assert footer.source_span.startswith("export default function Footer")
    assert footer.source_span.rstrip().endswith("}")


def test_elements_are_scanned_per_span() -> None:
    header, footer = parse_source(_TWO_COMPONENTS).components

    assert [element.tag for element in header.detected_elements] == ["h1"]
    assert header.detected_elements[0].display_name == "heading"
    assert [element.tag for element in footer.detected_elements] == ["button"]
    # Ordinals restart for every component span.
    assert footer.detected_elements[0].id == "button-1"


def test_lower_case_exports_are_not_components() -> None:
    """Only capitalized exports start a component span."""
    result = parse_source("export function helper() { return 1; }\n")
    assert [component.name for component in result.components] == [FALLBACK_COMPONENT_NAME]


def test_fallback_component_covers_whole_text() -> None:
    """Text with no exported component becomes a single fallback component."""
    text = "<div>Loose markup</div>\n<button>Go</button>\n"
    [component] = parse_source(text).components

    assert component.name == FALLBACK_COMPONENT_NAME
    assert component.declared_props == []
    assert component.source_span == text
    assert [element.tag for element in component.detected_elements] == ["div", "button"]


def test_empty_text_yields_fallback_component() -> None:
    [component] = parse_source("").components
    assert component.name == FALLBACK_COMPONENT_NAME
    assert component.detected_elements == []


def test_export_inside_text_starts_a_new_span() -> None:
    """A line beginning with an export declaration splits the span even inside a string."""
    source = 'export function A() {\n  const s = `\nexport function B() {}`;\n  return s;\n}\n'
    result = parse_source(source)
    assert [component.name for component in result.components] == ["A", "B"]


# ###############
# Declared Props
# ###############


def test_typed_props() -> None:
    span = "export function Knob(label: string, level?: number) {}"
    assert extract_declared_props(span) == ["label", "level"]


def test_destructured_props_with_defaults() -> None:
    span = "export const Slider = ({ min = 0, max, onChange }) => null"
    assert extract_declared_props(span) == ["min", "max", "onChange"]


def test_destructured_and_typed_names_are_deduplicated() -> None:
    span = "export function Header({ title }: { title: string }) {}"
    assert extract_declared_props(span) == ["title"]


def test_no_parameters() -> None:
    assert extract_declared_props("export function Empty() {}") == []


def test_no_parenthesized_group() -> None:
    assert extract_declared_props("export const Logo = <img />") == []
