# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the opening-tag element scanner."""

from joinport.model import Direction, JoinType
from joinport.scanner import ELEMENT_JOIN_BASE, scan_elements

# ###############
# Detection
# ###############


def test_empty_text_yields_no_elements() -> None:
    assert scan_elements("") == []


def test_plain_text_yields_no_elements() -> None:
    """Text without tag shapes, including comparisons, yields nothing."""
    assert scan_elements("const ok = a < 3 && b > 2;") == []


def test_closing_tags_are_not_detected() -> None:
    """Only opening tags are reported."""
    elements = scan_elements("<div>hello</div>")
    assert [element.tag for element in elements] == ["div"]


def test_elements_are_numbered_in_source_order() -> None:
    """Ids and join numbers follow the 1-based ordinal of each tag."""
    elements = scan_elements("<span>a</span><button>b</button><p>c</p>")

    assert [element.id for element in elements] == ["span-1", "button-2", "p-3"]
    assert [element.suggested_join_number for element in elements] == [
        ELEMENT_JOIN_BASE + 1,
        ELEMENT_JOIN_BASE + 2,
        ELEMENT_JOIN_BASE + 3,
    ]


def test_join_numbers_are_unique_within_one_scan() -> None:
    text = "".join(f"<button id='b{i}'>x</button>" for i in range(20))
    numbers = [element.suggested_join_number for element in scan_elements(text)]
    assert len(numbers) == len(set(numbers)) == 20


def test_tag_is_lower_cased() -> None:
    elements = scan_elements("<Button onClick={go}>Go</Button>")
    assert elements[0].tag == "button"
    assert elements[0].id == "button-1"


# ###############
# Naming
# ###############


def test_name_taken_from_id_attribute() -> None:
    elements = scan_elements('<button id="power">On</button>')
    assert elements[0].display_name == "power"


def test_name_taken_from_aria_label() -> None:
    elements = scan_elements("<div aria-label='Volume'></div>")
    assert elements[0].display_name == "Volume"


def test_name_falls_back_to_element_id() -> None:
    elements = scan_elements("<section><h1>Title</h1></section>")
    assert [element.display_name for element in elements] == ["section-1", "h1-2"]


# ###############
# Join Suggestions
# ###############


def test_button_with_click_handler_is_digital_input() -> None:
    """A clickable button is an interactive digital input."""
    [element] = scan_elements("<button onClick={go}>Go</button>")

    assert element.interactive is True
    assert element.suggested_join_type == JoinType.DIGITAL
    assert element.suggested_direction == Direction.INPUT


def test_range_input_with_value_is_analog_output() -> None:
    """A range input bound to a value is analog and fed by the control system."""
    [element] = scan_elements('<input type="range" value={level} />')

    assert element.interactive is True
    assert element.suggested_join_type == JoinType.ANALOG
    assert element.suggested_direction == Direction.OUTPUT


def test_interactive_text_field_is_serial() -> None:
    [element] = scan_elements('<input name="title" />')

    assert element.interactive is True
    assert element.suggested_join_type == JoinType.SERIAL
    assert element.suggested_direction == Direction.INPUT


def test_interactive_tag_without_hints_is_interactive() -> None:
    """Form controls are interactive even with no attributes."""
    [element] = scan_elements("<select>")
    assert element.interactive is True
    assert element.suggested_join_type == JoinType.DIGITAL


def test_static_element_is_serial_output() -> None:
    """Non-interactive elements are suggested as serial outputs."""
    [element] = scan_elements('<div className="panel">Status</div>')

    assert element.interactive is False
    assert element.suggested_join_type == JoinType.SERIAL
    assert element.suggested_direction == Direction.OUTPUT


def test_suggested_join_is_a_valid_join() -> None:
    [element] = scan_elements('<button id="mute" onClick={toggle}>Mute</button>')
    join = element.suggested_join()
    assert join.number == 1101
    assert join.description == "mute"
