# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for join lists recovered from program source."""

from joinport.extractor import (
    JoinBlock,
    ParsedJoin,
    detect_join_pattern,
    multiply_join_block,
    parse_join_list,
    suggest_join_mappings,
)
from joinport.model import JoinType

# ###############
# Helpers
# ###############


def _join(number: int, join_type: JoinType = JoinType.DIGITAL) -> ParsedJoin:
    return ParsedJoin(type=join_type, number=number, name="", description="", group="Imported")


# ###############
# Parsing
# ###############


def test_parse_declarations() -> None:
    """Each recognised line yields one join in source order."""
    text = """\
// Lobby panel
const ushort PowerOn = Digital Join 21;
AnalogJoin: 5
serial=12
unrelated line
"""
    imported = parse_join_list(text, "lobby.cs")

    assert imported.file_name == "lobby.cs"
    assert [(join.type, join.number) for join in imported.joins] == [
        (JoinType.DIGITAL, 21),
        (JoinType.ANALOG, 5),
        (JoinType.SERIAL, 12),
    ]
    assert imported.groups == ["Imported"]


def test_parsed_join_fields() -> None:
    [join] = parse_join_list("  DIGITAL 7  ", "a.txt").joins
    assert join.name == "digital-7"
    assert join.description == "DIGITAL 7"
    assert join.group == "Imported"


def test_parse_without_declarations() -> None:
    imported = parse_join_list("nothing here\n", "empty.txt")
    assert imported.joins == []
    assert imported.groups == []


# ###############
# Patterns and Blocks
# ###############


def test_contiguous_pattern() -> None:
    pattern = detect_join_pattern([_join(3), _join(1), _join(2)])
    assert pattern.contiguous is True
    assert (pattern.minimum, pattern.maximum) == (1, 3)


def test_pattern_with_gap() -> None:
    pattern = detect_join_pattern([_join(1), _join(5)])
    assert pattern.contiguous is False
    assert (pattern.minimum, pattern.maximum) == (1, 5)


def test_empty_pattern() -> None:
    pattern = detect_join_pattern([])
    assert (pattern.contiguous, pattern.minimum, pattern.maximum) == (False, 0, 0)


def test_single_join_is_contiguous() -> None:
    assert detect_join_pattern([_join(9)]).contiguous is True


def test_multiply_join_block() -> None:
    """Blocks produce spaced digital joins with numbered labels."""
    joins = multiply_join_block(JoinBlock(base=100, count=3, offset=10, label="Zone {n}"))

    assert [join.number for join in joins] == [100, 110, 120]
    assert [join.name for join in joins] == ["Zone 1", "Zone 2", "Zone 3"]
    assert all(join.type == JoinType.DIGITAL and join.group == "Generated" for join in joins)


def test_multiply_empty_block() -> None:
    assert multiply_join_block(JoinBlock(base=1, count=0, offset=1)) == []


# ###############
# Mappings
# ###############


def test_mappings_pair_in_order() -> None:
    """Mappings pair elements and joins positionally up to the shorter list."""
    mappings = suggest_join_mappings(["button-1", "input-2", "div-3"], [_join(21), _join(5, JoinType.ANALOG)])

    assert [(m.element_id, m.join_type, m.join_number) for m in mappings] == [
        ("button-1", JoinType.DIGITAL, 21),
        ("input-2", JoinType.ANALOG, 5),
    ]
    assert {mapping.confidence for mapping in mappings} == {"medium"}
