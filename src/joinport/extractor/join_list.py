# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Join lists recovered from control-system program source.

Processor-side programs usually declare their joins in constants or comments
such as ``DigitalJoin = 21`` or ``// serial join 5``. These helpers pull such
declarations out line by line so they can be mapped onto imported elements.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from joinport.model.types import JoinType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ParsedJoin:
    """A join declaration found in program source."""

    type: JoinType
    number: int
    name: str
    description: str
    group: str


@dataclass(frozen=True)
class JoinListImport:
    """Joins parsed from one file.

    Attributes:
        file_name: Label of the parsed file.
        joins: Joins in source order.
        groups: Distinct group names in first-seen order.
    """

    file_name: str
    joins: list[ParsedJoin] = field(default_factory=list)
    groups: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class JoinPattern:
    """Numeric layout of a join list."""

    contiguous: bool
    minimum: int
    maximum: int


@dataclass(frozen=True)
class JoinBlock:
    """A repeated block of digital joins (one per zone, room, source, ...).

    ``{n}`` in the label is replaced by the 1-based copy number.
    """

    base: int
    count: int
    offset: int
    label: str = "Block {n}"


@dataclass(frozen=True)
class JoinMapping:
    """A proposed assignment of a parsed join to an element."""

    element_id: str
    join_type: JoinType
    join_number: int
    confidence: str


def parse_join_list(text: str, file_name: str) -> JoinListImport:
    """Parse join declarations from program source, one per line at most."""
    joins: list[ParsedJoin] = []
    for line in text.splitlines():
        match = _JOIN_DECLARATION.search(line)
        if match is None:
            continue
        join_type = JoinType(match.group(1).lower())
        number = int(match.group(2))
        joins.append(
            ParsedJoin(
                type=join_type,
                number=number,
                name=f"{join_type.value}-{number}",
                description=line.strip(),
                group=_IMPORTED_GROUP,
            )
        )
    groups = list(dict.fromkeys(join.group for join in joins))
    return JoinListImport(file_name=file_name, joins=joins, groups=groups)


def detect_join_pattern(joins: list[ParsedJoin]) -> JoinPattern:
    """Report the number range of *joins* and whether it has no gaps."""
    if not joins:
        return JoinPattern(contiguous=False, minimum=0, maximum=0)
    numbers = sorted(join.number for join in joins)
    contiguous = all(later == earlier + 1 for earlier, later in zip(numbers, numbers[1:]))
    return JoinPattern(contiguous=contiguous, minimum=numbers[0], maximum=numbers[-1])


def multiply_join_block(block: JoinBlock) -> list[ParsedJoin]:
    """Expand a join block into ``block.count`` digital joins spaced by ``block.offset``."""
    return [
        ParsedJoin(
            type=JoinType.DIGITAL,
            number=block.base + i * block.offset,
            name=block.label.replace("{n}", str(i + 1)),
            description="Generated from multiply block",
            group=_GENERATED_GROUP,
        )
        for i in range(block.count)
    ]


def suggest_join_mappings(element_ids: list[str], joins: list[ParsedJoin]) -> list[JoinMapping]:
    """Pair elements with joins in order; extra elements or joins are left unmapped."""
    return [
        JoinMapping(
            element_id=element_id,
            join_type=join.type,
            join_number=join.number,
            confidence="medium",
        )
        for element_id, join in zip(element_ids, joins)
    ]


# ################
# Implementation
# ################

_JOIN_DECLARATION = re.compile(r"(digital|analog|serial)\s*(?:join)?\s*[:=]?\s*(\d+)", re.IGNORECASE)

_IMPORTED_GROUP = "Imported"
_GENERATED_GROUP = "Generated"
