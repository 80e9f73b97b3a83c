# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Component extraction and join allocation."""

from joinport.extractor.components import (
    FALLBACK_COMPONENT_NAME,
    ExtractionResult,
    extract_declared_props,
    parse_source,
)
from joinport.extractor.join_list import (
    JoinBlock,
    JoinListImport,
    JoinMapping,
    JoinPattern,
    ParsedJoin,
    detect_join_pattern,
    multiply_join_block,
    parse_join_list,
    suggest_join_mappings,
)
from joinport.extractor.joins import COMPONENT_JOIN_BASE, COMPONENT_JOIN_STRIDE, allocate_joins

__all__ = [
    "parse_source",
    "extract_declared_props",
    "ExtractionResult",
    "FALLBACK_COMPONENT_NAME",
    "allocate_joins",
    "COMPONENT_JOIN_BASE",
    "COMPONENT_JOIN_STRIDE",
    "parse_join_list",
    "detect_join_pattern",
    "multiply_join_block",
    "suggest_join_mappings",
    "ParsedJoin",
    "JoinListImport",
    "JoinPattern",
    "JoinBlock",
    "JoinMapping",
]
