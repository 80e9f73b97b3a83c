# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deterministic join allocation for components imported together."""

from joinport.model.types import JoinTriple

# ###############
# Public Interface
# ###############

COMPONENT_JOIN_BASE = 1000
COMPONENT_JOIN_STRIDE = 10


def allocate_joins(index: int) -> JoinTriple:
    """Return the digital, analog and serial join numbers for a batch position.

    Each index owns the block ``[base + 1, base + COMPONENT_JOIN_STRIDE)`` with
    ``base = COMPONENT_JOIN_BASE + index * COMPONENT_JOIN_STRIDE``, so distinct
    indices never share a number. The index is the position within the current
    import batch; numbers are not reconciled against joins used elsewhere in
    the project.

    Raises:
        ValueError: If *index* is negative.
    """
    if index < 0:
        raise ValueError(f"Join allocation index must be non-negative, got {index}")
    base = COMPONENT_JOIN_BASE + index * COMPONENT_JOIN_STRIDE
    return JoinTriple(digital=base + 1, analog=base + 2, serial=base + 3)
