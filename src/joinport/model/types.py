# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Join and classification vocabulary shared by every stage of the import pipeline."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

MIN_JOIN_NUMBER = 1
MAX_JOIN_NUMBER = 65535


class JoinType(Enum):
    """Signal kinds a join can carry to the control system."""

    DIGITAL = "digital"
    ANALOG = "analog"
    SERIAL = "serial"


class Direction(Enum):
    """Direction of a join as seen from the control system."""

    INPUT = "input"
    OUTPUT = "output"


class Category(Enum):
    """Classification assigned to every file found inside an archive."""

    COMPONENT = "component"
    STYLE = "style"
    CONFIG = "config"
    ASSET = "asset"
    DATA = "data"
    JUNK = "junk"
    OTHER = "other"


class ResultKind(Enum):
    """Outcome of importing one file or one logical import unit."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Join(BaseModel):
    """A typed, numbered channel wiring a control to the control system."""

    type: JoinType
    number: int = _Field(ge=MIN_JOIN_NUMBER, le=MAX_JOIN_NUMBER)
    direction: Direction | None = None
    description: str | None = None


class JoinTriple(BaseModel):
    """One digital, one analog and one serial join number allocated together."""

    model_config = ConfigDict(frozen=True)

    digital: int
    analog: int
    serial: int

    def as_joins(self) -> dict[str, Join]:
        """Return the triple as a join map keyed by join type."""
        return {
            JoinType.DIGITAL.value: Join(type=JoinType.DIGITAL, number=self.digital),
            JoinType.ANALOG.value: Join(type=JoinType.ANALOG, number=self.analog),
            JoinType.SERIAL.value: Join(type=JoinType.SERIAL, number=self.serial),
        }
