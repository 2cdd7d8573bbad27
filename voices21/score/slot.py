# ------------------------------------------------------------------------------
# Name:          slot.py
# Purpose:       Slot is a discrete time position within a measure stack.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from music21.common import opFrac
from music21.common.types import OffsetQL, OffsetQLIn

class Slot:
    def __init__(
        self,
        slotId: int,
        timeOffset: OffsetQLIn = 0.0,
        stack=None  # MeasureStack | None
    ) -> None:
        self.id: int = slotId  # 1-based within its stack
        self.timeOffset: OffsetQL = opFrac(timeOffset)
        self.stack = stack

    def __repr__(self) -> str:
        return f'<Slot#{self.id} @{self.timeOffset}>'
