# ------------------------------------------------------------------------------
# Name:          measurestack.py
# Purpose:       MeasureStack is a vertical group of simultaneous measures, one per
#                Part, across one System.  It also owns the time slots shared by
#                those measures.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from music21.common.types import OffsetQLIn

from voices21.score import EntityKind
from voices21.score import Point
from voices21.score import Slot
from voices21.score import Measure

class MeasureStack:
    kind: EntityKind = EntityKind.MEASURE_STACK

    def __init__(
        self,
        system,  # System
        left: float,
        right: float
    ) -> None:
        from voices21.score import System
        self.system: System = system
        self.left: float = left
        self.right: float = right
        self.measures: list[Measure] = []
        self.slots: list[Slot] = []

    @property
    def id(self) -> int:
        return self.system.stacks.index(self) + 1

    @property
    def center(self) -> Point:
        return ((self.left + self.right) / 2, 0.0)

    def contains(self, point: Point) -> bool:
        return self.left <= point[0] < self.right

    def getMeasureAt(self, part) -> Measure | None:  # part is a Part
        for measure in self.measures:
            if measure.part is part:
                return measure
        return None

    def addSlot(self, timeOffset: OffsetQLIn) -> Slot:
        slot = Slot(len(self.slots) + 1, timeOffset, self)
        self.slots.append(slot)
        return slot

    def getSlot(self, slotId: int) -> Slot | None:
        for slot in self.slots:
            if slot.id == slotId:
                return slot
        return None

    def clearSlots(self) -> None:
        self.slots = []

    @property
    def prevSibling(self) -> t.Optional['MeasureStack']:
        idx: int = self.system.stacks.index(self)
        if idx == 0:
            return None
        return self.system.stacks[idx - 1]

    @property
    def nextSibling(self) -> t.Optional['MeasureStack']:
        idx: int = self.system.stacks.index(self)
        if idx + 1 >= len(self.system.stacks):
            return None
        return self.system.stacks[idx + 1]

    def __repr__(self) -> str:
        return f'<MeasureStack#{self.id} [{self.left}, {self.right})>'
