# ------------------------------------------------------------------------------
# Name:          part.py
# Purpose:       LogicalPart is the stable identity of one instrumental line across
#                the whole score.  Part is its concrete instance within one System;
#                it owns one Measure per MeasureStack, plus the slurs of its notes.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from voices21.score import Measure
from voices21.score import Slur

class LogicalPart:
    def __init__(self, partId: int, name: str = '') -> None:
        self.id: int = partId
        self.name: str = name

    def swapVoiceId(self, page, id1: int, id2: int) -> None:  # page is a Page
        '''
        Exchanges voice IDs id1 and id2 in every measure of this logical part,
        across all the systems of the page.
        '''
        for system in page.systems:
            part: Part | None = system.getPartById(self.id)
            if part is not None:
                part.swapVoiceId(id1, id2)

    def __repr__(self) -> str:
        return f'<LogicalPart#{self.id} {self.name!r}>'

class Part:
    def __init__(
        self,
        system,  # System
        logicalPart: LogicalPart
    ) -> None:
        from voices21.score import System
        self.system: System = system
        self.logicalPart: LogicalPart = logicalPart
        self.measures: list[Measure] = []
        self.slurs: list[Slur] = []

    @property
    def id(self) -> int:
        return self.logicalPart.id

    @property
    def firstMeasure(self) -> Measure | None:
        if not self.measures:
            return None
        return self.measures[0]

    @property
    def lastMeasure(self) -> Measure | None:
        if not self.measures:
            return None
        return self.measures[-1]

    def addSlur(self, slur: Slur) -> Slur:
        slur.part = self
        self.slurs.append(slur)
        return slur

    def removeSlur(self, slur: Slur) -> None:
        if slur in self.slurs:
            self.slurs.remove(slur)
        slur.part = None

    def getSlurs(
        self,
        predicate: t.Callable[[Slur], bool] | None = None
    ) -> list[Slur]:
        if predicate is None:
            return list(self.slurs)
        return [slur for slur in self.slurs if predicate(slur)]

    def swapVoiceId(self, id1: int, id2: int) -> None:
        for measure in self.measures:
            measure.swapVoiceIds(id1, id2)

    @staticmethod
    def byId(p1: 'Part', p2: 'Part') -> int:
        if p1.id == p2.id:
            return 0
        return -1 if p1.id < p2.id else 1

    def __repr__(self) -> str:
        return f'<Part#{self.id}>'
