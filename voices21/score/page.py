# ------------------------------------------------------------------------------
# Name:          page.py
# Purpose:       Page is an ordered list of Systems, with the LogicalParts that
#                appear in them.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from voices21.score import LogicalPart
from voices21.score import System

class Page:
    def __init__(self, score=None) -> None:  # score is a Score | None
        self.score = score
        self.systems: list[System] = []
        self.logicalParts: list[LogicalPart] = []

    @property
    def number(self) -> int:
        if self.score is None:
            return 1
        return self.score.pages.index(self) + 1

    def addSystem(self) -> System:
        system = System(self)
        self.systems.append(system)
        return system

    def addLogicalPart(self, logicalPart: LogicalPart) -> None:
        if self.getLogicalPartById(logicalPart.id) is None:
            self.logicalParts.append(logicalPart)

    def getLogicalPartById(self, partId: int) -> LogicalPart | None:
        for logicalPart in self.logicalParts:
            if logicalPart.id == partId:
                return logicalPart
        return None

    @property
    def firstSystem(self) -> System | None:
        if not self.systems:
            return None
        return self.systems[0]

    @property
    def lastSystem(self) -> System | None:
        if not self.systems:
            return None
        return self.systems[-1]

    def __repr__(self) -> str:
        return f'<Page#{self.number}>'
