# ------------------------------------------------------------------------------
# Name:          system.py
# Purpose:       System is one line of music on a page: an ordered list of Parts
#                and an ordered list of MeasureStacks, plus the relations between
#                its entities.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from voices21.score import ScoreStructureError
from voices21.score import Point
from voices21.score import RelationGraph
from voices21.score import Measure
from voices21.score import MeasureStack
from voices21.score import LogicalPart, Part

class System:
    def __init__(self, page=None) -> None:  # page is a Page | None
        self.page = page
        self.parts: list[Part] = []
        self.stacks: list[MeasureStack] = []
        self.relations: RelationGraph = RelationGraph()

    @property
    def id(self) -> int:
        if self.page is None:
            return 1
        return self.page.systems.index(self) + 1

    def addPart(self, logicalPart: LogicalPart) -> Part:
        if self.getPartById(logicalPart.id) is not None:
            raise ScoreStructureError(f'{logicalPart} already has a part in {self}')
        part = Part(self, logicalPart)
        self.parts.append(part)
        for stack in self.stacks:
            measure = Measure(part, stack)
            stack.measures.append(measure)
            part.measures.append(measure)
        if self.page is not None:
            self.page.addLogicalPart(logicalPart)
        return part

    def addStack(self, left: float, right: float) -> MeasureStack:
        if self.stacks and left < self.stacks[-1].right:
            raise ScoreStructureError(f'stack [{left}, {right}) overlaps {self.stacks[-1]}')
        stack = MeasureStack(self, left, right)
        self.stacks.append(stack)
        for part in self.parts:
            measure = Measure(part, stack)
            stack.measures.append(measure)
            part.measures.append(measure)
        return stack

    def getPartById(self, partId: int) -> Part | None:
        for part in self.parts:
            if part.id == partId:
                return part
        return None

    def getStackAt(self, point: Point | None) -> MeasureStack | None:
        if point is None:
            return None
        for stack in self.stacks:
            if stack.contains(point):
                return stack
        return None

    @property
    def firstStack(self) -> MeasureStack | None:
        if not self.stacks:
            return None
        return self.stacks[0]

    @property
    def lastStack(self) -> MeasureStack | None:
        if not self.stacks:
            return None
        return self.stacks[-1]

    def __repr__(self) -> str:
        return f'<System#{self.id}>'
