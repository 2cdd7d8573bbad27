# ------------------------------------------------------------------------------
# Name:          score.py
# Purpose:       Score is the top of the model: an ordered list of Pages and the
#                LogicalParts of the whole work.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from voices21.score import ScoreStructureError
from voices21.score import LogicalPart
from voices21.score import Page

class Score:
    def __init__(self) -> None:
        self.pages: list[Page] = []
        self.logicalParts: list[LogicalPart] = []

    @property
    def pageCount(self) -> int:
        return len(self.pages)

    def addLogicalPart(self, partId: int, name: str = '') -> LogicalPart:
        if self.getLogicalPartById(partId) is not None:
            raise ScoreStructureError(f'logical part {partId} already exists')
        logicalPart = LogicalPart(partId, name)
        self.logicalParts.append(logicalPart)
        return logicalPart

    def getLogicalPartById(self, partId: int) -> LogicalPart | None:
        for logicalPart in self.logicalParts:
            if logicalPart.id == partId:
                return logicalPart
        return None

    def addPage(self) -> Page:
        page = Page(self)
        self.pages.append(page)
        return page

    def getPage(self, pageNumber: int) -> Page:
        # 1-based, like page numbers
        return self.pages[pageNumber - 1]

    def getPrevPage(self, page: Page) -> Page | None:
        idx: int = self.pages.index(page)
        if idx == 0:
            return None
        return self.pages[idx - 1]

    def getNextPage(self, page: Page) -> Page | None:
        idx: int = self.pages.index(page)
        if idx + 1 >= len(self.pages):
            return None
        return self.pages[idx + 1]
