# ------------------------------------------------------------------------------
# Name:          slur.py
# Purpose:       Slur connects a left note head and a right note head, and may be
#                a tie.  A slur broken by a system break is drawn as two pieces
#                linked by their extensions; a slur broken by a page break is left
#                as two orphans that are linked on demand.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from music21 import environment

from voices21.score import EntityKind, HorizontalSide
from voices21.score import ScoreEntity, Point
from voices21.score import Note

environLocal = environment.Environment('voices21.score.slur')

class Slur(ScoreEntity):
    def __init__(
        self,
        leftHead: Note | None = None,
        rightHead: Note | None = None,
        isTie: bool = False,
        center: Point | None = None
    ) -> None:
        super().__init__(EntityKind.SLUR, center)
        self.isTie: bool = isTie
        self.part = None  # Part | None, set by Part.addSlur
        self.leftExtension: Slur | None = None
        self.rightExtension: Slur | None = None
        # the slur on the previous page this one was confirmed to be tied to
        self.crossTiePartner: Slur | None = None

        self.leftHead: Note | None = None
        self.rightHead: Note | None = None
        if leftHead is not None:
            self.setHead(HorizontalSide.LEFT, leftHead)
        if rightHead is not None:
            self.setHead(HorizontalSide.RIGHT, rightHead)

    @property
    def center(self) -> Point | None:
        if self._center is not None:
            return self._center
        centers: list[Point] = [
            c for c in (self._headCenter(self.leftHead), self._headCenter(self.rightHead))
            if c is not None
        ]
        if not centers:
            return None
        return (
            sum(c[0] for c in centers) / len(centers),
            sum(c[1] for c in centers) / len(centers)
        )

    @center.setter
    def center(self, newCenter: Point | None) -> None:
        self._center = newCenter

    @staticmethod
    def _headCenter(head: Note | None) -> Point | None:
        if head is None:
            return None
        return head.center

    def getHead(self, side: HorizontalSide) -> Note | None:
        if side == HorizontalSide.LEFT:
            return self.leftHead
        return self.rightHead

    def setHead(self, side: HorizontalSide, head: Note | None) -> None:
        oldHead: Note | None = self.getHead(side)
        if oldHead is not None and self in oldHead.slurs:
            if oldHead is not self.getHead(side.opposite):
                oldHead.slurs.remove(self)
        if side == HorizontalSide.LEFT:
            self.leftHead = head
        else:
            self.rightHead = head
        if head is not None and self not in head.slurs:
            head.slurs.append(self)

    def getExtension(self, side: HorizontalSide) -> t.Optional['Slur']:
        if side == HorizontalSide.LEFT:
            return self.leftExtension
        return self.rightExtension

    def setExtension(self, side: HorizontalSide, other: t.Optional['Slur']) -> None:
        '''
        Links this slur to its continuation on the given side, and the
        continuation back to this slur (single hop).
        '''
        if side == HorizontalSide.LEFT:
            self.leftExtension = other
            if other is not None:
                other.rightExtension = self
        else:
            self.rightExtension = other
            if other is not None:
                other.leftExtension = self

    @property
    def isBeginningOrphan(self) -> bool:
        # starts before the beginning of its system, with no known left part
        return self.leftHead is None and self.leftExtension is None

    @property
    def isEndingOrphan(self) -> bool:
        return self.rightHead is None and self.rightExtension is None

    def checkCrossTie(self, prevSlur: 'Slur') -> bool:
        '''
        Called on a beginning orphan matched with an ending orphan of the previous
        page.  If the two heads carry the same pitch, the pair is a tie.  If we
        can't tell (missing pitch), we trust what either piece already said.
        '''
        samePitch: bool | None = None
        if self.rightHead is not None:
            samePitch = self.rightHead.hasSamePitchAs(prevSlur.leftHead)

        isTie: bool
        if samePitch is None:
            isTie = self.isTie or prevSlur.isTie
        else:
            isTie = samePitch

        self.isTie = isTie
        prevSlur.isTie = isTie
        if isTie:
            self.crossTiePartner = prevSlur
            environLocal.printDebug(f'cross-page tie {prevSlur} -> {self}')
        else:
            self.crossTiePartner = None
        return isTie

    def detach(self) -> None:
        for side in (HorizontalSide.LEFT, HorizontalSide.RIGHT):
            self.setHead(side, None)
            ext: Slur | None = self.getExtension(side)
            if ext is not None and ext.getExtension(side.opposite) is self:
                ext.setExtension(side.opposite, None)
                self.setExtension(side, None)
        if self.part is not None:
            self.part.removeSlur(self)

    @staticmethod
    def discardOrphans(orphans: t.Iterable['Slur'], side: HorizontalSide) -> None:
        for orphan in list(orphans):
            environLocal.printDebug(f'discarding {side.name} orphan {orphan}')
            orphan.detach()

    def __repr__(self) -> str:
        kindStr: str = 'tie' if self.isTie else 'slur'
        return f'<Slur {kindStr} {self.leftHead} -> {self.rightHead}>'
