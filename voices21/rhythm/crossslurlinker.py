# ------------------------------------------------------------------------------
# Name:          crossslurlinker.py
# Purpose:       CrossSlurLinker matches the beginning orphan slurs of a part (first
#                system of a page) with the ending orphan slurs of the same logical
#                part at the end of the previous page.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from music21 import environment

from voices21.score import HorizontalSide
from voices21.score import Note
from voices21.score import Slur
from voices21.score import Part

environLocal = environment.Environment('voices21.rhythm.crossslurlinker')

class CrossSlurLinker:
    '''
    Default matcher used by Voices.refineScore.  Any object with the same link()
    method can be used instead.

    Heads with the same pitch are matched first (that is what a tie across the
    page break looks like).  The remaining orphans are then paired top to bottom,
    but only if both sides have the same count left; otherwise they stay unmatched.
    The returned mapping is injective.
    '''
    def link(self, part: Part, precedingPart: Part) -> dict[Slur, Slur]:
        orphans: list[Slur] = self._sortedOrphans(
            part.getSlurs(lambda s: s.isBeginningOrphan), HorizontalSide.RIGHT
        )
        precOrphans: list[Slur] = self._sortedOrphans(
            precedingPart.getSlurs(lambda s: s.isEndingOrphan), HorizontalSide.LEFT
        )

        links: dict[Slur, Slur] = {}
        used: set[Slur] = set()

        for slur in orphans:
            head: Note | None = slur.rightHead
            if head is None:
                continue
            for prevSlur in precOrphans:
                if prevSlur in used:
                    continue
                if head.hasSamePitchAs(prevSlur.leftHead):
                    links[slur] = prevSlur
                    used.add(prevSlur)
                    break

        remaining: list[Slur] = [s for s in orphans if s not in links]
        precRemaining: list[Slur] = [s for s in precOrphans if s not in used]
        if remaining and len(remaining) == len(precRemaining):
            for slur, prevSlur in zip(remaining, precRemaining):
                links[slur] = prevSlur

        environLocal.printDebug(f'{part}: {len(links)} cross-page slur links')
        return links

    @staticmethod
    def _sortedOrphans(slurs: list[Slur], side: HorizontalSide) -> list[Slur]:
        def ordinate(slur: Slur) -> float:
            head: Note | None = slur.getHead(side)
            if head is None or head.center is None:
                return 0.0
            return head.center[1]

        return sorted(slurs, key=ordinate)
