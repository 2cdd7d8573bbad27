# ------------------------------------------------------------------------------
# Name:          sluradapters.py
# Purpose:       Slur adapters give access to the partnering slur of a tie, on the
#                previous side of the boundary being crossed.  There is one adapter
#                per granularity:
#                   SystemLocalSlurAdapter: measure to measure within a system
#                   PageLocalSlurAdapter:   system to system within a page
#                   ScoreLocalSlurAdapter:  page to page within a score
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from voices21.score import HorizontalSide
from voices21.score import Slur

class SlurAdapter:
    def partnerOf(self, slur: Slur) -> Slur | None:
        raise NotImplementedError

class SystemLocalSlurAdapter(SlurAdapter):
    # no boundary is crossed, the slur is its own partner
    def partnerOf(self, slur: Slur) -> Slur | None:
        return slur

class PageLocalSlurAdapter(SlurAdapter):
    # the piece drawn at the end of the previous system
    def partnerOf(self, slur: Slur) -> Slur | None:
        return slur.getExtension(HorizontalSide.LEFT)

class ScoreLocalSlurAdapter(SlurAdapter):
    def __init__(self, links: t.Mapping[Slur, Slur]) -> None:
        # beginning orphan (this page) -> ending orphan (previous page)
        self.links: t.Mapping[Slur, Slur] = links

    def partnerOf(self, slur: Slur) -> Slur | None:
        return self.links.get(slur)
