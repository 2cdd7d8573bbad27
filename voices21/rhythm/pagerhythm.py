# ------------------------------------------------------------------------------
# Name:          pagerhythm.py
# Purpose:       PageRhythm re-derives the rhythm (chords, slots, voices) of a page
#                or of a single measure stack, and re-connects voice IDs around
#                what was re-derived.  RhythmsStep ties it to edit batches.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from music21 import environment

from voices21.score import EntityKind
from voices21.score import Measure, MeasureStack
from voices21.score import Page, Score
from voices21.rhythm import Voices
from voices21.rhythm import EditBatch, Impact, ImpactClassifier, OpKind

environLocal = environment.Environment('voices21.rhythm.pagerhythm')

class StackRhythmDeriver:
    '''
    The external collaborator that builds chords, time slots and voices of
    every measure of a stack, from scratch (previous voices are discarded).
    '''
    def deriveStack(self, stack: MeasureStack) -> None:
        raise NotImplementedError

class PageRhythm:
    def __init__(
        self,
        page: Page,
        deriver: StackRhythmDeriver,
        score: Score | None = None,
        slurLinker=None,  # SlurLinker | None
    ) -> None:
        self.page: Page = page
        self.deriver: StackRhythmDeriver = deriver
        self.score: Score | None = score if score is not None else page.score
        self.slurLinker = slurLinker

    def process(self) -> int:
        '''
        Re-derives every stack of the page, then connects voices within each
        system, across systems, and across the page boundaries.  Returns the
        count of score-level modifications.
        '''
        environLocal.printDebug(f'PageRhythm.process {self.page}')
        for system in self.page.systems:
            for stack in system.stacks:
                self.deriver.deriveStack(stack)

        for system in self.page.systems:
            Voices.refineSystem(system)
        Voices.refinePage(self.page)

        if self.score is None or self.page not in self.score.pages:
            return 0

        pages: list[Page] = [self.page]
        prevPage: Page | None = self.score.getPrevPage(self.page)
        nextPage: Page | None = self.score.getNextPage(self.page)
        if prevPage is not None:
            pages.insert(0, prevPage)
        if nextPage is not None:
            pages.append(nextPage)
        return Voices.refineScore(self.score, pages=pages, slurLinker=self.slurLinker)

    def reprocessStack(self, stack: MeasureStack) -> int:
        '''
        Re-derives just this stack, then re-connects its voices with those of
        the previous stack and the next stack, part per part.  Other stacks are
        left alone.  Returns the count of swaps.
        '''
        environLocal.printDebug(f'PageRhythm.reprocessStack {stack}')
        self.deriver.deriveStack(stack)

        modifs: int = 0
        system = stack.system
        prevStack: MeasureStack | None = stack.prevSibling
        nextStack: MeasureStack | None = stack.nextSibling

        for part in system.parts:
            measure: Measure | None = stack.getMeasureAt(part)
            if measure is None:
                continue
            prevMeasure: Measure | None = None
            if prevStack is not None:
                prevMeasure = prevStack.getMeasureAt(part)
            modifs += Voices.refineMeasure(measure, prevMeasure, system.relations)

            if nextStack is not None:
                nextMeasure: Measure | None = nextStack.getMeasureAt(part)
                if nextMeasure is not None:
                    modifs += Voices.refineMeasure(nextMeasure, measure, system.relations)

        return modifs

class RhythmsStep:
    '''
    Handles the timing of every relevant item within a page, and keeps it up
    to date when the page is edited.
    '''
    def __init__(
        self,
        deriver: StackRhythmDeriver,
        score: Score | None = None,
        slurLinker=None,  # SlurLinker | None
    ) -> None:
        self.deriver: StackRhythmDeriver = deriver
        self.score: Score | None = score
        self.slurLinker = slurLinker

    def doit(self, pages: t.Iterable[Page]) -> None:
        for page in pages:
            self._pageRhythm(page).process()

    def impact(self, batch: EditBatch, opKind: OpKind) -> Impact:
        '''
        First, determines what the batch impacts, then reprocesses it:
        the whole page, or each impacted stack.
        '''
        impact: Impact = ImpactClassifier.classify(batch, opKind)
        environLocal.printDebug(f'{impact}')
        page: Page | None = impact.page
        if page is None:
            return impact

        if impact.onPage:
            self._pageRhythm(page).process()
        else:
            for stack in impact.stacks:
                self._pageRhythm(page).reprocessStack(stack)

        return impact

    @staticmethod
    def isImpactedBy(kind: EntityKind) -> bool:
        return ImpactClassifier.isImpactedBy(kind)

    def _pageRhythm(self, page: Page) -> PageRhythm:
        return PageRhythm(page, self.deriver, self.score, self.slurLinker)
