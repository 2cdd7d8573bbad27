# ------------------------------------------------------------------------------
# Name:          voices.py
# Purpose:       Voices connects voices and harmonizes their IDs (and thus colors)
#                within a stack, a system, a page or a score.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from music21 import environment

from voices21.score import HorizontalSide
from voices21.score import EntityKind
from voices21.score import RelationGraph
from voices21.score import Note, Chord, Slot, Slur
from voices21.score import Voice
from voices21.score import Measure, MeasureStack
from voices21.score import Part
from voices21.score import System, Page, Score
from voices21.shared import SharedConstants
from voices21.rhythm import PreconditionViolation
from voices21.rhythm import SlurAdapter
from voices21.rhythm import SystemLocalSlurAdapter
from voices21.rhythm import PageLocalSlurAdapter
from voices21.rhythm import ScoreLocalSlurAdapter
from voices21.rhythm import CrossSlurLinker

environLocal = environment.Environment('voices21.rhythm.voices')

class SlurLinker(t.Protocol):
    def link(self, part: Part, precedingPart: Part) -> dict[Slur, Slur]:
        ...

def _cmp(a: t.Any, b: t.Any) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1

class Voices:
    '''
    All static: not meant to be instantiated.

    The unification passes (refineSystem, refinePage, refineScore) look at the
    first chord of each voice at the start of a region, search evidence that it
    continues a voice of the previous region (a preferred voice ID, a same-voice
    annotation, an incoming tie), and swap IDs accordingly.  Swapping
    (rather than overwriting) keeps IDs unique within each measure.

    Each pass returns the count of swaps it performed.
    '''

    # ------------------------------------------------------------------------
    # Identity ordering

    @staticmethod
    def byId(v1: Voice, v2: Voice) -> int:
        return _cmp(v1.id, v2.id)

    @staticmethod
    def byOrdinate(v1: Voice, v2: Voice) -> int:
        '''
        Vertical order of two voices of the same stack: part, then family, then
        first time slot, then ordinate of the first chord.
        '''
        if v1.measure is None or v2.measure is None:
            raise PreconditionViolation('Comparing voices that are not in a measure')
        if v1.measure.stack is not v2.measure.stack:
            raise PreconditionViolation('Comparing voices in different stacks')

        # Check if they are located in different parts
        p1: Part = v1.measure.part
        p2: Part = v2.measure.part
        if p1 is not p2:
            return Part.byId(p1, p2)

        # Check voice family
        if v1.family != v2.family:
            return _cmp(v1.family, v2.family)

        c1: Chord | None = v1.firstChord
        c2: Chord | None = v2.firstChord
        if c1 is None or c2 is None:
            # empty voices go last
            return _cmp(c1 is None, c2 is None)

        slot1: Slot | None = c1.slot
        slot2: Slot | None = c2.slot

        # Check if the voices started in different time slots
        if slot1 is not None and slot2 is not None:
            comp: int = _cmp(slot1.id, slot2.id)
            if comp != 0:
                return comp
            # Same first time slot, so let's use chord ordinate
            return Chord.byOrdinate(c1, c2)

        # We have at least one whole rest (which always starts on slot 1, by definition)
        if slot2 is not None and slot2.id > 1:
            return -1
        if slot1 is not None and slot1.id > 1:
            return 1

        # Both are at beginning of measure, so let's use chord ordinates
        return Chord.byOrdinate(c1, c2)

    @staticmethod
    def colorOf(voice: Voice | int) -> str:
        '''
        Returns the color (a music21 style.color string) to use when painting the
        given voice (or voice ID).  Colors are used circularly.
        '''
        voiceId: int = voice if isinstance(voice, int) else voice.id
        if voiceId < 1:
            raise PreconditionViolation(f'Voice IDs are positive, got {voiceId}')
        colors: tuple[str, ...] = SharedConstants.VOICE_COLORS
        return colors[(voiceId - 1) % len(colors)]

    @staticmethod
    def getColorCount() -> int:
        return len(SharedConstants.VOICE_COLORS)

    # ------------------------------------------------------------------------
    # Evidence

    @staticmethod
    def getTiedId(voice: Voice, slurAdapter: SlurAdapter) -> int | None:
        '''
        Checks whether the first chord of voice has an incoming tie, coming from
        a voice in another measure.  If so, returns that voice's ID (the ID this
        voice must use), else None.
        '''
        firstChord: Chord | None = voice.firstChord
        if firstChord is None:
            return None

        for note in firstChord.notes:
            if not note.isHead:
                continue
            for slur in note.getSlurs(HorizontalSide.RIGHT):
                if not slur.isTie:
                    continue
                prevSlur: Slur | None = slurAdapter.partnerOf(slur)
                if prevSlur is None:
                    continue
                left: Note | None = prevSlur.getHead(HorizontalSide.LEFT)
                if left is None:
                    continue
                leftVoice: Voice | None = left.voice
                # Can be None if rhythm could not process the whole measure
                if leftVoice is None or leftVoice.measure is voice.measure:
                    continue
                environLocal.printDebug(f'{slur} ties {voice} over to {leftVoice}')
                return leftVoice.id

        return None

    @staticmethod
    def getSameVoiceId(
        voice: Voice,
        prevMeasure: Measure,
        relations: RelationGraph
    ) -> int | None:
        '''
        Checks whether the first chord of voice is annotated as being in the
        same voice as a chord of prevMeasure.  If so, returns that chord's voice
        ID, else None.
        '''
        firstChord: Chord | None = voice.firstChord
        if firstChord is None:
            return None

        for rel in relations.getRelations(firstChord, EntityKind.SAME_VOICE):
            other = relations.getOpposite(firstChord, rel)
            if not isinstance(other, Chord):
                continue
            if other.measure is prevMeasure and other.voice is not None:
                return other.voice.id
        return None

    @staticmethod
    def getPreferredId(voice: Voice) -> int | None:
        firstChord: Chord | None = voice.firstChord
        if firstChord is None:
            return None
        return firstChord.preferredVoiceId

    # ------------------------------------------------------------------------
    # Stack-local refinement

    @staticmethod
    def refineStack(stack: MeasureStack) -> None:
        '''
        Renames the voices of each measure of the stack from top to bottom,
        then extends each chord voice to its cue chords.  This is a first
        assignment, independent of any tie: IDs end up being 1..N in vertical
        order.  It is not part of the default pipeline.
        '''
        for measure in stack.measures:
            measure.sortVoices()
            measure.renameVoices()
            measure.setCueVoices()

    # ------------------------------------------------------------------------
    # Unification passes

    @staticmethod
    def refineMeasure(
        measure: Measure,
        prevMeasure: Measure | None,
        relations: RelationGraph
    ) -> int:
        '''
        Connects the voices of measure with those of prevMeasure (the previous
        measure of the same part, in the same system), if any.  The required ID
        comes from the first evidence found, in this order: preferred voice ID,
        same-voice annotation, tie.  Each voice is swapped at most once.
        '''
        modifs: int = 0
        measureAdapter: SlurAdapter = SystemLocalSlurAdapter()

        for voice in list(measure.voices):
            requiredId: int | None = Voices.getPreferredId(voice)
            if requiredId is None and prevMeasure is not None:
                requiredId = Voices.getSameVoiceId(voice, prevMeasure, relations)
                if requiredId is None:
                    requiredId = Voices.getTiedId(voice, measureAdapter)

            if requiredId is not None and voice.id != requiredId:
                measure.swapVoiceId(voice, requiredId)
                modifs += 1

        return modifs

    @staticmethod
    def refineSystem(system: System) -> int:
        '''
        Connects voices within the same part across all measures of a system.
        '''
        environLocal.printDebug(f'refineSystem {system}')
        modifs: int = 0

        for part in system.parts:
            prevMeasure: Measure | None = None
            for stack in system.stacks:
                measure: Measure | None = stack.getMeasureAt(part)
                if measure is None:
                    prevMeasure = None
                    continue
                modifs += Voices.refineMeasure(measure, prevMeasure, system.relations)
                prevMeasure = measure

        return modifs

    @staticmethod
    def refinePage(page: Page) -> int:
        '''
        Connects voices within the same logical part across all systems of a page.
        '''
        environLocal.printDebug(f'refinePage {page}')
        modifs: int = 0
        firstSystem: System | None = page.firstSystem

        # Across systems within a single page, the partnering slur is the left extension
        systemAdapter: SlurAdapter = PageLocalSlurAdapter()

        for logicalPart in page.logicalParts:
            for system in page.systems:
                if system is firstSystem:
                    continue
                part: Part | None = system.getPartById(logicalPart.id)
                if part is None:
                    continue
                # Check tied voices from previous system
                firstMeasure: Measure | None = part.firstMeasure
                if firstMeasure is None:
                    continue
                for voice in list(firstMeasure.voices):
                    tiedId: int | None = Voices.getTiedId(voice, systemAdapter)
                    if tiedId is not None and voice.id != tiedId:
                        part.swapVoiceId(voice.id, tiedId)
                        modifs += 1

        return modifs

    @staticmethod
    def refineScore(
        score: Score,
        pages: t.Collection[Page] | None = None,
        slurLinker: SlurLinker | None = None
    ) -> int:
        '''
        Connects voices within the same logical part across all pages of a score.

        Ties across pages are not persisted: orphan slurs at the end of a page and
        at the start of the next one are linked on the fly (by slurLinker), the
        confirmed ones are used as tie evidence, and the unmatched ones are
        discarded.

        If pages is given, only those pages are processed; a page not in pages
        breaks the chain.  Returns the count of modifications made.
        '''
        linker: SlurLinker = slurLinker if slurLinker is not None else CrossSlurLinker()
        modifs: int = 0
        prevSystem: System | None = None  # Last system of preceding page, if any

        for page in score.pages:
            if pages is not None and page not in pages:
                prevSystem = None
                continue

            firstSystem: System | None = page.firstSystem
            if prevSystem is not None and firstSystem is not None:
                for scorePart in score.logicalParts:
                    # Check tied voices from same logicalPart in previous page
                    logicalPart = page.getLogicalPartById(scorePart.id)
                    if logicalPart is None:
                        continue  # logical part not found in this page

                    part: Part | None = firstSystem.getPartById(logicalPart.id)
                    if part is None:
                        continue  # logical part not found in the first system of this page

                    orphans: list[Slur] = part.getSlurs(lambda s: s.isBeginningOrphan)
                    precedingPart: Part | None = prevSystem.getPartById(logicalPart.id)

                    if precedingPart is not None:
                        precOrphans: list[Slur] = precedingPart.getSlurs(
                            lambda s: s.isEndingOrphan
                        )
                        links: dict[Slur, Slur] = linker.link(part, precedingPart)

                        for slur, prevSlur in links.items():
                            slur.checkCrossTie(prevSlur)

                        # Purge orphans across pages
                        linkedPrev: set[Slur] = set(links.values())
                        orphans = [s for s in orphans if s not in links]
                        precOrphans = [s for s in precOrphans if s not in linkedPrev]
                        Slur.discardOrphans(precOrphans, HorizontalSide.RIGHT)

                        # Across pages within a score, use the links map
                        pageAdapter: SlurAdapter = ScoreLocalSlurAdapter(links)
                        firstMeasure: Measure | None = part.firstMeasure
                        if firstMeasure is not None:
                            for voice in list(firstMeasure.voices):
                                tiedId: int | None = Voices.getTiedId(voice, pageAdapter)
                                if tiedId is not None and voice.id != tiedId:
                                    logicalPart.swapVoiceId(page, voice.id, tiedId)
                                    modifs += 1

                    Slur.discardOrphans(orphans, HorizontalSide.LEFT)

            prevSystem = page.lastSystem

        environLocal.printDebug(f'refineScore: {modifs} modifications')
        return modifs

    @staticmethod
    def refineAll(
        score: Score,
        slurLinker: SlurLinker | None = None,
        withScorePass: bool = True
    ) -> int:
        '''
        Runs system, page and score passes over the whole score.  Returns the
        total count of swaps.
        '''
        modifs: int = 0
        for page in score.pages:
            for system in page.systems:
                modifs += Voices.refineSystem(system)
            modifs += Voices.refinePage(page)
        if withScorePass:
            modifs += Voices.refineScore(score, slurLinker=slurLinker)
        return modifs
