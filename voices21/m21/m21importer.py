# ------------------------------------------------------------------------------
# Name:          m21importer.py
# Purpose:       M21ScoreImporter builds the voices21 score model (pages, systems,
#                stacks, measures, voices, chords, slots, slurs) out of a music21
#                Score, so voice IDs can be unified across the whole work.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

import music21 as m21
from music21 import environment
from music21.common import opFrac
from music21.common.types import OffsetQL

from voices21.score import HorizontalSide
from voices21.score import Note, Chord, Slot, Slur
from voices21.score import Voice, VoiceFamily
from voices21.score import Measure, MeasureStack
from voices21.score import Part
from voices21.score import System, Page, Score
from voices21.m21 import M21ImportError

environLocal = environment.Environment('voices21.m21.m21importer')

class M21ScoreImporter:
    '''
    Geometry is synthetic: each measure stack is StackWidth wide, each part
    gets a PartHeight high band, and within a band higher pitches are drawn
    higher (smaller y), like on paper.
    '''

    StackWidth: float = 1000.0
    PartHeight: float = 1000.0
    _MIDDLE_C_PS: float = 60.0
    _PS_STEP: float = 5.0
    _VOICE_REST_STEP: float = 40.0

    def __init__(self, m21Score: m21.stream.Score) -> None:
        self.m21Score: m21.stream.Score = m21Score
        self.score: Score = Score()
        # m21 element id() -> model Note, for ties and slurs
        self._noteForM21: dict[int, Note] = {}
        # (partIndex, pitch name with octave) -> left note of a tie still open
        self._openTies: dict[tuple[int, str], Note] = {}

    def importScore(self) -> Score:
        m21Parts: list[m21.stream.Part] = list(self.m21Score.parts)
        if not m21Parts:
            raise M21ImportError('music21 score has no parts')

        for pIdx, m21Part in enumerate(m21Parts):
            self.score.addLogicalPart(pIdx + 1, m21Part.partName or '')

        measuresPerPart: list[list[m21.stream.Measure]] = [
            list(m21Part.getElementsByClass(m21.stream.Measure)) for m21Part in m21Parts
        ]
        numMeasures: int = max(len(measures) for measures in measuresPerPart)

        page: Page | None = None
        system: System | None = None
        for mIdx in range(numMeasures):
            m21Measures: list[m21.stream.Measure | None] = [
                measures[mIdx] if mIdx < len(measures) else None
                for measures in measuresPerPart
            ]
            present: list[m21.stream.Measure] = [m for m in m21Measures if m is not None]

            if page is None or self._startsWithPageBreak(present):
                page = self.score.addPage()
                system = self._addSystem(page)
            elif system is None or self._startsWithSystemBreak(present):
                system = self._addSystem(page)

            left: float = mIdx * self.StackWidth
            stack: MeasureStack = system.addStack(left, left + self.StackWidth)
            offsetToSlot: dict[OffsetQL, Slot] = self._makeSlots(stack, present)

            for pIdx, m21Measure in enumerate(m21Measures):
                if m21Measure is None:
                    continue
                part: Part | None = system.getPartById(pIdx + 1)
                assert part is not None
                measure: Measure | None = stack.getMeasureAt(part)
                assert measure is not None
                self._importMeasure(measure, m21Measure, pIdx, offsetToSlot)

        self._importSlurs()

        environLocal.printDebug(f'imported {self.score.pageCount} pages')
        return self.score

    def _addSystem(self, page: Page) -> System:
        system: System = page.addSystem()
        for logicalPart in self.score.logicalParts:
            system.addPart(logicalPart)
        return system

    @staticmethod
    def _startsWithPageBreak(m21Measures: list[m21.stream.Measure]) -> bool:
        for m in m21Measures:
            for pageLayout in m[m21.layout.PageLayout]:
                if pageLayout.offset == 0 and pageLayout.isNew:
                    return True
        return False

    @staticmethod
    def _startsWithSystemBreak(m21Measures: list[m21.stream.Measure]) -> bool:
        for m in m21Measures:
            for systemLayout in m[m21.layout.SystemLayout]:
                if systemLayout.offset == 0 and systemLayout.isNew:
                    return True
        return False

    @staticmethod
    def _voiceStreams(m21Measure: m21.stream.Measure) -> list[m21.stream.Stream]:
        m21Voices: list[m21.stream.Voice] = list(m21Measure.voices)
        if m21Voices:
            return list(m21Voices)
        return [m21Measure]

    @staticmethod
    def _offsetInMeasure(
        gn: m21.note.GeneralNote,
        vStream: m21.stream.Stream,
        m21Measure: m21.stream.Measure
    ) -> OffsetQL:
        if vStream is m21Measure:
            return opFrac(gn.offset)
        return opFrac(vStream.offset + gn.offset)

    @staticmethod
    def _isFullMeasureRest(
        gn: m21.note.GeneralNote,
        offset: OffsetQL,
        barDuration: OffsetQL
    ) -> bool:
        if not isinstance(gn, m21.note.Rest):
            return False
        if gn.fullMeasure in (True, 'always'):
            return True
        return offset == 0 and opFrac(gn.quarterLength) >= barDuration

    def _makeSlots(
        self,
        stack: MeasureStack,
        m21Measures: list[m21.stream.Measure]
    ) -> dict[OffsetQL, Slot]:
        offsets: set[OffsetQL] = set()
        for m21Measure in m21Measures:
            barDuration: OffsetQL = opFrac(m21Measure.barDuration.quarterLength)
            for vStream in self._voiceStreams(m21Measure):
                for gn in vStream.notesAndRests:
                    if gn.duration.isGrace:
                        continue
                    offset: OffsetQL = self._offsetInMeasure(gn, vStream, m21Measure)
                    if self._isFullMeasureRest(gn, offset, barDuration):
                        continue
                    offsets.add(offset)

        return {offset: stack.addSlot(offset) for offset in sorted(offsets)}

    def _importMeasure(
        self,
        measure: Measure,
        m21Measure: m21.stream.Measure,
        pIdx: int,
        offsetToSlot: dict[OffsetQL, Slot]
    ) -> None:
        barDuration: OffsetQL = opFrac(m21Measure.barDuration.quarterLength)
        nextId: int = 1

        for vIdx, vStream in enumerate(self._voiceStreams(m21Measure)):
            voice = Voice(nextId, VoiceFamily.HIGH)
            if isinstance(vStream, m21.stream.Voice):
                voice.m21Voice = vStream

            pendingCues: list[Chord] = []
            for gn in vStream.notesAndRests:
                offset: OffsetQL = self._offsetInMeasure(gn, vStream, m21Measure)
                isCue: bool = gn.duration.isGrace
                slot: Slot | None = None
                if not isCue and not self._isFullMeasureRest(gn, offset, barDuration):
                    slot = offsetToSlot.get(offset)

                chord: Chord = self._makeChord(
                    gn, measure.stack, pIdx, vIdx, offset, barDuration, slot, isCue
                )
                if isCue:
                    pendingCues.append(chord)
                    continue

                voice.addChord(chord)
                for cueChord in pendingCues:
                    chord.addCueChord(cueChord)
                pendingCues = []

            if not voice.chords:
                continue
            measure.addVoice(voice)
            self._registerTies(voice, pIdx)
            nextId += 1

    def _makeChord(
        self,
        gn: m21.note.GeneralNote,
        stack: MeasureStack,
        pIdx: int,
        vIdx: int,
        offset: OffsetQL,
        barDuration: OffsetQL,
        slot: Slot | None,
        isCue: bool
    ) -> Chord:
        x: float = stack.left + 0.05 * self.StackWidth
        if barDuration > 0:
            x += float(offset) / float(barDuration) * 0.9 * self.StackWidth
        top: float = pIdx * self.PartHeight

        m21Notes: list[m21.note.GeneralNote]
        if isinstance(gn, m21.chord.Chord):
            m21Notes = list(gn.notes)
        else:
            m21Notes = [gn]

        notes: list[Note] = []
        for m21Note in m21Notes:
            note: Note
            if isinstance(m21Note, m21.note.Rest):
                y: float = top + (128 - self._MIDDLE_C_PS) * self._PS_STEP
                note = Note(isRest=True, center=(x, y + vIdx * self._VOICE_REST_STEP))
            elif isinstance(m21Note, m21.note.Note):
                y = top + (128 - m21Note.pitch.ps) * self._PS_STEP
                note = Note(pitch=m21Note.pitch, center=(x, y))
            else:
                # Unpitched
                y = top + (128 - self._MIDDLE_C_PS) * self._PS_STEP
                note = Note(center=(x, y))
            note.m21Element = m21Note
            notes.append(note)
            self._noteForM21[id(m21Note)] = note

        center: tuple[float, float] = (
            x, sum(n.center[1] for n in notes if n.center is not None) / len(notes)
        )
        chord = Chord(
            center,
            slot=slot,
            isRest=isinstance(gn, m21.note.Rest),
            isCue=isCue
        )
        chord.m21Element = gn
        for note in notes:
            chord.addNote(note)
        if notes:
            # spanners on a chord are attached to the chord itself
            self._noteForM21[id(gn)] = notes[0]

        return chord

    def _registerTies(self, voice: Voice, pIdx: int) -> None:
        # only once the voice is in its measure, so a tie can find its part
        for chord in voice.chords:
            for note in chord.notes:
                if isinstance(note.m21Element, m21.note.Note):
                    self._registerTie(pIdx, note.m21Element, note)

    def _registerTie(self, pIdx: int, m21Note: m21.note.Note, note: Note) -> None:
        tie: m21.tie.Tie | None = m21Note.tie
        if tie is None:
            return
        key: tuple[int, str] = (pIdx, m21Note.pitch.nameWithOctave)
        if tie.type in ('stop', 'continue'):
            left: Note | None = self._openTies.pop(key, None)
            if left is not None:
                self._connect(left, note, isTie=True)
            else:
                environLocal.printDebug(f'tie stop without start at {m21Note}')
        if tie.type in ('start', 'continue'):
            self._openTies[key] = note

    def _importSlurs(self) -> None:
        for m21Slur in self.m21Score.spannerBundle.getByClass(m21.spanner.Slur):
            first: m21.base.Music21Object | None = m21Slur.getFirst()
            last: m21.base.Music21Object | None = m21Slur.getLast()
            if first is None or last is None or first is last:
                continue
            left: Note | None = self._noteForM21.get(id(first))
            right: Note | None = self._noteForM21.get(id(last))
            if left is None or right is None:
                continue
            self._connect(left, right, isTie=False)

    @staticmethod
    def _partOf(note: Note) -> Part | None:
        if note.chord is None or note.chord.voice is None:
            return None
        measure: Measure | None = note.chord.voice.measure
        if measure is None:
            return None
        return measure.part

    def _connect(self, left: Note, right: Note, isTie: bool) -> None:
        '''
        Same system: one slur.  Same page: two pieces linked by extension.
        Different pages: two orphans, linked later by Voices.refineScore.
        '''
        leftPart: Part | None = self._partOf(left)
        rightPart: Part | None = self._partOf(right)
        if leftPart is None or rightPart is None:
            # cue notes have no voice of their own
            return

        if leftPart.system is rightPart.system:
            leftPart.addSlur(Slur(leftHead=left, rightHead=right, isTie=isTie))
            return

        endPiece = Slur(leftHead=left, isTie=isTie)
        beginPiece = Slur(rightHead=right, isTie=isTie)
        if leftPart.system.page is rightPart.system.page:
            beginPiece.setExtension(HorizontalSide.LEFT, endPiece)
        leftPart.addSlur(endPiece)
        rightPart.addSlur(beginPiece)
