# ------------------------------------------------------------------------------
# Name:          chord.py
# Purpose:       Chord is a group of simultaneous notes (or a rest) belonging to
#                one voice.  Cue (small) chords hang off the regular chord they
#                ornament.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import music21 as m21

from voices21.score import EntityKind
from voices21.score import ScoreEntity, Point
from voices21.score import Slot
from voices21.score import Note

class Chord(ScoreEntity):
    def __init__(
        self,
        center: Point,
        slot: Slot | None = None,
        preferredVoiceId: int | None = None,
        isRest: bool = False,
        isCue: bool = False
    ) -> None:
        kind: EntityKind = EntityKind.HEAD_CHORD
        if isCue:
            kind = EntityKind.SMALL_CHORD
        elif isRest:
            kind = EntityKind.REST_CHORD
        super().__init__(kind, center)

        self.slot: Slot | None = slot
        # an explicit (user supplied) voice ID this chord's voice must get
        self.preferredVoiceId: int | None = preferredVoiceId
        self.isRest: bool = isRest
        self.isCue: bool = isCue
        self.notes: list[Note] = []
        self.cueChords: list[Chord] = []
        self.voice = None  # Voice | None, set by Voice.addChord (or Measure.setCueVoices)
        self.m21Element: m21.note.GeneralNote | None = None

    @property
    def center(self) -> Point:
        assert self._center is not None
        return self._center

    @center.setter
    def center(self, newCenter: Point) -> None:
        self._center = newCenter

    @property
    def ordinate(self) -> float:
        return self.center[1]

    @property
    def measure(self):  # -> Measure | None
        if self.voice is None:
            return None
        return self.voice.measure

    def addNote(self, note: Note) -> Note:
        note.chord = self
        self.notes.append(note)
        return note

    def addCueChord(self, cueChord: 'Chord') -> 'Chord':
        self.cueChords.append(cueChord)
        return cueChord

    @staticmethod
    def byOrdinate(c1: 'Chord', c2: 'Chord') -> int:
        # top to bottom, then left to right
        y1, y2 = c1.ordinate, c2.ordinate
        if y1 != y2:
            return -1 if y1 < y2 else 1
        x1, x2 = c1.center[0], c2.center[0]
        if x1 != x2:
            return -1 if x1 < x2 else 1
        return 0

    def __repr__(self) -> str:
        slotStr: str = f'slot#{self.slot.id}' if self.slot is not None else 'no slot'
        return f'<Chord {self.kind.name} {slotStr} y={self.ordinate}>'
