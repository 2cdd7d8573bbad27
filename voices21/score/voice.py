# ------------------------------------------------------------------------------
# Name:          voice.py
# Purpose:       Voice is a time-ordered sequence of chords within one measure.
#                Its ID is only meaningful within its own measure; continuity
#                across measures, systems and pages is inferred by voices21.rhythm.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from enum import IntEnum

import music21 as m21

from voices21.score import Slot
from voices21.score import Chord

class VoiceFamily(IntEnum):
    # order matters: it is a sort key
    HIGH = 1  # voices starting in the upper staff of a part
    LOW = 5   # voices starting in the lower staff of a part
    CUE = 9   # voices made of cue (small) chords only

class Voice:
    def __init__(
        self,
        voiceId: int,
        family: VoiceFamily = VoiceFamily.HIGH
    ) -> None:
        self.id: int = voiceId
        self.family: VoiceFamily = family
        self.chords: list[Chord] = []
        self.measure = None  # Measure | None, set by Measure.addVoice
        # the music21 Voice this Voice was imported from, if any
        self.m21Voice: m21.stream.Voice | None = None

    def addChord(self, chord: Chord) -> Chord:
        chord.voice = self
        self.chords.append(chord)
        return chord

    @property
    def firstChord(self) -> Chord | None:
        if not self.chords:
            return None
        return self.chords[0]

    @property
    def firstSlot(self) -> Slot | None:
        chord: Chord | None = self.firstChord
        if chord is None:
            return None
        return chord.slot

    @property
    def isWholeMeasureRest(self) -> bool:
        return (
            len(self.chords) == 1
            and self.chords[0].isRest
            and self.chords[0].slot is None
        )

    def __repr__(self) -> str:
        return f'<Voice#{self.id} {self.family.name}>'
