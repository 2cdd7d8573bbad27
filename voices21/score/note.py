# ------------------------------------------------------------------------------
# Name:          note.py
# Purpose:       Note is one note head (or rest) within a Chord.  Notes are the
#                endpoints of slurs (and thus of ties).
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

import music21 as m21

from voices21.score import EntityKind, HorizontalSide
from voices21.score import ScoreEntity, Point

class Note(ScoreEntity):
    def __init__(
        self,
        pitch: m21.pitch.Pitch | str | None = None,
        isRest: bool = False,
        center: Point | None = None
    ) -> None:
        super().__init__(EntityKind.REST if isRest else EntityKind.HEAD, center)
        if isinstance(pitch, str):
            pitch = m21.pitch.Pitch(pitch)
        self.pitch: m21.pitch.Pitch | None = pitch
        self.isRest: bool = isRest
        self.chord = None  # Chord | None, set by Chord.addNote
        self.slurs: list = []  # list[Slur], maintained by Slur
        # the music21 note (or rest) this Note was imported from, if any
        self.m21Element: m21.note.GeneralNote | None = None

    @property
    def isHead(self) -> bool:
        return not self.isRest

    @property
    def center(self) -> Point | None:
        if self._center is None and self.chord is not None:
            return self.chord.center
        return self._center

    @center.setter
    def center(self, newCenter: Point | None) -> None:
        self._center = newCenter

    @property
    def voice(self):  # -> Voice | None
        if self.chord is None:
            return None
        return self.chord.voice

    def getSlurs(self, side: HorizontalSide) -> list:
        '''
        Returns the slurs for which this note is the head on the given side,
        i.e. getSlurs(RIGHT) gives the slurs ending at this note.
        '''
        return [slur for slur in self.slurs if slur.getHead(side) is self]

    def hasSamePitchAs(self, other: t.Optional['Note']) -> bool | None:
        # None means we cannot tell
        if other is None or self.pitch is None or other.pitch is None:
            return None
        return self.pitch.nameWithOctave == other.pitch.nameWithOctave

    def __repr__(self) -> str:
        if self.isRest:
            return '<Note rest>'
        if self.pitch is None:
            return '<Note head>'
        return f'<Note {self.pitch.nameWithOctave}>'
