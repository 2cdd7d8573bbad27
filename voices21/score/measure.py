# ------------------------------------------------------------------------------
# Name:          measure.py
# Purpose:       Measure is the slice of one Part within one MeasureStack.  It owns
#                the voices of that slice, and knows how to rename/swap their IDs.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import functools

from music21 import environment

from voices21.score import ScoreStructureError
from voices21.score import Voice

environLocal = environment.Environment('voices21.score.measure')

class Measure:
    def __init__(
        self,
        part,   # Part
        stack,  # MeasureStack
    ) -> None:
        from voices21.score import Part
        from voices21.score import MeasureStack
        self.part: Part = part
        self.stack: MeasureStack = stack
        self.voices: list[Voice] = []

    @property
    def system(self):  # -> System
        return self.stack.system

    @property
    def page(self):  # -> Page | None
        return self.stack.system.page

    @property
    def voiceIds(self) -> list[int]:
        return [voice.id for voice in self.voices]

    def addVoice(self, voice: Voice) -> Voice:
        if voice.id < 1:
            raise ScoreStructureError(f'voice ID must be positive, got {voice.id}')
        if self.getVoiceById(voice.id) is not None:
            raise ScoreStructureError(f'voice ID {voice.id} already used in {self}')
        voice.measure = self
        self.voices.append(voice)
        return voice

    def clearVoices(self) -> None:
        for voice in self.voices:
            voice.measure = None
        self.voices = []

    def getVoiceById(self, voiceId: int) -> Voice | None:
        for voice in self.voices:
            if voice.id == voiceId:
                return voice
        return None

    def swapVoiceId(self, voice: Voice, newId: int) -> None:
        '''
        Gives newId to voice.  The voice currently holding newId (if any)
        gets voice's old ID, so IDs stay unique within the measure.
        '''
        if voice.id == newId:
            return
        oldId: int = voice.id
        holder: Voice | None = self.getVoiceById(newId)
        if holder is not None:
            holder.id = oldId
        voice.id = newId
        environLocal.printDebug(f'{self}: voice {oldId} -> {newId}')

    def swapVoiceIds(self, id1: int, id2: int) -> None:
        '''
        Exchanges id1 and id2 between the voices of this measure.
        '''
        if id1 == id2:
            return
        for voice in self.voices:
            if voice.id == id1:
                voice.id = id2
            elif voice.id == id2:
                voice.id = id1

    def sortVoices(self) -> None:
        from voices21.rhythm import Voices
        self.voices.sort(key=functools.cmp_to_key(Voices.byOrdinate))

    def renameVoices(self) -> None:
        # straight 1..N assignment, following current voice order
        for i, voice in enumerate(self.voices):
            voice.id = i + 1

    def setCueVoices(self) -> None:
        # cue chords belong to the voice of the chord they ornament
        for voice in self.voices:
            for chord in voice.chords:
                for cueChord in chord.cueChords:
                    cueChord.voice = voice

    def __repr__(self) -> str:
        return f'<Measure part#{self.part.id} stack#{self.stack.id}>'
