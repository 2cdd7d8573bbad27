# ------------------------------------------------------------------------------
# Name:          m21exporter.py
# Purpose:       M21VoiceExporter writes unified voice IDs (and voice colors) back
#                onto the music21 objects a voices21 score was imported from.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from music21 import environment

from voices21.score import Chord
from voices21.score import Voice
from voices21.score import Score
from voices21.rhythm import Voices

environLocal = environment.Environment('voices21.m21.m21exporter')

class M21VoiceExporter:
    def __init__(self, score: Score, colorize: bool = True) -> None:
        self.score: Score = score
        self.colorize: bool = colorize

    def export(self) -> int:
        '''
        Returns the number of voices exported.
        '''
        numVoices: int = 0
        for page in self.score.pages:
            for system in page.systems:
                for part in system.parts:
                    for measure in part.measures:
                        for voice in measure.voices:
                            self._exportVoice(voice)
                            numVoices += 1
        environLocal.printDebug(f'exported {numVoices} voices')
        return numVoices

    def _exportVoice(self, voice: Voice) -> None:
        if voice.m21Voice is not None:
            voice.m21Voice.id = str(voice.id)

        if not self.colorize:
            return

        color: str = Voices.colorOf(voice.id)
        for chord in voice.chords:
            self._colorChord(chord, color)
            for cueChord in chord.cueChords:
                self._colorChord(cueChord, color)

    @staticmethod
    def _colorChord(chord: Chord, color: str) -> None:
        if chord.m21Element is not None:
            chord.m21Element.style.color = color
        for note in chord.notes:
            if note.m21Element is not None and note.m21Element is not chord.m21Element:
                note.m21Element.style.color = color
