# ------------------------------------------------------------------------------
# Purpose:       voices21 is a music21-extending package that gives stable voice
#                IDs (and colors) to the voices of a score, across measures,
#                systems and pages, and keeps them up to date as the score is edited.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

__all__ = [
    'score',
    'rhythm',
    'm21',
    'linkVoices',
]

import music21

from .shared import SharedConstants
from .rhythm import Voices
from .m21 import M21ScoreImporter
from .m21 import M21VoiceExporter

def linkVoices(
    m21Score: music21.stream.Score,
    withScorePass: bool = True,
    colorize: bool = True
) -> int:
    '''
    Unifies the voice IDs of m21Score in place (and colors its notes by voice).
    Returns the count of voice ID swaps performed.
    '''
    score = M21ScoreImporter(m21Score).importScore()
    modifs: int = Voices.refineAll(score, withScorePass=withScorePass)
    M21VoiceExporter(score, colorize=colorize).export()
    return modifs
