# ------------------------------------------------------------------------------
# Name:          scoreexceptions.py
# Purpose:       Exceptions that can be raised while building the score model.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from music21 import exceptions21

class ScoreStructureError(exceptions21.Music21Exception):
    '''When the score model is being built in an inconsistent way.'''
    pass
