# ------------------------------------------------------------------------------
# Name:          m21exceptions.py
# Purpose:       Exceptions that can be raised while bridging to/from music21.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from music21 import exceptions21

class M21ImportError(exceptions21.Music21Exception):
    '''When a music21 score cannot be turned into a voices21 score.'''
    pass
