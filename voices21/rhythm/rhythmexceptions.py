# ------------------------------------------------------------------------------
# Name:          rhythmexceptions.py
# Purpose:       Exceptions that can be raised during voice unification.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from music21 import exceptions21

class PreconditionViolation(exceptions21.Music21Exception):
    '''
    When a caller breaks a contract (e.g. comparing voices from different
    stacks).  This is a programming error, not something to catch and retry.
    '''
    pass
