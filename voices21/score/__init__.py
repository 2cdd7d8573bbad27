# ------------------------------------------------------------------------------
# Name:          score/__init__.py
# Purpose:       Allows "from voices21.score import Measure" et al instead
#                of "from voices21.score.measure import Measure".
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

from .entitykind import EntityKind, HorizontalSide
from .scoreexceptions import ScoreStructureError
from .entity import ScoreEntity, Point
from .relations import Relation, RelationGraph
from .slot import Slot
from .note import Note
from .chord import Chord
from .slur import Slur
from .voice import Voice, VoiceFamily
from .measure import Measure
from .measurestack import MeasureStack
from .part import LogicalPart, Part
from .system import System
from .page import Page
from .score import Score
