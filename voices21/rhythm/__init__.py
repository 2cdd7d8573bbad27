# ------------------------------------------------------------------------------
# Name:          rhythm/__init__.py
# Purpose:       Allows "from voices21.rhythm import Voices" et al instead
#                of "from voices21.rhythm.voices import Voices".
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

from .rhythmexceptions import PreconditionViolation
from .sluradapters import SlurAdapter
from .sluradapters import SystemLocalSlurAdapter, PageLocalSlurAdapter, ScoreLocalSlurAdapter
from .crossslurlinker import CrossSlurLinker
from .voices import Voices, SlurLinker
from .impact import ImpactScope, IMPACT_SCOPES
from .impact import OpKind, TaskAction
from .impact import EditTask, EntityTask, RelationTask, StackTask, PageTask, SystemMergeTask
from .impact import EditBatch, Impact, ImpactClassifier
from .pagerhythm import StackRhythmDeriver, PageRhythm, RhythmsStep
