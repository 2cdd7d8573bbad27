# ------------------------------------------------------------------------------
# Name:          entitykind.py
# Purpose:       EntityKind enumerates every kind of score entity (symbol, relation,
#                structural subject) that an edit can carry. HorizontalSide is
#                LEFT/RIGHT, used to address slur heads and slur extensions.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from enum import Enum, IntEnum, auto

class HorizontalSide(IntEnum):
    LEFT = auto()
    RIGHT = auto()

    @property
    def opposite(self) -> 'HorizontalSide':
        if self == HorizontalSide.LEFT:
            return HorizontalSide.RIGHT
        return HorizontalSide.LEFT

class EntityKind(Enum):
    # symbols (inters)
    AUGMENTATION_DOT = auto()
    BARLINE = auto()
    BEAM_HOOK = auto()
    BEAM = auto()
    FLAG = auto()
    HEAD_CHORD = auto()
    HEAD = auto()
    REST_CHORD = auto()
    REST = auto()
    SMALL_BEAM = auto()
    SMALL_CHORD = auto()
    SMALL_FLAG = auto()
    STAFF_BARLINE = auto()
    STEM = auto()
    TUPLET = auto()
    TIME_SIGNATURE = auto()
    TIME_NUMBER = auto()
    BRACE = auto()
    SLUR = auto()
    # symbols with no effect on timing
    ACCIDENTAL = auto()
    ARTICULATION = auto()
    CLEF = auto()
    DYNAMICS = auto()
    FERMATA = auto()
    KEY_SIGNATURE = auto()
    LYRICS = auto()
    ORNAMENT = auto()
    TEXT = auto()

    # relations (edges between two entities)
    AUGMENTATION = auto()
    BEAM_STEM = auto()
    CHORD_TUPLET = auto()
    DOUBLE_DOT = auto()
    HEAD_STEM = auto()
    SAME_TIME = auto()
    SAME_VOICE = auto()
    SEPARATE_TIME = auto()
    SEPARATE_VOICE = auto()
    # relations with no effect on timing
    SLUR_HEAD = auto()
    ALTER_HEAD = auto()
    CHORD_ARTICULATION = auto()
    CHORD_DYNAMICS = auto()
    CHORD_ORNAMENT = auto()

    # structural subjects and tasks
    MEASURE_STACK = auto()
    SYSTEM_MERGE = auto()

    @property
    def isRelation(self) -> bool:
        return self in _RELATION_KINDS

_RELATION_KINDS: frozenset[EntityKind] = frozenset((
    EntityKind.AUGMENTATION,
    EntityKind.BEAM_STEM,
    EntityKind.CHORD_TUPLET,
    EntityKind.DOUBLE_DOT,
    EntityKind.HEAD_STEM,
    EntityKind.SAME_TIME,
    EntityKind.SAME_VOICE,
    EntityKind.SEPARATE_TIME,
    EntityKind.SEPARATE_VOICE,
    EntityKind.SLUR_HEAD,
    EntityKind.ALTER_HEAD,
    EntityKind.CHORD_ARTICULATION,
    EntityKind.CHORD_DYNAMICS,
    EntityKind.CHORD_ORNAMENT,
))
