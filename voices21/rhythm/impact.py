# ------------------------------------------------------------------------------
# Name:          impact.py
# Purpose:       Edit tasks (what an editor did to the score), and the classifier
#                that decides, for a batch of such tasks, what rhythm data must be
#                recomputed: nothing, a few measure stacks, or the whole page.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t
from enum import Enum, IntEnum, auto

from music21 import environment

from voices21.score import EntityKind
from voices21.score import ScoreEntity
from voices21.score import Relation
from voices21.score import MeasureStack
from voices21.score import System, Page

environLocal = environment.Environment('voices21.rhythm.impact')

class ImpactScope(IntEnum):
    NONE = 0
    STACK = 1  # effect cannot cross a measure stack boundary
    PAGE = 2   # effect can ripple across the whole page

# Every EntityKind, and what editing it invalidates.
IMPACT_SCOPES: dict[EntityKind, ImpactScope] = {
    # symbols
    EntityKind.AUGMENTATION_DOT: ImpactScope.STACK,
    EntityKind.BARLINE: ImpactScope.STACK,
    EntityKind.BEAM_HOOK: ImpactScope.STACK,
    EntityKind.BEAM: ImpactScope.STACK,
    EntityKind.FLAG: ImpactScope.STACK,
    EntityKind.HEAD_CHORD: ImpactScope.STACK,
    EntityKind.HEAD: ImpactScope.STACK,
    EntityKind.REST_CHORD: ImpactScope.STACK,
    EntityKind.REST: ImpactScope.STACK,
    EntityKind.SMALL_BEAM: ImpactScope.STACK,
    EntityKind.SMALL_CHORD: ImpactScope.STACK,
    EntityKind.SMALL_FLAG: ImpactScope.STACK,
    EntityKind.STAFF_BARLINE: ImpactScope.STACK,
    EntityKind.STEM: ImpactScope.STACK,
    EntityKind.TUPLET: ImpactScope.STACK,
    EntityKind.TIME_SIGNATURE: ImpactScope.PAGE,
    EntityKind.TIME_NUMBER: ImpactScope.PAGE,
    EntityKind.BRACE: ImpactScope.PAGE,  # possibility of part merge/split
    EntityKind.SLUR: ImpactScope.PAGE,   # possibility of ties
    EntityKind.ACCIDENTAL: ImpactScope.NONE,
    EntityKind.ARTICULATION: ImpactScope.NONE,
    EntityKind.CLEF: ImpactScope.NONE,
    EntityKind.DYNAMICS: ImpactScope.NONE,
    EntityKind.FERMATA: ImpactScope.NONE,
    EntityKind.KEY_SIGNATURE: ImpactScope.NONE,
    EntityKind.LYRICS: ImpactScope.NONE,
    EntityKind.ORNAMENT: ImpactScope.NONE,
    EntityKind.TEXT: ImpactScope.NONE,
    # relations
    EntityKind.AUGMENTATION: ImpactScope.STACK,
    EntityKind.BEAM_STEM: ImpactScope.STACK,
    EntityKind.CHORD_TUPLET: ImpactScope.STACK,
    EntityKind.DOUBLE_DOT: ImpactScope.STACK,
    EntityKind.HEAD_STEM: ImpactScope.STACK,
    EntityKind.SAME_TIME: ImpactScope.STACK,
    EntityKind.SAME_VOICE: ImpactScope.STACK,
    EntityKind.SEPARATE_TIME: ImpactScope.STACK,
    EntityKind.SEPARATE_VOICE: ImpactScope.STACK,
    EntityKind.SLUR_HEAD: ImpactScope.NONE,
    EntityKind.ALTER_HEAD: ImpactScope.NONE,
    EntityKind.CHORD_ARTICULATION: ImpactScope.NONE,
    EntityKind.CHORD_DYNAMICS: ImpactScope.NONE,
    EntityKind.CHORD_ORNAMENT: ImpactScope.NONE,
    # structural subjects and tasks
    EntityKind.MEASURE_STACK: ImpactScope.STACK,
    EntityKind.SYSTEM_MERGE: ImpactScope.PAGE,
}

_BARLINE_KINDS: tuple[EntityKind, ...] = (EntityKind.BARLINE, EntityKind.STAFF_BARLINE)

class OpKind(Enum):
    DO = auto()
    UNDO = auto()
    REDO = auto()

class TaskAction(Enum):
    ADDITION = auto()
    REMOVAL = auto()
    MODIFICATION = auto()

class EditTask:
    pass

class EntityTask(EditTask):
    def __init__(self, entity: ScoreEntity, action: TaskAction) -> None:
        self.entity: ScoreEntity = entity
        self.action: TaskAction = action

    def __repr__(self) -> str:
        return f'<EntityTask {self.action.name} {self.entity}>'

class RelationTask(EditTask):
    def __init__(self, relation: Relation, action: TaskAction) -> None:
        self.relation: Relation = relation
        self.action: TaskAction = action

    @property
    def source(self) -> ScoreEntity:
        return self.relation.source

    @property
    def target(self) -> ScoreEntity:
        return self.relation.target

    def __repr__(self) -> str:
        return f'<RelationTask {self.action.name} {self.relation}>'

class StackTask(EditTask):
    def __init__(self, stack: MeasureStack) -> None:
        self.stack: MeasureStack = stack

    def __repr__(self) -> str:
        return f'<StackTask {self.stack}>'

class PageTask(EditTask):
    def __init__(self, page: Page) -> None:
        self.page: Page = page

    def __repr__(self) -> str:
        return f'<PageTask {self.page}>'

class SystemMergeTask(EditTask):
    def __init__(self, system: System) -> None:
        self.system: System = system

    def __repr__(self) -> str:
        return f'<SystemMergeTask {self.system}>'

class EditBatch:
    '''
    The tasks of one user action (or of its undo/redo), all within one system.
    '''
    def __init__(self, system: System, tasks: t.Iterable[EditTask] = ()) -> None:
        self.system: System = system
        self.tasks: list[EditTask] = list(tasks)

    def addTask(self, task: EditTask) -> EditTask:
        self.tasks.append(task)
        return task

    def __repr__(self) -> str:
        return f'<EditBatch {self.system} {self.tasks}>'

class Impact:
    def __init__(self) -> None:
        self.onPage: bool = False
        self.page: Page | None = None
        # dict as an insertion-ordered set
        self._onStacks: dict[MeasureStack, None] = {}

    @property
    def stacks(self) -> tuple[MeasureStack, ...]:
        return tuple(self._onStacks)

    @property
    def isEmpty(self) -> bool:
        return not self.onPage and not self._onStacks

    def add(self, stack: MeasureStack | None) -> None:
        if stack is not None:
            self._onStacks[stack] = None

    def clearStacks(self) -> None:
        self._onStacks.clear()

    def __repr__(self) -> str:
        return f'RhythmsImpact{{page:{self.onPage} stacks:{list(self._onStacks)}}}'

class ImpactClassifier:
    @staticmethod
    def scopeOf(kind: EntityKind) -> ImpactScope:
        return IMPACT_SCOPES[kind]

    @staticmethod
    def isImpactedBy(kind: EntityKind) -> bool:
        return IMPACT_SCOPES[kind] != ImpactScope.NONE

    @staticmethod
    def classify(batch: EditBatch, opKind: OpKind) -> Impact:
        environLocal.printDebug(f'RHYTHMS impact {opKind.name} {batch}')
        system: System = batch.system
        impact = Impact()

        for task in batch.tasks:
            if isinstance(task, EntityTask):
                ImpactClassifier._classifyEntityTask(task, opKind, system, impact)
            elif isinstance(task, RelationTask):
                scope: ImpactScope = IMPACT_SCOPES[task.relation.kind]
                if scope == ImpactScope.PAGE:
                    impact.onPage = True
                elif scope == ImpactScope.STACK:
                    # both ends of the relation
                    impact.add(ImpactClassifier._stackOf(system, task.source))
                    impact.add(ImpactClassifier._stackOf(system, task.target))
            elif isinstance(task, StackTask):
                if ImpactClassifier.isImpactedBy(task.stack.kind):
                    impact.add(task.stack)
            elif isinstance(task, PageTask):
                impact.onPage = True
                impact.page = task.page
            elif isinstance(task, SystemMergeTask):
                impact.onPage = True
                impact.page = task.system.page

        if impact.page is None:
            impact.page = system.page
        if impact.onPage:
            # whole page or stacks, never both
            impact.clearStacks()

        return impact

    @staticmethod
    def _classifyEntityTask(
        task: EntityTask,
        opKind: OpKind,
        system: System,
        impact: Impact
    ) -> None:
        entity: ScoreEntity = task.entity
        scope: ImpactScope = IMPACT_SCOPES[entity.kind]

        if scope == ImpactScope.PAGE:
            # Reprocess the whole page
            impact.onPage = True
            return

        if scope != ImpactScope.STACK:
            return

        # Reprocess just the stack
        stack: MeasureStack | None = ImpactClassifier._stackOf(system, entity)
        if stack is None:
            return
        impact.add(stack)

        if entity.kind in _BARLINE_KINDS:
            # a barline shifts measure boundaries: next stack as well
            if ((task.action == TaskAction.REMOVAL and opKind == OpKind.UNDO)
                    or (task.action == TaskAction.ADDITION and opKind != OpKind.UNDO)):
                impact.add(stack.nextSibling)

    @staticmethod
    def _stackOf(system: System, entity: ScoreEntity) -> MeasureStack | None:
        stack: MeasureStack | None = system.getStackAt(entity.center)
        if stack is None:
            environLocal.warn(f'No measure stack found for {entity}, ignored')
        return stack
