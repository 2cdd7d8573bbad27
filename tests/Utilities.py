from voices21.score import Note, Chord, Slur
from voices21.score import Voice, VoiceFamily
from voices21.score import Measure, MeasureStack
from voices21.score import Part, System, Score
from voices21.score import HorizontalSide

STACK_WIDTH = 100.0
PART_HEIGHT = 1000.0

def MakeScore(pages, partIds=(1,)) -> Score:
    '''
    pages is a list (one entry per page) of lists (one entry per system) of
    stack counts.  e.g. [[2, 2], [3]] is two pages, the first one with two
    systems of two stacks each, the second one with one system of three stacks.
    '''
    score = Score()
    for partId in partIds:
        score.addLogicalPart(partId, f'P{partId}')
    for systems in pages:
        page = score.addPage()
        for numStacks in systems:
            system = page.addSystem()
            for logicalPart in score.logicalParts:
                system.addPart(logicalPart)
            for i in range(numStacks):
                system.addStack(i * STACK_WIDTH, (i + 1) * STACK_WIDTH)
    return score

def MakeSystem(numStacks: int, partIds=(1,)) -> System:
    return MakeScore([[numStacks]], partIds).pages[0].systems[0]

def GetMeasure(system: System, stackIndex: int, partId: int = 1) -> Measure:
    part = system.getPartById(partId)
    return system.stacks[stackIndex].getMeasureAt(part)

def AddVoice(measure: Measure,
             voiceId: int,
             y: float = 100.0,
             slotId: int | None = 1,
             pitch: str | None = 'C4',
             family: VoiceFamily = VoiceFamily.HIGH,
             isRest: bool = False,
             preferredVoiceId: int | None = None) -> Voice:
    '''
    Adds a voice holding one chord (with one note) to measure.  y is relative
    to the top of the part.  slotId None makes a slot-less chord (whole rest).
    '''
    stack: MeasureStack = measure.stack
    slot = None
    if slotId is not None:
        while stack.getSlot(slotId) is None:
            stack.addSlot(len(stack.slots))
        slot = stack.getSlot(slotId)
    x = stack.left + 10.0 * (slotId or 1)
    top = (measure.part.id - 1) * PART_HEIGHT
    chord = Chord((x, top + y), slot=slot, preferredVoiceId=preferredVoiceId, isRest=isRest)
    chord.addNote(Note(pitch=None if isRest else pitch, isRest=isRest))
    voice = measure.addVoice(Voice(voiceId, family))
    voice.addChord(chord)
    return voice

def NoteOf(voice: Voice) -> Note:
    return voice.chords[0].notes[0]

def PartOf(note: Note) -> Part:
    return note.chord.voice.measure.part

def Tie(left: Note, right: Note, isTie: bool = True) -> Slur:
    return PartOf(left).addSlur(Slur(leftHead=left, rightHead=right, isTie=isTie))

def TieAcrossSystems(left: Note, right: Note) -> tuple[Slur, Slur]:
    endPiece = PartOf(left).addSlur(Slur(leftHead=left, isTie=True))
    beginPiece = PartOf(right).addSlur(Slur(rightHead=right, isTie=True))
    beginPiece.setExtension(HorizontalSide.LEFT, endPiece)
    return endPiece, beginPiece

def OrphansAcrossPages(left: Note, right: Note, isTie: bool = True) -> tuple[Slur, Slur]:
    endOrphan = PartOf(left).addSlur(Slur(leftHead=left, isTie=isTie))
    beginOrphan = PartOf(right).addSlur(Slur(rightHead=right, isTie=isTie))
    return endOrphan, beginOrphan

def AllMeasures(score: Score) -> list[Measure]:
    measures = []
    for page in score.pages:
        for system in page.systems:
            for part in system.parts:
                measures.extend(part.measures)
    return measures

def VoiceIdSets(measures: list[Measure]) -> list[list[int]]:
    return [sorted(m.voiceIds) for m in measures]

def CheckVoiceIds(measure: Measure, expectedIds: list[int]):
    # expectedIds in voice insertion order
    assert measure.voiceIds == expectedIds

def CheckIdSetsUnchanged(measures: list[Measure], idSetsBefore: list[list[int]]):
    assert VoiceIdSets(measures) == idSetsBefore
    for measure in measures:
        assert len(set(measure.voiceIds)) == len(measure.voiceIds)

class FixedSlurLinker:
    '''
    Stands for the external matcher: always returns the links it was given.
    '''
    def __init__(self, links: dict):
        self.links = links
        self.calls = []

    def link(self, part: Part, precedingPart: Part) -> dict:
        self.calls.append((part, precedingPart))
        return {s: p for s, p in self.links.items() if s.part is part and p.part is precedingPart}
