import pytest

# The things we're testing
from voices21.rhythm import Voices
from voices21.score import Chord, Note, Slur

# test utilities
from tests.Utilities import MakeSystem, GetMeasure, AddVoice, NoteOf, Tie
from tests.Utilities import VoiceIdSets, CheckIdSetsUnchanged

@pytest.fixture
def crossedSystem():
    '''
    Two measures, two voices each.  The lower voice of measure 1 (ID 2) is tied
    to the first chord of voice 1 of measure 2, which is drawn lower.
    '''
    system = MakeSystem(2)
    m1 = GetMeasure(system, 0)
    m2 = GetMeasure(system, 1)
    upper1 = AddVoice(m1, 1, y=100.0, pitch='C5')
    lower1 = AddVoice(m1, 2, y=300.0, pitch='C4')
    lower2 = AddVoice(m2, 1, y=300.0, pitch='C4')
    upper2 = AddVoice(m2, 2, y=100.0, pitch='C5')
    Tie(NoteOf(lower1), NoteOf(lower2))
    return system, (upper1, lower1, upper2, lower2)

def test_refineSystem_tie_propagates_id(crossedSystem):
    system, (upper1, lower1, upper2, lower2) = crossedSystem
    measures = [GetMeasure(system, 0), GetMeasure(system, 1)]
    before = VoiceIdSets(measures)

    modifs = Voices.refineSystem(system)

    assert modifs == 1
    assert lower2.id == lower1.id == 2
    assert upper2.id == 1
    CheckIdSetsUnchanged(measures, before)

def test_refineSystem_idempotent(crossedSystem):
    system, _ = crossedSystem
    Voices.refineSystem(system)
    ids = [m.voiceIds for m in (GetMeasure(system, 0), GetMeasure(system, 1))]
    assert Voices.refineSystem(system) == 0
    assert [m.voiceIds for m in (GetMeasure(system, 0), GetMeasure(system, 1))] == ids

def test_refineSystem_tie_chain_over_three_measures():
    system = MakeSystem(3)
    m1, m2, m3 = (GetMeasure(system, i) for i in range(3))
    a1 = AddVoice(m1, 1, y=100.0, pitch='E5')
    b1 = AddVoice(m1, 2, y=300.0, pitch='C4')
    b2 = AddVoice(m2, 1, y=300.0, pitch='C4')
    a2 = AddVoice(m2, 2, y=100.0, pitch='E5')
    a3 = AddVoice(m3, 1, y=100.0, pitch='E5')
    b3 = AddVoice(m3, 2, y=300.0, pitch='C4')
    Tie(NoteOf(b1), NoteOf(b2))
    Tie(NoteOf(b2), NoteOf(b3))
    Tie(NoteOf(a2), NoteOf(a3))
    before = VoiceIdSets([m1, m2, m3])

    Voices.refineSystem(system)

    assert a1.id == a2.id == a3.id == 1
    assert b1.id == b2.id == b3.id == 2
    CheckIdSetsUnchanged([m1, m2, m3], before)

def test_refineSystem_non_tie_slur_is_no_evidence():
    system = MakeSystem(2)
    m1, m2 = GetMeasure(system, 0), GetMeasure(system, 1)
    AddVoice(m1, 1, y=100.0)
    lower1 = AddVoice(m1, 2, y=300.0)
    lower2 = AddVoice(m2, 1, y=300.0)
    AddVoice(m2, 2, y=100.0)
    Tie(NoteOf(lower1), NoteOf(lower2), isTie=False)

    assert Voices.refineSystem(system) == 0
    assert lower2.id == 1

def test_refineSystem_unresolved_left_voice():
    system = MakeSystem(2)
    m1, m2 = GetMeasure(system, 0), GetMeasure(system, 1)
    AddVoice(m1, 1)
    v = AddVoice(m2, 1)
    AddVoice(m2, 2)
    # a chord the upstream rhythm could not put into any voice
    lost = Chord((50.0, 300.0))
    lostNote = lost.addNote(Note('C4'))
    system.parts[0].addSlur(Slur(lostNote, NoteOf(v), isTie=True))

    assert Voices.refineSystem(system) == 0
    assert v.id == 1

def test_refineSystem_same_voice_annotation():
    system = MakeSystem(2)
    m1, m2 = GetMeasure(system, 0), GetMeasure(system, 1)
    AddVoice(m1, 1, y=100.0)
    lower1 = AddVoice(m1, 2, y=300.0)
    lower2 = AddVoice(m2, 1, y=300.0)
    upper2 = AddVoice(m2, 2, y=100.0)
    system.relations.addSameVoice(lower1.firstChord, lower2.firstChord)

    assert Voices.refineSystem(system) == 1
    assert lower2.id == 2
    assert upper2.id == 1

def test_refineSystem_same_voice_annotation_not_adjacent():
    system = MakeSystem(3)
    m1, m2, m3 = (GetMeasure(system, i) for i in range(3))
    AddVoice(m1, 1, y=100.0)
    lower1 = AddVoice(m1, 2, y=300.0)
    AddVoice(m2, 1)
    lower3 = AddVoice(m3, 1, y=300.0)
    AddVoice(m3, 2, y=100.0)
    # m1 is not the measure just before m3: ignored
    system.relations.addSameVoice(lower1.firstChord, lower3.firstChord)

    assert Voices.refineSystem(system) == 0
    assert lower3.id == 1

def test_refineSystem_preferred_id_wins_over_tie():
    system = MakeSystem(2)
    m1, m2 = GetMeasure(system, 0), GetMeasure(system, 1)
    AddVoice(m1, 1, y=100.0)
    lower1 = AddVoice(m1, 2, y=300.0)
    upper2 = AddVoice(m2, 1, y=100.0)
    # tied to voice 2, but explicitly wanted as voice 1
    lower2 = AddVoice(m2, 2, y=300.0, preferredVoiceId=1)
    Tie(NoteOf(lower1), NoteOf(lower2))
    before = VoiceIdSets([m1, m2])

    assert Voices.refineSystem(system) == 1

    assert lower2.id == 1
    assert upper2.id == 2
    CheckIdSetsUnchanged([m1, m2], before)

    # settled: nothing left to swap, nothing churns
    assert Voices.refineSystem(system) == 0
    assert Voices.refineSystem(system) == 0
    assert (lower2.id, upper2.id) == (1, 2)

def test_refineSystem_same_voice_annotation_wins_over_tie():
    system = MakeSystem(2)
    m1, m2 = GetMeasure(system, 0), GetMeasure(system, 1)
    upper1 = AddVoice(m1, 1, y=100.0)
    lower1 = AddVoice(m1, 2, y=300.0)
    upper2 = AddVoice(m2, 1, y=100.0)
    # tied to voice 2, but annotated as continuing voice 1
    lower2 = AddVoice(m2, 2, y=300.0)
    Tie(NoteOf(lower1), NoteOf(lower2))
    system.relations.addSameVoice(upper1.firstChord, lower2.firstChord)

    assert Voices.refineSystem(system) == 1
    assert (lower2.id, upper2.id) == (1, 2)
    assert Voices.refineSystem(system) == 0

def test_refineSystem_preferred_id_in_first_measure():
    system = MakeSystem(1)
    m = GetMeasure(system, 0)
    v1 = AddVoice(m, 1, preferredVoiceId=2)
    v2 = AddVoice(m, 2)

    assert Voices.refineSystem(system) == 1
    assert (v1.id, v2.id) == (2, 1)

def test_refineSystem_parts_are_independent():
    system = MakeSystem(2, partIds=(1, 2))
    lower1 = AddVoice(GetMeasure(system, 0, 1), 2, y=300.0)
    AddVoice(GetMeasure(system, 0, 1), 1, y=100.0)
    lower2 = AddVoice(GetMeasure(system, 1, 1), 1, y=300.0)
    AddVoice(GetMeasure(system, 1, 1), 2, y=100.0)
    other1 = AddVoice(GetMeasure(system, 0, 2), 1)
    other2 = AddVoice(GetMeasure(system, 1, 2), 1)
    other3 = AddVoice(GetMeasure(system, 1, 2), 2)
    Tie(NoteOf(lower1), NoteOf(lower2))

    Voices.refineSystem(system)

    assert lower2.id == 2
    assert (other1.id, other2.id, other3.id) == (1, 1, 2)

def test_refineSystem_missing_holder_renames():
    system = MakeSystem(2)
    m1, m2 = GetMeasure(system, 0), GetMeasure(system, 1)
    AddVoice(m1, 1, y=100.0)
    lower1 = AddVoice(m1, 2, y=300.0)
    only2 = AddVoice(m2, 1, y=300.0)
    Tie(NoteOf(lower1), NoteOf(only2))

    Voices.refineSystem(system)

    assert only2.id == 2
    assert m2.voiceIds == [2]
