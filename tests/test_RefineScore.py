import importlib

import pytest

# The things we're testing
from voices21.rhythm import Voices
from voices21.rhythm import CrossSlurLinker
from voices21.score import Slur

# test utilities
from tests.Utilities import MakeScore, GetMeasure, AddVoice, NoteOf, OrphansAcrossPages
from tests.Utilities import AllMeasures, VoiceIdSets, CheckIdSetsUnchanged
from tests.Utilities import FixedSlurLinker

def _makeCrossedPages(pages, lowerPitch='C4'):
    '''
    The last system of page 1 ends with voices 1 (upper) and 2 (lower); the
    lower one is tied over the page break to voice 1 of page 2, drawn lower.
    '''
    score = MakeScore(pages)
    lastSys1 = score.pages[0].lastSystem
    AddVoice(GetMeasure(lastSys1, 0), 1, y=100.0, pitch='C5')
    lower = AddVoice(GetMeasure(lastSys1, 0), 2, y=300.0, pitch='C4')
    page2Voices = []
    for system in score.pages[1].systems:
        page2Voices.append((
            AddVoice(GetMeasure(system, 0), 1, y=300.0, pitch=lowerPitch),
            AddVoice(GetMeasure(system, 0), 2, y=100.0, pitch='C5'),
        ))
    endOrphan, beginOrphan = OrphansAcrossPages(NoteOf(lower), NoteOf(page2Voices[0][0]))
    return score, lower, page2Voices, endOrphan, beginOrphan

def test_refineScore_default_linker():
    score, lower, page2Voices, endOrphan, beginOrphan = _makeCrossedPages([[1], [1]])
    measures = AllMeasures(score)
    before = VoiceIdSets(measures)

    assert Voices.refineScore(score) == 1

    low, high = page2Voices[0]
    assert low.id == lower.id == 2
    assert high.id == 1
    assert beginOrphan.crossTiePartner is endOrphan
    assert beginOrphan.isTie and endOrphan.isTie
    CheckIdSetsUnchanged(measures, before)

def test_refineScore_fixed_linker():
    score, lower, page2Voices, endOrphan, beginOrphan = _makeCrossedPages([[1], [1]])
    linker = FixedSlurLinker({beginOrphan: endOrphan})

    assert Voices.refineScore(score, slurLinker=linker) == 1

    assert len(linker.calls) == 1
    part, precedingPart = linker.calls[0]
    assert part is score.pages[1].firstSystem.parts[0]
    assert precedingPart is score.pages[0].lastSystem.parts[0]
    assert page2Voices[0][0].id == 2

def test_refineScore_swaps_across_page_systems():
    score, lower, page2Voices, _, _ = _makeCrossedPages([[1], [1, 1]])

    assert Voices.refineScore(score) == 1

    # the second system of page 2 follows the logical part swap
    for low, high in page2Voices:
        assert (low.id, high.id) == (2, 1)

def test_refineScore_pitch_mismatch():
    score, _, page2Voices, endOrphan, beginOrphan = _makeCrossedPages([[1], [1]], lowerPitch='D4')

    assert Voices.refineScore(score) == 0

    assert page2Voices[0][0].id == 1
    assert not beginOrphan.isTie
    assert not endOrphan.isTie
    assert beginOrphan.crossTiePartner is None

def test_refineScore_unmatched_orphans_discarded():
    score, _, page2Voices, endOrphan, beginOrphan = _makeCrossedPages([[1], [1]])
    linker = FixedSlurLinker({})
    part2 = beginOrphan.part
    part1 = endOrphan.part

    assert Voices.refineScore(score, slurLinker=linker) == 0

    assert beginOrphan not in part2.slurs
    assert endOrphan not in part1.slurs
    assert NoteOf(page2Voices[0][0]).slurs == []
    assert beginOrphan.rightHead is None
    assert endOrphan.leftHead is None

def test_refineScore_extra_orphan_discarded():
    score, lower, page2Voices, endOrphan, beginOrphan = _makeCrossedPages([[1], [1]])
    high = page2Voices[0][1]
    extra = score.pages[1].firstSystem.parts[0].addSlur(
        Slur(rightHead=NoteOf(high), isTie=False)
    )

    assert Voices.refineScore(score) == 1

    assert beginOrphan.crossTiePartner is endOrphan
    assert extra.part is None
    assert extra not in NoteOf(high).slurs
    assert beginOrphan in beginOrphan.part.slurs

def test_refineScore_idempotent():
    score, _, _, _, _ = _makeCrossedPages([[1], [1]])
    Voices.refineScore(score)
    ids = [m.voiceIds for m in AllMeasures(score)]
    assert Voices.refineScore(score) == 0
    assert [m.voiceIds for m in AllMeasures(score)] == ids

def test_refineScore_page_selection_breaks_chain():
    score = MakeScore([[1], [1], [1]])
    p2sys = score.pages[1].firstSystem
    p3sys = score.pages[2].firstSystem
    AddVoice(GetMeasure(score.pages[0].firstSystem, 0), 1)
    AddVoice(GetMeasure(p2sys, 0), 1, y=100.0, pitch='C5')
    lower = AddVoice(GetMeasure(p2sys, 0), 2, y=300.0, pitch='C4')
    low3 = AddVoice(GetMeasure(p3sys, 0), 1, y=300.0, pitch='C4')
    AddVoice(GetMeasure(p3sys, 0), 2, y=100.0, pitch='C5')
    endOrphan, beginOrphan = OrphansAcrossPages(NoteOf(lower), NoteOf(low3))
    linker = FixedSlurLinker({beginOrphan: endOrphan})

    pages = [score.pages[0], score.pages[2]]
    assert Voices.refineScore(score, pages=pages, slurLinker=linker) == 0

    assert linker.calls == []
    assert low3.id == 1
    # nothing was examined, so nothing was discarded
    assert beginOrphan in beginOrphan.part.slurs

    assert Voices.refineScore(score, pages=score.pages[1:], slurLinker=linker) == 1
    assert low3.id == 2

def test_refineAll_counts_every_pass():
    score, lower, page2Voices, _, _ = _makeCrossedPages([[1], [1]])
    assert Voices.refineAll(score, withScorePass=False) == 0
    assert Voices.refineAll(score) == 1
    assert page2Voices[0][0].id == lower.id

def test_crossSlurLinker_leftovers_paired_by_ordinate():
    score = MakeScore([[1], [1]])
    sys1 = score.pages[0].firstSystem
    sys2 = score.pages[1].firstSystem
    a1 = AddVoice(GetMeasure(sys1, 0), 1, y=100.0, pitch='E5')
    b1 = AddVoice(GetMeasure(sys1, 0), 2, y=300.0, pitch='C4')
    a2 = AddVoice(GetMeasure(sys2, 0), 1, y=150.0, pitch='F5')
    b2 = AddVoice(GetMeasure(sys2, 0), 2, y=350.0, pitch='D4')
    endA, beginA = OrphansAcrossPages(NoteOf(a1), NoteOf(a2), isTie=False)
    endB, beginB = OrphansAcrossPages(NoteOf(b1), NoteOf(b2), isTie=False)

    links = CrossSlurLinker().link(sys2.parts[0], sys1.parts[0])

    assert links == {beginA: endA, beginB: endB}

def test_crossSlurLinker_uneven_leftovers_unmatched():
    score = MakeScore([[1], [1]])
    sys1 = score.pages[0].firstSystem
    sys2 = score.pages[1].firstSystem
    a1 = AddVoice(GetMeasure(sys1, 0), 1, y=100.0, pitch='E5')
    b1 = AddVoice(GetMeasure(sys1, 0), 2, y=300.0, pitch='C4')
    a2 = AddVoice(GetMeasure(sys2, 0), 1, y=150.0, pitch='C4')
    OrphansAcrossPages(NoteOf(a1), NoteOf(a2), isTie=False)
    endB = sys1.parts[0].addSlur(Slur(leftHead=NoteOf(b1)))

    links = CrossSlurLinker().link(sys2.parts[0], sys1.parts[0])

    # C4 goes with C4, E5 has no partner left
    assert list(links.values()) == [endB]

def test_refineScore_logs_modification_count(monkeypatch):
    voicesModule = importlib.import_module('voices21.rhythm.voices')
    messages = []
    monkeypatch.setattr(
        voicesModule.environLocal, 'printDebug', lambda msg, *args, **kwargs: messages.append(msg)
    )
    score, _, _, _, _ = _makeCrossedPages([[1], [1]])

    assert Voices.refineScore(score) == 1

    assert 'refineScore: 1 modifications' in messages
