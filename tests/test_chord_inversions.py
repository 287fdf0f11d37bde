import pytest

from chord_bridge.chord_inversions import (
    format_slash_notation,
    get_all_inversions,
    get_inversion_count,
    get_inversion_name,
    rotate_notes,
    voice_chord_inversion,
)
from chord_bridge.music_theory import CHORD_INTERVALS, NOTE_NAMES, NoteWithRole, get_chord_notes


def _tones(count):
    return [NoteWithRole(NOTE_NAMES[i], i, "root" if i == 0 else "extension") for i in range(count)]


@pytest.mark.parametrize("count", range(0, 8))
def test_inversion_count(count):
    assert get_inversion_count(_tones(count)) == max(0, count - 1)


def test_rotate_notes():
    notes = get_chord_notes("C", "maj7")
    assert [n.note for n in rotate_notes(notes, 1)] == ["E", "G", "B", "C"]
    assert [n.note for n in rotate_notes(notes, 3)] == ["B", "C", "E", "G"]
    assert rotate_notes(notes, 4) == notes
    assert [n.note for n in rotate_notes(notes, -1)] == ["B", "C", "E", "G"]
    assert rotate_notes([], 2) == []


def test_voice_first_inversion_lifts_the_root():
    voiced = voice_chord_inversion(get_chord_notes("C", "maj7"), 1, 4)
    assert [(v.note, v.octave) for v in voiced] == [("E", 4), ("G", 4), ("B", 4), ("C", 5)]
    assert [v.midi_number for v in voiced] == [64, 67, 71, 72]
    assert voiced[-1].role == "root"


def test_voice_inversion_crossing_the_octave_early():
    voiced = voice_chord_inversion(get_chord_notes("D", "maj"), 2, 4)
    assert [(v.note, v.octave, v.midi_number) for v in voiced] == [("A", 4, 69), ("D", 5, 74), ("F#", 5, 78)]


def test_voice_inversion_with_wide_extensions():
    voiced = voice_chord_inversion(get_chord_notes("C", "13#11"), 5, 3)
    assert [(v.note, v.octave) for v in voiced] == [
        ("A", 3), ("C", 4), ("E", 4), ("G", 4), ("A#", 4), ("F#", 5),
    ]


def test_voice_inversion_empty():
    assert voice_chord_inversion([], 1) == []


@pytest.mark.parametrize("chord_type", sorted(CHORD_INTERVALS))
@pytest.mark.parametrize("root", ["C", "F#", "B"])
def test_every_inversion_is_strictly_ascending(root, chord_type):
    notes = get_chord_notes(root, chord_type)
    for inversion_number in range(1, get_inversion_count(notes) + 1):
        voiced = voice_chord_inversion(notes, inversion_number, 4)
        midis = [v.midi_number for v in voiced]
        assert len(voiced) == len(notes)
        assert all(low < high for low, high in zip(midis, midis[1:]))
        assert voiced[0].note == notes[inversion_number].note
        assert voiced[0].octave == 4


def test_format_slash_notation():
    assert format_slash_notation("C", "maj7", "E") == "Cmaj7/E"
    assert format_slash_notation("A#", "6/9", "D") == "A#6/9/D"


def test_all_inversions_c_major_seventh():
    inversions = get_all_inversions("C", "maj7", 4)
    assert [inv.inversion_number for inv in inversions] == [1, 2, 3]
    assert [inv.slash_notation for inv in inversions] == ["Cmaj7/E", "Cmaj7/G", "Cmaj7/B"]
    assert [inv.bass_note for inv in inversions] == ["E", "G", "B"]
    assert [v.midi_number for v in inversions[2].voiced_notes] == [71, 72, 76, 79]


def test_all_inversions_d_major():
    inversions = get_all_inversions("D", "maj", 4)
    assert [inv.slash_notation for inv in inversions] == ["Dmaj/F#", "Dmaj/A"]


def test_power_chord_has_one_inversion():
    notes = get_chord_notes("C", "5")
    assert get_inversion_count(notes) == 1
    inversions = get_all_inversions("C", "5")
    assert len(inversions) == 1
    assert inversions[0].bass_note == "G"
    assert inversions[0].slash_notation == "C5/G"
    assert [v.midi_number for v in inversions[0].voiced_notes] == [67, 72]


def test_unknown_chord_has_no_inversions():
    assert get_all_inversions("C", "doesnotexist") == []


def test_all_inversions_are_repeatable():
    assert get_all_inversions("G", "m11", 3) == get_all_inversions("G", "m11", 3)


@pytest.mark.parametrize(
    "number, name",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (5, "5th"), (11, "11th"), (21, "21th")],
)
def test_inversion_name(number, name):
    assert get_inversion_name(number) == name
