from chord_bridge.music_theory import get_chord_notes
from chord_bridge.piano_utils import (
    VoicedNote,
    create_highlight_map,
    generate_piano_keys,
    get_highlighted_keys,
    get_key_id,
    get_tone_note_name,
    get_vexflow_key,
    is_black_key,
    midi_to_note,
    note_to_midi,
    voice_chord,
)


def test_note_to_midi_middle_c():
    assert note_to_midi("C", 4) == 60
    assert note_to_midi("A", 4) == 69
    assert note_to_midi("C", -1) == 0
    assert note_to_midi("B", 3) == 59


def test_midi_to_note():
    assert midi_to_note(60) == ("C", 4)
    assert midi_to_note(61) == ("C#", 4)
    assert midi_to_note(59) == ("B", 3)
    for midi in range(0, 128):
        note, octave = midi_to_note(midi)
        assert note_to_midi(note, octave) == midi


def test_key_names():
    assert get_key_id("F#", 3) == "F#3"
    assert get_tone_note_name("C#", 4) == "C#4"
    assert get_vexflow_key("F#", 3) == "f#/3"
    assert is_black_key("G#")
    assert not is_black_key("B")


def test_voice_chord_root_position():
    voiced = voice_chord(get_chord_notes("C", "maj7"), 4)
    assert [v.octave for v in voiced] == [4, 4, 4, 4]
    assert [v.midi_number for v in voiced] == [60, 64, 67, 71]
    assert [v.role for v in voiced] == ["root", "third", "fifth", "seventh"]


def test_voice_chord_places_extensions_above_the_octave():
    voiced = voice_chord(get_chord_notes("C", "13#11"), 4)
    assert [(v.note, v.octave) for v in voiced] == [
        ("C", 4), ("E", 4), ("G", 4), ("A#", 4), ("F#", 5), ("A", 5),
    ]
    assert [v.midi_number for v in voiced] == [60, 64, 67, 70, 78, 81]


def test_voice_chord_follows_base_octave():
    voiced = voice_chord(get_chord_notes("A", "m"), 2)
    assert [(v.note, v.octave, v.midi_number) for v in voiced] == [("A", 2, 45), ("C", 2, 36), ("E", 2, 40)]


def test_voice_chord_empty():
    assert voice_chord([], 4) == []


def test_generate_piano_keys_default_range():
    keys = generate_piano_keys()
    assert len(keys) == 37
    assert keys[0].key_id == "C3"
    assert keys[0].midi_number == 48
    assert keys[-1].key_id == "C6"
    assert keys[-1].midi_number == 84
    assert sum(1 for key in keys if key.is_black) == 15
    assert [key.midi_number for key in keys] == list(range(48, 85))


def test_generate_piano_keys_custom_range():
    keys = generate_piano_keys(start_octave=4, num_octaves=1)
    assert len(keys) == 13
    assert keys[-1].key_id == "C5"


def test_highlight_map_and_keys():
    voiced = voice_chord(get_chord_notes("D", "maj"), 4)
    highlight_map = create_highlight_map(voiced)
    assert highlight_map == {"D4": "root", "F#4": "third", "A4": "fifth"}

    keys = get_highlighted_keys(generate_piano_keys(), highlight_map)
    highlighted = {key.key_id: key.role for key in keys if key.role}
    assert highlighted == highlight_map
    assert next(key for key in keys if key.key_id == "D3").role is None


def test_highlight_map_last_duplicate_wins():
    voiced = [VoicedNote("C", 4, 60, "root"), VoicedNote("C", 4, 60, "extension")]
    assert create_highlight_map(voiced) == {"C4": "extension"}
