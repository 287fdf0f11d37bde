from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

try:
    from constants import (
        DEFAULT_BASE_OCTAVE,
        KEYBOARD_NUM_OCTAVES,
        KEYBOARD_START_OCTAVE,
        NOTES_PER_OCTAVE,
    )
    from music_theory import NOTE_NAMES, NoteWithRole, is_accidental, note_index
except ImportError:
    from .constants import (
        DEFAULT_BASE_OCTAVE,
        KEYBOARD_NUM_OCTAVES,
        KEYBOARD_START_OCTAVE,
        NOTES_PER_OCTAVE,
    )
    from .music_theory import NOTE_NAMES, NoteWithRole, is_accidental, note_index


class VoicedNote(NamedTuple):
    note: str
    octave: int
    midi_number: int
    role: str


class PianoKey(NamedTuple):
    note: str
    octave: int
    midi_number: int
    is_black: bool
    key_id: str


class HighlightedKey(NamedTuple):
    note: str
    octave: int
    midi_number: int
    is_black: bool
    key_id: str
    role: Optional[str]


def is_black_key(note: str) -> bool:
    return is_accidental(note)


def note_to_midi(note: str, octave: int) -> int:
    return (octave + 1) * NOTES_PER_OCTAVE + note_index(note)


def midi_to_note(midi_number: int) -> Tuple[str, int]:
    return NOTE_NAMES[midi_number % NOTES_PER_OCTAVE], midi_number // NOTES_PER_OCTAVE - 1


def get_key_id(note: str, octave: int) -> str:
    return f"{note}{octave}"


def get_tone_note_name(note: str, octave: int) -> str:
    return f"{note}{octave}"


def get_vexflow_key(note: str, octave: int) -> str:
    return f"{note.lower()}/{octave}"


def _piano_key(note: str, octave: int) -> PianoKey:
    return PianoKey(
        note=note,
        octave=octave,
        midi_number=note_to_midi(note, octave),
        is_black=is_black_key(note),
        key_id=get_key_id(note, octave),
    )


def generate_piano_keys(
    start_octave: int = KEYBOARD_START_OCTAVE,
    num_octaves: int = KEYBOARD_NUM_OCTAVES,
) -> List[PianoKey]:
    keys = [
        _piano_key(note, octave)
        for octave in range(start_octave, start_octave + num_octaves)
        for note in NOTE_NAMES
    ]
    keys.append(_piano_key("C", start_octave + num_octaves))
    return keys


def voice_chord(chord_notes: Iterable[NoteWithRole], base_octave: int = DEFAULT_BASE_OCTAVE) -> List[VoicedNote]:
    # Extensions past the octave land semitones // 12 octaves up.
    voiced: List[VoicedNote] = []
    for chord_note in chord_notes:
        octave = base_octave + chord_note.semitones // NOTES_PER_OCTAVE
        voiced.append(VoicedNote(
            note=chord_note.note,
            octave=octave,
            midi_number=note_to_midi(chord_note.note, octave),
            role=chord_note.role,
        ))
    return voiced


def create_highlight_map(voiced_notes: Iterable[VoicedNote]) -> Dict[str, str]:
    return {get_key_id(voiced.note, voiced.octave): voiced.role for voiced in voiced_notes}


def get_highlighted_keys(piano_keys: Iterable[PianoKey], highlight_map: Dict[str, str]) -> List[HighlightedKey]:
    return [HighlightedKey(*key, role=highlight_map.get(key.key_id)) for key in piano_keys]
