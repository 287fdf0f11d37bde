from __future__ import annotations

from typing import List, NamedTuple, Sequence

try:
    from constants import DEFAULT_BASE_OCTAVE
    from music_theory import NoteWithRole, get_chord_notes
    from piano_utils import VoicedNote, note_to_midi
except ImportError:
    from .constants import DEFAULT_BASE_OCTAVE
    from .music_theory import NoteWithRole, get_chord_notes
    from .piano_utils import VoicedNote, note_to_midi

INVERSION_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}


class ChordInversion(NamedTuple):
    inversion_number: int
    voiced_notes: List[VoicedNote]
    bass_note: str
    slash_notation: str


def get_inversion_count(chord_notes: Sequence[NoteWithRole]) -> int:
    # Root position is not counted.
    return max(0, len(chord_notes) - 1)


def rotate_notes(notes: Sequence[NoteWithRole], positions: int) -> List[NoteWithRole]:
    if not notes:
        return []
    offset = positions % len(notes)
    return list(notes[offset:]) + list(notes[:offset])


def voice_chord_inversion(
    chord_notes: Sequence[NoteWithRole],
    inversion_number: int,
    base_octave: int = DEFAULT_BASE_OCTAVE,
) -> List[VoicedNote]:
    # Bass at base_octave; a tone at or below its predecessor moves up an octave.
    voiced: List[VoicedNote] = []
    current_octave = base_octave
    previous_midi = None

    for chord_note in rotate_notes(chord_notes, inversion_number):
        midi = note_to_midi(chord_note.note, current_octave)
        if previous_midi is not None and midi <= previous_midi:
            current_octave += 1
            midi = note_to_midi(chord_note.note, current_octave)

        voiced.append(VoicedNote(
            note=chord_note.note,
            octave=current_octave,
            midi_number=midi,
            role=chord_note.role,
        ))
        previous_midi = midi

    return voiced


def format_slash_notation(root: str, chord_type: str, bass_note: str) -> str:
    return f"{root}{chord_type}/{bass_note}"


def get_all_inversions(root: str, chord_type: str, base_octave: int = DEFAULT_BASE_OCTAVE) -> List[ChordInversion]:
    chord_notes = get_chord_notes(root, chord_type)
    inversions: List[ChordInversion] = []

    for inversion_number in range(1, get_inversion_count(chord_notes) + 1):
        voiced_notes = voice_chord_inversion(chord_notes, inversion_number, base_octave)
        bass_note = voiced_notes[0].note if voiced_notes else root
        inversions.append(ChordInversion(
            inversion_number=inversion_number,
            voiced_notes=voiced_notes,
            bass_note=bass_note,
            slash_notation=format_slash_notation(root, chord_type, bass_note),
        ))

    return inversions


def get_inversion_name(inversion_number: int) -> str:
    return INVERSION_ORDINALS.get(inversion_number, f"{inversion_number}th")
