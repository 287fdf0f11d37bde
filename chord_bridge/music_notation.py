from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

try:
    from constants import ACCIDENTAL_MARK, TREBLE_MIN_OCTAVE
    from music_theory import is_accidental
    from piano_utils import VoicedNote, get_tone_note_name, get_vexflow_key
except ImportError:
    from .constants import ACCIDENTAL_MARK, TREBLE_MIN_OCTAVE
    from .music_theory import is_accidental
    from .piano_utils import VoicedNote, get_tone_note_name, get_vexflow_key

STAFF_TREBLE = "treble"
STAFF_BASS = "bass"


def get_staff(octave: int) -> str:
    return STAFF_TREBLE if octave >= TREBLE_MIN_OCTAVE else STAFF_BASS


def get_accidental(note: str) -> Optional[str]:
    return ACCIDENTAL_MARK if is_accidental(note) else None


def to_staff_note(voiced: VoicedNote) -> Dict[str, Any]:
    return {
        "key": get_vexflow_key(voiced.note, voiced.octave),
        "accidental": get_accidental(voiced.note),
        "role": voiced.role,
        "midi_number": voiced.midi_number,
    }


def split_by_clef(voiced_notes: Iterable[VoicedNote]) -> Dict[str, List[Dict[str, Any]]]:
    staves: Dict[str, List[Dict[str, Any]]] = {STAFF_TREBLE: [], STAFF_BASS: []}
    for voiced in voiced_notes:
        staves[get_staff(voiced.octave)].append(to_staff_note(voiced))
    return staves


def format_voicing_as_notes(voiced_notes: Iterable[VoicedNote], chord_name: str = "") -> str:
    notes = ", ".join(get_tone_note_name(voiced.note, voiced.octave) for voiced in voiced_notes)
    if chord_name:
        return f"{chord_name}: {notes}" if notes else f"{chord_name}: (no notes)"
    return notes
