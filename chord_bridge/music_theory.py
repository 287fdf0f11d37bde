from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional, Tuple

try:
    from constants import ACCIDENTAL_MARK, NOTES_PER_OCTAVE
except ImportError:
    from .constants import ACCIDENTAL_MARK, NOTES_PER_OCTAVE

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

NOTE_TO_INDEX = {name: index for index, name in enumerate(NOTE_NAMES)}


class ChordRole:
    ROOT = "root"
    THIRD = "third"
    FIFTH = "fifth"
    SEVENTH = "seventh"
    EXTENSION = "extension"

    ALL = (ROOT, THIRD, FIFTH, SEVENTH, EXTENSION)


class InvalidPitchClassError(ValueError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid pitch class: {value!r} (expected one of {', '.join(NOTE_NAMES)})")


class ChordInterval(NamedTuple):
    semitones: int
    role: str


class NoteWithRole(NamedTuple):
    note: str
    semitones: int
    role: str


def _intervals(*pairs: Tuple[int, str]) -> Tuple[ChordInterval, ...]:
    return tuple(ChordInterval(semitones, role) for semitones, role in pairs)


R = ChordRole.ROOT
T = ChordRole.THIRD
F = ChordRole.FIFTH
S = ChordRole.SEVENTH
X = ChordRole.EXTENSION

# Order inside each entry is the stacking order used for voicing and inversions.
CHORD_INTERVALS: Dict[str, Tuple[ChordInterval, ...]] = {
    # Major
    "maj": _intervals((0, R), (4, T), (7, F)),
    "maj7": _intervals((0, R), (4, T), (7, F), (11, S)),
    "maj9": _intervals((0, R), (4, T), (7, F), (11, S), (14, X)),
    "maj11": _intervals((0, R), (4, T), (7, F), (11, S), (14, X), (17, X)),
    "maj13": _intervals((0, R), (4, T), (7, F), (11, S), (14, X), (21, X)),
    "6": _intervals((0, R), (4, T), (7, F), (9, X)),
    "add9": _intervals((0, R), (4, T), (7, F), (14, X)),
    "6/9": _intervals((0, R), (4, T), (7, F), (9, X), (14, X)),
    # Minor
    "m": _intervals((0, R), (3, T), (7, F)),
    "m7": _intervals((0, R), (3, T), (7, F), (10, S)),
    "m9": _intervals((0, R), (3, T), (7, F), (10, S), (14, X)),
    "m11": _intervals((0, R), (3, T), (7, F), (10, S), (14, X), (17, X)),
    "m6": _intervals((0, R), (3, T), (7, F), (9, X)),
    "m(maj7)": _intervals((0, R), (3, T), (7, F), (11, S)),
    "m(maj9)": _intervals((0, R), (3, T), (7, F), (11, S), (14, X)),
    "m add9": _intervals((0, R), (3, T), (7, F), (14, X)),
    # Dominant
    "7": _intervals((0, R), (4, T), (7, F), (10, S)),
    "9": _intervals((0, R), (4, T), (7, F), (10, S), (14, X)),
    "11": _intervals((0, R), (4, T), (7, F), (10, S), (14, X), (17, X)),
    "13": _intervals((0, R), (4, T), (7, F), (10, S), (14, X), (21, X)),
    "7#9": _intervals((0, R), (4, T), (7, F), (10, S), (15, X)),
    "7b9": _intervals((0, R), (4, T), (7, F), (10, S), (13, X)),
    "7#5": _intervals((0, R), (4, T), (8, F), (10, S)),
    "7b5": _intervals((0, R), (4, T), (6, F), (10, S)),
    "9#11": _intervals((0, R), (4, T), (7, F), (10, S), (14, X), (18, X)),
    "13#11": _intervals((0, R), (4, T), (7, F), (10, S), (18, X), (21, X)),
    # Diminished / augmented
    "dim": _intervals((0, R), (3, T), (6, F)),
    "dim7": _intervals((0, R), (3, T), (6, F), (9, S)),
    "m7b5": _intervals((0, R), (3, T), (6, F), (10, S)),
    "aug": _intervals((0, R), (4, T), (8, F)),
    "aug7": _intervals((0, R), (4, T), (8, F), (10, S)),
    # Suspended / power
    "sus2": _intervals((0, R), (2, T), (7, F)),
    "sus4": _intervals((0, R), (5, T), (7, F)),
    "7sus4": _intervals((0, R), (5, T), (7, F), (10, S)),
    "9sus4": _intervals((0, R), (5, T), (7, F), (10, S), (14, X)),
    "5": _intervals((0, R), (7, F)),
}

del R, T, F, S, X

CHORD_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "Major": ("maj", "maj7", "maj9", "maj11", "maj13", "6", "add9", "6/9"),
    "Minor": ("m", "m7", "m9", "m11", "m6", "m(maj7)", "m(maj9)", "m add9"),
    "Dominant": ("7", "9", "11", "13", "7#9", "7b9", "7#5", "7b5", "9#11", "13#11"),
    "Dim/Aug": ("dim", "dim7", "m7b5", "aug", "aug7"),
    "Sus/Power": ("sus2", "sus4", "7sus4", "9sus4", "5"),
}


def note_index(note: str) -> int:
    try:
        return NOTE_TO_INDEX[note]
    except (KeyError, TypeError) as exc:
        raise InvalidPitchClassError(note) from exc


def validate_note(note: str) -> str:
    note_index(note)
    return note


def is_accidental(note: str) -> bool:
    return ACCIDENTAL_MARK in validate_note(note)


def transpose_note(note: str, semitones: int) -> str:
    return NOTE_NAMES[(note_index(note) + semitones) % NOTES_PER_OCTAVE]


def get_chord_intervals(chord_type: str) -> List[ChordInterval]:
    return list(CHORD_INTERVALS.get(chord_type, ()))


def get_chord_definition(chord_type: str) -> Optional[List[ChordInterval]]:
    intervals = CHORD_INTERVALS.get(chord_type)
    if intervals is None:
        return None
    return list(intervals)


def get_chord_categories() -> Dict[str, List[str]]:
    return {category: list(chord_types) for category, chord_types in CHORD_CATEGORIES.items()}


def get_chord_types() -> List[str]:
    return [chord_type for chord_types in CHORD_CATEGORIES.values() for chord_type in chord_types]


def get_chord_category(chord_type: str) -> Optional[str]:
    for category, chord_types in CHORD_CATEGORIES.items():
        if chord_type in chord_types:
            return category
    return None


def format_chord_name(root: str, chord_type: str) -> str:
    return f"{root}{chord_type}"


def get_chord_notes(root: str, chord_type: str) -> List[NoteWithRole]:
    validate_note(root)
    return [
        NoteWithRole(
            note=transpose_note(root, interval.semitones % NOTES_PER_OCTAVE),
            semitones=interval.semitones,
            role=interval.role,
        )
        for interval in CHORD_INTERVALS.get(chord_type, ())
    ]
