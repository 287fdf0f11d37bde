from __future__ import annotations

from typing import Any, Dict, Iterable, List

try:
    from constants import (
        ARPEGGIO_GAP_SEC,
        ARPEGGIO_NOTE_DURATION_SEC,
        CHORD_DURATION_SEC,
        NOTE_DURATION_SEC,
        VOLUME_DB_RANGE,
        VOLUME_MAX,
        VOLUME_MIN,
    )
    from piano_utils import VoicedNote, get_tone_note_name, note_to_midi
except ImportError:
    from .constants import (
        ARPEGGIO_GAP_SEC,
        ARPEGGIO_NOTE_DURATION_SEC,
        CHORD_DURATION_SEC,
        NOTE_DURATION_SEC,
        VOLUME_DB_RANGE,
        VOLUME_MAX,
        VOLUME_MIN,
    )
    from .piano_utils import VoicedNote, get_tone_note_name, note_to_midi


def _event(note_name: str, midi_number: int, time_sec: float, duration_sec: float) -> Dict[str, Any]:
    return {
        "note": note_name,
        "midi_number": midi_number,
        "time": round(time_sec, 6),
        "duration": duration_sec,
    }


def build_note_event(note: str, octave: int, duration: float = NOTE_DURATION_SEC) -> Dict[str, Any]:
    return _event(get_tone_note_name(note, octave), note_to_midi(note, octave), 0.0, duration)


def build_chord_events(voiced_notes: Iterable[VoicedNote], duration: float = CHORD_DURATION_SEC) -> List[Dict[str, Any]]:
    return [
        _event(get_tone_note_name(voiced.note, voiced.octave), voiced.midi_number, 0.0, duration)
        for voiced in voiced_notes
    ]


def build_arpeggio_events(
    voiced_notes: Iterable[VoicedNote],
    note_duration: float = ARPEGGIO_NOTE_DURATION_SEC,
    gap: float = ARPEGGIO_GAP_SEC,
) -> List[Dict[str, Any]]:
    ordered = sorted(voiced_notes, key=lambda voiced: voiced.midi_number)
    step = note_duration + gap
    return [
        _event(get_tone_note_name(voiced.note, voiced.octave), voiced.midi_number, index * step, note_duration)
        for index, voiced in enumerate(ordered)
    ]


def volume_to_db(volume: float) -> float:
    volume = max(VOLUME_MIN, min(VOLUME_MAX, volume))
    if volume == 0:
        return float("-inf")
    return volume / VOLUME_MAX * VOLUME_DB_RANGE - VOLUME_DB_RANGE
