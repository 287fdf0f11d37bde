from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

try:
    from constants import (
        ARPEGGIO_GAP_SEC,
        ARPEGGIO_NOTE_DURATION_SEC,
        CHORD_DURATION_SEC,
        DEFAULT_BASE_OCTAVE,
        OCTAVE_MAX,
        OCTAVE_MIN,
        PLAYBACK_MODE_ARPEGGIO,
        PLAYBACK_MODE_CHORD,
        VOLUME_DEFAULT,
        VOLUME_MAX,
        VOLUME_MIN,
    )
except ImportError:
    from .constants import (
        ARPEGGIO_GAP_SEC,
        ARPEGGIO_NOTE_DURATION_SEC,
        CHORD_DURATION_SEC,
        DEFAULT_BASE_OCTAVE,
        OCTAVE_MAX,
        OCTAVE_MIN,
        PLAYBACK_MODE_ARPEGGIO,
        PLAYBACK_MODE_CHORD,
        VOLUME_DEFAULT,
        VOLUME_MAX,
        VOLUME_MIN,
    )


class PitchClassInfo(BaseModel):
    note: str
    index: int
    is_accidental: bool


class ChordCategory(BaseModel):
    name: str
    chord_types: List[str] = Field(default_factory=list)


class ChordTone(BaseModel):
    note: str
    semitones: int
    role: str


class VoicedNoteInfo(BaseModel):
    note: str
    octave: int
    midi_number: int
    role: str


class StaffNote(BaseModel):
    key: str
    accidental: Optional[str] = None
    role: str
    midi_number: int


class StaffSplit(BaseModel):
    treble: List[StaffNote] = Field(default_factory=list)
    bass: List[StaffNote] = Field(default_factory=list)


class ChordResponse(BaseModel):
    root: str
    chord_type: str
    chord_name: str
    category: Optional[str] = None
    base_octave: int
    tones: List[ChordTone] = Field(default_factory=list)
    voiced_notes: List[VoicedNoteInfo] = Field(default_factory=list)
    highlight_map: Dict[str, str] = Field(default_factory=dict)
    staff: StaffSplit = Field(default_factory=StaffSplit)
    summary: str = ""


class InversionInfo(BaseModel):
    inversion_number: int
    name: str
    voiced_notes: List[VoicedNoteInfo] = Field(default_factory=list)
    bass_note: str
    slash_notation: str
    highlight_map: Dict[str, str] = Field(default_factory=dict)


class InversionsResponse(BaseModel):
    root: str
    chord_type: str
    chord_name: str
    base_octave: int
    inversion_count: int
    inversions: List[InversionInfo] = Field(default_factory=list)


class PianoKeyInfo(BaseModel):
    note: str
    octave: int
    midi_number: int
    is_black: bool
    key_id: str
    role: Optional[str] = None


class KeyboardResponse(BaseModel):
    start_octave: int
    num_octaves: int
    keys: List[PianoKeyInfo] = Field(default_factory=list)


class PlaybackRequest(BaseModel):
    root: str
    chord_type: str
    octave: int = Field(default=DEFAULT_BASE_OCTAVE, ge=OCTAVE_MIN, le=OCTAVE_MAX)
    inversion: int = Field(default=0, ge=0, description="0 plays root position, N plays the Nth inversion")
    mode: str = Field(default=PLAYBACK_MODE_CHORD, pattern=f"^({PLAYBACK_MODE_CHORD}|{PLAYBACK_MODE_ARPEGGIO})$")
    duration: float = Field(default=CHORD_DURATION_SEC, gt=0)
    note_duration: float = Field(default=ARPEGGIO_NOTE_DURATION_SEC, gt=0)
    gap: float = Field(default=ARPEGGIO_GAP_SEC, ge=0)
    volume: float = Field(default=VOLUME_DEFAULT, ge=VOLUME_MIN, le=VOLUME_MAX)


class PlaybackEvent(BaseModel):
    note: str
    midi_number: int
    time: float
    duration: float


class PlaybackResponse(BaseModel):
    chord_name: str
    mode: str
    volume_db: Optional[float] = Field(default=None, description="None means muted")
    events: List[PlaybackEvent] = Field(default_factory=list)
