from __future__ import annotations

import math
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

try:
    from chord_inversions import get_all_inversions, get_inversion_count, get_inversion_name, voice_chord_inversion
    from constants import (
        APP_NAME,
        BRIDGE_HOST,
        BRIDGE_PORT,
        DEFAULT_BASE_OCTAVE,
        KEYBOARD_MAX_OCTAVES,
        KEYBOARD_NUM_OCTAVES,
        KEYBOARD_START_OCTAVE,
        MIDI_MAX,
        MIDI_MIN,
        OCTAVE_MAX,
        OCTAVE_MIN,
        PLAYBACK_MODE_ARPEGGIO,
    )
    from logger_config import logger
    from models import (
        ChordCategory,
        ChordResponse,
        ChordTone,
        InversionInfo,
        InversionsResponse,
        KeyboardResponse,
        PianoKeyInfo,
        PitchClassInfo,
        PlaybackEvent,
        PlaybackRequest,
        PlaybackResponse,
        StaffNote,
        StaffSplit,
        VoicedNoteInfo,
    )
    from music_notation import format_voicing_as_notes, split_by_clef
    from music_theory import (
        NOTE_NAMES,
        InvalidPitchClassError,
        format_chord_name,
        get_chord_categories,
        get_chord_category,
        get_chord_notes,
        is_accidental,
        note_index,
    )
    from piano_utils import (
        VoicedNote,
        create_highlight_map,
        generate_piano_keys,
        get_highlighted_keys,
        note_to_midi,
        voice_chord,
    )
    from playback import build_arpeggio_events, build_chord_events, volume_to_db
except ImportError:
    from .chord_inversions import get_all_inversions, get_inversion_count, get_inversion_name, voice_chord_inversion
    from .constants import (
        APP_NAME,
        BRIDGE_HOST,
        BRIDGE_PORT,
        DEFAULT_BASE_OCTAVE,
        KEYBOARD_MAX_OCTAVES,
        KEYBOARD_NUM_OCTAVES,
        KEYBOARD_START_OCTAVE,
        MIDI_MAX,
        MIDI_MIN,
        OCTAVE_MAX,
        OCTAVE_MIN,
        PLAYBACK_MODE_ARPEGGIO,
    )
    from .logger_config import logger
    from .models import (
        ChordCategory,
        ChordResponse,
        ChordTone,
        InversionInfo,
        InversionsResponse,
        KeyboardResponse,
        PianoKeyInfo,
        PitchClassInfo,
        PlaybackEvent,
        PlaybackRequest,
        PlaybackResponse,
        StaffNote,
        StaffSplit,
        VoicedNoteInfo,
    )
    from .music_notation import format_voicing_as_notes, split_by_clef
    from .music_theory import (
        NOTE_NAMES,
        InvalidPitchClassError,
        format_chord_name,
        get_chord_categories,
        get_chord_category,
        get_chord_notes,
        is_accidental,
        note_index,
    )
    from .piano_utils import (
        VoicedNote,
        create_highlight_map,
        generate_piano_keys,
        get_highlighted_keys,
        note_to_midi,
        voice_chord,
    )
    from .playback import build_arpeggio_events, build_chord_events, volume_to_db

app = FastAPI(title=APP_NAME)


def resolve_chord_notes(root: str, chord_type: str):
    try:
        return get_chord_notes(root, chord_type)
    except InvalidPitchClassError as exc:
        logger.warning("Rejected root note: %r", root)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def voiced_note_infos(voiced_notes: List[VoicedNote]) -> List[VoicedNoteInfo]:
    return [VoicedNoteInfo(**voiced._asdict()) for voiced in voiced_notes]


def require_midi_range(midi_numbers: List[int], label: str) -> None:
    out_of_range = [midi for midi in midi_numbers if not MIDI_MIN <= midi <= MIDI_MAX]
    if out_of_range:
        logger.warning("Rejected %s: MIDI %s outside %d..%d", label, out_of_range, MIDI_MIN, MIDI_MAX)
        raise HTTPException(
            status_code=400,
            detail=f"{label} reaches MIDI {out_of_range[-1]}, outside {MIDI_MIN}..{MIDI_MAX}; use a lower octave",
        )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/notes")
def notes() -> JSONResponse:
    infos = [
        PitchClassInfo(note=note, index=note_index(note), is_accidental=is_accidental(note)).model_dump()
        for note in NOTE_NAMES
    ]
    return JSONResponse(content=infos)


@app.get("/chord-types")
def chord_types() -> JSONResponse:
    categories = [
        ChordCategory(name=name, chord_types=types).model_dump()
        for name, types in get_chord_categories().items()
    ]
    return JSONResponse(content=categories)


@app.get("/chord")
def chord(
    root: str,
    chord_type: str,
    octave: int = Query(DEFAULT_BASE_OCTAVE, ge=OCTAVE_MIN, le=OCTAVE_MAX),
) -> JSONResponse:
    chord_notes = resolve_chord_notes(root, chord_type)
    voiced_notes = voice_chord(chord_notes, octave)
    chord_name = format_chord_name(root, chord_type)
    require_midi_range([voiced.midi_number for voiced in voiced_notes], chord_name)
    staves = split_by_clef(voiced_notes)

    response = ChordResponse(
        root=root,
        chord_type=chord_type,
        chord_name=chord_name,
        category=get_chord_category(chord_type),
        base_octave=octave,
        tones=[ChordTone(**tone._asdict()) for tone in chord_notes],
        voiced_notes=voiced_note_infos(voiced_notes),
        highlight_map=create_highlight_map(voiced_notes),
        staff=StaffSplit(
            treble=[StaffNote(**entry) for entry in staves["treble"]],
            bass=[StaffNote(**entry) for entry in staves["bass"]],
        ),
        summary=format_voicing_as_notes(voiced_notes, chord_name),
    )
    logger.info("Chord: %s octave=%d tones=%d", chord_name, octave, len(chord_notes))
    return JSONResponse(content=response.model_dump())


@app.get("/inversions")
def inversions(
    root: str,
    chord_type: str,
    octave: int = Query(DEFAULT_BASE_OCTAVE, ge=OCTAVE_MIN, le=OCTAVE_MAX),
) -> JSONResponse:
    chord_notes = resolve_chord_notes(root, chord_type)
    all_inversions = get_all_inversions(root, chord_type, octave)
    for inversion in all_inversions:
        require_midi_range([voiced.midi_number for voiced in inversion.voiced_notes], inversion.slash_notation)
    inversion_infos = [
        InversionInfo(
            inversion_number=inversion.inversion_number,
            name=get_inversion_name(inversion.inversion_number),
            voiced_notes=voiced_note_infos(inversion.voiced_notes),
            bass_note=inversion.bass_note,
            slash_notation=inversion.slash_notation,
            highlight_map=create_highlight_map(inversion.voiced_notes),
        )
        for inversion in all_inversions
    ]
    response = InversionsResponse(
        root=root,
        chord_type=chord_type,
        chord_name=format_chord_name(root, chord_type),
        base_octave=octave,
        inversion_count=get_inversion_count(chord_notes),
        inversions=inversion_infos,
    )
    logger.info(
        "Inversions: %s octave=%d count=%d",
        response.chord_name,
        octave,
        response.inversion_count,
    )
    return JSONResponse(content=response.model_dump())


@app.get("/keyboard")
def keyboard(
    start_octave: int = Query(KEYBOARD_START_OCTAVE, ge=OCTAVE_MIN, le=OCTAVE_MAX),
    num_octaves: int = Query(KEYBOARD_NUM_OCTAVES, ge=1, le=KEYBOARD_MAX_OCTAVES),
    root: Optional[str] = None,
    chord_type: Optional[str] = None,
    octave: int = Query(DEFAULT_BASE_OCTAVE, ge=OCTAVE_MIN, le=OCTAVE_MAX),
) -> JSONResponse:
    if (root is None) != (chord_type is None):
        logger.warning("Rejected keyboard highlight: root=%r chord_type=%r", root, chord_type)
        raise HTTPException(status_code=400, detail="root and chord_type must be given together")

    top_key = note_to_midi("C", start_octave + num_octaves)
    require_midi_range([top_key], f"Keyboard from octave {start_octave} over {num_octaves} octaves")

    highlight_map = {}
    if root is not None:
        voiced_notes = voice_chord(resolve_chord_notes(root, chord_type), octave)
        require_midi_range([voiced.midi_number for voiced in voiced_notes], format_chord_name(root, chord_type))
        highlight_map = create_highlight_map(voiced_notes)

    keys = get_highlighted_keys(generate_piano_keys(start_octave, num_octaves), highlight_map)
    response = KeyboardResponse(
        start_octave=start_octave,
        num_octaves=num_octaves,
        keys=[PianoKeyInfo(**key._asdict()) for key in keys],
    )
    logger.info(
        "Keyboard: start=%d octaves=%d highlighted=%d",
        start_octave,
        num_octaves,
        len(highlight_map),
    )
    return JSONResponse(content=response.model_dump())


@app.post("/playback")
def playback(request: PlaybackRequest) -> JSONResponse:
    chord_notes = resolve_chord_notes(request.root, request.chord_type)
    inversion_count = get_inversion_count(chord_notes)
    if request.inversion > inversion_count:
        logger.warning(
            "Rejected inversion %d for %s%s (max %d)",
            request.inversion,
            request.root,
            request.chord_type,
            inversion_count,
        )
        raise HTTPException(
            status_code=400,
            detail=f"Inversion {request.inversion} out of range (chord has {inversion_count} inversions)",
        )

    if request.inversion:
        voiced_notes = voice_chord_inversion(chord_notes, request.inversion, request.octave)
    else:
        voiced_notes = voice_chord(chord_notes, request.octave)
    require_midi_range(
        [voiced.midi_number for voiced in voiced_notes],
        format_chord_name(request.root, request.chord_type),
    )

    if request.mode == PLAYBACK_MODE_ARPEGGIO:
        events = build_arpeggio_events(voiced_notes, request.note_duration, request.gap)
    else:
        events = build_chord_events(voiced_notes, request.duration)

    volume_db = volume_to_db(request.volume)
    response = PlaybackResponse(
        chord_name=format_chord_name(request.root, request.chord_type),
        mode=request.mode,
        volume_db=None if math.isinf(volume_db) else volume_db,
        events=[PlaybackEvent(**event) for event in events],
    )
    logger.info(
        "Playback: %s mode=%s inversion=%d events=%d",
        response.chord_name,
        request.mode,
        request.inversion,
        len(events),
    )
    return JSONResponse(content=response.model_dump())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=BRIDGE_HOST, port=BRIDGE_PORT, log_level="info")
