from __future__ import annotations

import os

APP_NAME = "Chord Bridge"
BRIDGE_HOST = os.environ.get("CHORD_BRIDGE_HOST", "127.0.0.1")
BRIDGE_PORT = int(os.environ.get("CHORD_BRIDGE_PORT", "8765"))

LOGGER_NAME = "chord_bridge"
LOG_LEVEL = os.environ.get("CHORD_BRIDGE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

NOTES_PER_OCTAVE = 12
ACCIDENTAL_MARK = "#"

MIDI_MIN = 0
MIDI_MAX = 127

DEFAULT_BASE_OCTAVE = 4
OCTAVE_MIN = 0
OCTAVE_MAX = 8

# C4 and above are written on the treble staff.
TREBLE_MIN_OCTAVE = 4

KEYBOARD_START_OCTAVE = 3
KEYBOARD_NUM_OCTAVES = 3
KEYBOARD_MAX_OCTAVES = 7

CHORD_DURATION_SEC = 1.5
NOTE_DURATION_SEC = 0.8
ARPEGGIO_NOTE_DURATION_SEC = 0.4
ARPEGGIO_GAP_SEC = 0.15

VOLUME_MIN = 0
VOLUME_MAX = 100
VOLUME_DEFAULT = 50
VOLUME_DB_RANGE = 40.0

PLAYBACK_MODE_CHORD = "chord"
PLAYBACK_MODE_ARPEGGIO = "arpeggio"
