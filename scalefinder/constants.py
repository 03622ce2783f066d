import os

# ── Scoring ───────────────────────────────────────────────────────────────────

# A scale is reported only when its accuracy is strictly above this value.
REQUIRED_ACCURACY = 0.7
# Weight of a chord root in the weight vector; other chord tones weigh 1.
ROOT_WEIGHT = 3

NUM_PITCH_CLASSES = 12

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# Display spelling: sharps everywhere except Bb, so that A#/Bb and the
# Central European B/H naming can never be confused.
TONE_NAMES: list[str] = [
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "Bb", "B"
]
_NOTE_TO_PC: dict[str, int] = {
    "C": 0,  "C#": 1,  "Db": 1,  "D": 2,  "D#": 3,  "Eb": 3,
    "E": 4,  "F": 5,   "F#": 6,  "Gb": 6, "G": 7,   "G#": 8,
    "Ab": 8, "A": 9,   "A#": 10, "Bb": 10, "B": 11, "H": 11,
}

# ── Data files ────────────────────────────────────────────────────────────────

# Bundled databases, installed as package data
_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
DEFAULT_CHORDS_FILE = os.path.join(_DATA_DIR, "chords")
DEFAULT_SCALES_FILE = os.path.join(_DATA_DIR, "scales")
RECORD_SEPARATOR = ":"

# ── Playback ──────────────────────────────────────────────────────────────────

MIDI_BASE_NOTE = 48   # C3, the C below middle C
PLAYBACK_VELOCITY = 75
PLAYBACK_QUARTER_LENGTH = 0.5
