"""
The twelve pitch classes and their display names.
"""
from enum import IntEnum

from .constants import NUM_PITCH_CLASSES, TONE_NAMES, _NOTE_TO_PC


class PitchClass(IntEnum):
    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    B_FLAT = 10
    B = 11

    def __str__(self):
        return TONE_NAMES[self.value]


def transpose(pc, semitones) -> PitchClass:
    """Move a pitch class up by `semitones`, wrapping around the octave."""
    return PitchClass((int(pc) + int(semitones)) % NUM_PITCH_CLASSES)


def parse_pitch_class(name: str) -> PitchClass:
    """
    Map a note name ('C', 'F#', 'Gb', 'H') to its PitchClass.
    Raises ValueError for anything not in the note table.
    """
    pc = _NOTE_TO_PC.get(name.strip())
    if pc is None:
        raise ValueError(f"Unknown note name: {name!r}")
    return PitchClass(pc)
