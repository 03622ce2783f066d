"""
Play a matched scale: the scale tones from the root upwards, followed by the
root one octave higher, as a music21 stream or a MIDI file.
"""
import music21

from .constants import MIDI_BASE_NOTE, PLAYBACK_QUARTER_LENGTH, PLAYBACK_VELOCITY


def scale_midi_notes(match, base_note=MIDI_BASE_NOTE) -> list[int]:
    root = base_note + int(match.root)
    # Closing octave so the scale sounds complete
    return [root + o for o in match.offsets] + [root + 12]


def scale_to_stream(match, base_note=MIDI_BASE_NOTE,
                    quarter_length=PLAYBACK_QUARTER_LENGTH,
                    velocity=PLAYBACK_VELOCITY):
    """Build a monophonic music21 Stream playing the scale once."""
    s = music21.stream.Stream()
    s.insert(0, music21.instrument.Piano())
    for i, midi in enumerate(scale_midi_notes(match, base_note)):
        n = music21.note.Note(midi=midi)
        n.duration.quarterLength = quarter_length
        n.volume.velocity = velocity
        s.insert(i * quarter_length, n)
    return s


def write_midi(match, path, **kwargs):
    """Write the scale to a standard MIDI file and return the written path."""
    return scale_to_stream(match, **kwargs).write("midi", fp=path)
