"""
Turn a set of input chords into a 12-slot importance vector.

Chord roots weigh ROOT_WEIGHT, every other chord tone weighs 1 and tones
outside all chords weigh 0. Weights never accumulate: a tone shared by several
chords still weighs 1 (or ROOT_WEIGHT if it is the root of any of them).
"""
from collections import namedtuple

import numpy as np

from .constants import NUM_PITCH_CLASSES, RECORD_SEPARATOR, ROOT_WEIGHT
from .pitch import parse_pitch_class

InputChord = namedtuple("InputChord", ["root", "shape_name"])


def parse_input_chord(text: str) -> InputChord:
    """
    Parse a chord entry of the form ``Root:shape`` (e.g. ``F#:mi7``).

    Whitespace around both parts is ignored. Only the root is validated here;
    the shape name is resolved against the chord registry when the weights
    are built.
    """
    root_name, sep, shape_name = text.partition(RECORD_SEPARATOR)
    shape_name = shape_name.strip()
    if not sep or not shape_name:
        raise ValueError(f"Chord entry must look like 'Root:shape', got {text!r}")
    return InputChord(parse_pitch_class(root_name), shape_name)


def build_weights(chords, chord_shapes, root_weight=ROOT_WEIGHT):
    """
    Build the weight vector for `chords`.

    Args:
        chords: iterable of InputChord.
        chord_shapes: ChordShapeRegistry used to resolve shape names.
        root_weight: weight given to chord roots.

    Returns:
        (weights, sum_weights): int64 array of shape (12,) indexed by pitch
        class, and the sum of its entries (0 for an empty chord set).

    Raises:
        ShapeNotFoundError: a chord names a shape the registry does not know.
    """
    weights = np.zeros(NUM_PITCH_CLASSES, dtype=np.int64)

    for chord in chords:
        root = int(chord.root)
        offsets = chord_shapes.offsets_for(chord.shape_name)

        if weights[root] < root_weight:
            weights[root] = root_weight

        for i in offsets:
            pc = (root + i) % NUM_PITCH_CLASSES
            if weights[pc] < 1:
                weights[pc] = 1

    return weights, int(weights.sum())
