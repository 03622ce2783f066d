"""
List the known chords that can be built on each degree of a matched scale.

The search runs in the scale's own frame (root = 0): membership is computed
once from the scale offsets, each chord shape is tested on each degree offset,
and only fitting chords are translated to absolute roots.
"""
from collections import namedtuple

import numpy as np

from .constants import NUM_PITCH_CLASSES
from .pitch import transpose


class ChordMatch(namedtuple("ChordMatch", ["root", "shape_name"])):
    __slots__ = ()

    def __str__(self):
        return f"{self.root}{self.shape_name}"


def scale_membership(offsets):
    """Boolean array of length 12, True at every offset of the scale."""
    in_scale = np.zeros(NUM_PITCH_CLASSES, dtype=bool)
    for o in offsets:
        in_scale[o % NUM_PITCH_CLASSES] = True
    return in_scale


def find_suitable_chords(match, chord_shapes):
    """
    Return ``[(degree_offset, [ChordMatch, ...]), ...]``.

    Degrees follow the scale's offset order and chords follow registry order.
    Degrees on which no chord fits are left out.
    """
    in_scale = scale_membership(match.offsets)

    result = []
    for degree in match.offsets:
        fitting = []
        for shape in chord_shapes:
            # All the tones of the chord must lie in the scale
            if all(in_scale[(degree + j) % NUM_PITCH_CLASSES] for j in shape.offsets):
                fitting.append(ChordMatch(transpose(match.root, degree), shape.name))
        if fitting:
            result.append((degree, fitting))
    return result
