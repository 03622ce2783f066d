"""
Score every scale shape on every root against the input chords.

For a scale shape s on root r the accuracy is

    sum(weights[(r + i) % 12] for i in s.offsets) / sum(weights)

and the (s, r) pair is reported when the accuracy is strictly above
REQUIRED_ACCURACY. Matches come out in discovery order: scale registry order,
then root C..B.
"""
import numpy as np

from .constants import NUM_PITCH_CLASSES, REQUIRED_ACCURACY, ROOT_WEIGHT
from .pitch import PitchClass, transpose
from .shapes import IntervalPattern
from .weights import build_weights


class WeightedScaleMatch:
    """A scale shape placed on a concrete root, with its accuracy."""

    __slots__ = ("_shape", "_root", "_accuracy")

    def __init__(self, shape, root, accuracy):
        self._shape = IntervalPattern(shape.name, tuple(shape.offsets))
        self._root = PitchClass(root)
        self._accuracy = float(accuracy)

    @property
    def shape(self):
        return self._shape

    @property
    def name(self):
        return self._shape.name

    @property
    def offsets(self):
        return self._shape.offsets

    @property
    def root(self):
        return self._root

    @property
    def accuracy(self):
        return self._accuracy

    @property
    def percent(self) -> int:
        """Accuracy truncated to whole percent; this is what ranking compares."""
        return int(self._accuracy * 100)

    @property
    def tones(self):
        """Absolute pitch classes of the scale, in offset order."""
        return tuple(transpose(self._root, i) for i in self._shape.offsets)

    def __eq__(self, other):
        if not isinstance(other, WeightedScaleMatch):
            return NotImplemented
        return (self._shape, self._root, self._accuracy) == \
            (other._shape, other._root, other._accuracy)

    def __hash__(self):
        return hash((self._shape, self._root, self._accuracy))

    def __str__(self):
        return f"{self._root} {self._shape.name}"

    def __repr__(self):
        return (f"WeightedScaleMatch({self._shape.name!r}, root={self._root}, "
                f"accuracy={self._accuracy:.4f})")


def find_scales(chords, chord_shapes, scale_shapes,
                required_accuracy=REQUIRED_ACCURACY, root_weight=ROOT_WEIGHT):
    """
    Return every WeightedScaleMatch whose accuracy exceeds `required_accuracy`,
    in discovery order. An empty chord set yields no matches.
    """
    weights, sum_weights = build_weights(chords, chord_shapes, root_weight=root_weight)
    if sum_weights == 0:
        return []

    result = []
    for shape in scale_shapes:
        offsets = np.asarray(shape.offsets, dtype=np.int64)
        for root in range(NUM_PITCH_CLASSES):
            num_hits = int(weights[(root + offsets) % NUM_PITCH_CLASSES].sum())
            accuracy = num_hits / sum_weights
            if accuracy > required_accuracy:
                result.append(WeightedScaleMatch(shape, root, accuracy))
    return result


def rank_matches(matches):
    """
    Order matches by descending whole-percent accuracy.

    Matches with the same percent keep their discovery order, even when their
    exact accuracies differ (0.771 and 0.779 both rank as 77%).
    """
    indexed = sorted(enumerate(matches), key=lambda im: (-im[1].percent, im[0]))
    return [m for _, m in indexed]
