"""
Analysis session tying the databases to the matcher.

The chord database is read once, when the session is created. The scale
database is read again on every call to analyze(), so edits to it show up on
the next analysis without restarting.
"""
from .chord_finder import find_suitable_chords
from .constants import (DEFAULT_CHORDS_FILE, DEFAULT_SCALES_FILE,
                        REQUIRED_ACCURACY, ROOT_WEIGHT)
from .matcher import find_scales, rank_matches
from .shapes import load_chord_shapes, load_scale_shapes


class ScaleAnalyzer:
    """
    Usage:
        analyzer = ScaleAnalyzer()
        ranked = analyzer.analyze([InputChord(PitchClass.C, "dur"), ...])
        groups = analyzer.suitable_chords(ranked[0])
    """

    def __init__(self, chords_path=DEFAULT_CHORDS_FILE, scales_path=DEFAULT_SCALES_FILE,
                 required_accuracy=REQUIRED_ACCURACY, root_weight=ROOT_WEIGHT,
                 verbose=False):
        self.chords_path = chords_path
        self.scales_path = scales_path
        self.required_accuracy = required_accuracy
        self.root_weight = root_weight
        self.verbose = verbose
        self.chord_shapes = load_chord_shapes(chords_path)
        self._log(f"{len(self.chord_shapes)} chord shapes loaded from {chords_path}")

    # ── Public API ──────────────────────────────────────────────────────────

    def load_scales(self):
        scale_shapes = load_scale_shapes(self.scales_path)
        self._log(f"{len(scale_shapes)} scale shapes loaded from {self.scales_path}")
        return scale_shapes

    def analyze(self, chords):
        """Reload the scale database and return matching scales, best first."""
        scale_shapes = self.load_scales()
        matches = find_scales(
            chords, self.chord_shapes, scale_shapes,
            required_accuracy=self.required_accuracy,
            root_weight=self.root_weight,
        )
        self._log(f"{len(matches)} scales above {self.required_accuracy:.0%}")
        return rank_matches(matches)

    def suitable_chords(self, match):
        return find_suitable_chords(match, self.chord_shapes)

    # ── Internals ────────────────────────────────────────────────────────────

    def _log(self, message):
        if self.verbose:
            print(f"[ScaleAnalyzer] {message}")
