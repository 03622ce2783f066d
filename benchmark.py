import time
import numpy as np
from scalefinder.constants import DEFAULT_CHORDS_FILE, DEFAULT_SCALES_FILE
from scalefinder.matcher import find_scales
from scalefinder.pitch import PitchClass
from scalefinder.shapes import load_chord_shapes, load_scale_shapes
from scalefinder.weights import InputChord

def run_benchmark():
    # Setup
    chord_shapes = load_chord_shapes(DEFAULT_CHORDS_FILE)
    scale_shapes = load_scale_shapes(DEFAULT_SCALES_FILE)
    names = chord_shapes.names()
    rng = np.random.default_rng(42)
    # Generate 2,000 random progressions of 4 chords
    progressions = [
        [InputChord(PitchClass(int(r)), names[int(s)])
         for r, s in zip(rng.integers(0, 12, 4), rng.integers(0, len(names), 4))]
        for _ in range(2000)
    ]

    # Benchmark
    start_time = time.perf_counter()
    n_matches = 0
    for chords in progressions:
        n_matches += len(find_scales(chords, chord_shapes, scale_shapes))
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds ({n_matches} matches)")

if __name__ == '__main__':
    run_benchmark()
