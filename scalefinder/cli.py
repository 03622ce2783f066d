#!/usr/bin/env python3
"""
scalefinder — find the scales that contain a set of chords.

    scalefinder C:dur D:mi F:maj
    scalefinder --select 1 --midi f_major.mid C:dur D:mi F:maj

Chords are given as Root:shape, where shape is a name from the chord database.
"""
import argparse
import sys

from .analyzer import ScaleAnalyzer
from .constants import DEFAULT_CHORDS_FILE, DEFAULT_SCALES_FILE, REQUIRED_ACCURACY
from .display import format_match_table, format_scale_details
from .playback import write_midi
from .shapes import RegistryFormatError, ShapeNotFoundError
from .weights import parse_input_chord


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="Find the scales that contain the given chords.")
    parser.add_argument("chords", nargs="+", metavar="CHORD",
                        help="Chord as Root:shape, e.g. C:dur or F#:mi7")
    parser.add_argument("--chords-db", default=DEFAULT_CHORDS_FILE,
                        help="Path to the chord database")
    parser.add_argument("--scales-db", default=DEFAULT_SCALES_FILE,
                        help="Path to the scale database (re-read on every run)")
    parser.add_argument("--required-accuracy", type=float, default=REQUIRED_ACCURACY,
                        help="Report scales with accuracy strictly above this (0-1)")
    parser.add_argument("--select", type=int, metavar="N",
                        help="Show details and suitable chords for row N of the table")
    parser.add_argument("--midi", metavar="OUT",
                        help="Write the selected scale to a MIDI file (needs --select)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print database loading diagnostics")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    if args.midi and args.select is None:
        sys.exit("Error: --midi needs --select N")

    try:
        chords = [parse_input_chord(c) for c in args.chords]
    except ValueError as e:
        sys.exit(f"Error parsing chord: {e}")

    try:
        analyzer = ScaleAnalyzer(args.chords_db, args.scales_db,
                                 required_accuracy=args.required_accuracy,
                                 verbose=args.verbose)
        ranked = analyzer.analyze(chords)
    except (OSError, RegistryFormatError) as e:
        sys.exit(f"Error loading database: {e}")
    except ShapeNotFoundError as e:
        sys.exit(f"Error: {e}")

    if not ranked:
        print("No matching scales.", file=sys.stderr)
        return 1

    for row in format_match_table(ranked):
        print(row)

    if args.select is None:
        return 0

    if not 1 <= args.select <= len(ranked):
        sys.exit(f"Error: --select must be between 1 and {len(ranked)}")
    match = ranked[args.select - 1]

    print()
    print(format_scale_details(match, analyzer.suitable_chords(match)))

    if args.midi:
        try:
            path = write_midi(match, args.midi)
        except OSError as e:
            sys.exit(f"Error writing MIDI file: {e}")
        print(f"Saved {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
