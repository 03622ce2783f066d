"""
Text rendering of matched scales and their chords.
"""


def format_tones(match) -> str:
    return " ".join(str(pc) for pc in match.tones)


def format_mask(match) -> str:
    return " - ".join(str(o) for o in match.offsets)


def format_intervals(match) -> str:
    """Semitone steps between consecutive offsets, the first one measured from 0."""
    steps = []
    last = 0
    for o in match.offsets:
        steps.append(str(o - last))
        last = o
    return " - ".join(steps)


def format_chord_groups(groups) -> list[str]:
    """One line per degree: 'Cdur, Cmaj, ...'."""
    return [", ".join(str(c) for c in chords) for _, chords in groups]


def format_match_table(matches) -> list[str]:
    if not matches:
        return []
    labels = [str(m) for m in matches]
    width = max(len(label) for label in labels)
    idx_width = len(str(len(matches)))
    return [
        f"{i:>{idx_width}}  {label:<{width}}  {m.percent:>3}%"
        for i, (label, m) in enumerate(zip(labels, matches), start=1)
    ]


def format_scale_details(match, groups) -> str:
    """Detail view of a single scale: name, tones, mask, intervals and chords."""
    bar = "─" * 60
    lines = [
        bar,
        f"  {match}  ({match.percent}%)",
        f"  Tones     : {format_tones(match)}",
        f"  Mask      : {format_mask(match)}",
        f"  Intervals : {format_intervals(match)}",
        "  Chords    :",
    ]
    chord_lines = format_chord_groups(groups)
    if chord_lines:
        lines.extend(f"    {line}" for line in chord_lines)
    else:
        lines.append("    (none)")
    lines.append(bar)
    return "\n".join(lines)
