"""
report.py

Plain-text rendering of frame scores.
"""

from .rules import tenpin_rules


def print_frames(frame_scores, ruleset=tenpin_rules):
    """Render frame scores as a two-row table.

    Frames that are incomplete or not yet played are left empty.
    """
    colwidth = max(len(str(ruleset.num_frames)), len(str(ruleset.max_strike_score))) + 2

    def align(string):
        format_string = f"{{:^{colwidth}}}"
        return format_string.format(string)

    num_columns = ruleset.num_frames
    separator_line = "+".join([""] + ["=" * colwidth] * num_columns + [""])

    frame_row = [align(i) for i in range(1, num_columns + 1)]
    score_row = []
    for i in range(num_columns):
        frame_score = frame_scores[i] if i < len(frame_scores) else None
        score_row.append(align("" if frame_score is None else frame_score))

    out = [
        separator_line,
        "|".join([""] + frame_row + [""]),
        separator_line,
        "|".join([""] + score_row + [""]),
        separator_line,
    ]

    return "\n".join(out)
