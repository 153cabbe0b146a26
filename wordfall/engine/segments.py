"""Split a Line into maximal runs of filled cells."""

from typing import List

from .models import BLANK, Line, Position, Segment


def extract_segments(line: Line) -> List[Segment]:
    """
    Return every maximal run of non-blank characters in ``line``.

    Blank runs of any length only separate segments, so leading, trailing
    or repeated blanks never produce an empty segment.

    Example:
        ``"HAT CAT"`` yields ``HAT`` at positions 0-2 and ``CAT`` at 4-6.
    """
    segments: List[Segment] = []
    letters = ""
    positions: List[Position] = []

    for char, pos in zip(line.letters, line.positions):
        if char != BLANK:
            letters += char
            positions.append(pos)
        elif letters:
            segments.append(Segment(letters=letters, positions=positions))
            letters, positions = "", []

    # Flush a run that reaches the end of the line
    if letters:
        segments.append(Segment(letters=letters, positions=positions))

    return segments
