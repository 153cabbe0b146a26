"""Dictionary matching over segments and the four scan lines of a cell."""

from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from .exceptions import InvalidConfigurationError, OutOfRangeError
from .grid import BoardProvider
from .lines import lines_through
from .models import Direction, Line, Match, Position, Segment
from .segments import extract_segments


DEFAULT_MIN_WORD_LENGTH = 3


class DictionaryProvider(Protocol):
    """Read-only word lookup consumed by the engine."""

    def has_word(self, word: str) -> bool: ...


def check_min_length(min_length: int) -> int:
    if min_length < 1:
        raise InvalidConfigurationError(
            f"Minimum word length must be positive, got {min_length}"
        )
    return min_length


def is_valid_word(
    letters: str,
    dictionary: Optional[DictionaryProvider],
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> bool:
    """True if ``letters`` is long enough and in the dictionary (case-insensitive)."""
    if dictionary is None or len(letters) < min_length:
        return False
    return dictionary.has_word(letters.lower())


def find_matches(
    segment: Segment,
    dictionary: Optional[DictionaryProvider],
    direction: Direction,
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> List[Match]:
    """
    Every dictionary word inside ``segment`` of at least ``min_length`` letters.

    Overlapping and nested words are all reported, shortest lengths first and
    left to right within a length. Letters keep the board's case.
    """
    check_min_length(min_length)
    matches: List[Match] = []
    if dictionary is None:
        return matches

    size = len(segment.letters)
    for length in range(min_length, size + 1):
        for start in range(size - length + 1):
            letters = segment.letters[start:start + length]
            if dictionary.has_word(letters.lower()):
                matches.append(Match(
                    letters=letters,
                    positions=segment.positions[start:start + length],
                    direction=direction,
                ))
    return matches


def find_matches_in_line(
    line: Line,
    dictionary: Optional[DictionaryProvider],
    direction: Direction,
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> List[Match]:
    matches: List[Match] = []
    for segment in extract_segments(line):
        matches.extend(find_matches(segment, dictionary, direction, min_length))
    return matches


def check_for_words(
    grid: BoardProvider,
    dictionary: Optional[DictionaryProvider],
    row: int,
    col: int,
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> List[Match]:
    """All words on the row, column and both diagonals through ``(row, col)``."""
    matches: List[Match] = []
    for direction, line in lines_through(grid, row, col):
        matches.extend(find_matches_in_line(line, dictionary, direction, min_length))
    return matches


def dedupe_positions(positions: Iterable[Tuple[int, int]]) -> List[Position]:
    """Drop repeated positions, keeping first-seen order."""
    return list(dict.fromkeys(Position(*pos) for pos in positions))


def dedupe_matches(matches: Iterable[Match]) -> List[Match]:
    """Keep the first Match for each ``(letters, positions)`` identity."""
    unique: Dict[Tuple, Match] = {}
    for match in matches:
        unique.setdefault(match.key, match)
    return list(unique.values())


def validate_positions(grid: BoardProvider, positions: Iterable[Tuple[int, int]]) -> List[Position]:
    """Deduplicate ``positions`` and reject any that fall outside the grid."""
    unique = dedupe_positions(positions)
    invalid = [
        pos for pos in unique
        if not (0 <= pos.row < grid.rows and 0 <= pos.col < grid.cols)
    ]
    if invalid:
        raise OutOfRangeError(
            f"{len(invalid)} position(s) outside {grid.rows}x{grid.cols} grid: "
            + ", ".join(f"({r}, {c})" for r, c in invalid),
            invalid,
        )
    return unique


def find_words_at(
    grid: BoardProvider,
    dictionary: Optional[DictionaryProvider],
    positions: Iterable[Tuple[int, int]],
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> List[Match]:
    """
    Words through any of ``positions``, each reported once.

    A word reachable from several positions (or found by several of them in
    the same direction) is deduplicated by its letters and exact positions.
    """
    seeds = validate_positions(grid, positions)
    found: List[Match] = []
    for row, col in seeds:
        found.extend(check_for_words(grid, dictionary, row, col, min_length))
    return dedupe_matches(found)
