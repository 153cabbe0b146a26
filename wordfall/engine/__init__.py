"""Grid word search and cascade resolution for wordfall."""

from .cascade import CascadeResolver, ResolverState
from .exceptions import (
    WordfallError,
    OutOfRangeError,
    InvalidConfigurationError,
    InvalidTileError,
    ColumnFullError,
)
from .grid import Grid, BoardProvider
from .lines import row_line, column_line, diagonal_line, diagonal_start, lines_through
from .matcher import (
    DEFAULT_MIN_WORD_LENGTH,
    DictionaryProvider,
    is_valid_word,
    find_matches,
    find_matches_in_line,
    check_for_words,
    find_words_at,
)
from .models import BLANK, DIRECTIONS, Direction, Position, Line, Segment, Match, CascadeStep
from .segments import extract_segments

__all__ = [
    # Resolution
    "CascadeResolver",
    "ResolverState",
    # Errors
    "WordfallError",
    "OutOfRangeError",
    "InvalidConfigurationError",
    "InvalidTileError",
    "ColumnFullError",
    # Board
    "Grid",
    "BoardProvider",
    # Lines and segments
    "row_line",
    "column_line",
    "diagonal_line",
    "diagonal_start",
    "lines_through",
    "extract_segments",
    # Matching
    "DEFAULT_MIN_WORD_LENGTH",
    "DictionaryProvider",
    "is_valid_word",
    "find_matches",
    "find_matches_in_line",
    "check_for_words",
    "find_words_at",
    # Models
    "BLANK",
    "DIRECTIONS",
    "Direction",
    "Position",
    "Line",
    "Segment",
    "Match",
    "CascadeStep",
]
