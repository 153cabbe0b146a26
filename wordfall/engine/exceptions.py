"""Exception hierarchy for the word-search and cascade engine."""

from typing import Iterable, List, Tuple


class WordfallError(Exception):
    """Base exception for engine and session failures."""


class OutOfRangeError(WordfallError, IndexError):
    """Raised when a query or seed position lies outside the grid."""

    def __init__(self, message: str, positions: Iterable[Tuple[int, int]] = ()) -> None:
        super().__init__(message)
        self.positions: List[Tuple[int, int]] = list(positions)


class InvalidConfigurationError(WordfallError, ValueError):
    """Raised for non-positive grid dimensions or word length bounds."""


class InvalidTileError(WordfallError, ValueError):
    """Raised when a cell is given something other than a single letter."""


class ColumnFullError(WordfallError):
    """Raised when a tile is dropped into a column with no empty cell."""
