"""Data models for grid word search and cascade resolution."""

from typing import List, Literal, NamedTuple, Set, Tuple
from pydantic import BaseModel, Field, model_validator


Direction = Literal["row", "column", "descending", "ascending"]
DiagonalKind = Literal["descending", "ascending"]

DIRECTIONS: Tuple[Direction, ...] = ("row", "column", "descending", "ascending")

# Placeholder used for empty cells inside a Line
BLANK = " "


class Position(NamedTuple):
    """A cell on the grid, 0-based, row 0 at the top."""
    row: int
    col: int


class _LetterRun(BaseModel):
    """Letters with the grid position of each character, index-aligned."""
    letters: str
    positions: List[Position] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_alignment(self):
        if len(self.letters) != len(self.positions):
            raise ValueError(
                f"letters ({len(self.letters)}) and positions "
                f"({len(self.positions)}) must have the same length"
            )
        return self


class Line(_LetterRun):
    """A full row, column or diagonal, with BLANK for empty cells."""


class Segment(_LetterRun):
    """A maximal run of non-blank characters taken from a Line."""


class Match(_LetterRun):
    """A dictionary word found on the grid."""
    direction: Direction

    @property
    def key(self) -> Tuple[str, Tuple[Position, ...]]:
        """Identity used to deduplicate matches across seeds and directions."""
        return self.letters, tuple(self.positions)

    @property
    def word(self) -> str:
        return self.letters.lower()

    @property
    def columns(self) -> Set[int]:
        return {pos.col for pos in self.positions}


class CascadeStep(BaseModel):
    """All matches cleared together in one iteration of a cascade."""
    iteration: int = Field(..., ge=1)
    matches: List[Match] = Field(default_factory=list)
    affected_columns: Set[int] = Field(default_factory=set)
    cleared_positions: List[Position] = Field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return [m.letters for m in self.matches]
