"""Board model: a rows x cols matrix of optional single-letter tiles."""

from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from .exceptions import (
    ColumnFullError,
    InvalidConfigurationError,
    InvalidTileError,
    OutOfRangeError,
)
from .models import Position


class BoardProvider(Protocol):
    """The board operations the cascade engine relies on."""

    rows: int
    cols: int

    def get_letter(self, row: int, col: int) -> Optional[str]: ...

    def set_letter(self, row: int, col: int, letter: Optional[str]) -> None: ...

    def clear_cells(self, positions: Iterable[Tuple[int, int]]) -> None: ...

    def compact_column(self, col: int) -> None: ...

    def count_filled(self, col: int) -> int: ...

    def lowest_empty_row(self, col: int) -> Optional[int]: ...


class Grid:
    """
    In-memory board provider.

    Each cell holds either a single character or ``None``. Gravity is not
    enforced on writes; callers (and the cascade resolver) keep columns
    compact by calling :meth:`compact_column`.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise InvalidConfigurationError(
                f"Grid dimensions must be positive, got {rows}x{cols}"
            )
        self.rows = rows
        self.cols = cols
        self._cells: List[List[Optional[str]]] = [
            [None] * cols for _ in range(rows)
        ]

    @classmethod
    def from_strings(cls, rows: Sequence[str], blank: str = ".") -> "Grid":
        """
        Build a grid from row strings, top row first.

        Any ``blank`` character or whitespace becomes an empty cell.
        All rows must have the same width.
        """
        if not rows:
            raise InvalidConfigurationError("At least one row is required")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise InvalidConfigurationError(f"Rows have differing widths: {sorted(widths)}")

        grid = cls(len(rows), widths.pop())
        for r, text in enumerate(rows):
            for c, char in enumerate(text):
                if char != blank and not char.isspace():
                    grid._cells[r][c] = char
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise OutOfRangeError(
                f"Position ({row}, {col}) outside {self.rows}x{self.cols} grid",
                [(row, col)],
            )

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self.cols:
            raise OutOfRangeError(f"Column {col} outside [0, {self.cols})")

    def get_letter(self, row: int, col: int) -> Optional[str]:
        self._check(row, col)
        return self._cells[row][col]

    def set_letter(self, row: int, col: int, letter: Optional[str]) -> None:
        """Place ``letter`` in a cell; ``None`` or a blank string empties it."""
        self._check(row, col)
        if letter is None or not letter.strip():
            self._cells[row][col] = None
            return
        if len(letter) != 1:
            raise InvalidTileError(f"A tile holds exactly one character, got {letter!r}")
        self._cells[row][col] = letter

    def clear_cells(self, positions: Iterable[Tuple[int, int]]) -> None:
        """Empty every given cell. Clearing an empty cell is a no-op."""
        targets = [Position(*pos) for pos in positions]
        for row, col in targets:
            self._check(row, col)
        for row, col in targets:
            self._cells[row][col] = None

    def reset(self) -> None:
        for row in self._cells:
            for c in range(self.cols):
                row[c] = None

    # ------------------------------------------------------------------
    # Column helpers
    # ------------------------------------------------------------------
    def column_letters(self, col: int) -> List[Optional[str]]:
        """Cells of ``col`` from top to bottom."""
        self._check_col(col)
        return [self._cells[r][col] for r in range(self.rows)]

    def count_filled(self, col: int) -> int:
        return sum(1 for letter in self.column_letters(col) if letter is not None)

    def lowest_empty_row(self, col: int) -> Optional[int]:
        """Landing row for a new tile in ``col``, or ``None`` if it is full."""
        self._check_col(col)
        for row in range(self.rows - 1, -1, -1):
            if self._cells[row][col] is None:
                return row
        return None

    def compact_column(self, col: int) -> None:
        """Let every tile in ``col`` fall until no gap remains beneath it."""
        letters = [letter for letter in self.column_letters(col) if letter is not None]
        gaps = self.rows - len(letters)
        for row in range(self.rows):
            self._cells[row][col] = None if row < gaps else letters[row - gaps]

    def drop_letter(self, col: int, letter: str) -> Position:
        """Land ``letter`` on the lowest empty row of ``col``."""
        row = self.lowest_empty_row(col)
        if row is None:
            raise ColumnFullError(f"Column {col} is full")
        self.set_letter(row, col, letter)
        return Position(row, col)

    # ------------------------------------------------------------------
    # Whole-board views
    # ------------------------------------------------------------------
    def filled_count(self) -> int:
        return sum(self.count_filled(col) for col in range(self.cols))

    def filled_positions(self) -> List[Position]:
        return [
            Position(r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if self._cells[r][c] is not None
        ]

    def to_strings(self, blank: str = ".") -> List[str]:
        return [''.join(letter or blank for letter in row) for row in self._cells]

    def render(self, blank: str = ".") -> str:
        """Render the board to a string, one line per row."""
        return '\n'.join(self.to_strings(blank))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, filled={self.filled_count()})"
