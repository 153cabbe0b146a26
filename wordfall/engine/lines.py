"""Line extraction: full rows, columns and diagonals through a cell."""

from typing import Iterable, List, Tuple

from .exceptions import OutOfRangeError
from .grid import BoardProvider
from .models import BLANK, DiagonalKind, Direction, Line, Position


def _check_position(grid: BoardProvider, row: int, col: int) -> None:
    if not (0 <= row < grid.rows and 0 <= col < grid.cols):
        raise OutOfRangeError(
            f"Position ({row}, {col}) outside {grid.rows}x{grid.cols} grid",
            [(row, col)],
        )


def _collect(grid: BoardProvider, positions: Iterable[Position]) -> Line:
    """Read the letters at ``positions``, substituting BLANK for empty cells."""
    positions = list(positions)
    letters = ''.join(grid.get_letter(r, c) or BLANK for r, c in positions)
    return Line(letters=letters, positions=positions)


def row_line(grid: BoardProvider, row: int) -> Line:
    """All cells of ``row``, left to right."""
    _check_position(grid, row, 0)
    return _collect(grid, (Position(row, c) for c in range(grid.cols)))


def column_line(grid: BoardProvider, col: int) -> Line:
    """All cells of ``col``, top to bottom."""
    _check_position(grid, 0, col)
    return _collect(grid, (Position(r, col) for r in range(grid.rows)))


def diagonal_start(grid: BoardProvider, row: int, col: int, kind: DiagonalKind) -> Position:
    """
    Leftmost cell of the diagonal through ``(row, col)``.

    Every cell of a diagonal normalizes to the same start, which is what makes
    :func:`diagonal_line` independent of the reference cell.
    """
    _check_position(grid, row, col)
    if kind == "descending":
        step = min(row, col)
        return Position(row - step, col - step)
    if kind == "ascending":
        step = min(grid.rows - 1 - row, col)
        return Position(row + step, col - step)
    raise ValueError(f"Unknown diagonal kind: {kind!r}")


def diagonal_line(grid: BoardProvider, row: int, col: int, kind: DiagonalKind) -> Line:
    """
    The full diagonal through ``(row, col)``, read left to right.

    ``descending`` runs top-left to bottom-right, ``ascending`` runs
    bottom-left to top-right.
    """
    r, c = diagonal_start(grid, row, col, kind)
    row_step = 1 if kind == "descending" else -1

    positions: List[Position] = []
    while 0 <= r < grid.rows and c < grid.cols:
        positions.append(Position(r, c))
        r += row_step
        c += 1
    return _collect(grid, positions)


def lines_through(grid: BoardProvider, row: int, col: int) -> List[Tuple[Direction, Line]]:
    """The four scan lines through a cell, in row, column, descending, ascending order."""
    _check_position(grid, row, col)
    return [
        ("row", row_line(grid, row)),
        ("column", column_line(grid, col)),
        ("descending", diagonal_line(grid, row, col, "descending")),
        ("ascending", diagonal_line(grid, row, col, "ascending")),
    ]
