"""
Cascade resolution: match, clear, apply gravity, re-scan until stable.

Each iteration scans the seed positions in all four directions, clears every
match found in that scan together, compacts the touched columns, then re-seeds
with every tile left in those columns. Compaction can bring letters that were
never adjacent into contact, so the whole column is re-scanned rather than just
the landing cell.
"""

from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple

from ..utils.logger import get_logger
from .grid import BoardProvider
from .matcher import (
    DEFAULT_MIN_WORD_LENGTH,
    DictionaryProvider,
    check_min_length,
    dedupe_positions,
    find_words_at,
    validate_positions,
)
from .models import CascadeStep, Match, Position


LOGGER = get_logger(__name__)


class ResolverState(str, Enum):
    """Phases of a resolution pass."""

    IDLE = "IDLE"
    SCANNING = "SCANNING"
    RESOLVING = "RESOLVING"
    COMPACTING = "COMPACTING"


StepCallback = Callable[[CascadeStep], None]


class CascadeResolver:
    """
    Drives a board to a word-free state after tiles change.

    The resolver never owns the board or the dictionary; it reads and mutates
    the board it was given and reports what it removed. It is synchronous and
    assumes nothing else writes to the board during a pass.

    Attributes:
        grid: Board provider mutated by clear and compact steps
        dictionary: Word lookup; ``None`` means no word ever matches
        min_word_length: Shortest run of letters that can form a word
        state: Current phase, ``IDLE`` outside of a pass
    """

    def __init__(
        self,
        grid: BoardProvider,
        dictionary: Optional[DictionaryProvider],
        min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    ) -> None:
        self.grid = grid
        self.dictionary = dictionary
        self.min_word_length = check_min_length(min_word_length)
        self.state = ResolverState.IDLE

    def find_words_at(self, positions: Iterable[Tuple[int, int]]) -> List[Match]:
        """Deduplicated matches through any of ``positions``, without touching the board."""
        return find_words_at(self.grid, self.dictionary, positions, self.min_word_length)

    def resolve(
        self,
        seed_positions: Iterable[Tuple[int, int]],
        on_step: Optional[StepCallback] = None,
    ) -> List[CascadeStep]:
        """
        Run the cascade to completion and return every step in order.

        ``on_step`` is called with each step before its tiles are cleared, so
        the caller can still read the matched letters off the board.

        Raises:
            OutOfRangeError: If any seed lies outside the grid
        """
        steps: List[CascadeStep] = []
        for step in self.iter_steps(seed_positions):
            if on_step is not None:
                on_step(step)
            steps.append(step)
        return steps

    def iter_steps(self, seed_positions: Iterable[Tuple[int, int]]) -> Iterator[CascadeStep]:
        """
        Yield one CascadeStep per iteration.

        Each step is yielded before the board is mutated; clearing and
        compaction for that step happen when the caller asks for the next one.
        Seeds are validated immediately, not on first iteration.
        """
        seeds = validate_positions(self.grid, seed_positions)
        return self._run(seeds)

    def _run(self, seeds: List[Position]) -> Iterator[CascadeStep]:
        iteration = 0
        try:
            while seeds:
                self.state = ResolverState.SCANNING
                matches = self.find_words_at(seeds)
                if not matches:
                    break

                iteration += 1
                self.state = ResolverState.RESOLVING
                cleared = dedupe_positions(pos for m in matches for pos in m.positions)
                affected = {pos.col for pos in cleared}
                step = CascadeStep(
                    iteration=iteration,
                    matches=matches,
                    affected_columns=affected,
                    cleared_positions=cleared,
                )
                LOGGER.debug(
                    "Cascade step %s: %s word(s) %s, columns %s",
                    iteration,
                    len(matches),
                    step.words,
                    sorted(affected),
                )
                yield step

                self.state = ResolverState.COMPACTING
                self._clear_and_compact(cleared, affected)
                seeds = self._next_seeds(affected)
        finally:
            self.state = ResolverState.IDLE

        if iteration:
            LOGGER.debug("Cascade settled after %s step(s)", iteration)

    def _clear_and_compact(self, cleared: List[Position], affected: Set[int]) -> None:
        self.grid.clear_cells(cleared)
        for col in sorted(affected):
            self.grid.compact_column(col)

    def _next_seeds(self, affected: Set[int]) -> List[Position]:
        """Every tile now sitting in an affected column, bottom row first."""
        bottom = self.grid.rows - 1
        return dedupe_positions(
            Position(bottom - i, col)
            for col in sorted(affected)
            for i in range(self.grid.count_filled(col))
        )
