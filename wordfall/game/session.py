"""
Game session: tile drops, cascades and the made-words list, with no UI.

A session owns a Grid, a CascadeResolver and a TileGenerator. Rendering,
animation and input handling belong to whoever drives the session; they can
use the per-step data in each DropResult to pace their own playback.
"""

from collections import deque
from typing import Deque, Dict, List, Optional

from ..data.dictionary import WordDictionary
from ..data.loader import load_word_lists
from ..engine.cascade import CascadeResolver
from ..engine.exceptions import OutOfRangeError
from ..engine.grid import Grid
from ..engine.models import CascadeStep, Position
from ..utils.logger import get_logger
from .models import DropResult, GameConfig, MadeWord, SessionResult
from .tiles import TileGenerator


LOGGER = get_logger(__name__)


class GameSession:
    """
    One game: a board, the letter stream and everything made so far.

    Attributes:
        config: Session configuration
        dictionary: Word lookup shared with the resolver
        grid: The board
        resolver: Cascade resolver bound to ``grid`` and ``dictionary``
        tile_generator: Source of upcoming letters
        current_letter: Letter the next drop will place
        made_words: Every word cleared, oldest first
        score: One point per letter of every cleared word
        drop_count: Accepted drops since the last reset
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        dictionary: Optional[WordDictionary] = None,
        tile_generator: Optional[TileGenerator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.dictionary = dictionary if dictionary is not None else WordDictionary()
        self.grid = Grid(self.config.rows, self.config.cols)
        self.resolver = CascadeResolver(self.grid, self.dictionary, self.config.min_word_length)
        self.tile_generator = tile_generator or TileGenerator(
            tiles=self.config.tiles,
            seed=self.config.seed,
            preview_count=self.config.preview_count,
        )
        self.made_words: List[MadeWord] = []
        self.drops: List[DropResult] = []
        self.score = 0
        self.drop_count = 0
        self._queue: Deque[int] = deque()
        self._processing = False
        self.current_letter = self.tile_generator.get_next_tile()

    @classmethod
    def from_config(cls, config: GameConfig) -> "GameSession":
        """Create a session, loading the configured word lists and extra words."""
        dictionary = load_word_lists(config.word_lists)
        for word in config.words:
            dictionary.add_word(word)
        return cls(config=config, dictionary=dictionary)

    @property
    def upcoming(self) -> List[str]:
        return self.tile_generator.peek_upcoming()

    # ------------------------------------------------------------------
    # Drops
    # ------------------------------------------------------------------
    def drop(self, col: int) -> DropResult:
        """
        Drop the current letter into ``col`` and resolve any cascade.

        A full column rejects the drop and keeps the current letter.

        Raises:
            OutOfRangeError: If ``col`` is not a column of the board
        """
        if not 0 <= col < self.grid.cols:
            raise OutOfRangeError(f"Column {col} outside [0, {self.grid.cols})")

        letter = self.current_letter
        row = self.grid.lowest_empty_row(col)
        if row is None:
            LOGGER.info("Column %s is full, drop ignored", col)
            result = DropResult(column=col, letter=letter, accepted=False, reason="column_full")
            self.drops.append(result)
            return result

        self.grid.set_letter(row, col, letter)
        self.drop_count += 1
        landed = Position(row, col)

        steps = self.resolver.resolve([landed], on_step=self._record_step)
        points = sum(len(m.letters) for step in steps for m in step.matches)
        self.score += points

        self.current_letter = self.tile_generator.get_next_tile()
        result = DropResult(
            column=col,
            letter=letter,
            landed_at=landed,
            steps=steps,
            points=points,
        )
        self.drops.append(result)
        LOGGER.debug("Dropped %s into column %s at row %s, words: %s", letter, col, row, result.words)
        return result

    def _record_step(self, step: CascadeStep) -> None:
        # Called before the step's tiles are cleared
        for match in step.matches:
            self.made_words.append(MadeWord(
                word=match.letters,
                definition=self.dictionary.get_definition(match.word),
                positions=match.positions,
                direction=match.direction,
                drop_number=self.drop_count,
                cascade_iteration=step.iteration,
            ))

    def queue_drop(self, col: int) -> None:
        self._queue.append(col)

    def process_queue(self) -> List[DropResult]:
        """
        Run queued drops one at a time, in the order they were queued.

        Each drop's cascade settles before the next drop starts. A call made
        while the queue is already being processed returns immediately; its
        drops are picked up by the running loop.
        """
        if self._processing:
            return []
        results: List[DropResult] = []
        self._processing = True
        try:
            while self._queue:
                results.append(self.drop(self._queue.popleft()))
        finally:
            self._processing = False
        return results

    # ------------------------------------------------------------------
    # Lifecycle and reporting
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Empty the board and start a fresh letter stream."""
        self.grid.reset()
        self.made_words = []
        self.drops = []
        self.score = 0
        self.drop_count = 0
        self._queue.clear()
        self.tile_generator.reset()
        self.current_letter = self.tile_generator.get_next_tile()

    def is_board_full(self) -> bool:
        return all(self.grid.lowest_empty_row(col) is None for col in range(self.grid.cols))

    def get_state(self) -> Dict:
        """Current session state as a plain dictionary."""
        return {
            "current_letter": self.current_letter,
            "upcoming": self.upcoming,
            "drops": self.drop_count,
            "words_made": len(self.made_words),
            "score": self.score,
            "tiles_on_board": self.grid.filled_count(),
            "board_full": self.is_board_full(),
        }

    def get_result(self) -> SessionResult:
        return SessionResult(
            config=self.config,
            drops=self.drops,
            made_words=self.made_words,
            score=self.score,
            board=self.grid.to_strings(),
            state=self.get_state(),
        )
