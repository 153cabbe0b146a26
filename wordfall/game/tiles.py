import random
from typing import Callable, Dict, List, Optional, Sequence


# Letter weights for the default tile stream, roughly English letter frequency
TILE_DISTRIBUTION: Dict[str, int] = {
    "A": 13, "B": 3, "C": 3, "D": 6, "E": 18, "F": 3, "G": 4,
    "H": 3, "I": 12, "J": 2, "K": 2, "L": 5, "M": 3, "N": 8,
    "O": 11, "P": 3, "Q": 2, "R": 9, "S": 6, "T": 9, "U": 6,
    "V": 3, "W": 3, "X": 2, "Y": 3, "Z": 2
}

TileObserver = Callable[[List[str]], None]


class TileGenerator:
    """
    Endless stream of letters with a short look-ahead.

    Observers are called with the new upcoming letters every time a tile is
    taken with :meth:`get_next_tile`.

    Attributes:
        tiles: Optional fixed alphabet drawn from uniformly
        seed: Optional random seed for reproducibility
        preview_count: Number of upcoming letters kept ready
    """

    def __init__(
        self,
        tiles: Optional[Sequence[str]] = None,
        seed: Optional[int] = None,
        preview_count: int = 3,
    ) -> None:
        if preview_count < 1:
            raise ValueError(f"preview_count must be at least 1, got {preview_count}")
        if tiles is not None and not tiles:
            raise ValueError("tiles must not be empty")
        for tile in tiles or []:
            if len(tile) != 1 or not (tile.isascii() and tile.isalpha()):
                raise ValueError(f"Each tile must be a single letter, got {tile!r}")
        self.tiles = [t.upper() for t in tiles] if tiles else None
        self.seed = seed
        self.preview_count = preview_count
        self._observers: List[TileObserver] = []
        self._rng = random.Random(seed)
        self._upcoming: List[str] = []
        self._fill()

    def _draw(self) -> str:
        if self.tiles:
            return self._rng.choice(self.tiles)
        letters = list(TILE_DISTRIBUTION)
        weights = list(TILE_DISTRIBUTION.values())
        return self._rng.choices(letters, weights=weights)[0]

    def _fill(self) -> None:
        while len(self._upcoming) < self.preview_count:
            self._upcoming.append(self._draw())

    def peek_upcoming(self, n: Optional[int] = None) -> List[str]:
        """The next ``n`` letters (default: the whole preview), without consuming them."""
        n = self.preview_count if n is None else n
        if n < 0:
            raise ValueError(f"n must not be negative, got {n}")
        while len(self._upcoming) < n:
            self._upcoming.append(self._draw())
        return self._upcoming[:n]

    def get_next_tile(self) -> str:
        """Take the next letter and notify observers of the new preview."""
        tile = self._upcoming.pop(0)
        self._fill()
        upcoming = self.peek_upcoming()
        for observer in list(self._observers):
            observer(upcoming)
        return tile

    def add_observer(self, observer: TileObserver) -> None:
        self._observers.append(observer)

    def clear_observers(self) -> None:
        self._observers.clear()

    def reset(self) -> None:
        """Reseed and refill the preview. Observers are not notified."""
        self._rng = random.Random(self.seed)
        self._upcoming = []
        self._fill()
