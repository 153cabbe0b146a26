"""Game session layer for wordfall."""

from .models import GameConfig, MadeWord, DropResult, SessionResult
from .tiles import TileGenerator, TILE_DISTRIBUTION
from .session import GameSession

__all__ = [
    "GameConfig",
    "MadeWord",
    "DropResult",
    "SessionResult",
    "TileGenerator",
    "TILE_DISTRIBUTION",
    "GameSession",
]
