"""Falling-letter word puzzle: grid word search and cascade resolution."""

from .engine import CascadeResolver, CascadeStep, Grid, Match, Position
from .data import WordDictionary, load_word_lists
from .game import GameConfig, GameSession, TileGenerator

__all__ = [
    "CascadeResolver",
    "CascadeStep",
    "Grid",
    "Match",
    "Position",
    "WordDictionary",
    "load_word_lists",
    "GameConfig",
    "GameSession",
    "TileGenerator",
]

__version__ = "0.1.0"
