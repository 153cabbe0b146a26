"""
Pydantic models for the game session layer.

Configuration, per-drop results and the serializable session summary. The
engine's own records (Match, CascadeStep) live in ``wordfall.engine.models``.
"""

from typing import Annotated, List, Dict, Optional, Literal
from pydantic import BaseModel, Field

from ..engine.models import CascadeStep, Direction, Position


DropRejection = Literal["column_full"]
Tile = Annotated[str, Field(pattern=r"^[A-Za-z]$")]


class GameConfig(BaseModel):
    """Configuration for a game session."""
    rows: int = Field(default=6, ge=1)
    cols: int = Field(default=7, ge=1)
    min_word_length: int = Field(default=3, ge=1)
    seed: Optional[int] = None
    tiles: Optional[List[Tile]] = None  # Fixed alphabet; default is weighted A-Z
    preview_count: int = Field(default=3, ge=1)
    word_lists: List[str] = Field(default_factory=list)  # CSV files with word,definition
    words: List[str] = Field(default_factory=list)  # Extra words without definitions
    drops: List[int] = Field(default_factory=list)  # Scripted columns for the CLI


class MadeWord(BaseModel):
    """A word cleared from the board, as shown in the made-words list."""
    word: str
    definition: str
    positions: List[Position] = Field(default_factory=list)
    direction: Direction
    drop_number: int
    cascade_iteration: int


class DropResult(BaseModel):
    """Outcome of dropping one tile."""
    column: int
    letter: str
    accepted: bool = True
    reason: Optional[DropRejection] = None
    landed_at: Optional[Position] = None
    steps: List[CascadeStep] = Field(default_factory=list)
    points: int = 0

    @property
    def words(self) -> List[str]:
        return [word for step in self.steps for word in step.words]


class SessionResult(BaseModel):
    """Serializable summary of a session."""
    config: GameConfig
    drops: List[DropResult] = Field(default_factory=list)
    made_words: List[MadeWord] = Field(default_factory=list)
    score: int = 0
    board: List[str] = Field(default_factory=list)
    state: Dict = Field(default_factory=dict)
