"""
Minesweeper game engine.

Provides the board state machine: deferred mine placement, flood-fill
reveals, win/loss detection and per-game session state.
"""
from .cell import Cell, CellState, Coordinate, FlagOutcome, RevealOutcome
from .board import Board
from .difficulty import (
    Difficulty,
    DifficultyLevel,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    difficulty_from_name,
)
from .errors import (
    MinesweeperError,
    InvalidDifficultyError,
    OutOfBoundsError,
    MinesAlreadyPlacedError,
    GameOverError,
)
from .reveal import RevealResult
from .scores import HighScoreTable, ScoreRecord, ScoreStore, propose_score
from .session import FlagResult, GameSession, GameStatus
from .snapshot import CellView, SessionSnapshot
from .api import new_game
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Coordinate",
    "FlagOutcome",
    "RevealOutcome",
    "Board",
    "Difficulty",
    "DifficultyLevel",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "difficulty_from_name",
    "MinesweeperError",
    "InvalidDifficultyError",
    "OutOfBoundsError",
    "MinesAlreadyPlacedError",
    "GameOverError",
    "RevealResult",
    "HighScoreTable",
    "ScoreRecord",
    "ScoreStore",
    "propose_score",
    "FlagResult",
    "GameSession",
    "GameStatus",
    "CellView",
    "SessionSnapshot",
    "new_game",
    "MinesweeperEnv",
]
