"""
Call contract for presentation layers.

Thin module-level functions over GameSession, so a caller can drive a
game without depending on the session's method names.
"""
from typing import Optional

import numpy as np

from .cell import Coordinate
from .difficulty import Difficulty
from .reveal import RevealResult
from .scores import ScoreStore
from .session import FlagResult, GameSession, GameStatus
from .snapshot import SessionSnapshot


def new_game(
    difficulty: Difficulty,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    score_store: Optional[ScoreStore] = None,
) -> GameSession:
    """Start a fresh game; mines are placed on the first reveal."""
    return GameSession(difficulty, seed=seed, rng=rng, score_store=score_store)


def reveal(session: GameSession, coord: Coordinate) -> RevealResult:
    return session.reveal(coord)


def chord(session: GameSession, coord: Coordinate) -> RevealResult:
    return session.chord(coord)


def toggle_flag(session: GameSession, coord: Coordinate) -> FlagResult:
    return session.toggle_flag(coord)


def tick(session: GameSession, delta_time: float) -> float:
    """Advance elapsed time while the game is being played."""
    return session.tick(delta_time)


def status(session: GameSession) -> GameStatus:
    return session.status


def snapshot(session: GameSession) -> SessionSnapshot:
    return session.snapshot()
