"""
Game session for Minesweeper.

Wraps a Board with the game lifecycle (not started, playing, won, lost),
the elapsed-time accumulator and flag counters. The session is the only
thing that mutates its board.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

import numpy as np

from .board import Board
from .cell import Coordinate, FlagOutcome, RevealOutcome
from .difficulty import Difficulty
from .errors import GameOverError
from .reveal import RevealResult
from .scores import ScoreRecord, ScoreStore, propose_score
from .snapshot import SessionSnapshot, take_snapshot

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class FlagResult:
    """
    Outcome of a flag toggle.

    Attributes:
        outcome: New flag state, or REJECTED for a revealed cell.
        coord: Cell that was targeted.
        flags_placed: Flags on the board after the action.
        remaining_flags: Mines minus flags (negative when over-flagged).
    """

    outcome: FlagOutcome
    coord: Coordinate
    flags_placed: int
    remaining_flags: int


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper from first move to win or loss.

    Status transitions:
        NOT_STARTED -> PLAYING on the first reveal or flag
        PLAYING -> LOST when a mine is revealed
        PLAYING -> WON when every safe cell is revealed
    WON and LOST are terminal; start a new session for a new game.
    """

    def __init__(
        self,
        difficulty: Optional[Difficulty] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        score_store: Optional[ScoreStore] = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            difficulty: Board parameters (default: beginner).
            seed: Seed for mine placement, ignored if rng is given.
            rng: Random source for mine placement.
            score_store: Collaborator consulted for the best time on a win.
        """
        self.difficulty = difficulty or Difficulty()
        self.board = Board(self.difficulty)
        self.score_store = score_store
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._status = GameStatus.NOT_STARTED
        self._elapsed_time = 0.0
        self._detonated_at: Optional[Coordinate] = None
        self._score_candidate: Optional[ScoreRecord] = None

    @classmethod
    def from_layout(
        cls,
        difficulty: Difficulty,
        mines: Iterable[Coordinate],
        score_store: Optional[ScoreStore] = None,
    ) -> "GameSession":
        """
        Create a session whose mines are already laid out.

        Args:
            difficulty: Board parameters.
            mines: Exactly difficulty.mine_count mine positions.
            score_store: Collaborator consulted for the best time on a win.
        """
        session = cls(difficulty, score_store=score_store)
        session.board.lay_mines(mines)
        return session

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, coord: Coordinate) -> RevealResult:
        """
        Reveal a cell.

        Args:
            coord: (row, col) to reveal.

        Returns:
            Result describing the outcome and newly revealed cells.

        Raises:
            GameOverError: If the game has already ended.
            OutOfBoundsError: If the coordinate is off the board.
        """
        self._require_active()
        self.board.cell_at(coord)  # bounds check before any state change
        self._start()
        result = self.board.reveal(coord, self._rng)
        self._apply(result, coord)
        return result

    def chord(self, coord: Coordinate) -> RevealResult:
        """
        Reveal the unflagged neighbors of a satisfied numbered cell.

        Raises:
            GameOverError: If the game has already ended.
            OutOfBoundsError: If the coordinate is off the board.
        """
        self._require_active()
        result = self.board.chord(coord)
        self._apply(result, coord)
        return result

    def toggle_flag(self, coord: Coordinate) -> FlagResult:
        """
        Flag or unflag a hidden cell.

        Flagging never places mines, even before the first reveal.

        Raises:
            GameOverError: If the game has already ended.
            OutOfBoundsError: If the coordinate is off the board.
        """
        self._require_active()
        self.board.cell_at(coord)  # bounds check before any state change
        self._start()
        outcome = self.board.toggle_flag(coord)
        return FlagResult(outcome, coord, self.flags_placed, self.remaining_flags)

    def tick(self, delta_time: float) -> float:
        """
        Advance the game clock.

        Time only accumulates while the game is being played.

        Args:
            delta_time: Seconds since the previous tick.

        Returns:
            Total elapsed seconds.
        """
        if delta_time < 0:
            raise ValueError("Time delta cannot be negative")
        if self._status == GameStatus.PLAYING:
            self._elapsed_time += delta_time
        return self._elapsed_time

    def snapshot(self) -> SessionSnapshot:
        """Get a read-only view of every cell and the counters."""
        return take_snapshot(self)

    # ========================================================================
    # Lifecycle (Low-level)
    # ========================================================================

    def _require_active(self) -> None:
        if self.is_over:
            raise GameOverError(f"Game is over ({self._status.name})")

    def _start(self) -> None:
        if self._status == GameStatus.NOT_STARTED:
            self._status = GameStatus.PLAYING
            self._elapsed_time = 0.0

    def _apply(self, result: RevealResult, coord: Coordinate) -> None:
        """Update status after a reveal or chord."""
        if result.outcome == RevealOutcome.REVEALED_MINE:
            self._lose(result.cells_revealed[-1] if result.cells_revealed else coord)
        elif self.board.is_fully_cleared():
            self._win()

    def _lose(self, detonated_at: Coordinate) -> None:
        self._status = GameStatus.LOST
        self._detonated_at = detonated_at
        self.board.reveal_all_mines()
        logger.info(
            "Game lost at %s after %.1fs on %s",
            detonated_at, self._elapsed_time, self.difficulty,
        )

    def _win(self) -> None:
        self._status = GameStatus.WON
        self._score_candidate = propose_score(
            self.difficulty, self._elapsed_time, self.score_store
        )
        logger.info(
            "Game won in %.1fs on %s", self._elapsed_time, self.difficulty
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        return self._status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def is_over(self) -> bool:
        """Check if the game has reached a terminal state."""
        return self._status in (GameStatus.WON, GameStatus.LOST)

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def flags_placed(self) -> int:
        return self.board.flags_placed

    @property
    def remaining_flags(self) -> int:
        """Mines not yet accounted for by flags."""
        return self.difficulty.mine_count - self.board.flags_placed

    @property
    def detonated_at(self) -> Optional[Coordinate]:
        """Mine that ended a lost game."""
        return self._detonated_at

    @property
    def score_candidate(self) -> Optional[ScoreRecord]:
        """Record proposed for storage after a qualifying win."""
        return self._score_candidate
