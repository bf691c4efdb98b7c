"""
Exceptions raised by the Minesweeper engine.

Normal game outcomes (hitting a mine, clearing the board) are never
reported through exceptions; they are state transitions on the session.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidDifficultyError(MinesweeperError, ValueError):
    """Difficulty parameters cannot describe a playable board."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, coord, height: int, width: int) -> None:
        super().__init__(
            f"Coordinate {coord} is outside a {height}x{width} board"
        )
        self.coord = coord


class MinesAlreadyPlacedError(MinesweeperError):
    """Mines were placed a second time on the same board."""


class GameOverError(MinesweeperError):
    """An action was attempted after the game was won or lost."""
