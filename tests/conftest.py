"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweep import Board, Cell, Difficulty, GameSession, HighScoreTable


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with a single mine in the corner."""
    board = Board(Difficulty(3, 3, 1))
    board.lay_mines([(2, 2)])
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(Difficulty(5, 5, 0))


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board split by a column of mines.

        0 1 2 3 4
    0 [ . 2 * 2 . ]
    1 [ . 3 * 3 . ]
    2 [ . 3 * 3 . ]
    3 [ . 3 * 3 . ]
    4 [ . 2 * 2 . ]

    Cells marked "." have no adjacent mines.
    """
    board = Board(Difficulty(5, 5, 5))
    board.lay_mines([(row, 2) for row in range(5)])
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def seeded_session() -> GameSession:
    """Create a beginner session with reproducible mine placement."""
    return GameSession(Difficulty(9, 9, 10), seed=1234)


@pytest.fixture
def corner_mine_session() -> GameSession:
    """Create a 3x3 session with one mine at (2, 2)."""
    return GameSession.from_layout(Difficulty(3, 3, 1), [(2, 2)])


@pytest.fixture
def chord_session() -> GameSession:
    """
    Create a 3x3 session whose center shows a "2".

        0 1 2
    0 [ * 2 * ]
    1 [ 1 2 1 ]
    2 [ . . . ]
    """
    return GameSession.from_layout(Difficulty(3, 3, 2), [(0, 0), (0, 2)])


@pytest.fixture
def score_table() -> HighScoreTable:
    """Create an empty high score table."""
    return HighScoreTable()
