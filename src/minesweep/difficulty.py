"""
Difficulty module for Minesweeper.

Describes board dimensions and mine count, along with the standard
preset levels.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidDifficultyError


# ============================================================================
# Constants
# ============================================================================

class DifficultyLevel(Enum):
    """Named preset levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


# ============================================================================
# Difficulty Data Class
# ============================================================================

@dataclass(frozen=True)
class Difficulty:
    """
    Dimensions and mine count of a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidDifficultyError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidDifficultyError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.mine_count > max_mines:
            raise InvalidDifficultyError(f"Too many mines (max {max_mines})")

    @classmethod
    def custom(cls, width: int, height: int, mine_count: int) -> "Difficulty":
        """Build a caller-defined difficulty."""
        return cls(width=width, height=height, mine_count=mine_count)

    @classmethod
    def preset(cls, level: DifficultyLevel) -> "Difficulty":
        """Get the difficulty for a preset level."""
        return PRESETS[level]

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cell_count(self) -> int:
        """Number of cells without a mine."""
        return self.cell_count - self.mine_count

    @property
    def level(self) -> Optional[DifficultyLevel]:
        """Preset level matching these parameters, or None if custom."""
        for level, difficulty in PRESETS.items():
            if difficulty == self:
                return level
        return None

    @property
    def is_custom(self) -> bool:
        """Check if this difficulty is not one of the presets."""
        return self.level is None

    @property
    def identifier(self) -> str:
        """Stable key used for score records."""
        level = self.level
        if level is not None:
            return level.value
        return f"custom-{self.width}x{self.height}-{self.mine_count}"

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "width": self.width,
            "height": self.height,
            "mine_count": self.mine_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Difficulty":
        """Rebuild a difficulty from serialized data."""
        return cls(
            width=int(data["width"]),
            height=int(data["height"]),
            mine_count=int(data["mine_count"]),
        )

    def __str__(self) -> str:
        name = "Custom" if self.is_custom else self.level.name.capitalize()
        return f"{name} (w:{self.width}, h:{self.height}, m:{self.mine_count})"


# Preset difficulty levels
BEGINNER = Difficulty(9, 9, 10)
INTERMEDIATE = Difficulty(16, 16, 40)
EXPERT = Difficulty(30, 16, 99)

PRESETS: Dict[DifficultyLevel, Difficulty] = {
    DifficultyLevel.BEGINNER: BEGINNER,
    DifficultyLevel.INTERMEDIATE: INTERMEDIATE,
    DifficultyLevel.EXPERT: EXPERT,
}


def difficulty_from_name(name: str) -> Difficulty:
    """
    Resolve a preset by name.

    Args:
        name: Level name, case-insensitive (e.g. "beginner").

    Returns:
        The preset difficulty.

    Raises:
        InvalidDifficultyError: If no preset has that name.
    """
    try:
        level = DifficultyLevel(name.strip().lower())
    except ValueError:
        known = ", ".join(level.value for level in DifficultyLevel)
        raise InvalidDifficultyError(
            f"Unknown difficulty '{name}' (expected one of: {known})"
        ) from None
    return PRESETS[level]
