"""
Unit tests for Difficulty and presets.
"""
import pytest
from minesweep import (
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    Difficulty,
    DifficultyLevel,
    GameSession,
    InvalidDifficultyError,
    difficulty_from_name,
)


# ============================================================================
# Validation Tests
# ============================================================================

class TestDifficultyValidation:
    """Test difficulty validation."""

    def test_zero_width_raises_error(self) -> None:
        with pytest.raises(ValueError, match="dimensions must be positive"):
            Difficulty(0, 9, 10)

    def test_zero_height_raises_error(self) -> None:
        with pytest.raises(InvalidDifficultyError, match="dimensions must be positive"):
            Difficulty(9, 0, 10)

    def test_negative_mines_raises_error(self) -> None:
        with pytest.raises(InvalidDifficultyError, match="cannot be negative"):
            Difficulty(9, 9, -1)

    def test_mines_filling_board_raises_error(self) -> None:
        """mine_count must stay below the number of cells."""
        with pytest.raises(InvalidDifficultyError, match=r"Too many mines \(max 8\)"):
            Difficulty(3, 3, 9)

    def test_max_mines_is_valid(self) -> None:
        assert Difficulty(3, 3, 8).mine_count == 8

    def test_invalid_difficulty_never_builds_session(self) -> None:
        with pytest.raises(InvalidDifficultyError):
            GameSession(Difficulty.custom(2, 2, 4))

    def test_difficulty_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            BEGINNER.mine_count = 1


# ============================================================================
# Preset Tests
# ============================================================================

class TestPresets:
    """Test the standard levels."""

    @pytest.mark.parametrize(
        "difficulty, width, height, mines",
        [
            (BEGINNER, 9, 9, 10),
            (INTERMEDIATE, 16, 16, 40),
            (EXPERT, 30, 16, 99),
        ],
    )
    def test_preset_values(self, difficulty, width, height, mines) -> None:
        assert (difficulty.width, difficulty.height, difficulty.mine_count) == (
            width, height, mines,
        )

    def test_preset_lookup(self) -> None:
        assert Difficulty.preset(DifficultyLevel.EXPERT) is EXPERT

    def test_default_is_beginner(self) -> None:
        assert Difficulty() == BEGINNER
        assert Difficulty().level == DifficultyLevel.BEGINNER

    def test_custom_has_no_level(self) -> None:
        custom = Difficulty.custom(10, 10, 10)
        assert custom.level is None
        assert custom.is_custom is True

    def test_custom_matching_preset_is_that_preset(self) -> None:
        assert Difficulty.custom(16, 16, 40).level == DifficultyLevel.INTERMEDIATE

    @pytest.mark.parametrize("name", ["expert", "EXPERT", "  Expert "])
    def test_from_name(self, name: str) -> None:
        assert difficulty_from_name(name) == EXPERT

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(InvalidDifficultyError, match="Unknown difficulty"):
            difficulty_from_name("nightmare")


# ============================================================================
# Derived Value Tests
# ============================================================================

class TestDerivedValues:
    """Test identifiers, counts and serialization."""

    def test_cell_counts(self) -> None:
        assert EXPERT.cell_count == 480
        assert EXPERT.safe_cell_count == 381

    def test_identifiers(self) -> None:
        assert BEGINNER.identifier == "beginner"
        assert Difficulty(10, 8, 12).identifier == "custom-10x8-12"

    def test_str(self) -> None:
        assert str(INTERMEDIATE) == "Intermediate (w:16, h:16, m:40)"
        assert str(Difficulty(45, 24, 150)) == "Custom (w:45, h:24, m:150)"

    def test_dict_conversion(self) -> None:
        data = Difficulty(12, 7, 20).to_dict()
        assert data == {"width": 12, "height": 7, "mine_count": 20}
        assert Difficulty.from_dict(data) == Difficulty(12, 7, 20)

    def test_from_dict_validates(self) -> None:
        with pytest.raises(InvalidDifficultyError):
            Difficulty.from_dict({"width": 2, "height": 2, "mine_count": 10})
