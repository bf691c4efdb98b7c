"""
Score records for Minesweeper.

The engine never touches storage. It compares a finished game's time
against whatever a ScoreStore reports and proposes a ScoreRecord for
the caller to persist. HighScoreTable is an in-memory store that keeps
the best few times per difficulty and converts to and from plain data.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .difficulty import Difficulty


# ============================================================================
# Constants
# ============================================================================

MAX_HIGH_SCORES_PER_LEVEL = 3
MAX_NAME_LENGTH = 32


# ============================================================================
# Score Record
# ============================================================================

@dataclass(frozen=True)
class ScoreRecord:
    """
    Finishing time for a difficulty.

    Attributes:
        difficulty: Difficulty identifier (see Difficulty.identifier).
        best_time: Elapsed seconds.
        name: Player name, empty until the caller fills it in.
    """

    difficulty: str
    best_time: float
    name: str = ""

    def __post_init__(self) -> None:
        if self.best_time < 0:
            raise ValueError("Score time cannot be negative")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(f"Name too long (max {MAX_NAME_LENGTH} characters)")

    def with_name(self, name: str) -> "ScoreRecord":
        """Copy of this record under a player name."""
        return ScoreRecord(self.difficulty, self.best_time, name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "seconds": self.best_time}


# ============================================================================
# Score Store Interface
# ============================================================================

class ScoreStore(ABC):
    """
    Persistence collaborator contract.

    Implementations report the stored best time for a difficulty; the
    engine only reads through this interface.
    """

    @abstractmethod
    def best_time(self, difficulty: Difficulty) -> Optional[float]:
        """
        Get the stored best time.

        Args:
            difficulty: Difficulty to look up.

        Returns:
            Best time in seconds, or None if nothing is stored.
        """
        pass


def propose_score(
    difficulty: Difficulty,
    elapsed: float,
    store: Optional[ScoreStore] = None,
) -> Optional[ScoreRecord]:
    """
    Decide whether a winning time should be offered for storage.

    Args:
        difficulty: Difficulty of the won game.
        elapsed: Finishing time in seconds.
        store: Collaborator holding previous bests, if any.

    Returns:
        A candidate record if the time beats the stored best (or nothing
        is stored), otherwise None.
    """
    previous = store.best_time(difficulty) if store is not None else None
    if previous is not None and elapsed >= previous:
        return None
    return ScoreRecord(difficulty.identifier, elapsed)


# ============================================================================
# High Score Table
# ============================================================================

class HighScoreTable(ScoreStore):
    """In-memory best times, ranked per difficulty identifier."""

    def __init__(self, limit: int = MAX_HIGH_SCORES_PER_LEVEL) -> None:
        if limit < 1:
            raise ValueError("High score limit must be positive")
        self.limit = limit
        self._scores: Dict[str, List[ScoreRecord]] = {}

    def best_time(self, difficulty: Difficulty) -> Optional[float]:
        scores = self._scores.get(difficulty.identifier)
        if not scores:
            return None
        return scores[0].best_time

    def scores_for(self, difficulty: Difficulty) -> List[ScoreRecord]:
        """Ranked records for a difficulty, fastest first."""
        return list(self._scores.get(difficulty.identifier, []))

    def qualifies(self, record: ScoreRecord) -> bool:
        """Check if a record would enter the table."""
        scores = self._scores.get(record.difficulty, [])
        if len(scores) < self.limit:
            return True
        return record.best_time < scores[-1].best_time

    def insert(self, record: ScoreRecord) -> Optional[int]:
        """
        Insert a record into its difficulty's ranking.

        Equal times keep the earlier record ahead.

        Returns:
            Rank index of the inserted record, or None if it did not
            make the table.
        """
        if not self.qualifies(record):
            return None
        scores = self._scores.setdefault(record.difficulty, [])
        index = len(scores)
        for i, existing in enumerate(scores):
            if record.best_time < existing.best_time:
                index = i
                break
        scores.insert(index, record)
        del scores[self.limit:]
        return index

    def rename(self, difficulty: Difficulty, index: int, name: str) -> ScoreRecord:
        """Attach a player name to a ranked record."""
        scores = self._scores[difficulty.identifier]
        scores[index] = scores[index].with_name(name)
        return scores[index]

    def discard(self, difficulty: Difficulty, index: int) -> None:
        """Remove a ranked record."""
        del self._scores[difficulty.identifier][index]

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Convert to dictionary for serialization."""
        return {
            key: [record.to_dict() for record in records]
            for key, records in self._scores.items()
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, List[Dict[str, Any]]],
        limit: int = MAX_HIGH_SCORES_PER_LEVEL,
    ) -> "HighScoreTable":
        """
        Rebuild a table from serialized data.

        Entries are sorted by time and truncated to the table limit, so
        hand-edited or stale data still yields a valid ranking.
        """
        table = cls(limit)
        for key, entries in data.items():
            records = [
                ScoreRecord(key, float(entry["seconds"]), entry.get("name", ""))
                for entry in entries
            ]
            records.sort(key=lambda record: record.best_time)
            table._scores[key] = records[:limit]
        return table
