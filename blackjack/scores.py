"""High score storage - the bankroll leaderboard behind the HUD."""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

logger = logging.getLogger(__name__)

# Shown before any score has been recorded
DEFAULT_HIGH_SCORE = 500

DELIMITER = "|"


@dataclass(frozen=True)
class ScoreEntry:
    """A recorded bankroll."""

    score: int
    recorded_at: datetime = field(default_factory=datetime.now)

    def to_line(self) -> str:
        """Serialize as a ``score|timestamp`` line."""
        return f"{self.score}{DELIMITER}{self.recorded_at.isoformat()}"

    @classmethod
    def from_line(cls, line: str) -> "ScoreEntry":
        """Parse a ``score|timestamp`` line."""
        parts = line.strip().split(DELIMITER)
        if len(parts) != 2:
            raise ValueError(f"Malformed score line: {line!r}")
        return cls(score=int(parts[0]), recorded_at=datetime.fromisoformat(parts[1]))


class HighScoreStore(ABC):
    """Abstract high score store.

    Lifecycle: ``open()`` at session start, ``record()`` after every
    settlement.
    """

    def __init__(self, default_high_score: int = DEFAULT_HIGH_SCORE) -> None:
        self.default_high_score = default_high_score
        self._entries: list[ScoreEntry] = []

    @abstractmethod
    def open(self) -> None:
        """Load previously recorded scores."""
        ...

    @abstractmethod
    def record(self, score: int) -> ScoreEntry:
        """Record a bankroll value as a score."""
        ...

    def highest(self) -> int:
        """Return the best recorded score, or the default if none."""
        if not self._entries:
            return self.default_high_score
        return max(entry.score for entry in self._entries)

    def scores(self) -> list[ScoreEntry]:
        """Return recorded scores, best first."""
        return sorted(self._entries, key=lambda e: e.score, reverse=True)


class InMemoryHighScoreStore(HighScoreStore):
    """Process-local score store."""

    def open(self) -> None:
        """Nothing to load."""

    def record(self, score: int) -> ScoreEntry:
        entry = ScoreEntry(score)
        self._entries.append(entry)
        return entry


class FileHighScoreStore(HighScoreStore):
    """Score store backed by an append-only text file.

    Each line holds ``score|ISO-8601 timestamp``.
    """

    def __init__(
        self,
        path: str | None = None,
        default_high_score: int = DEFAULT_HIGH_SCORE,
    ) -> None:
        """
        Initialize the store.

        Args:
            path: Score file. Defaults to ~/.blackjack_highscores.txt
            default_high_score: Value reported while no score exists
        """
        super().__init__(default_high_score)
        if path is None:
            path = os.path.join(os.path.expanduser("~"), ".blackjack_highscores.txt")
        self.path = path

    def open(self) -> None:
        """Load scores from file; a missing file means no scores."""
        self._entries = []
        if not os.path.exists(self.path):
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except OSError as exc:
            logger.warning("Could not read high scores from %s: %s", self.path, exc)
            return

        for line in lines:
            if not line.strip():
                continue
            try:
                self._entries.append(ScoreEntry.from_line(line))
            except ValueError:
                logger.warning("Skipping malformed high score line: %r", line)

        self._entries.sort(key=lambda e: e.score, reverse=True)

    def record(self, score: int) -> ScoreEntry:
        """Append a score to the file; it is kept in memory even if the write fails."""
        entry = ScoreEntry(score)
        self._entries.append(entry)
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(entry.to_line() + "\n")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
        return entry
