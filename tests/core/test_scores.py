"""Tests for high score storage."""

import logging
from datetime import datetime

import pytest

from blackjack.scores import (
    DEFAULT_HIGH_SCORE,
    FileHighScoreStore,
    InMemoryHighScoreStore,
    ScoreEntry,
)


class TestScoreEntry:
    """Tests for the score line format."""

    def test_to_line(self):
        entry = ScoreEntry(1200, datetime(2024, 5, 1, 12, 30))
        assert entry.to_line() == "1200|2024-05-01T12:30:00"

    def test_from_line(self):
        entry = ScoreEntry.from_line("875|2024-05-01T12:30:00\n")
        assert entry.score == 875
        assert entry.recorded_at == datetime(2024, 5, 1, 12, 30)

    @pytest.mark.parametrize("line", ["", "1200", "abc|2024-05-01", "1|2|3", "5|not-a-date"])
    def test_from_line_malformed(self, line):
        with pytest.raises(ValueError):
            ScoreEntry.from_line(line)


class TestInMemoryStore:
    """Tests for the process-local store."""

    def test_default_high_score(self):
        store = InMemoryHighScoreStore()
        store.open()
        assert store.highest() == DEFAULT_HIGH_SCORE

    def test_custom_default(self):
        assert InMemoryHighScoreStore(default_high_score=0).highest() == 0

    def test_highest_and_order(self):
        store = InMemoryHighScoreStore()
        for score in (300, 1200, 50):
            store.record(score)

        assert store.highest() == 1200
        assert [e.score for e in store.scores()] == [1200, 300, 50]

    def test_recorded_low_score_beats_default(self):
        # Once anything is recorded the default no longer applies
        store = InMemoryHighScoreStore()
        store.record(40)
        assert store.highest() == 40


class TestFileStore:
    """Tests for the file-backed store."""

    def test_missing_file_means_no_scores(self, tmp_path):
        store = FileHighScoreStore(str(tmp_path / "scores.txt"))
        store.open()

        assert store.highest() == DEFAULT_HIGH_SCORE
        assert store.scores() == []

    def test_record_then_reopen(self, tmp_path):
        path = tmp_path / "scores.txt"
        store = FileHighScoreStore(str(path))
        store.open()
        store.record(1100)
        store.record(950)

        reopened = FileHighScoreStore(str(path))
        reopened.open()

        assert reopened.highest() == 1100
        assert [e.score for e in reopened.scores()] == [1100, 950]
        assert len(path.read_text(encoding="utf-8").splitlines()) == 2

    def test_malformed_lines_skipped(self, tmp_path, caplog):
        path = tmp_path / "scores.txt"
        path.write_text(
            "700|2024-01-01T00:00:00\n"
            "garbage\n"
            "\n"
            "1500|2024-01-02T00:00:00\n",
            encoding="utf-8",
        )
        store = FileHighScoreStore(str(path))

        with caplog.at_level(logging.WARNING, logger="blackjack.scores"):
            store.open()

        assert [e.score for e in store.scores()] == [1500, 700]
        assert "malformed" in caplog.text

    def test_unreadable_path_logs_and_continues(self, tmp_path, caplog):
        # A directory can be neither read nor appended to as a file
        store = FileHighScoreStore(str(tmp_path))

        with caplog.at_level(logging.WARNING, logger="blackjack.scores"):
            store.open()
            entry = store.record(800)

        assert entry.score == 800
        assert store.highest() == 800
        assert "Could not read" in caplog.text
        assert "Could not save" in caplog.text

    def test_reopen_replaces_entries(self, tmp_path):
        path = tmp_path / "scores.txt"
        store = FileHighScoreStore(str(path))
        store.open()
        store.record(600)

        path.unlink()
        store.open()

        assert store.scores() == []

    def test_default_path_in_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        store = FileHighScoreStore()
        assert store.path == str(tmp_path / ".blackjack_highscores.txt")
