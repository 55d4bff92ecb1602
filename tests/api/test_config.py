"""Tests for configuration classes."""

import dataclasses
import os
from unittest.mock import patch

import pytest

from config import (
    AppConfig,
    CORSConfig,
    GameConfig,
    RateLimitConfig,
    ScoreConfig,
    SecurityConfig,
    _parse_cors_origins,
)


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_cors_default_origins(self):
        """Test that default CORS origins are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            config = CORSConfig()

            assert "http://localhost:8000" in config.allowed_origins

    def test_cors_parses_env_var(self):
        """Test that CORS origins are parsed from environment variable."""
        env_origins = "http://example.com,http://localhost:3000,http://app.test.com"
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            origins = _parse_cors_origins()

        assert origins == [
            "http://example.com",
            "http://localhost:3000",
            "http://app.test.com",
        ]

    def test_cors_parses_origins_with_whitespace(self):
        """Test that CORS origins handles whitespace correctly."""
        env_origins = "  http://example.com  ,  http://localhost:3000  , "
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            origins = _parse_cors_origins()

        assert origins == ["http://example.com", "http://localhost:3000"]

    def test_cors_defaults(self):
        """Test that credentials, methods and headers are open by default."""
        config = CORSConfig()

        assert config.allow_credentials is True
        assert "*" in config.allow_methods
        assert "*" in config.allow_headers


class TestRateLimitConfig:
    """Tests for RateLimitConfig class."""

    def test_rate_limit_defaults(self):
        """Test default rate limit values."""
        with patch.dict(os.environ, {}, clear=True):
            config = RateLimitConfig()

            assert config.enabled is True
            assert config.requests_per_minute == 60

    def test_rate_limit_from_env(self):
        """Test rate limit configuration from environment."""
        with patch.dict(
            os.environ,
            {"RATE_LIMIT_ENABLED": "false", "RATE_LIMIT_RPM": "120"},
        ):
            config = RateLimitConfig()

            assert config.enabled is False
            assert config.requests_per_minute == 120

    @pytest.mark.parametrize("value", ["FALSE", "0", "no"])
    def test_rate_limit_only_true_enables(self, value):
        """Only "true" (case insensitive) enables rate limiting."""
        with patch.dict(os.environ, {"RATE_LIMIT_ENABLED": value}):
            assert RateLimitConfig().enabled is False


class TestSecurityConfig:
    """Tests for SecurityConfig class."""

    def test_secret_key_auto_generates(self):
        """Test that secret key is auto-generated when not in env."""
        with patch.dict(os.environ, {}, clear=True):
            config = SecurityConfig()

            assert config.secret_key

    def test_secret_key_from_env(self):
        """Test that secret key is read from environment."""
        with patch.dict(os.environ, {"SECRET_KEY": "my-super-secret-key-12345"}):
            config = SecurityConfig()

            assert config.secret_key == "my-super-secret-key-12345"


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_config_defaults(self):
        """Test default session values."""
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

            assert config.starting_bankroll == 1000
            assert config.starting_bet == 50
            assert config.bet_step == 10
            assert config.reveal_delay == 0.45

    def test_game_config_from_env(self):
        with patch.dict(
            os.environ,
            {
                "BLACKJACK_BANKROLL": "250",
                "BLACKJACK_BET": "25",
                "BLACKJACK_REVEAL_DELAY": "0",
            },
        ):
            config = GameConfig()

            assert config.starting_bankroll == 250
            assert config.starting_bet == 25
            assert config.reveal_delay == 0.0

    def test_game_config_frozen(self):
        """Test that GameConfig is frozen (immutable)."""
        config = GameConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.starting_bet = 100


class TestScoreConfig:
    """Tests for ScoreConfig class."""

    def test_default_path_in_home(self):
        with patch.dict(os.environ, {"HOME": "/home/player"}, clear=True):
            config = ScoreConfig()

            assert config.path == os.path.join("/home/player", ".blackjack_highscores.txt")
            assert config.default_high_score == 500

    def test_path_from_env(self):
        with patch.dict(os.environ, {"BLACKJACK_SCORES_FILE": "/tmp/scores.txt"}):
            assert ScoreConfig().path == "/tmp/scores.txt"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_app_config_defaults(self):
        """Test default AppConfig values."""
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

            assert config.debug is False
            assert config.host == "0.0.0.0"
            assert config.port == 8000
            assert config.session_ttl == 3600

    def test_app_config_debug_from_env(self):
        """Test debug mode from environment."""
        with patch.dict(os.environ, {"DEBUG": "true"}):
            assert AppConfig().debug is True

    def test_app_config_has_nested_configs(self):
        """Test that AppConfig has nested configuration objects."""
        config = AppConfig()

        assert isinstance(config.game, GameConfig)
        assert isinstance(config.scores, ScoreConfig)
        assert isinstance(config.cors, CORSConfig)
        assert isinstance(config.rate_limit, RateLimitConfig)
        assert isinstance(config.security, SecurityConfig)
