"""Configuration management with environment variable support."""

import os
import secrets
from dataclasses import dataclass, field


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _default_scores_path() -> str:
    """Resolve the high score file from BLACKJACK_SCORES_FILE or the home directory."""
    path = os.getenv("BLACKJACK_SCORES_FILE")
    if path:
        return path
    return os.path.join(os.path.expanduser("~"), ".blackjack_highscores.txt")


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )


@dataclass(frozen=True)
class SecurityConfig:
    """Security configuration."""

    secret_key: str = field(
        default_factory=lambda: os.getenv("SECRET_KEY", secrets.token_urlsafe(32))
    )


@dataclass(frozen=True)
class GameConfig:
    """Session defaults. House rules are fixed in the engine."""

    starting_bankroll: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_BANKROLL", "1000"))
    )
    starting_bet: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_BET", "50"))
    )
    bet_step: int = 10
    # Seconds between paced card reveals in the table UI
    reveal_delay: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_REVEAL_DELAY", "0.45"))
    )


@dataclass(frozen=True)
class ScoreConfig:
    """High score persistence configuration."""

    path: str = field(default_factory=_default_scores_path)
    default_high_score: int = 500


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    session_ttl: int = 3600  # Session timeout in seconds

    game: GameConfig = field(default_factory=GameConfig)
    scores: ScoreConfig = field(default_factory=ScoreConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)


# Global configuration instance
config = AppConfig()
