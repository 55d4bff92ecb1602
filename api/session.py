"""Session management: signed session tokens and an in-memory table store."""

from datetime import datetime, timedelta
from uuid import uuid4

from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from blackjack.game import BlackjackGame
from blackjack.scores import FileHighScoreStore, HighScoreStore
from config import config


class SessionSigner:
    """Sign and verify session IDs using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the signer with a secret key."""
        self._secret_key = secret_key or config.security.secret_key
        self._serializer = URLSafeTimedSerializer(self._secret_key)

    def sign(self, session_id: str) -> str:
        """Create a signed token from a session ID."""
        return self._serializer.dumps(session_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Verify and extract session_id from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum age in seconds (defaults to session_ttl)

        Returns:
            The session ID if valid, None otherwise
        """
        max_age = max_age or config.session_ttl
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


# Global signer instance
_session_signer: SessionSigner | None = None


def get_session_signer() -> SessionSigner:
    """Get or create the session signer."""
    global _session_signer
    if _session_signer is None:
        _session_signer = SessionSigner()
    return _session_signer


class GameSessionStore:
    """In-memory store of live tables keyed by raw session ID."""

    def __init__(self) -> None:
        self._sessions: dict[str, tuple[BlackjackGame, datetime]] = {}

    async def get(self, session_id: str) -> BlackjackGame | None:
        """Get the table for a session, dropping it if expired."""
        if session_id not in self._sessions:
            return None

        game, expiry = self._sessions[session_id]
        if expiry < datetime.now():
            await self.delete(session_id)
            return None

        return game

    async def set(
        self,
        session_id: str,
        game: BlackjackGame,
        ttl: int | None = None,
    ) -> None:
        """Store a table and refresh its expiry."""
        ttl = ttl or config.session_ttl
        expiry = datetime.now() + timedelta(seconds=ttl)
        self._sessions[session_id] = (game, expiry)

    async def delete(self, session_id: str) -> None:
        """Delete session."""
        self._sessions.pop(session_id, None)

    async def exists(self, session_id: str) -> bool:
        """Check if session exists."""
        return await self.get(session_id) is not None

    async def cleanup_expired(self) -> int:
        """Remove expired sessions."""
        now = datetime.now()
        expired = [
            sid for sid, (_, expiry) in self._sessions.items() if expiry < now
        ]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    def create_session_id(self) -> str:
        """Create a new raw session ID."""
        return str(uuid4())


# Global store instances
_session_store: GameSessionStore | None = None
_score_store: HighScoreStore | None = None


async def get_session_store() -> GameSessionStore:
    """Get or create the session store."""
    global _session_store
    if _session_store is None:
        _session_store = GameSessionStore()
    return _session_store


def get_score_store() -> HighScoreStore:
    """Get or create the shared high score store."""
    global _score_store
    if _score_store is None:
        _score_store = FileHighScoreStore(
            config.scores.path,
            default_high_score=config.scores.default_high_score,
        )
        _score_store.open()
    return _score_store


def set_score_store(store: HighScoreStore | None) -> None:
    """Replace the shared high score store (None resets to the configured file)."""
    global _score_store
    _score_store = store


async def create_session() -> tuple[str, BlackjackGame]:
    """
    Open a new table with the configured session defaults.

    Returns:
        (signed token, table)
    """
    store = await get_session_store()
    await store.cleanup_expired()
    session_id = store.create_session_id()
    game = BlackjackGame(
        starting_bankroll=config.game.starting_bankroll,
        starting_bet=config.game.starting_bet,
        scores=get_score_store(),
    )
    game.start_session()
    await store.set(session_id, game)
    return get_session_signer().sign(session_id), game


def extract_session_id(token: str) -> str | None:
    """
    Extract the raw session ID from a signed token.

    Args:
        token: The signed session token

    Returns:
        The raw session ID if valid, None otherwise
    """
    signer = get_session_signer()
    return signer.unsign(token)
