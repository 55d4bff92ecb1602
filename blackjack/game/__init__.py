"""Round engine and state management."""

from blackjack.game.events import GameEvent, EventType, EventEmitter
from blackjack.game.state import Phase
from blackjack.game.engine import BlackjackGame, MIN_BET

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "Phase",
    "BlackjackGame",
    "MIN_BET",
]
