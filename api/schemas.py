"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# Game schemas
class BetRequest(BaseModel):
    """Request to raise or lower the wager."""

    delta: int = Field(..., description="Chips to add (negative to remove)")


class ActionRequest(BaseModel):
    """Request for player action."""

    action: Literal["hit", "stand", "double"]


class SessionResponse(BaseModel):
    """A newly opened table."""

    session_id: str


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    rank: str
    suit: str
    value: int


class HandResponse(BaseModel):
    """Hand representation; ``value`` is None while a card is face down."""

    cards: list[CardResponse]
    hidden_cards: int = 0
    value: int | None
    is_soft: bool
    is_blackjack: bool
    is_bust: bool


class GameStateResponse(BaseModel):
    """Current table state."""

    phase: str
    bankroll: int
    bet: int
    high_score: int
    player_hand: HandResponse
    dealer_hand: HandResponse
    dealer_showing: CardResponse | None
    last_outcome: str
    last_payout: int
    dealer_should_hit: bool
    can_hit: bool
    can_stand: bool
    can_double: bool


# Score schemas
class HighScoreResponse(BaseModel):
    """Best recorded bankroll."""

    high_score: int


class ScoreEntryResponse(BaseModel):
    """One recorded bankroll."""

    score: int
    recorded_at: datetime
