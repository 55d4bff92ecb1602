"""Blackjack table engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Suit
from blackjack.hand import Hand, settle_round
from blackjack.scores import FileHighScoreStore, HighScoreStore, InMemoryHighScoreStore

__all__ = [
    "Card",
    "Deck",
    "Suit",
    "Hand",
    "settle_round",
    "HighScoreStore",
    "InMemoryHighScoreStore",
    "FileHighScoreStore",
]
