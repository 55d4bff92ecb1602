"""Pytest fixtures for blackjack table tests."""

import pytest
from random import Random

from api.session import set_score_store
from blackjack.cards import Card, Deck, Suit, full_deck
from blackjack.game import BlackjackGame
from blackjack.hand import Hand
from blackjack.scores import InMemoryHighScoreStore


class StackedDeck(Deck):
    """Deck whose every shuffle puts the given cards on top, in order."""

    def __init__(self, order: list[Card]) -> None:
        self._order = list(order)
        super().__init__(rng=Random(0))

    def shuffle(self) -> None:
        self._top = 0
        rest = [c for c in full_deck() if c not in self._order]
        self._cards = self._order + rest


def parse_cards(codes: str) -> list[Card]:
    """Parse space-separated card codes like '10S AH KC'."""
    return [Card.from_string(code) for code in codes.split()]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def stacked_deck():
    """Factory for decks dealing a fixed sequence: P, D, P, D, then hits."""
    def _make(codes: str) -> StackedDeck:
        return StackedDeck(parse_cards(codes))
    return _make


@pytest.fixture
def make_game(stacked_deck):
    """Factory for a table dealing a fixed sequence of cards."""
    def _make(codes: str, bankroll: int = 1000, bet: int = 50, scores=None) -> BlackjackGame:
        return BlackjackGame(
            starting_bankroll=bankroll,
            starting_bet=bet,
            deck=stacked_deck(codes),
            scores=scores,
        )
    return _make


@pytest.fixture
def game(rng):
    """A new table with a seeded deck."""
    return BlackjackGame(rng=rng)


@pytest.fixture
def hand_of():
    """Factory building a hand from card codes."""
    def _make(codes: str) -> Hand:
        return Hand(parse_cards(codes))
    return _make


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return Hand([Card(1, Suit.SPADES), Card(13, Suit.HEARTS)])


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand([Card(1, Suit.SPADES), Card(6, Suit.HEARTS)])


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return Hand([Card(10, Suit.SPADES), Card(6, Suit.HEARTS)])


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand([Card(10, Suit.SPADES), Card(6, Suit.HEARTS), Card(13, Suit.CLUBS)])


@pytest.fixture
def memory_scores():
    """Install an in-memory score store for the API."""
    store = InMemoryHighScoreStore()
    set_score_store(store)
    yield store
    set_score_store(None)
