"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def is_red(self) -> bool:
        """Check if this suit is printed in red."""
        return self in (Suit.DIAMONDS, Suit.HEARTS)


ACE = 1
JACK = 11
QUEEN = 12
KING = 13

RANK_LABELS = {ACE: "A", JACK: "J", QUEEN: "Q", KING: "K"}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card.

    Ranks run 1..13 where 1 is the Ace and 11/12/13 are Jack/Queen/King.
    """

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if not ACE <= self.rank <= KING:
            raise ValueError(f"Invalid rank: {self.rank} (must be 1..13)")

    def __str__(self) -> str:
        return f"{self.label}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.label}, {self.suit.name})"

    @property
    def label(self) -> str:
        """Return the short rank text ("A", "2".."10", "J", "Q", "K")."""
        return RANK_LABELS.get(self.rank, str(self.rank))

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank == ACE

    @property
    def is_face_card(self) -> bool:
        """Check if this card is a Jack, Queen or King."""
        return self.rank >= JACK

    @property
    def is_ten_value(self) -> bool:
        """Check if this card counts as 10."""
        return self.rank >= 10

    @property
    def face_value(self) -> int:
        """Return the rank capped at 10 (an Ace is 1 here)."""
        return min(self.rank, 10)

    @property
    def value(self) -> int:
        """Return the blackjack point value with an Ace counted as 11."""
        if self.is_ace:
            return 11
        return self.face_value

    @property
    def hard_value(self) -> int:
        """Return the blackjack point value with an Ace counted as 1."""
        return self.face_value

    @property
    def display_value(self) -> str:
        """Return the value as shown to a player."""
        if self.is_ace:
            return "1/11"
        return str(self.face_value)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(n): n for n in range(2, 11)}
        rank_map.update({"T": 10, "J": JACK, "Q": QUEEN, "K": KING, "A": ACE})

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def full_deck() -> list[Card]:
    """Return the 52 canonical cards in suit-then-rank order."""
    return [Card(rank, suit) for suit in Suit for rank in range(ACE, KING + 1)]


class Deck:
    """A single 52-card deck with a draw cursor.

    Drawing past the last card reshuffles all 52 cards first, so ``draw``
    never fails.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize and shuffle a new deck."""
        self._rng = rng or Random()
        self._cards: list[Card] = full_deck()
        self._top = 0
        self.shuffle()

    def shuffle(self) -> None:
        """Return every card to the deck and apply a Fisher-Yates shuffle."""
        self._top = 0
        for i in range(len(self._cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def draw(self) -> Card:
        """Draw the next card, reshuffling first if the deck is spent."""
        if self._top >= len(self._cards):
            self.shuffle()
        card = self._cards[self._top]
        self._top += 1
        return card

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return all 52 cards in their current order, drawn ones included."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards not yet drawn."""
        return len(self._cards) - self._top

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards drawn since the last shuffle."""
        return self._top

    def __len__(self) -> int:
        return self.cards_remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._top:])
