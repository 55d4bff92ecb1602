"""Hand evaluation and round settlement for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from blackjack.cards import Card

BLACKJACK_PAYOUT = 1.5

OUTCOME_BLACKJACK = "Blackjack! You win 3:2"
OUTCOME_DEALER_BLACKJACK = "Dealer blackjack — you lose"
OUTCOME_BUST = "Bust — you lose"
OUTCOME_DEALER_BUST = "Dealer bust — you win"
OUTCOME_WIN = "You win"
OUTCOME_LOSE = "You lose"
OUTCOME_PUSH = "Push"


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """
        Calculate the best hand value.

        Returns the highest value that doesn't bust, or the lowest bust value.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
                total += 11
            else:
                total += card.face_value

        # Reduce aces from 11 to 1 as needed
        while total > 21 and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def hard_value(self) -> int:
        """Return the total with every Ace counted as 1."""
        return sum(card.hard_value for card in self.cards)

    @property
    def is_soft(self) -> bool:
        """Check if the hand is soft (an Ace is currently counted as 11)."""
        if not self.cards:
            return False
        value = self.value
        return value != self.hard_value and value <= 21

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == 21

    @property
    def is_bust(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > 21

    @property
    def up_card(self) -> Card | None:
        """Return the first card dealt, the dealer's exposed card."""
        return self.cards[0] if self.cards else None

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards)
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def settle_round(player_hand: Hand, dealer_hand: Hand, bet: int) -> tuple[int, str]:
    """
    Settle a finished round.

    Checks are made in house order and the first match wins: naturals, then
    player bust, then dealer bust, then totals.

    Returns:
        (payout, outcome) where payout is the signed change to the bankroll
    """
    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack
    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_bj and not dealer_bj:
        return round(bet * BLACKJACK_PAYOUT), OUTCOME_BLACKJACK
    if dealer_bj and not player_bj:
        return -bet, OUTCOME_DEALER_BLACKJACK
    if player_value > 21:
        return -bet, OUTCOME_BUST
    if dealer_value > 21:
        return bet, OUTCOME_DEALER_BUST
    if player_value > dealer_value:
        return bet, OUTCOME_WIN
    if player_value < dealer_value:
        return -bet, OUTCOME_LOSE
    return 0, OUTCOME_PUSH
