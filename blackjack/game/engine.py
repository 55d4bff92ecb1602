"""Blackjack round engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import EventData, Machine

from blackjack.cards import Card, Deck
from blackjack.hand import Hand, settle_round
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import Phase, is_valid_transition
from blackjack.scores import HighScoreStore

logger = logging.getLogger(__name__)

# House rules are fixed for this table
MIN_BET = 10
DEALER_STANDS_ON = 17

STARTING_BANKROLL = 1000
STARTING_BET = 50

OUTCOME_BANKROLL_EMPTY = "Bankroll empty"


class BlackjackGame:
    """
    Single-player blackjack round engine.

    Owns the player and dealer hands, the deck, the bankroll and the current
    wager. Commands called in the wrong phase do nothing and return False;
    callers may fire them without checking ``phase`` first.

    Dealer play is driven from outside so a presentation layer can pace it:
    either call ``play_dealer()`` once, or loop ``dealer_hit_one()`` while
    ``dealer_should_hit`` and then call ``finish_dealer()``.
    """

    # State machine states
    STATES = [p.name.lower() for p in Phase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_deal", "source": "betting", "dest": "dealing"},
        {"trigger": "reveal_deal", "source": "dealing", "dest": "player_turn"},
        {"trigger": "declare_broke", "source": "betting", "dest": "round_over"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {
            "trigger": "round_finished",
            "source": ["player_turn", "dealer_turn"],
            "dest": "round_over",
        },
        {"trigger": "reopen_betting", "source": "round_over", "dest": "betting"},
        {"trigger": "reset_table", "source": "*", "dest": "betting"},
    ]

    def __init__(
        self,
        starting_bankroll: int = STARTING_BANKROLL,
        starting_bet: int = STARTING_BET,
        rng: Random | None = None,
        scores: HighScoreStore | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Initialize a new blackjack table.

        Args:
            starting_bankroll: Chips the player holds at session start
            starting_bet: Wager at session start
            rng: Random number generator for reproducible shuffles
            scores: High score collaborator, opened by start_session()
            deck: Deck to draw from (a fresh shuffled deck if not provided)
        """
        self._starting_bankroll = starting_bankroll
        self._starting_bet = starting_bet
        self.deck = deck or Deck(rng=rng)
        self.scores = scores
        self.events = EventEmitter()

        self._player = Hand()
        self._dealer = Hand()
        self._bankroll = starting_bankroll
        self._bet = starting_bet
        self._last_outcome = ""
        self._last_payout = 0
        self._high_score = 0
        self._clamp_bet()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="betting",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_phase_change",
            send_event=True,
        )

    # Query surface

    @property
    def phase(self) -> Phase:
        """Get the current round phase."""
        return Phase[self._machine_state.upper()]  # type: ignore[attr-defined]

    @property
    def bankroll(self) -> int:
        """Chips currently owned by the player."""
        return self._bankroll

    @property
    def bet(self) -> int:
        """Current wager."""
        return self._bet

    @property
    def player(self) -> Hand:
        return self._player

    @property
    def dealer(self) -> Hand:
        return self._dealer

    @property
    def last_outcome(self) -> str:
        """Summary text of the most recent settlement."""
        return self._last_outcome

    @property
    def last_payout(self) -> int:
        """Net bankroll change from the most recent settlement."""
        return self._last_payout

    @property
    def high_score(self) -> int:
        """Highest bankroll recorded, for the HUD."""
        return self._high_score

    @property
    def dealer_should_hit(self) -> bool:
        """Check if the dealer must draw (stands on every 17, soft included)."""
        return self._dealer.value < DEALER_STANDS_ON

    @property
    def can_hit(self) -> bool:
        return self.phase is Phase.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        return self.phase is Phase.PLAYER_TURN

    @property
    def can_double(self) -> bool:
        """Check if doubling is allowed (two cards and the bet can be matched)."""
        return (
            self.phase is Phase.PLAYER_TURN
            and len(self._player) == 2
            and self._bankroll - self._bet >= self._bet
        )

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    # Command surface

    def start_session(self) -> None:
        """Reset bankroll, bet and phase for a fresh session."""
        self.reset_table()
        self._bankroll = self._starting_bankroll
        self._bet = self._starting_bet
        self._clamp_bet()
        self._player.clear()
        self._dealer.clear()
        self._last_outcome = ""
        self._last_payout = 0

        if self.scores is not None:
            self.scores.open()
            self._high_score = self.scores.highest()
        else:
            self._high_score = self._bankroll

        self.events.emit_new(
            EventType.SESSION_STARTED,
            bankroll=self._bankroll,
            high_score=self._high_score,
        )

    def adjust_bet(self, delta: int) -> bool:
        """
        Change the wager by ``delta`` while betting.

        The result is clamped to at least MIN_BET and at most the bankroll.
        """
        if self.phase is not Phase.BETTING:
            return False

        new_bet = max(MIN_BET, min(self._bet + delta, max(MIN_BET, self._bankroll)))
        if new_bet != self._bet:
            logger.debug("Bet changed: %d -> %d", self._bet, new_bet)
            self.events.emit_new(EventType.BET_CHANGED, old_bet=self._bet, bet=new_bet)
        self._bet = new_bet
        return True

    def new_round(self) -> bool:
        """Deal a new round, or lock the table if the bankroll is empty."""
        if self.phase is not Phase.BETTING:
            return False

        if self._bankroll <= 0:
            self.declare_broke()
            self._last_outcome = OUTCOME_BANKROLL_EMPTY
            self._last_payout = 0
            self.events.emit_new(EventType.BANKROLL_EMPTY)
            return True

        if self._bet > self._bankroll:
            self._bet = self._bankroll

        self._player.clear()
        self._dealer.clear()
        self._last_outcome = ""
        self._last_payout = 0

        self.begin_deal()
        self.events.emit_new(EventType.ROUND_STARTED, bet=self._bet)

        self.deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED)

        # Deal: player, dealer, player, dealer (face down)
        self._deal_card_to_hand(self._player)
        self._deal_card_to_hand(self._dealer)
        self._deal_card_to_hand(self._player)
        self._deal_card_to_hand(self._dealer, face_up=False)

        self.reveal_deal()

        player_bj = self._player.is_blackjack
        dealer_bj = self._dealer.is_blackjack
        if player_bj:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
        if dealer_bj:
            self.events.emit_new(EventType.DEALER_BLACKJACK)
        if player_bj or dealer_bj:
            self._end_round()

        return True

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.phase is not Phase.PLAYER_TURN:
            return False

        self._deal_card_to_hand(self._player)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self._player.value)

        if self._player.is_bust:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self._player.value)
            self._end_round()
        return True

    def stand(self) -> bool:
        """Player stands; the dealer plays next."""
        if self.phase is not Phase.PLAYER_TURN:
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self._player.value)
        self.player_done()
        return True

    def double_down(self) -> bool:
        """
        Player doubles down: one more card, then the dealer plays.

        Requires exactly two cards and a bankroll that can match the wager.
        A bust on the doubling card settles at the original wager.
        """
        if not self.can_double:
            return False

        self._deal_card_to_hand(self._player)

        if self._player.is_bust:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self._player.value)
            self._end_round()
            return True

        self._bet *= 2
        self.events.emit_new(
            EventType.PLAYER_DOUBLE,
            hand_value=self._player.value,
            new_bet=self._bet,
        )
        self.player_done()
        return True

    def dealer_hit_one(self) -> bool:
        """Dealer draws one card; a dealer bust ends the round at once."""
        if self.phase is not Phase.DEALER_TURN:
            return False

        self._deal_card_to_hand(self._dealer)
        self.events.emit_new(EventType.DEALER_HITS, hand_value=self._dealer.value)

        if self._dealer.is_bust:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self._dealer.value)
            self._end_round()
        return True

    def finish_dealer(self) -> bool:
        """Dealer stands and the round is settled."""
        if self.phase is not Phase.DEALER_TURN:
            return False

        self.events.emit_new(EventType.DEALER_STANDS, hand_value=self._dealer.value)
        self._end_round()
        return True

    def play_dealer(self) -> bool:
        """Dealer draws to 17 or more and the round is settled."""
        if self.phase is not Phase.DEALER_TURN:
            return False

        while self.phase is Phase.DEALER_TURN and self.dealer_should_hit:
            self.dealer_hit_one()

        if self.phase is Phase.DEALER_TURN:
            self.finish_dealer()
        return True

    def next_hand(self) -> bool:
        """Leave a finished round and return to betting."""
        if self.phase is not Phase.ROUND_OVER:
            return False

        self.reopen_betting()
        self._clamp_bet()
        return True

    # Internals

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self.deck.draw()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if hand is self._dealer else "player",
            hand_value=hand.value if face_up else None,
        )
        return card

    def _log_phase_change(self, event: EventData) -> None:
        source = Phase[event.transition.source.upper()]
        if is_valid_transition(source, self.phase):
            logger.debug("Phase %s -> %s", source, self.phase)
        else:
            logger.debug("Table reset from %s", source)

    def _clamp_bet(self) -> None:
        """Keep the wager between MIN_BET and the bankroll."""
        self._bet = max(MIN_BET, min(self._bet, max(MIN_BET, self._bankroll)))

    def _end_round(self) -> None:
        self.round_finished()
        self._settle()

    def _settle(self) -> None:
        """Pay out the round and report the bankroll as a score."""
        payout, outcome = settle_round(self._player, self._dealer, self._bet)

        self._bankroll += payout
        self._last_payout = payout
        self._last_outcome = outcome
        logger.debug(
            "Settled: %s (payout %+d, bankroll %d)", outcome, payout, self._bankroll
        )

        self.events.emit_new(
            EventType.ROUND_SETTLED,
            outcome=outcome,
            payout=payout,
            bankroll=self._bankroll,
        )

        self._clamp_bet()

        if self.scores is not None:
            self.scores.record(self._bankroll)
        self._high_score = max(self._high_score, self._bankroll)
