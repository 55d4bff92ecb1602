"""Paces the engine for the table UI: timed card reveals and dealer play."""

from blackjack.game import BlackjackGame, Phase
from blackjack.game.engine import OUTCOME_BANKROLL_EMPTY

# Initial deal order: player, dealer, player, dealer
DEAL_ORDER = ("player", "dealer", "player", "dealer")


class TableDirector:
    """Drive a BlackjackGame one card at a time from the frame loop.

    The engine settles everything synchronously; the director only decides
    when the result is shown. Call ``update(dt)`` every frame.

    While a sequence (initial reveal or dealer play) is running, further
    deals, player actions and dealer steps are ignored. ``paused`` stops
    dealer steps until cleared.
    """

    def __init__(self, game: BlackjackGame, reveal_delay: float = 0.45):
        """Initialize the director.

        Args:
            game: Engine to drive
            reveal_delay: Seconds between revealed cards
        """
        self.game = game
        self.reveal_delay = reveal_delay
        self.paused = False

        self._dealing = False
        self._dealer_in_progress = False
        self._timer = 0.0
        self._pending: list[str] = []
        self._shown = {"player": 0, "dealer": 0}

    @property
    def busy(self) -> bool:
        """Check if a reveal or dealer sequence is running."""
        return self._dealing or self._dealer_in_progress

    @property
    def dealing(self) -> bool:
        """Check if the initial deal is still being revealed."""
        return self._dealing

    @property
    def dealer_in_progress(self) -> bool:
        """Check if the dealer is still being stepped."""
        return self._dealer_in_progress

    @property
    def visible_player_cards(self) -> int:
        if self._dealing:
            return self._shown["player"]
        return len(self.game.player)

    @property
    def visible_dealer_cards(self) -> int:
        if self._dealing:
            return self._shown["dealer"]
        return len(self.game.dealer)

    @property
    def hole_card_hidden(self) -> bool:
        """Check if the dealer's second card should be drawn face down."""
        return self._dealing or self.game.phase in (Phase.DEALING, Phase.PLAYER_TURN)

    @property
    def outcome_visible(self) -> bool:
        """Check if the settled result may be shown."""
        return self.game.phase is Phase.ROUND_OVER and not self.busy

    # Commands

    def deal(self) -> bool:
        """Start a new round and begin revealing the initial cards."""
        if self.busy or not self.game.new_round():
            return False

        # An empty bankroll ends the round without dealing; old cards may remain
        if self.game.last_outcome != OUTCOME_BANKROLL_EMPTY:
            self._pending = list(DEAL_ORDER)
            self._shown = {"player": 0, "dealer": 0}
            self._dealing = True
            self._timer = 0.0
        return True

    def advance(self) -> bool:
        """Next hand after a settled round, otherwise deal."""
        if self.game.phase is Phase.ROUND_OVER:
            if self.busy:
                return False
            return self.game.next_hand()
        return self.deal()

    def adjust_bet(self, delta: int) -> bool:
        return self.game.adjust_bet(delta)

    def hit(self) -> bool:
        if self.busy:
            return False
        return self.game.hit()

    def stand(self) -> bool:
        if self.busy or not self.game.stand():
            return False
        self._start_dealer()
        return True

    def double(self) -> bool:
        if self.busy or not self.game.double_down():
            return False
        if self.game.phase is Phase.DEALER_TURN:
            self._start_dealer()
        return True

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def restart(self) -> None:
        """Abandon any running sequence and start a fresh session."""
        self._dealing = False
        self._dealer_in_progress = False
        self._pending = []
        self._timer = 0.0
        self.paused = False
        self.game.start_session()

    # Frame loop

    def update(self, dt: float) -> None:
        """Advance timers and reveal or draw at most as the delay allows."""
        if self._dealing:
            self._timer += dt
            while self._dealing and self._timer >= self.reveal_delay:
                self._timer -= self.reveal_delay
                self._reveal_next()
            return

        if self._dealer_in_progress and not self.paused:
            self._timer += dt
            if self._timer >= self.reveal_delay:
                self._timer = 0.0
                self._step_dealer()

    def _reveal_next(self) -> None:
        hand = self._pending.pop(0)
        self._shown[hand] += 1
        if not self._pending:
            self._dealing = False
            self._timer = 0.0

    def _start_dealer(self) -> None:
        self._dealer_in_progress = True
        self._timer = 0.0

    def _step_dealer(self) -> None:
        """One stepwise dealer call: draw while required, then stand."""
        game = self.game
        if game.phase is not Phase.DEALER_TURN:
            self._dealer_in_progress = False
            return

        if game.dealer_should_hit:
            game.dealer_hit_one()
            if game.phase is not Phase.DEALER_TURN:
                self._dealer_in_progress = False
        else:
            game.finish_dealer()
            self._dealer_in_progress = False
