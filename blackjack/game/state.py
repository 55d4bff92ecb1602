"""Round phase enumeration."""

from enum import Enum, auto


class Phase(Enum):
    """
    Round state machine phases.

    Flow: BETTING → DEALING → PLAYER_TURN → DEALER_TURN → ROUND_OVER → BETTING
    """

    # Wager can be adjusted, next round not yet dealt
    BETTING = auto()

    # Initial cards being dealt
    DEALING = auto()

    # Player actions
    PLAYER_TURN = auto()

    # Dealer draws
    DEALER_TURN = auto()

    # Settled; also the resting state when the bankroll is empty
    ROUND_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid phase transitions
VALID_TRANSITIONS: dict[Phase, list[Phase]] = {
    Phase.BETTING: [Phase.DEALING, Phase.ROUND_OVER],  # ROUND_OVER if broke
    Phase.DEALING: [Phase.PLAYER_TURN],
    Phase.PLAYER_TURN: [Phase.DEALER_TURN, Phase.ROUND_OVER],
    Phase.DEALER_TURN: [Phase.ROUND_OVER],
    Phase.ROUND_OVER: [Phase.BETTING],
}


def is_valid_transition(from_phase: Phase, to_phase: Phase) -> bool:
    """
    Check if a phase transition is valid.

    Args:
        from_phase: Current phase
        to_phase: Desired phase

    Returns:
        True if the transition is allowed
    """
    return to_phase in VALID_TRANSITIONS.get(from_phase, [])
