"""Game API endpoints."""

from typing import Annotated, Callable

from fastapi import APIRouter, HTTPException, Header

from api.schemas import (
    ActionRequest,
    BetRequest,
    CardResponse,
    GameStateResponse,
    HandResponse,
    SessionResponse,
)
from api.session import create_session, extract_session_id, get_session_store
from blackjack.cards import Card
from blackjack.game import BlackjackGame, Phase
from blackjack.hand import Hand

router = APIRouter()

# Phases in which the dealer's second card is still face down
HOLE_CARD_HIDDEN = (Phase.DEALING, Phase.PLAYER_TURN)


async def _get_game(token: str) -> BlackjackGame:
    """Resolve a signed session token to its table."""
    session_id = extract_session_id(token)
    if session_id is None:
        raise HTTPException(status_code=401, detail="Invalid session token")

    store = await get_session_store()
    game = await store.get(session_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Session not found")

    # Refresh expiry on activity
    await store.set(session_id, game)
    return game


def _card_to_response(card: Card) -> CardResponse:
    return CardResponse(rank=card.label, suit=str(card.suit), value=card.value)


def _hand_to_response(hand: Hand, hide_hole_card: bool = False) -> HandResponse:
    """Convert a Hand to HandResponse."""
    if hide_hole_card and len(hand) >= 2:
        shown = hand.cards[:1] + hand.cards[2:]
        return HandResponse(
            cards=[_card_to_response(c) for c in shown],
            hidden_cards=1,
            value=None,
            is_soft=False,
            is_blackjack=False,
            is_bust=False,
        )

    return HandResponse(
        cards=[_card_to_response(c) for c in hand.cards],
        value=hand.value,
        is_soft=hand.is_soft,
        is_blackjack=hand.is_blackjack,
        is_bust=hand.is_bust,
    )


def _game_state_response(game: BlackjackGame) -> GameStateResponse:
    """Convert game state to response."""
    up_card = game.dealer.up_card
    return GameStateResponse(
        phase=game.phase.name,
        bankroll=game.bankroll,
        bet=game.bet,
        high_score=game.high_score,
        player_hand=_hand_to_response(game.player),
        dealer_hand=_hand_to_response(
            game.dealer, hide_hole_card=game.phase in HOLE_CARD_HIDDEN
        ),
        dealer_showing=_card_to_response(up_card) if up_card else None,
        last_outcome=game.last_outcome,
        last_payout=game.last_payout,
        dealer_should_hit=game.phase is Phase.DEALER_TURN and game.dealer_should_hit,
        can_hit=game.can_hit,
        can_stand=game.can_stand,
        can_double=game.can_double,
    )


def _run_command(game: BlackjackGame, command: Callable[[], bool], name: str) -> GameStateResponse:
    """Run an engine command, mapping a no-op to HTTP 400."""
    if not command():
        raise HTTPException(
            status_code=400,
            detail=f"Cannot {name} during {game.phase}",
        )
    return _game_state_response(game)


@router.post("/new")
async def new_game(
    session_id: Annotated[str | None, Header(alias="X-Session-ID")] = None,
) -> SessionResponse:
    """Open a table, or restart the session of an existing one."""
    raw_id = extract_session_id(session_id) if session_id is not None else None
    if raw_id is not None:
        store = await get_session_store()
        game = await store.get(raw_id)
        if game is not None:
            game.start_session()
            return SessionResponse(session_id=session_id)

    token, _ = await create_session()
    return SessionResponse(session_id=token)


@router.get("/state")
async def get_state(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Get current table state."""
    game = await _get_game(session_id)
    return _game_state_response(game)


@router.post("/bet")
async def adjust_bet(
    request: BetRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Raise or lower the wager before dealing."""
    game = await _get_game(session_id)
    return _run_command(game, lambda: game.adjust_bet(request.delta), "change bet")


@router.post("/deal")
async def deal(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Deal a new round."""
    game = await _get_game(session_id)
    return _run_command(game, game.new_round, "deal")


@router.post("/action")
async def player_action(
    request: ActionRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Execute a player action."""
    game = await _get_game(session_id)

    actions = {
        "hit": game.hit,
        "stand": game.stand,
        "double": game.double_down,
    }
    return _run_command(game, actions[request.action], request.action)


@router.post("/dealer/step")
async def dealer_step(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Dealer draws one card."""
    game = await _get_game(session_id)
    return _run_command(game, game.dealer_hit_one, "draw for dealer")


@router.post("/dealer/finish")
async def dealer_finish(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Dealer stands and the round settles."""
    game = await _get_game(session_id)
    return _run_command(game, game.finish_dealer, "finish dealer")


@router.post("/dealer/play")
async def dealer_play(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Dealer plays out the hand and the round settles."""
    game = await _get_game(session_id)
    return _run_command(game, game.play_dealer, "play dealer")


@router.post("/next")
async def next_hand(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Return to betting after a settled round."""
    game = await _get_game(session_id)
    return _run_command(game, game.next_hand, "move to next hand")
