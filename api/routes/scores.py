"""High score API endpoints."""

from fastapi import APIRouter, Query

from api.schemas import HighScoreResponse, ScoreEntryResponse
from api.session import get_score_store

router = APIRouter()


@router.get("/high")
async def high_score() -> HighScoreResponse:
    """Best bankroll recorded so far."""
    return HighScoreResponse(high_score=get_score_store().highest())


@router.get("")
async def list_scores(
    limit: int = Query(default=10, ge=1, le=100),
) -> list[ScoreEntryResponse]:
    """Recorded bankrolls, best first."""
    entries = get_score_store().scores()[:limit]
    return [
        ScoreEntryResponse(score=e.score, recorded_at=e.recorded_at) for e in entries
    ]
