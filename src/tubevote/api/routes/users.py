"""Per-session endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from tubevote.api.deps import SessionIdDep, VideoServiceDep

router = APIRouter(prefix="/user", tags=["User"])


class ScoreResponse(BaseModel):
    """A session's recommendation score."""

    score: int


@router.get(
    "/score",
    response_model=ScoreResponse,
    summary="Session score",
    description="Total likes received by the distinct videos this session recommended.",
)
async def session_score(session_id: SessionIdDep, service: VideoServiceDep) -> ScoreResponse:
    """Get the caller's score."""
    return ScoreResponse(score=service.session_score(session_id))
