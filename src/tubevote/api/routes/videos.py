"""Video listing, submission and voting endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tubevote.api.deps import SessionIdDep, VideoServiceDep
from tubevote.domain.enums import SessionVote
from tubevote.domain.models import VideoView, VoteTally
from tubevote.logging import get_logger

router = APIRouter(prefix="/videos", tags=["Videos"])
logger = get_logger(__name__)


class CamelModel(BaseModel):
    """Serializes field names as camelCase for the browser client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmitVideoRequest(BaseModel):
    """Request to submit a video."""

    id: str


class SubmitVideoResponse(BaseModel):
    """Submitted video identifier."""

    id: str


class VoteRequest(BaseModel):
    """Request to vote on a video."""

    vote: str


class VideoViewResponse(CamelModel):
    """A video with its metadata and vote tallies."""

    id: str
    title: str
    thumbnail_url: str
    likes: int
    dislikes: int
    session_like: bool
    session_dislike: bool

    @classmethod
    def from_view(cls, view: VideoView) -> "VideoViewResponse":
        return cls(
            id=view.id,
            title=view.title,
            thumbnail_url=view.thumbnail_url,
            likes=view.likes,
            dislikes=view.dislikes,
            session_like=view.session_like,
            session_dislike=view.session_dislike,
        )


class VoteTallyResponse(CamelModel):
    """Vote tallies for a video after a vote."""

    likes: int
    dislikes: int
    session_like: bool
    session_dislike: bool
    session_vote: SessionVote

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "VoteTallyResponse":
        return cls(
            likes=tally.likes,
            dislikes=tally.dislikes,
            session_like=tally.session_like,
            session_dislike=tally.session_dislike,
            session_vote=tally.session_vote,
        )


@router.get(
    "",
    response_model=list[VideoViewResponse],
    summary="List videos",
    description="List all submitted videos with metadata, vote counts and the caller's votes.",
)
async def list_videos(session_id: SessionIdDep, service: VideoServiceDep) -> list[VideoViewResponse]:
    """List all videos."""
    views = await service.list_videos(session_id)
    return [VideoViewResponse.from_view(view) for view in views]


@router.post(
    "",
    response_model=SubmitVideoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit video",
    description="Recommend a video by its 11-character identifier.",
)
async def submit_video(
    request: SubmitVideoRequest,
    session_id: SessionIdDep,
    service: VideoServiceDep,
) -> SubmitVideoResponse:
    """Submit a video recommendation."""
    video_id = service.submit_video(session_id, request.id)
    return SubmitVideoResponse(id=video_id)


@router.post(
    "/{video_id}/vote",
    response_model=VoteTallyResponse,
    summary="Vote on video",
    description="Like or dislike a video; a later vote replaces the caller's earlier one.",
)
async def vote_video(
    video_id: str,
    request: VoteRequest,
    session_id: SessionIdDep,
    service: VideoServiceDep,
) -> VoteTallyResponse:
    """Cast a vote."""
    tally = service.cast_vote(session_id, video_id, request.vote)
    return VoteTallyResponse.from_tally(tally)
