"""Video listing, submission, voting and scoring service."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from tubevote.adapters.metadata.base import MetadataProvider
from tubevote.db.models import VideoModel
from tubevote.domain.enums import VoteValue
from tubevote.domain.models import VideoView, VoteTally
from tubevote.domain.validation import parse_vote, validate_video_id
from tubevote.logging import get_logger
from tubevote.services.metadata_cache import MetadataCache, get_metadata_provider
from tubevote.services.recommendations import RecommendationLog
from tubevote.services.votes import VoteLedger

logger = get_logger(__name__)


class VideoService:
    """Composes the metadata cache, vote ledger and recommendation log.

    Every operation takes the caller's session identifier explicitly; the
    service holds no per-request state beyond the database session it was
    built with.
    """

    def __init__(
        self,
        session: Session,
        provider: MetadataProvider | None = None,
        metadata: MetadataCache | None = None,
        votes: VoteLedger | None = None,
        recommendations: RecommendationLog | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            session: Database session shared by all components
            provider: Metadata provider (defaults to the configured one)
            metadata: Metadata cache override
            votes: Vote ledger override
            recommendations: Recommendation log override
        """
        self.session = session
        self.metadata = metadata or MetadataCache(session, provider or get_metadata_provider())
        self.votes = votes or VoteLedger(session)
        self.recommendations = recommendations or RecommendationLog(session)

    async def list_videos(self, session_id: str) -> list[VideoView]:
        """List every video with fresh-as-possible metadata and vote tallies."""
        videos = self.session.execute(
            select(VideoModel).order_by(VideoModel.created_at, VideoModel.id)
        ).scalars().all()
        video_ids = [video.id for video in videos]

        metadata = {}
        for video_id in video_ids:
            metadata[video_id] = await self.metadata.ensure_fresh(video_id)

        tallies = self.votes.scores_for(video_ids, session_id)

        views = []
        for video_id in video_ids:
            meta = metadata[video_id]
            tally = tallies.get(video_id) or VoteTally()
            views.append(
                VideoView(
                    id=video_id,
                    title=meta.title or "",
                    thumbnail_url=meta.thumbnail_url or "",
                    likes=tally.likes,
                    dislikes=tally.dislikes,
                    session_like=tally.session_like,
                    session_dislike=tally.session_dislike,
                )
            )
        return views

    def submit_video(self, session_id: str, video_id: str) -> str:
        """Register a video and log the submission in one transaction."""
        video_id = validate_video_id(video_id)

        try:
            self.metadata.register(video_id)
            self.recommendations.record(session_id, video_id)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("video_submitted", video_id=video_id)
        return video_id

    def cast_vote(self, session_id: str, video_id: str, vote: VoteValue | str) -> VoteTally:
        """Validate and record a vote, returning the video's updated tally."""
        video_id = validate_video_id(video_id)
        value = parse_vote(vote)

        try:
            tally = self.votes.cast_vote(session_id, video_id, value)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return tally

    def session_score(self, session_id: str) -> int:
        """Sum of current likes over the distinct videos a session recommended."""
        return self.votes.total_likes(self.recommendations.recommended_ids_query(session_id))
