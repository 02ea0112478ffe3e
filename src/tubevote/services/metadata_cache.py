"""Cached video metadata with staleness-triggered refresh.

Refreshes are best effort: a failed lookup is logged and the last known
metadata (possibly none) keeps being served until a later read succeeds.
Storage errors are not swallowed.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from sqlalchemy import update
from sqlalchemy.orm import Session

from tubevote.adapters.metadata.base import MetadataLookupError, MetadataProvider
from tubevote.config import settings
from tubevote.db.models import VideoModel
from tubevote.db.session import dialect_insert
from tubevote.domain.models import VideoMetadata
from tubevote.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FRESHNESS_WINDOW = timedelta(hours=24)


def utcnow() -> datetime:
    return datetime.now(UTC)


def get_metadata_provider(name: str | None = None) -> MetadataProvider:
    """Build the configured metadata provider."""
    provider = (name or settings.metadata_provider).lower()

    if provider == "youtube":
        from tubevote.adapters.metadata.youtube import YouTubeMetadataProvider

        return YouTubeMetadataProvider(
            api_key=settings.youtube_api_key,
            timeout=settings.metadata_timeout_seconds,
        )
    if provider == "stub":
        from tubevote.adapters.metadata.stub import StubMetadataProvider

        return StubMetadataProvider()

    raise ValueError(f"Unknown metadata provider: {provider}")


class MetadataCache:
    """Stores per-video metadata and refreshes it when stale."""

    def __init__(
        self,
        session: Session,
        provider: MetadataProvider,
        freshness_window: timedelta | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.session = session
        self.provider = provider
        self.freshness_window = freshness_window or timedelta(
            hours=settings.metadata_freshness_hours
        )
        self.clock = clock

    def is_stale(self, video: VideoModel, now: datetime | None = None) -> bool:
        """Missing title, missing timestamp or an expired fetch are all stale."""
        if not video.title or video.fetched_at is None:
            return True
        fetched_at = video.fetched_at
        if fetched_at.tzinfo is None:
            # SQLite drops the offset; everything is stored in UTC
            fetched_at = fetched_at.replace(tzinfo=UTC)
        return (now or self.clock()) - fetched_at > self.freshness_window

    def register(self, video_id: str) -> None:
        """Create a bare video row unless one already exists."""
        insert = dialect_insert(self.session)
        stmt = (
            insert(VideoModel)
            .values(id=video_id, created_at=self.clock())
            .on_conflict_do_nothing(index_elements=[VideoModel.id])
        )
        self.session.execute(stmt)

    async def ensure_fresh(self, video_id: str) -> VideoMetadata:
        """Return metadata for a video, refreshing it first if stale."""
        video = self.session.get(VideoModel, video_id)
        if video is None:
            return VideoMetadata()

        current = VideoMetadata(title=video.title, thumbnail_url=video.thumbnail_url)
        now = self.clock()
        if not self.is_stale(video, now):
            return current

        try:
            fetched = await self.provider.fetch(video_id)
        except MetadataLookupError as e:
            logger.warning(
                "metadata_refresh_failed",
                video_id=video_id,
                provider=self.provider.name,
                error=str(e),
            )
            return current

        self.session.execute(
            update(VideoModel)
            .where(VideoModel.id == video_id)
            .values(
                title=fetched.title,
                thumbnail_url=fetched.thumbnail_url,
                fetched_at=now,
            )
        )
        self.session.commit()

        logger.debug("metadata_refreshed", video_id=video_id, provider=self.provider.name)
        return fetched
