"""Stub metadata provider for testing."""

from tubevote.adapters.metadata.base import MetadataProvider
from tubevote.domain.models import VideoMetadata
from tubevote.logging import get_logger

logger = get_logger(__name__)


class StubMetadataProvider(MetadataProvider):
    """Provider that derives metadata from the identifier without network access."""

    @property
    def name(self) -> str:
        return "stub"

    async def fetch(self, video_id: str) -> VideoMetadata:
        """Return placeholder metadata."""
        logger.debug("stub_fetch_metadata", video_id=video_id)
        return VideoMetadata(
            title=f"Video {video_id}",
            thumbnail_url=f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg",
        )
