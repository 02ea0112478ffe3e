"""YouTube metadata provider using the Data API."""

from typing import Any

import httpx

from tubevote.adapters.metadata.base import (
    MetadataNotFoundError,
    MetadataProvider,
    MetadataProviderError,
)
from tubevote.domain.models import VideoMetadata
from tubevote.logging import get_logger

logger = get_logger(__name__)

YOUTUBE_DATA_URL = "https://www.googleapis.com/youtube/v3/videos"

# Preferred first
THUMBNAIL_PREFERENCE = ("high", "default")


def select_thumbnail(thumbnails: dict[str, Any]) -> str | None:
    """Pick the high resolution thumbnail, falling back to the default one.

    Entries that are not objects with a string ``url`` are skipped.
    """
    for key in THUMBNAIL_PREFERENCE:
        entry = thumbnails.get(key)
        if not isinstance(entry, dict):
            continue
        url = entry.get("url")
        if isinstance(url, str) and url:
            return url
    return None


def _unexpected_payload() -> MetadataProviderError:
    return MetadataProviderError("YouTube Data API returned an unexpected payload")


class YouTubeMetadataProvider(MetadataProvider):
    """Fetches video snippets from YouTube Data API (videos.list).

    Authenticates with an API key; no OAuth is needed for public metadata.
    """

    def __init__(
        self,
        api_key: str | None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: YouTube Data API key.
            timeout: Request timeout in seconds.
            client: Optional pre-built HTTP client (used by tests).
        """
        self.api_key = api_key
        self.timeout = timeout
        self._client = client

    @property
    def name(self) -> str:
        return "youtube"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def fetch(self, video_id: str) -> VideoMetadata:
        """Fetch the snippet for a video.

        Args:
            video_id: The YouTube video ID.

        Returns:
            VideoMetadata with title and preferred thumbnail.
        """
        if not self.api_key:
            raise MetadataProviderError("YouTube API key is not configured")

        client = await self._get_client()

        try:
            response = await client.get(
                YOUTUBE_DATA_URL,
                params={
                    "part": "snippet",
                    "id": video_id,
                    "key": self.api_key,
                },
            )
        except httpx.HTTPError as e:
            raise MetadataProviderError(f"YouTube Data API request failed: {e}") from e

        if response.status_code != 200:
            logger.error(
                "youtube_data_api_error",
                video_id=video_id,
                status=response.status_code,
                body=response.text[:500],
            )
            raise MetadataProviderError(f"YouTube Data API error: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise MetadataProviderError("YouTube Data API returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise _unexpected_payload()
        items = payload.get("items") or []
        if not isinstance(items, list):
            raise _unexpected_payload()

        if not items:
            raise MetadataNotFoundError(f"Video not found: {video_id}")

        item = items[0]
        if not isinstance(item, dict):
            raise _unexpected_payload()
        snippet = item.get("snippet") or {}
        if not isinstance(snippet, dict):
            raise _unexpected_payload()
        title = snippet.get("title")
        thumbnails = snippet.get("thumbnails") or {}
        if not isinstance(thumbnails, dict) or not (title is None or isinstance(title, str)):
            raise _unexpected_payload()

        return VideoMetadata(title=title, thumbnail_url=select_thumbnail(thumbnails))

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def health_check(self) -> bool:
        """The provider is usable once an API key is configured."""
        return bool(self.api_key)
