"""Tests for the metadata cache."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import func, select

from tubevote.adapters.metadata.base import MetadataProviderError
from tubevote.db.models import VideoModel
from tubevote.domain.models import VideoMetadata
from tubevote.services.metadata_cache import MetadataCache, get_metadata_provider

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture
def cache(db_session, metadata_provider) -> MetadataCache:
    return MetadataCache(
        db_session,
        metadata_provider,
        freshness_window=timedelta(hours=24),
        clock=lambda: NOW,
    )


def add_video(db_session, video_id: str = VIDEO_ID, **fields) -> VideoModel:
    video = VideoModel(id=video_id, created_at=NOW, **fields)
    db_session.add(video)
    db_session.commit()
    return video


class TestStaleness:
    """Tests for the staleness rule."""

    def test_missing_title_is_stale(self, cache: MetadataCache) -> None:
        video = VideoModel(id=VIDEO_ID, title=None, fetched_at=NOW)
        assert cache.is_stale(video) is True

    def test_missing_fetch_time_is_stale(self, cache: MetadataCache) -> None:
        video = VideoModel(id=VIDEO_ID, title="Known", fetched_at=None)
        assert cache.is_stale(video) is True

    def test_recent_fetch_is_fresh(self, cache: MetadataCache) -> None:
        video = VideoModel(id=VIDEO_ID, title="Known", fetched_at=NOW - timedelta(hours=1))
        assert cache.is_stale(video) is False

    def test_old_fetch_is_stale(self, cache: MetadataCache) -> None:
        video = VideoModel(id=VIDEO_ID, title="Known", fetched_at=NOW - timedelta(hours=25))
        assert cache.is_stale(video) is True

    def test_naive_timestamps_are_treated_as_utc(self, cache: MetadataCache) -> None:
        fetched = (NOW - timedelta(hours=1)).replace(tzinfo=None)
        video = VideoModel(id=VIDEO_ID, title="Known", fetched_at=fetched)
        assert cache.is_stale(video) is False


class TestRegister:
    """Tests for idempotent registration."""

    def test_register_creates_bare_row(self, db_session, cache: MetadataCache, metadata_provider) -> None:
        cache.register(VIDEO_ID)
        db_session.commit()

        video = db_session.get(VideoModel, VIDEO_ID)
        assert video is not None
        assert video.title is None
        assert video.fetched_at is None
        assert metadata_provider.calls == []

    def test_register_is_idempotent(self, db_session, cache: MetadataCache) -> None:
        add_video(db_session, title="Keep me", fetched_at=NOW)

        cache.register(VIDEO_ID)
        cache.register(VIDEO_ID)
        db_session.commit()

        count = db_session.execute(select(func.count()).select_from(VideoModel)).scalar_one()
        assert count == 1
        db_session.expire_all()
        assert db_session.get(VideoModel, VIDEO_ID).title == "Keep me"


class TestEnsureFresh:
    """Tests for refresh on read."""

    @pytest.mark.asyncio
    async def test_bare_video_is_fetched_and_stored(
        self, db_session, cache: MetadataCache, metadata_provider
    ) -> None:
        add_video(db_session)

        metadata = await cache.ensure_fresh(VIDEO_ID)

        assert metadata == VideoMetadata(
            title=f"Title {VIDEO_ID}",
            thumbnail_url=f"https://img.example/{VIDEO_ID}/high.jpg",
        )
        assert metadata_provider.calls == [VIDEO_ID]

        db_session.expire_all()
        video = db_session.get(VideoModel, VIDEO_ID)
        assert video.title == f"Title {VIDEO_ID}"
        assert video.fetched_at is not None

    @pytest.mark.asyncio
    async def test_stale_video_is_refetched(
        self, db_session, cache: MetadataCache, metadata_provider
    ) -> None:
        add_video(db_session, title="Old", fetched_at=NOW - timedelta(hours=25))

        metadata = await cache.ensure_fresh(VIDEO_ID)

        assert metadata.title == f"Title {VIDEO_ID}"
        assert metadata_provider.calls == [VIDEO_ID]

    @pytest.mark.asyncio
    async def test_fresh_video_is_not_refetched(
        self, db_session, cache: MetadataCache, metadata_provider
    ) -> None:
        add_video(
            db_session,
            title="Cached",
            thumbnail_url="https://img.example/cached.jpg",
            fetched_at=NOW - timedelta(hours=1),
        )

        metadata = await cache.ensure_fresh(VIDEO_ID)

        assert metadata == VideoMetadata(
            title="Cached", thumbnail_url="https://img.example/cached.jpg"
        )
        assert metadata_provider.calls == []

    @pytest.mark.asyncio
    async def test_lookup_failure_keeps_last_known_value(
        self, db_session, cache: MetadataCache, metadata_provider
    ) -> None:
        stale_at = NOW - timedelta(days=3)
        add_video(db_session, title="Old", thumbnail_url="https://img.example/old.jpg", fetched_at=stale_at)
        metadata_provider.fail_with(VIDEO_ID, MetadataProviderError("quota exceeded"))

        metadata = await cache.ensure_fresh(VIDEO_ID)

        assert metadata == VideoMetadata(title="Old", thumbnail_url="https://img.example/old.jpg")
        db_session.expire_all()
        video = db_session.get(VideoModel, VIDEO_ID)
        assert video.title == "Old"
        assert cache.is_stale(video) is True

    @pytest.mark.asyncio
    async def test_not_found_leaves_metadata_absent(
        self, db_session, cache: MetadataCache, metadata_provider
    ) -> None:
        add_video(db_session)
        metadata_provider.fail_with(VIDEO_ID)

        metadata = await cache.ensure_fresh(VIDEO_ID)

        assert metadata == VideoMetadata()

        # Tried again on the next read
        await cache.ensure_fresh(VIDEO_ID)
        assert metadata_provider.calls == [VIDEO_ID, VIDEO_ID]

    @pytest.mark.asyncio
    async def test_unknown_video_returns_empty_metadata(
        self, cache: MetadataCache, metadata_provider
    ) -> None:
        assert await cache.ensure_fresh(VIDEO_ID) == VideoMetadata()
        assert metadata_provider.calls == []


class TestProviderFactory:
    """Tests for provider selection."""

    def test_stub_provider(self) -> None:
        from tubevote.adapters.metadata.stub import StubMetadataProvider

        assert isinstance(get_metadata_provider("stub"), StubMetadataProvider)

    def test_youtube_provider(self) -> None:
        from tubevote.adapters.metadata.youtube import YouTubeMetadataProvider

        assert isinstance(get_metadata_provider("youtube"), YouTubeMetadataProvider)

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError):
            get_metadata_provider("vimeo")
