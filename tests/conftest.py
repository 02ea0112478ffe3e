"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["METADATA_PROVIDER"] = "stub"
os.environ["LOG_LEVEL"] = "WARNING"

from tubevote.adapters.metadata.base import (  # noqa: E402
    MetadataNotFoundError,
    MetadataProvider,
)
from tubevote.domain.models import VideoMetadata  # noqa: E402


class RecordingMetadataProvider(MetadataProvider):
    """Provider that records lookups and can be told to fail for given ids."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.failures: dict[str, Exception] = {}

    @property
    def name(self) -> str:
        return "recording"

    async def fetch(self, video_id: str) -> VideoMetadata:
        self.calls.append(video_id)
        if video_id in self.failures:
            raise self.failures[video_id]
        return VideoMetadata(
            title=f"Title {video_id}",
            thumbnail_url=f"https://img.example/{video_id}/high.jpg",
        )

    def fail_with(self, video_id: str, error: Exception | None = None) -> None:
        self.failures[video_id] = error or MetadataNotFoundError(f"Video not found: {video_id}")


@pytest.fixture(autouse=True)
def reset_database() -> Generator[None, None, None]:
    """Recreate all tables so every test starts from an empty store."""
    from tubevote.db.models import Base
    from tubevote.db.session import get_engine

    engine = get_engine()
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    yield


@pytest.fixture
def db_session():
    """A database session on the test engine."""
    from tubevote.db.session import get_session_factory

    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def metadata_provider() -> RecordingMetadataProvider:
    """A recording metadata provider."""
    return RecordingMetadataProvider()


@pytest.fixture
def test_client(metadata_provider: RecordingMetadataProvider) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    from tubevote.api.deps import get_provider
    from tubevote.main import app

    app.dependency_overrides[get_provider] = lambda: metadata_provider
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

