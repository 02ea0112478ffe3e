"""Application services."""

from tubevote.services.metadata_cache import MetadataCache, get_metadata_provider
from tubevote.services.recommendations import RecommendationLog
from tubevote.services.videos import VideoService
from tubevote.services.votes import VoteLedger

__all__ = [
    "MetadataCache",
    "RecommendationLog",
    "VideoService",
    "VoteLedger",
    "get_metadata_provider",
]
