"""Domain models and business logic."""

from tubevote.domain.enums import SessionVote, VoteValue
from tubevote.domain.models import VideoMetadata, VideoView, VoteTally
from tubevote.domain.validation import (
    InvalidVideoIdError,
    InvalidVoteError,
    ValidationError,
    parse_vote,
    validate_video_id,
)

__all__ = [
    "InvalidVideoIdError",
    "InvalidVoteError",
    "SessionVote",
    "ValidationError",
    "VideoMetadata",
    "VideoView",
    "VoteTally",
    "VoteValue",
    "parse_vote",
    "validate_video_id",
]
