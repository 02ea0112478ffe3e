"""Domain enumerations."""

from enum import StrEnum


class VoteValue(StrEnum):
    """Values a session can cast for a video."""

    LIKE = "like"
    DISLIKE = "dislike"


class SessionVote(StrEnum):
    """A session's current vote state for one video."""

    LIKE = "like"
    DISLIKE = "dislike"
    NONE = "none"
