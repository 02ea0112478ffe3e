"""Input validation for identifiers and vote values.

Validation runs before any storage access; failures surface to clients
as 400 responses.
"""

import re

from tubevote.domain.enums import VoteValue

VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")


class ValidationError(ValueError):
    """Raised when client input is malformed."""

    pass


class InvalidVideoIdError(ValidationError):
    """Raised for identifiers that are not 11 URL-safe characters."""

    pass


class InvalidVoteError(ValidationError):
    """Raised for vote values other than like/dislike."""

    pass


def validate_video_id(video_id: object) -> str:
    """Return ``video_id`` unchanged if it is a well-formed video identifier."""
    if not isinstance(video_id, str) or not VIDEO_ID_PATTERN.fullmatch(video_id):
        raise InvalidVideoIdError("Invalid YouTube ID")
    return video_id


def parse_vote(value: object) -> VoteValue:
    """Parse a raw vote value, rejecting anything but ``like``/``dislike``."""
    if not isinstance(value, str):
        raise InvalidVoteError("Invalid vote")
    try:
        return VoteValue(value)
    except ValueError:
        raise InvalidVoteError("Invalid vote") from None
