"""Domain models - pure Python classes independent of database."""

from dataclasses import dataclass

from tubevote.domain.enums import SessionVote


@dataclass(frozen=True)
class VideoMetadata:
    """Catalog metadata cached for a video."""

    title: str | None = None
    thumbnail_url: str | None = None


@dataclass(frozen=True)
class VoteTally:
    """Vote aggregates for one video as seen by one session."""

    likes: int = 0
    dislikes: int = 0
    session_like: bool = False
    session_dislike: bool = False

    @property
    def session_vote(self) -> SessionVote:
        """The requesting session's own vote."""
        if self.session_like:
            return SessionVote.LIKE
        if self.session_dislike:
            return SessionVote.DISLIKE
        return SessionVote.NONE


@dataclass(frozen=True)
class VideoView:
    """Merged read-model of cached metadata and current vote aggregates."""

    id: str
    title: str = ""
    thumbnail_url: str = ""
    likes: int = 0
    dislikes: int = 0
    session_like: bool = False
    session_dislike: bool = False
