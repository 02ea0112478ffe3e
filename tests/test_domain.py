"""Tests for domain models and validation."""

import pytest

from tubevote.domain.enums import SessionVote, VoteValue
from tubevote.domain.models import VideoView, VoteTally
from tubevote.domain.validation import (
    InvalidVideoIdError,
    InvalidVoteError,
    ValidationError,
    parse_vote,
    validate_video_id,
)


@pytest.mark.parametrize("video_id", ["dQw4w9WgXcQ", "a-b_c-d_e-f", "12345678901"])
def test_validate_video_id_accepts_url_safe_ids(video_id: str) -> None:
    assert validate_video_id(video_id) == video_id


@pytest.mark.parametrize(
    "video_id",
    ["short", "dQw4w9WgXcQx", "dQw4w9WgXc!", "dQw4w9 gXcQ", "", None, 12345678901],
)
def test_validate_video_id_rejects_malformed(video_id: object) -> None:
    with pytest.raises(InvalidVideoIdError):
        validate_video_id(video_id)


def test_validate_video_id_rejects_trailing_newline() -> None:
    with pytest.raises(InvalidVideoIdError):
        validate_video_id("dQw4w9WgXcQ\n")


def test_parse_vote() -> None:
    assert parse_vote("like") is VoteValue.LIKE
    assert parse_vote("dislike") is VoteValue.DISLIKE
    assert parse_vote(VoteValue.LIKE) is VoteValue.LIKE


@pytest.mark.parametrize("value", ["meh", "LIKE", "", None, 1])
def test_parse_vote_rejects_unknown_values(value: object) -> None:
    with pytest.raises(InvalidVoteError):
        parse_vote(value)


def test_validation_errors_share_a_base() -> None:
    assert issubclass(InvalidVideoIdError, ValidationError)
    assert issubclass(InvalidVoteError, ValidationError)


def test_vote_tally_session_vote() -> None:
    assert VoteTally(likes=1, session_like=True).session_vote == SessionVote.LIKE
    assert VoteTally(dislikes=1, session_dislike=True).session_vote == SessionVote.DISLIKE
    assert VoteTally(likes=3, dislikes=2).session_vote == SessionVote.NONE


def test_video_view_defaults() -> None:
    view = VideoView(id="dQw4w9WgXcQ")

    assert view.title == ""
    assert view.thumbnail_url == ""
    assert view.likes == 0
    assert view.dislikes == 0
    assert view.session_like is False
    assert view.session_dislike is False
