"""Vote ledger: one vote per (session, video) and per-video aggregates."""

from collections.abc import Iterable

from sqlalchemy import Select, and_, case, func, select
from sqlalchemy.orm import Session

from tubevote.db.models import VoteModel
from tubevote.db.session import dialect_insert
from tubevote.domain.enums import VoteValue
from tubevote.domain.models import VoteTally
from tubevote.domain.validation import parse_vote
from tubevote.logging import get_logger

logger = get_logger(__name__)


def _count_of(value: VoteValue):
    return func.coalesce(func.sum(case((VoteModel.vote == value.value, 1), else_=0)), 0)


def _session_flag(session_id: str, value: VoteValue):
    matches = and_(VoteModel.session_id == session_id, VoteModel.vote == value.value)
    return func.coalesce(func.max(case((matches, 1), else_=0)), 0)


class VoteLedger:
    """Upserts votes and reads like/dislike tallies."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _tally_columns(self, session_id: str) -> tuple:
        return (
            _count_of(VoteValue.LIKE).label("likes"),
            _count_of(VoteValue.DISLIKE).label("dislikes"),
            _session_flag(session_id, VoteValue.LIKE).label("session_like"),
            _session_flag(session_id, VoteValue.DISLIKE).label("session_dislike"),
        )

    def cast_vote(self, session_id: str, video_id: str, vote: VoteValue | str) -> VoteTally:
        """Record a session's vote, replacing any earlier vote for the same video.

        Returns the video's tally including the caller's own flags, read in
        one aggregate query after the upsert.
        """
        value = parse_vote(vote)

        insert = dialect_insert(self.session)
        stmt = insert(VoteModel).values(
            session_id=session_id,
            video_id=video_id,
            vote=value.value,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[VoteModel.session_id, VoteModel.video_id],
            set_={"vote": stmt.excluded.vote},
        )
        self.session.execute(stmt)

        row = self.session.execute(
            select(*self._tally_columns(session_id)).where(VoteModel.video_id == video_id)
        ).one()

        logger.info("vote_cast", video_id=video_id, vote=value.value)
        return VoteTally(
            likes=int(row.likes),
            dislikes=int(row.dislikes),
            session_like=bool(row.session_like),
            session_dislike=bool(row.session_dislike),
        )

    def scores_for(self, video_ids: Iterable[str], session_id: str) -> dict[str, VoteTally]:
        """Batch tallies for the given videos; unvoted videos get an empty tally."""
        ids = list(dict.fromkeys(video_ids))
        if not ids:
            return {}

        rows = self.session.execute(
            select(VoteModel.video_id, *self._tally_columns(session_id))
            .where(VoteModel.video_id.in_(ids))
            .group_by(VoteModel.video_id)
        ).all()

        tallies = {video_id: VoteTally() for video_id in ids}
        for row in rows:
            tallies[row.video_id] = VoteTally(
                likes=int(row.likes),
                dislikes=int(row.dislikes),
                session_like=bool(row.session_like),
                session_dislike=bool(row.session_dislike),
            )
        return tallies

    def total_likes(self, video_ids: Iterable[str] | Select) -> int:
        """Sum of like counts over a set of videos, each counted once."""
        if not isinstance(video_ids, Select):
            video_ids = list(video_ids)
            if not video_ids:
                return 0

        total = self.session.execute(
            select(_count_of(VoteValue.LIKE)).where(VoteModel.video_id.in_(video_ids))
        ).scalar_one()
        return int(total)
