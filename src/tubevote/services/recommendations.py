"""Append-only log of which session submitted which video."""

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from tubevote.db.models import RecommendationModel


class RecommendationLog:
    """Records submissions; duplicates are kept."""

    def __init__(
        self,
        session: Session,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self.session = session
        self.clock = clock

    def record(self, session_id: str, video_id: str) -> None:
        self.session.add(
            RecommendationModel(
                session_id=session_id,
                video_id=video_id,
                recommended_at=self.clock(),
            )
        )
        self.session.flush()

    def recommended_ids_query(self, session_id: str) -> Select:
        """Distinct video ids recommended by a session, as a subquery."""
        return (
            select(RecommendationModel.video_id)
            .where(RecommendationModel.session_id == session_id)
            .distinct()
        )

    def video_ids_recommended_by(self, session_id: str) -> set[str]:
        return set(self.session.execute(self.recommended_ids_query(session_id)).scalars())
