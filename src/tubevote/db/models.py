"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

VIDEO_ID_LENGTH = 11
SESSION_ID_LENGTH = 64


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class VideoModel(Base):
    """Submitted video with its cached catalog metadata."""

    __tablename__ = "videos"

    id: Mapped[str] = mapped_column(String(VIDEO_ID_LENGTH), primary_key=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    fetched_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )


class VoteModel(Base):
    """One vote per (session, video) pair."""

    __tablename__ = "votes"
    __table_args__ = (
        CheckConstraint("vote IN ('like', 'dislike')", name="ck_votes_vote"),
    )

    session_id: Mapped[str] = mapped_column(String(SESSION_ID_LENGTH), primary_key=True)
    video_id: Mapped[str] = mapped_column(String(VIDEO_ID_LENGTH), primary_key=True, index=True)
    vote: Mapped[str] = mapped_column(String(7), nullable=False)


class RecommendationModel(Base):
    """Append-only log of video submissions (duplicates allowed)."""

    __tablename__ = "recommendations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[str] = mapped_column(String(SESSION_ID_LENGTH), nullable=False, index=True)
    video_id: Mapped[str] = mapped_column(String(VIDEO_ID_LENGTH), nullable=False)
    recommended_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
