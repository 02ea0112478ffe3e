"""Initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Videos table
    op.create_table(
        "videos",
        sa.Column("id", sa.String(11), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("fetched_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_videos_created_at", "videos", ["created_at"])

    # Votes table (one row per session and video)
    op.create_table(
        "votes",
        sa.Column("session_id", sa.String(64), nullable=False),
        sa.Column("video_id", sa.String(11), nullable=False),
        sa.Column("vote", sa.String(7), nullable=False),
        sa.PrimaryKeyConstraint("session_id", "video_id"),
        sa.CheckConstraint("vote IN ('like', 'dislike')", name="ck_votes_vote"),
    )
    op.create_index("ix_votes_video_id", "votes", ["video_id"])

    # Recommendations table (append-only)
    op.create_table(
        "recommendations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("session_id", sa.String(64), nullable=False),
        sa.Column("video_id", sa.String(11), nullable=False),
        sa.Column("recommended_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_recommendations_session_id", "recommendations", ["session_id"])


def downgrade() -> None:
    op.drop_index("ix_recommendations_session_id", table_name="recommendations")
    op.drop_table("recommendations")
    op.drop_index("ix_votes_video_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("ix_videos_created_at", table_name="videos")
    op.drop_table("videos")
