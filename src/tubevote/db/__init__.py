"""Database layer."""

from tubevote.db.models import Base, RecommendationModel, VideoModel, VoteModel
from tubevote.db.session import (
    create_db_engine,
    dialect_insert,
    get_engine,
    get_session,
    get_session_context,
    init_db,
)

__all__ = [
    "Base",
    "create_db_engine",
    "dialect_insert",
    "get_engine",
    "get_session",
    "get_session_context",
    "init_db",
    # Models
    "RecommendationModel",
    "VideoModel",
    "VoteModel",
]
