"""FastAPI dependencies."""

from functools import lru_cache
from typing import Annotated
from uuid import uuid4

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from tubevote.adapters.metadata.base import MetadataProvider
from tubevote.config import settings
from tubevote.db.models import SESSION_ID_LENGTH
from tubevote.db.session import get_session
from tubevote.services.metadata_cache import get_metadata_provider
from tubevote.services.videos import VideoService

# Database session dependency
SessionDep = Annotated[Session, Depends(get_session)]


@lru_cache
def get_provider() -> MetadataProvider:
    """Get the process-wide metadata provider instance."""
    return get_metadata_provider()


MetadataProviderDep = Annotated[MetadataProvider, Depends(get_provider)]


def resolve_session_id(request: Request) -> tuple[str, bool]:
    """Return the request's anonymous session id and whether it was just issued.

    A missing cookie, or one too long for the session column, gets a fresh UUID4.
    """
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id or len(session_id) > SESSION_ID_LENGTH:
        return str(uuid4()), True
    return session_id, False


def set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        settings.session_cookie_name,
        session_id,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def get_session_id(request: Request) -> str:
    """Session id resolved by the session middleware for this request."""
    session_id = getattr(request.state, "session_id", None)
    if session_id is None:
        session_id, _ = resolve_session_id(request)
    return session_id


SessionIdDep = Annotated[str, Depends(get_session_id)]


def get_video_service(session: SessionDep, provider: MetadataProviderDep) -> VideoService:
    """Get a video service bound to the request's database session."""
    return VideoService(session, provider=provider)


VideoServiceDep = Annotated[VideoService, Depends(get_video_service)]
