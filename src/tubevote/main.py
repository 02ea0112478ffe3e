"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tubevote import __version__
from tubevote.adapters.metadata.base import MetadataLookupError
from tubevote.api.deps import get_provider, resolve_session_id, set_session_cookie
from tubevote.api.routes import health, users, videos
from tubevote.config import settings
from tubevote.domain.validation import ValidationError
from tubevote.logging import bind_request_context, get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("application_starting", version=__version__)

    # Startup: verify database connection and create missing tables
    try:
        from tubevote.db.session import init_db

        init_db()
        logger.info("database_ready")
    except SQLAlchemyError as e:
        logger.error("database_connection_failed", error=str(e))
        # Don't raise - let health checks report the issue

    yield

    # Shutdown
    await get_provider().close()
    logger.info("application_shutting_down")


# Create FastAPI app
app = FastAPI(
    title="TubeVote",
    description="Session-based video recommendation and voting service",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def session_cookie(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Resolve the anonymous session and issue its cookie when it is new.

    Runs outside the exception handlers, so error responses carry the cookie too.
    """
    session_id, issued = resolve_session_id(request)
    request.state.session_id = session_id
    bind_request_context(session_id, request.method, request.url.path)

    response = await call_next(request)
    if issued:
        set_session_cookie(response, session_id)
    return response


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Malformed identifiers and vote values are client errors."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are reported with the same envelope."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage failures surface as a generic server error."""
    logger.error("storage_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"},
    )


@app.exception_handler(MetadataLookupError)
async def metadata_error_handler(request: Request, exc: MetadataLookupError) -> JSONResponse:
    """Provider failures that escape the cache are server errors."""
    logger.error("metadata_provider_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


# Register routers
app.include_router(health.router)
app.include_router(videos.router, prefix="/api")
app.include_router(users.router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Service name, version and docs location."""
    return {
        "name": "TubeVote",
        "version": __version__,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tubevote.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
