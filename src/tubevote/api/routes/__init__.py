"""API route modules."""

from tubevote.api.routes import health, users, videos

__all__ = ["health", "users", "videos"]
