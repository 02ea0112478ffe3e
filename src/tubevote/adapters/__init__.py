"""Adapters for external services."""

from tubevote.adapters.metadata.base import MetadataProvider

__all__ = [
    "MetadataProvider",
]
