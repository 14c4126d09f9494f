"""Application services."""

from .tagging_service import TagRequest, TaggingService, build_layout

__all__ = ["TagRequest", "TaggingService", "build_layout"]
