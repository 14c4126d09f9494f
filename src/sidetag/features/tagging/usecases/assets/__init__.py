"""Sidecar asset discovery for tagging."""

from .asset_detection import (
    SidecarAssets,
    cover_mime_type,
    find_cover,
    find_lyrics,
    locate_sidecars,
)

__all__ = [
    "SidecarAssets",
    "cover_mime_type",
    "find_cover",
    "find_lyrics",
    "locate_sidecars",
]
