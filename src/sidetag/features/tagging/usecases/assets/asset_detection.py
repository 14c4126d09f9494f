"""src/sidetag/features/tagging/usecases/assets/asset_detection.py
What: Detect cover images and lyrics that share an audio file's base name.
Why: Sidecar files are the only source of artwork and lyrics for a download.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from sidetag.config.settings import IMAGE_EXTENSIONS, LYRICS_EXTENSION


@dataclass(frozen=True, slots=True)
class SidecarAssets:
    """Sidecar files found next to an audio file."""

    cover: Path | None = None
    lyrics: Path | None = None

    @property
    def empty(self) -> bool:
        return self.cover is None and self.lyrics is None


def find_cover(
    directory: Path,
    base: str,
    image_extensions: Sequence[str] = IMAGE_EXTENSIONS,
) -> Path | None:
    """Return ``directory/base+ext`` for the first extension that exists."""

    for ext in image_extensions:
        candidate = directory / f"{base}{ext}"
        if candidate.exists():
            return candidate
    return None


def find_lyrics(directory: Path, base: str) -> Path | None:
    """Return ``directory/base.lrc`` when it exists."""

    candidate = directory / f"{base}{LYRICS_EXTENSION}"
    if candidate.exists():
        return candidate
    return None


def locate_sidecars(
    directory: Path,
    base: str,
    image_extensions: Sequence[str] = IMAGE_EXTENSIONS,
) -> SidecarAssets:
    """Look up cover and lyrics independently."""

    return SidecarAssets(
        cover=find_cover(directory, base, image_extensions),
        lyrics=find_lyrics(directory, base),
    )


def cover_mime_type(path: Path) -> str:
    """PNG files are declared as such; everything else as JPEG."""

    return "image/png" if path.suffix.lower() == ".png" else "image/jpeg"


__all__ = [
    "SidecarAssets",
    "cover_mime_type",
    "find_cover",
    "find_lyrics",
    "locate_sidecars",
]
