"""Where: src/sidetag/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple normalisation for speed.
"""

from __future__ import annotations

from sidetag.config.config import (
    AUDIO_EXTENSIONS_DEFAULT,
    IMAGE_EXTENSIONS_DEFAULT,
    LYRICS_LANGUAGE_DEFAULT,
    config as app_config,
)


def _normalise_extensions(values: object, default: tuple[str, ...]) -> tuple[str, ...]:
    if not isinstance(values, (list, tuple)):
        return default
    normalised: list[str] = []
    for value in values:
        if not isinstance(value, str) or not value.strip():
            continue
        ext = value.strip().lower()
        normalised.append(ext if ext.startswith(".") else f".{ext}")
    return tuple(normalised) or default


# Extension sets --------------------------------------------------------------

AUDIO_EXTENSIONS: frozenset[str] = frozenset(
    _normalise_extensions(app_config.audio_extensions, AUDIO_EXTENSIONS_DEFAULT)
)

# Ordered: the first existing candidate wins.
IMAGE_EXTENSIONS: tuple[str, ...] = _normalise_extensions(
    app_config.image_extensions, IMAGE_EXTENSIONS_DEFAULT
)

LYRICS_EXTENSION: str = ".lrc"


# ID3 frame details ------------------------------------------------------------

# ID3 language codes are exactly three characters.
_language = (app_config.lyrics_language or "").strip()
LYRICS_LANGUAGE: str = _language if len(_language) == 3 else LYRICS_LANGUAGE_DEFAULT

COVER_DESCRIPTION: str = app_config.cover_description or "cover"


# Base directory layout --------------------------------------------------------

DOWNLOAD_DIR_NAME: str = app_config.download_dir_name or "download"
DONE_DIR_NAME: str = app_config.done_dir_name or "done"
SKIPPED_DIR_NAME: str = app_config.skipped_dir_name or "skipped"
CATALOG_FILE_NAME: str = app_config.catalog_file_name or "detail.json"
REPORT_FILE_NAME: str = app_config.report_file_name or "mp3tag-log.json"


__all__ = [
    "AUDIO_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "LYRICS_EXTENSION",
    "LYRICS_LANGUAGE",
    "COVER_DESCRIPTION",
    "DOWNLOAD_DIR_NAME",
    "DONE_DIR_NAME",
    "SKIPPED_DIR_NAME",
    "CATALOG_FILE_NAME",
    "REPORT_FILE_NAME",
]
