# /*
# Where: features/tagging/usecases/file_runner.py
# What: Per-file disposition engine for the tagging pipeline.
# Why: Keep TagProcessor lean by isolating the procedural flow of one file.
# Assumptions:
# - The caller only hands over files whose suffix is a supported audio extension.
# - Filesystem side effects are best effort; their failures are logged, never raised.
# Trade-offs:
# - A failed tag write leaves the copied file in ``done`` with whatever tags landed.
# - Lyrics that are not valid UTF-8 are decoded with replacement characters.
# */

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from mutagen import MutagenError

from sidetag.features.catalog import Catalog
from sidetag.platform.filesystem import FileOpResult, copy_file, move_file
from sidetag.shared import CoverImage, FileTags, Lyrics

from .assets import SidecarAssets, cover_mime_type, locate_sidecars
from .filename_parser import parse_file_name
from .ports import TagWriterPort
from .process_logger import ProcessLogger
from .processing_types import Disposition, FileOutcome, ProcessingEvent, RunLayout


class TagWriteError(RuntimeError):
    """Raised when the tag writer reports failure without raising itself."""

    def __init__(self, target_path: Path) -> None:
        super().__init__(f"Tag writer reported failure for {target_path}")
        self.target_path: Path = target_path


class ProcessorLike(Protocol):
    """Subset of TagProcessor needed for per-file orchestration."""

    layout: RunLayout
    catalog: Catalog
    writer: TagWriterPort
    dry_run: bool
    image_extensions: Sequence[str]
    lyrics_language: str
    cover_description: str
    log: ProcessLogger


def run_file_processing(
    processor: ProcessorLike,
    file_name: str,
    *,
    sequence: int | None = None,
    total: int | None = None,
) -> FileOutcome:
    """Decide and carry out the disposition of one audio file."""

    layout = processor.layout
    log = processor.log
    source_path = layout.download_dir / file_name
    done_path = layout.done_dir / file_name
    log_context: dict[str, object] = {
        "file_name": file_name,
        "source_path": source_path,
        "sequence": sequence,
        "total_files": total,
    }

    if done_path.exists():
        log(
            logging.INFO,
            ProcessingEvent.FILE_SKIP_EXISTING,
            "Already in done, skipping: %s",
            file_name,
            **log_context,
        )
        return FileOutcome(file_name, Disposition.ALREADY_DONE)

    base = Path(file_name).stem
    parsed = parse_file_name(base)
    tags = FileTags.from_parsed(parsed)

    record = processor.catalog.find(parsed)
    if record is None:
        log(
            logging.INFO,
            ProcessingEvent.FILE_SKIP_NO_MATCH,
            'No catalog entry for "%s" - "%s", skipping',
            parsed.title,
            parsed.artist,
            artist=parsed.artist,
            title=parsed.title,
            **log_context,
        )
        return FileOutcome(file_name, Disposition.NO_CATALOG_MATCH)

    tags.year = record.year_text

    assets = locate_sidecars(layout.download_dir, base, processor.image_extensions)
    if assets.empty:
        if not processor.dry_run:
            _report_best_effort(log, move_file(source_path, layout.skipped_dir / file_name), "move to skipped")
        log(
            logging.INFO,
            ProcessingEvent.FILE_SKIP_NO_ASSETS,
            "No cover or lyrics, setting aside: %s",
            file_name,
            **log_context,
        )
        return FileOutcome(file_name, Disposition.NO_ASSETS)

    if processor.dry_run:
        _log_tag_summary(log, tags, assets, log_context)
        log(
            logging.INFO,
            ProcessingEvent.FILE_PLANNED,
            "Would tag and copy to done: %s",
            file_name,
            **log_context,
        )
        return FileOutcome(file_name, Disposition.DONE)

    # done/ only receives files that are handed to the writer.
    try:
        _attach_assets(processor, tags, assets, log, log_context)
    except OSError as exc:
        return _failed(log, file_name, "Sidecar read failed", exc, log_context)

    _report_best_effort(log, copy_file(source_path, done_path), "copy to done")

    try:
        _log_tag_summary(log, tags, assets, log_context)
        if not processor.writer.write(tags, done_path):
            raise TagWriteError(done_path)
    except (MutagenError, OSError, ValueError, TagWriteError) as exc:
        return _failed(log, file_name, "Tag write failed", exc, log_context)

    log(
        logging.INFO,
        ProcessingEvent.FILE_DONE,
        "Tagged: %s",
        file_name,
        target_path=done_path,
        **{key: value for key, value in log_context.items() if key != "source_path"},
    )
    return FileOutcome(file_name, Disposition.DONE)


def _attach_assets(
    processor: ProcessorLike,
    tags: FileTags,
    assets: SidecarAssets,
    log: ProcessLogger,
    log_context: dict[str, object],
) -> None:
    context = {key: value for key, value in log_context.items() if key != "source_path"}

    if assets.cover is not None:
        tags.image = CoverImage(
            mime=cover_mime_type(assets.cover),
            data=assets.cover.read_bytes(),
            description=processor.cover_description,
        )
        log(
            logging.INFO,
            ProcessingEvent.FILE_COVER,
            "Adding cover: %s",
            assets.cover.name,
            source_path=assets.cover,
            **context,
        )

    if assets.lyrics is not None:
        tags.lyrics = Lyrics(
            language=processor.lyrics_language,
            text=assets.lyrics.read_text(encoding="utf-8", errors="replace"),
        )
        log(
            logging.INFO,
            ProcessingEvent.FILE_LYRICS,
            "Adding lyrics: %s",
            assets.lyrics.name,
            source_path=assets.lyrics,
            **context,
        )


def _log_tag_summary(
    log: ProcessLogger,
    tags: FileTags,
    assets: SidecarAssets,
    log_context: dict[str, object],
) -> None:
    log(
        logging.INFO,
        ProcessingEvent.FILE_TAGS,
        'Writing tags: artist="%s" title="%s" album="%s" year="%s" cover=%s lyrics=%s',
        tags.artist,
        tags.title,
        tags.album or "(none)",
        tags.year or "unknown",
        assets.cover is not None,
        assets.lyrics is not None,
        artist=tags.artist,
        title=tags.title,
        album=tags.album,
        year=tags.year,
        **log_context,
    )


def _failed(
    log: ProcessLogger,
    file_name: str,
    reason: str,
    exc: Exception,
    log_context: dict[str, object],
) -> FileOutcome:
    error_message = str(exc) if str(exc) else type(exc).__name__
    log(
        logging.ERROR,
        ProcessingEvent.FILE_FAILED,
        "%s: %s (%s)",
        reason,
        file_name,
        error_message,
        error_message=error_message,
        **log_context,
    )
    return FileOutcome(file_name, Disposition.FAILED, error_message=error_message)


def _report_best_effort(log: ProcessLogger, result: FileOpResult, action: str) -> None:
    if result.ok:
        return
    log(
        logging.DEBUG,
        ProcessingEvent.FILE_BEST_EFFORT,
        "Ignoring failed %s for %s: %s",
        action,
        result.path,
        result.error,
        target_path=result.path,
        error_message=result.error,
    )


__all__ = ["ProcessorLike", "TagWriteError", "run_file_processing"]
