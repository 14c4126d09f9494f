"""src/sidetag/features/tagging/usecases/directory_runner.py
What: Directory-wide tagging loop.
Why: Keep TagProcessor slim while owning scan order, error isolation and aggregation.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Collection
from pathlib import Path
from typing import Protocol

from sidetag.platform.filesystem import ensure_directory

from .file_runner import ProcessorLike as FileProcessorLike
from .processing_types import (
    Disposition,
    FileOutcome,
    ProcessingEvent,
    RunLogContext,
    RunResults,
)


class ProcessorLike(FileProcessorLike, Protocol):
    """Subset of TagProcessor needed for directory orchestration."""

    audio_extensions: Collection[str]

    def process_file(
        self,
        file_name: str,
        *,
        sequence: int | None = None,
        total: int | None = None,
    ) -> FileOutcome:
        ...


def scan_audio_files(directory: Path, audio_extensions: Collection[str]) -> list[str]:
    """Return sorted names of regular files whose lower-cased suffix is an audio extension."""

    return sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix.lower() in audio_extensions
    )


def run_directory_processing(
    processor: ProcessorLike,
    progress_callback: Callable[[int, int, str], None] | None = None,
) -> RunResults:
    """Process every audio file of the download directory in order."""

    layout = processor.layout
    log = processor.log
    directory = layout.download_dir
    if not directory.is_dir():
        raise ValueError(f"Not a directory: {directory}")

    if not processor.dry_run:
        for target in (layout.done_dir, layout.skipped_dir):
            created = ensure_directory(target)
            if not created.ok:
                log(
                    logging.DEBUG,
                    ProcessingEvent.FILE_BEST_EFFORT,
                    "Ignoring failed directory creation for %s: %s",
                    created.path,
                    created.error,
                    target_path=created.path,
                    error_message=created.error,
                )

    process_id = uuid.uuid4().hex[:12]
    file_names = scan_audio_files(directory, processor.audio_extensions)
    total_files = len(file_names)
    results = RunResults()

    if total_files == 0:
        log(
            logging.WARNING,
            ProcessingEvent.RUN_NO_FILES,
            "No audio files found in %s",
            directory,
            process_id=process_id,
            directory=directory,
        )
        return results

    stats = RunLogContext(
        process_id=process_id,
        directory=directory,
        total_files=total_files,
        dry_run=processor.dry_run,
    )
    log(
        logging.INFO,
        ProcessingEvent.RUN_START,
        "Tagging %d file(s) in %s%s",
        total_files,
        directory,
        " (dry run)" if processor.dry_run else "",
        **stats.summary_extra(results),
    )

    for index, file_name in enumerate(file_names, start=1):
        try:
            outcome = processor.process_file(file_name, sequence=index, total=total_files)
        except Exception as exc:
            error_message = str(exc) if str(exc) else type(exc).__name__
            log(
                logging.ERROR,
                ProcessingEvent.FILE_ERROR,
                "Unhandled error processing file #%d/%d [name=%s, error=%s]",
                index,
                total_files,
                file_name,
                error_message,
                file_name=file_name,
                source_path=directory / file_name,
                sequence=index,
                total_files=total_files,
                error_message=error_message,
            )
            outcome = FileOutcome(
                file_name,
                Disposition.FAILED,
                error_message=error_message,
            )

        results.add(outcome)
        if progress_callback:
            progress_callback(index, total_files, file_name)

    summary_extra = stats.summary_extra(results)
    log(
        logging.INFO,
        ProcessingEvent.RUN_COMPLETE,
        "Finished: done=%d skipped=%d failed=%d already_done=%d (%.2fs)",
        len(results.done),
        len(results.skipped),
        len(results.failed),
        len(results.skipped_existing),
        summary_extra["duration_seconds"],
        **summary_extra,
    )
    return results


__all__ = ["ProcessorLike", "run_directory_processing", "scan_audio_files"]
