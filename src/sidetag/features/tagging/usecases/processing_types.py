"""src/sidetag/features/tagging/usecases/processing_types.py
Where: Tagging feature usecases layer.
What: Shared enums and dataclasses for the per-file tagging flow.
Why: Keep the disposition engine lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class ProcessingEvent(StrEnum):
    """Structured event identifiers for tagging logs."""

    RUN_START = "tagging.run.start"
    RUN_COMPLETE = "tagging.run.complete"
    RUN_NO_FILES = "tagging.run.no_files"
    CATALOG_LOADED = "tagging.catalog.loaded"
    CATALOG_FALLBACK = "tagging.catalog.fallback"
    FILE_SKIP_EXISTING = "tagging.file.skip.existing"
    FILE_SKIP_NO_MATCH = "tagging.file.skip.no_match"
    FILE_SKIP_NO_ASSETS = "tagging.file.skip.no_assets"
    FILE_COVER = "tagging.file.cover"
    FILE_LYRICS = "tagging.file.lyrics"
    FILE_TAGS = "tagging.file.tags"
    FILE_DONE = "tagging.file.done"
    FILE_PLANNED = "tagging.file.planned"
    FILE_FAILED = "tagging.file.failed"
    FILE_ERROR = "tagging.file.error"
    FILE_BEST_EFFORT = "tagging.file.best_effort"
    REPORT_SAVED = "tagging.report.saved"


class Disposition(StrEnum):
    """Terminal outcome assigned to an audio file."""

    ALREADY_DONE = "already_done"
    NO_CATALOG_MATCH = "no_catalog_match"
    NO_ASSETS = "no_assets"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RunLayout:
    """Directories and files a run reads from and writes to."""

    base_dir: Path
    download_dir: Path
    done_dir: Path
    skipped_dir: Path
    catalog_file: Path
    report_file: Path


@dataclass
class FileOutcome:
    """Result of processing one audio file."""

    file_name: str
    disposition: Disposition
    error_message: str | None = None


@dataclass
class RunResults:
    """Per-outcome file lists for a whole run, in processing order.

    ``errors`` maps failed file names to their last error message; it is not
    part of the persisted report.
    """

    done: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped_existing: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    def add(self, outcome: FileOutcome) -> None:
        """Append ``outcome`` to the list matching its disposition."""

        match outcome.disposition:
            case Disposition.DONE:
                self.done.append(outcome.file_name)
            case Disposition.NO_CATALOG_MATCH | Disposition.NO_ASSETS:
                self.skipped.append(outcome.file_name)
            case Disposition.FAILED:
                self.failed.append(outcome.file_name)
                if outcome.error_message:
                    self.errors[outcome.file_name] = outcome.error_message
            case Disposition.ALREADY_DONE:
                self.skipped_existing.append(outcome.file_name)

    @property
    def total(self) -> int:
        return len(self.done) + len(self.skipped) + len(self.failed) + len(self.skipped_existing)

    def to_report(self) -> dict[str, list[str]]:
        """Return the persisted report shape."""

        return {
            "done": list(self.done),
            "skipped": list(self.skipped),
            "failed": list(self.failed),
            "skippedExisting": list(self.skipped_existing),
        }


@dataclass(slots=True)
class RunLogContext:
    """Bookkeeping for log extras of a directory run."""

    process_id: str
    directory: Path
    total_files: int
    dry_run: bool
    start_time: float = field(default_factory=time.perf_counter)

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self, results: RunResults) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "process_id": self.process_id,
            "directory": str(self.directory),
            "total_files": self.total_files,
            "done": len(results.done),
            "skipped": len(results.skipped),
            "failed": len(results.failed),
            "skipped_existing": len(results.skipped_existing),
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "Disposition",
    "FileOutcome",
    "ProcessingEvent",
    "RunLayout",
    "RunLogContext",
    "RunResults",
]
