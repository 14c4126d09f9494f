"""Application service for tagging a download directory.

This layer centralizes construction of the catalog, writer and processor so
that UIs only hand over a base directory and options.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from sidetag.config.settings import (
    CATALOG_FILE_NAME,
    DONE_DIR_NAME,
    DOWNLOAD_DIR_NAME,
    REPORT_FILE_NAME,
    SKIPPED_DIR_NAME,
)
from sidetag.features.catalog import Catalog, CatalogLoadError, load_catalog
from sidetag.features.tagging import Id3TagWriter, TagProcessor, TagWriterPort
from sidetag.features.tagging.usecases import (
    ProcessingEvent,
    RunLayout,
    RunResults,
    log_processing,
    write_report,
)


@dataclass(frozen=True)
class TagRequest:
    """Input parameters for a tagging run.

    Attributes:
        base_dir: Directory holding ``download``, ``done``, ``skipped`` and the catalog.
        dry_run: If True, decides dispositions without touching any file.
    """

    base_dir: Path
    dry_run: bool = False


def build_layout(base_dir: Path) -> RunLayout:
    """Resolve the fixed directory layout under ``base_dir``."""

    return RunLayout(
        base_dir=base_dir,
        download_dir=base_dir / DOWNLOAD_DIR_NAME,
        done_dir=base_dir / DONE_DIR_NAME,
        skipped_dir=base_dir / SKIPPED_DIR_NAME,
        catalog_file=base_dir / CATALOG_FILE_NAME,
        report_file=base_dir / REPORT_FILE_NAME,
    )


@final
class TaggingService:
    """Application service that orchestrates one tagging run."""

    def __init__(
        self,
        *,
        writer_factory: Callable[[], TagWriterPort] | None = None,
        catalog_loader: Callable[[Path], Catalog] | None = None,
        processor_factory: Callable[..., TagProcessor] | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests can inject light-weight doubles while production code relies on
        the mutagen writer and the JSON catalog loader.
        """

        self._writer_factory: Callable[[], TagWriterPort] = writer_factory or Id3TagWriter
        self._catalog_loader: Callable[[Path], Catalog] = catalog_loader or load_catalog
        self._processor_factory: Callable[..., TagProcessor] = processor_factory or TagProcessor

    def load_catalog(self, layout: RunLayout) -> Catalog:
        """Load the catalog, degrading to an empty one when it is unusable."""

        try:
            catalog = self._catalog_loader(layout.catalog_file)
        except CatalogLoadError as exc:
            log_processing(
                logging.WARNING,
                ProcessingEvent.CATALOG_FALLBACK,
                "Catalog unavailable (%s); no years will be written and every file will be skipped",
                exc.reason,
                error_message=exc.reason,
            )
            return Catalog()

        log_processing(
            logging.INFO,
            ProcessingEvent.CATALOG_LOADED,
            "Loaded %d catalog record(s) from %s",
            len(catalog),
            layout.catalog_file.name,
        )
        return catalog

    def build_processor(self, request: TagRequest) -> TagProcessor:
        """Build a ``TagProcessor`` for the request's layout."""

        layout = build_layout(request.base_dir)
        return self._processor_factory(
            layout,
            self.load_catalog(layout),
            self._writer_factory(),
            dry_run=request.dry_run,
        )

    def run(
        self,
        request: TagRequest,
        progress_callback: Callable[[int, int, str], None] | None = None,
    ) -> RunResults:
        """Tag every audio file and persist the report (skipped on dry runs).

        Raises:
            ValueError: If the download directory does not exist.
        """

        processor = self.build_processor(request)
        results = processor.process_directory(progress_callback)

        if request.dry_run:
            return results

        report_path = write_report(results, processor.layout.report_file)
        log_processing(
            logging.INFO,
            ProcessingEvent.REPORT_SAVED,
            "All files processed, report saved to %s",
            report_path.name,
            target_path=report_path,
        )
        return results


__all__ = ["TagRequest", "TaggingService", "build_layout"]
