"""src/sidetag/features/tagging/usecases/tag_processor.py
Where: Tagging feature usecases layer.
What: Hold run-wide collaborators and delegate per-file and per-directory flows.
Why: Give runners one object to depend on while keeping their logic in helpers.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Sequence

from sidetag.config.settings import (
    AUDIO_EXTENSIONS,
    COVER_DESCRIPTION,
    IMAGE_EXTENSIONS,
    LYRICS_LANGUAGE,
)
from sidetag.features.catalog import Catalog

from .directory_runner import run_directory_processing
from .file_runner import run_file_processing
from .ports import TagWriterPort
from .process_logger import ProcessLogger, log_processing
from .processing_types import FileOutcome, RunLayout, RunResults


class TagProcessor:
    """Apply catalog years, cover art and lyrics to the files of one layout."""

    layout: RunLayout
    catalog: Catalog
    writer: TagWriterPort
    dry_run: bool
    audio_extensions: Collection[str]
    image_extensions: Sequence[str]
    lyrics_language: str
    cover_description: str
    log: ProcessLogger

    def __init__(
        self,
        layout: RunLayout,
        catalog: Catalog,
        writer: TagWriterPort,
        *,
        dry_run: bool = False,
        audio_extensions: Collection[str] = AUDIO_EXTENSIONS,
        image_extensions: Sequence[str] = IMAGE_EXTENSIONS,
        lyrics_language: str = LYRICS_LANGUAGE,
        cover_description: str = COVER_DESCRIPTION,
        log: ProcessLogger | None = None,
    ) -> None:
        self.layout = layout
        self.catalog = catalog
        self.writer = writer
        self.dry_run = dry_run
        self.audio_extensions = frozenset(ext.lower() for ext in audio_extensions)
        self.image_extensions = tuple(image_extensions)
        self.lyrics_language = lyrics_language
        self.cover_description = cover_description
        self.log = log or log_processing

    def process_file(
        self,
        file_name: str,
        *,
        sequence: int | None = None,
        total: int | None = None,
    ) -> FileOutcome:
        """Process one file of the download directory by name."""

        return run_file_processing(self, file_name, sequence=sequence, total=total)

    def process_directory(
        self,
        progress_callback: Callable[[int, int, str], None] | None = None,
    ) -> RunResults:
        """Process every audio file of the download directory."""

        return run_directory_processing(self, progress_callback)


__all__ = ["TagProcessor"]
