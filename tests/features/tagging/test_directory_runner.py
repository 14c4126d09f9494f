"""Tests for the directory-wide tagging loop."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from sidetag.features.catalog import Catalog, CatalogRecord
from sidetag.features.tagging import (
    Disposition,
    FileOutcome,
    Id3TagWriter,
    ProcessingEvent,
    RunLayout,
    TagProcessor,
)
from sidetag.features.tagging.usecases import scan_audio_files


def test_scan_audio_files_filters_and_sorts(layout: RunLayout, make_audio: Callable[[str], Path]) -> None:
    """Only regular files with an audio suffix are returned, case-insensitively."""

    for name in ("b.mp3", "A.MP3", "cover.jpg", "notes.lrc"):
        _ = make_audio(name)
    (layout.download_dir / "folder.mp3").mkdir()

    assert scan_audio_files(layout.download_dir, {".mp3"}) == ["A.MP3", "b.mp3"]


def test_missing_download_directory_raises(tmp_path: Path, recording_writer: Any) -> None:
    """A run without a download directory is an error, not an empty run."""

    layout = RunLayout(
        base_dir=tmp_path,
        download_dir=tmp_path / "download",
        done_dir=tmp_path / "done",
        skipped_dir=tmp_path / "skipped",
        catalog_file=tmp_path / "detail.json",
        report_file=tmp_path / "mp3tag-log.json",
    )

    with pytest.raises(ValueError, match="Not a directory"):
        _ = TagProcessor(layout, Catalog(), recording_writer).process_directory()


def test_creates_output_directories(layout: RunLayout, recording_writer: Any) -> None:
    """done and skipped are created even when there is nothing to process."""

    results = TagProcessor(layout, Catalog(), recording_writer).process_directory()

    assert results.total == 0
    assert layout.done_dir.is_dir()
    assert layout.skipped_dir.is_dir()


def test_outcomes_are_merged_in_order(
    layout: RunLayout,
    make_audio: Callable[[str], Path],
    recording_writer: Any,
) -> None:
    """Each audio file lands in exactly one list; other files are ignored."""

    _ = make_audio("Artist - Title.mp3")
    _ = make_audio("Nobody - Nothing.mp3")
    _ = make_audio("Artist - Other.mp3")
    _ = make_audio("readme.txt")
    _ = (layout.download_dir / "Artist - Title.lrc").write_text("x", encoding="utf-8")
    catalog = Catalog([CatalogRecord("Title", "Artist", 2000), CatalogRecord("Other", "Artist")])
    progress: list[tuple[int, int, str]] = []

    results = TagProcessor(layout, catalog, recording_writer).process_directory(
        lambda done, total, name: progress.append((done, total, name))
    )

    assert results.done == ["Artist - Title.mp3"]
    assert results.skipped == ["Artist - Other.mp3", "Nobody - Nothing.mp3"]
    assert results.failed == []
    assert results.skipped_existing == []
    assert [entry[0] for entry in progress] == [1, 2, 3]
    assert {entry[1] for entry in progress} == {3}


def test_unexpected_error_fails_only_that_file(
    layout: RunLayout,
    make_audio: Callable[[str], Path],
    recording_writer: Any,
    mocker: MockerFixture,
) -> None:
    """An exception escaping one file is recorded as failed and the run continues."""

    _ = make_audio("a.mp3")
    _ = make_audio("b.mp3")
    processor = TagProcessor(layout, Catalog(), recording_writer)

    def _process(file_name: str, **_: object) -> FileOutcome:
        if file_name == "a.mp3":
            raise RuntimeError("boom")
        return FileOutcome(file_name, Disposition.NO_CATALOG_MATCH)

    _ = mocker.patch.object(processor, "process_file", side_effect=_process)

    results = processor.process_directory()

    assert results.failed == ["a.mp3"]
    assert results.skipped == ["b.mp3"]


def test_unusable_done_directory_does_not_stop_the_run(
    layout: RunLayout,
    make_audio: Callable[[str], Path],
) -> None:
    """A failed directory creation is logged; affected files fail and the rest are processed."""

    _ = make_audio("Artist - Title.mp3")
    _ = make_audio("Nobody - Nothing.mp3")
    _ = (layout.download_dir / "Artist - Title.lrc").write_text("x", encoding="utf-8")
    _ = layout.done_dir.write_text("not a directory", encoding="utf-8")
    events: list[ProcessingEvent] = []

    def _log(level: int, event: ProcessingEvent, message: str, *args: object, **context: object) -> None:
        del level, message, args, context
        events.append(event)

    processor = TagProcessor(
        layout,
        Catalog([CatalogRecord("Title", "Artist", 2000)]),
        Id3TagWriter(),
        log=_log,
    )

    results = processor.process_directory()

    assert events[0] is ProcessingEvent.FILE_BEST_EFFORT
    assert results.failed == ["Artist - Title.mp3"]
    assert results.skipped == ["Nobody - Nothing.mp3"]
    assert layout.skipped_dir.is_dir()
    assert events[-1] is ProcessingEvent.RUN_COMPLETE
