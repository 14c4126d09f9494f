"""Shared pytest fixtures for tagging tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from sidetag.application.services import build_layout
from sidetag.features.tagging import FileTags, RunLayout

# MPEG-1 Layer III frame header followed by silence; enough for mutagen to prepend ID3.
FAKE_MP3_BYTES = b"\xff\xfb\x90\x64" + b"\x00" * 413


class RecordingWriter:
    """Tag writer double that records calls and returns a fixed result."""

    def __init__(self, result: bool = True, error: Exception | None = None) -> None:
        self.result: bool = result
        self.error: Exception | None = error
        self.calls: list[tuple[FileTags, Path]] = []

    def write(self, tags: FileTags, target_path: Path) -> bool:
        self.calls.append((tags, target_path))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def layout(tmp_path: Path) -> RunLayout:
    """Base directory with an empty ``download`` folder."""

    run_layout = build_layout(tmp_path)
    run_layout.download_dir.mkdir()
    return run_layout


@pytest.fixture
def make_audio(layout: RunLayout) -> Callable[[str], Path]:
    """Create a fake MP3 (or any file) inside ``download``."""

    def _make(name: str) -> Path:
        path = layout.download_dir / name
        _ = path.write_bytes(FAKE_MP3_BYTES)
        return path

    return _make


@pytest.fixture
def write_catalog(layout: RunLayout) -> Callable[[object], Path]:
    """Write ``detail.json`` with the given JSON-serialisable payload."""

    def _write(payload: object) -> Path:
        _ = layout.catalog_file.write_text(json.dumps(payload), encoding="utf-8")
        return layout.catalog_file

    return _write


@pytest.fixture
def recording_writer() -> RecordingWriter:
    """Writer double that always succeeds."""

    return RecordingWriter()


@pytest.fixture
def make_writer() -> Callable[..., RecordingWriter]:
    """Factory for writer doubles with a chosen result or error."""

    return RecordingWriter
