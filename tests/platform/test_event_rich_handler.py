"""Tests for the Rich event handler rendering."""

from __future__ import annotations

import logging

from rich.console import Console

from sidetag.platform.logging import EventRichHandler


def _record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("sidetag", logging.INFO, __file__, 1, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_plain_records_use_default_rendering() -> None:
    handler = EventRichHandler(console=Console(record=True))
    record = _record("hello")

    rendered = handler.render_message(record, "hello")

    assert "hello" in str(rendered)


def test_file_event_renders_sequence_prefix_and_trailing_path() -> None:
    handler = EventRichHandler(console=Console(record=True))
    record = _record(
        "Tagged",
        processing_event="tagging.file.done",
        target_path="/very/long/base/dir/done/Artist - Title.mp3",
        sequence=2,
        total_files=5,
    )

    rendered = str(handler.render_message(record, "Tagged"))

    assert "[2/5]" in rendered
    assert "Tagged " in rendered
    assert "…/dir/done/Artist - Title.mp3" in rendered
    assert "very" not in rendered


def test_tag_summary_event_lists_fields() -> None:
    handler = EventRichHandler(console=Console(record=True))
    record = _record(
        "Writing tags",
        processing_event="tagging.file.tags",
        source_path="download/A - T.mp3",
        artist="A",
        title="T",
        album="",
        year=None,
    )

    rendered = str(handler.render_message(record, "Writing tags"))

    assert 'album="(none)"' in rendered
    assert 'year="unknown"' in rendered


def test_run_event_renders_message_text() -> None:
    handler = EventRichHandler(console=Console(record=True))
    record = _record("Tagging 3 file(s)", processing_event="tagging.run.start")

    rendered = str(handler.render_message(record, "Tagging 3 file(s)"))

    assert "Tagging 3 file(s)" in rendered
