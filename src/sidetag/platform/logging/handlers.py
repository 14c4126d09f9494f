"""Rich console handler for structured tagging events.

Where: platform/logging/handlers.py
What: Render ``processing_event`` log records with icons, colours and compact paths.
Why: Keep formatting concerns out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that styles tagging events and renders file names in white."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "tagging.run.start": ("🚀", "cyan"),
        "tagging.run.complete": ("🎵", "green"),
        "tagging.run.no_files": ("ℹ️", "yellow"),
        "tagging.catalog.loaded": ("📚", "cyan"),
        "tagging.catalog.fallback": ("⚠️", "yellow"),
        "tagging.file.skip.existing": ("⏭️", "yellow"),
        "tagging.file.skip.no_match": ("⏭️", "yellow"),
        "tagging.file.skip.no_assets": ("🚫", "yellow"),
        "tagging.file.cover": ("🖼️", "blue"),
        "tagging.file.lyrics": ("📝", "blue"),
        "tagging.file.tags": ("🎧", "blue"),
        "tagging.file.done": ("✅", "green"),
        "tagging.file.planned": ("🗒️", "magenta"),
        "tagging.file.failed": ("❌", "red"),
        "tagging.file.error": ("⛔", "red"),
        "tagging.report.saved": ("💾", "green"),
    }
    _PREFIXES: ClassVar[dict[str, str]] = {
        "tagging.file.skip.existing": "Already in done, skipped ",
        "tagging.file.skip.no_match": "No catalog entry, skipped ",
        "tagging.file.skip.no_assets": "No cover or lyrics, set aside ",
        "tagging.file.cover": "Cover ",
        "tagging.file.lyrics": "Lyrics ",
        "tagging.file.tags": "Writing tags ",
        "tagging.file.done": "Tagged ",
        "tagging.file.planned": "Would tag ",
        "tagging.file.failed": "Failed ",
        "tagging.file.error": "Unhandled error ",
        "tagging.report.saved": "Report saved ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, keeping only trailing segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]

        display = separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + display
        elif pure_path.anchor:
            display = pure_path.anchor + display

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured tagging events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("tagging.run") or event.startswith("tagging.catalog"):
            _ = body.append(record.getMessage())
            _ = text.append_text(body)
            return text

        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = self._PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        path_value = getattr(record, "source_path", None) or getattr(record, "target_path", None)
        if path_value:
            _ = body.append_text(self._format_path(str(path_value)))

        details: list[str] = []
        if event == "tagging.file.tags":
            artist = getattr(record, "artist", None) or ""
            title = getattr(record, "title", None) or ""
            album = getattr(record, "album", None) or "(none)"
            year = getattr(record, "year", None) or "unknown"
            details.append(f'artist="{artist}" title="{title}" album="{album}" year="{year}"')
        elif event in {"tagging.file.failed", "tagging.file.error"}:
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
