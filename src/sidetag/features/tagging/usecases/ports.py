"""Summary: Ports defining tagging use case dependencies.
Why: Decouple use cases from the mutagen adapter so tests and swaps stay simple."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from sidetag.shared import FileTags


@runtime_checkable
class TagWriterPort(Protocol):
    """Port for merging tags into an audio file in place."""

    def write(self, tags: FileTags, target_path: Path) -> bool:
        """Merge ``tags`` into ``target_path``; return ``False`` or raise on failure."""
        ...


__all__ = ["TagWriterPort"]
