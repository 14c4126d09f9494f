"""Best-effort filesystem helpers.

Where: platform/filesystem.py
What: Directory creation, copy and move wrappers that report instead of raise.
Why: Callers decide explicitly whether a failed operation matters.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileOpResult:
    """Outcome of a best-effort filesystem operation."""

    path: Path
    ok: bool
    error: str | None = None

    @classmethod
    def failure(cls, path: Path, exc: OSError) -> "FileOpResult":
        message = str(exc) if str(exc) else type(exc).__name__
        return cls(path=path, ok=False, error=message)


def ensure_directory(path: Path) -> FileOpResult:
    """Create ``path`` (and parents) if needed."""

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return FileOpResult.failure(path, exc)
    return FileOpResult(path=path, ok=True)


def copy_file(src_path: Path, dest_path: Path) -> FileOpResult:
    """Copy file contents to ``dest_path``, overwriting it."""

    try:
        _ = shutil.copyfile(src_path, dest_path)
    except OSError as exc:
        return FileOpResult.failure(dest_path, exc)
    return FileOpResult(path=dest_path, ok=True)


def move_file(src_path: Path, dest_path: Path) -> FileOpResult:
    """Move ``src_path`` to ``dest_path``, falling back to copy+delete across devices."""

    try:
        _ = shutil.move(str(src_path), str(dest_path))
    except OSError as exc:
        return FileOpResult.failure(dest_path, exc)
    return FileOpResult(path=dest_path, ok=True)


__all__ = ["FileOpResult", "copy_file", "ensure_directory", "move_file"]
